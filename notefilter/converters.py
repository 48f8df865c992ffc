"""Converters for Markdown note content."""

import re

import markdown
from bs4 import BeautifulSoup

# List items that start with a GitHub style checkbox
TASK_PATTERN = re.compile(r"^\s*(?:[-*+]|\d+\.)\s+\[([ xX])\]", re.MULTILINE)


def count_tasks(content: str | None) -> tuple[int, int]:
    """Count the tasks in Markdown content.

    Returns:
        Tuple of (all tasks, completed tasks)
    """
    if not content:
        return 0, 0

    marks = TASK_PATTERN.findall(content)
    completed = sum(1 for mark in marks if mark.lower() == "x")
    return len(marks), completed


def markdown_to_html(md_content: str) -> str:
    """Convert Markdown to HTML."""
    return markdown.markdown(md_content, extensions=["extra", "nl2br"])


def markdown_to_text(md_content: str | None) -> str:
    """Convert Markdown note content to plain text for the terminal.

    Checkboxes are kept as ``[ ]``/``[x]`` and list items get a leading dash.
    """
    if not md_content:
        return ""

    soup = BeautifulSoup(markdown_to_html(md_content), "html.parser")

    # nl2br keeps the source newline after each <br>
    for br in soup.find_all("br"):
        br.decompose()

    for li in soup.find_all("li"):
        li.insert(0, "- ")

    blocks = []
    for element in soup.children:
        if element.name is None:
            text = str(element).strip()
        elif element.name == "pre":
            text = element.get_text().rstrip("\n")
        else:
            text = element.get_text().strip()
        if text:
            blocks.append(text)

    return "\n\n".join(blocks)
