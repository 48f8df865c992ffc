import pytest
from click.testing import CliRunner

from notefilter import __version__
from notefilter.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def invoke(runner, notes_db):
    def _invoke(*args):
        return runner.invoke(cli, ["--db", str(notes_db), *args])
    return _invoke


def rows(output):
    """Table rows, without header, separator and footer."""
    lines = output.splitlines()
    return [line for line in lines[2:] if line and not line.startswith(("Page", "Found"))]


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_list_all(invoke):
    result = invoke("list")
    assert result.exit_code == 0
    titles = rows(result.output)
    assert "Meeting notes" in titles[0]
    assert "Trip Plan" in titles[1]
    assert "Shopping List" in titles[2]
    assert "* Meeting notes" in result.output
    assert "Page 1/1, Total: 3 notes" in result.output


def test_list_active(invoke):
    result = invoke("list", "--filter", "active")
    assert result.exit_code == 0
    assert "Trip Plan" not in result.output
    assert "Total: 2 notes" in result.output


def test_list_notebook(invoke):
    result = invoke("list", "-f", "notebook", "-q", "nb1")
    assert result.exit_code == 0
    assert "Meeting notes" in result.output
    assert "Total: 1 notes" in result.output


def test_list_task(invoke):
    result = invoke("list", "-f", "task")
    assert result.exit_code == 0
    assert "Shopping List" in result.output
    assert "Total: 1 notes" in result.output


def test_list_no_results(invoke):
    result = invoke("list", "-f", "tag", "-q", "nothing")
    assert result.exit_code == 0
    assert "No notes found." in result.output


def test_list_unknown_filter_rejected(invoke):
    result = invoke("list", "-f", "bogus")
    assert result.exit_code != 0


def test_list_sort_ascending(runner, notes_db):
    result = runner.invoke(cli, ["--db", str(notes_db), "--sort-direction", "asc", "list"])
    assert result.exit_code == 0
    assert "Shopping List" in rows(result.output)[0]


def test_list_pages(runner, notes_db):
    result = runner.invoke(cli, ["--db", str(notes_db), "--per-page", "1", "list", "--page", "2"])
    assert result.exit_code == 0
    assert "Trip Plan" in result.output
    assert "Meeting notes" not in result.output
    assert "Page 2/3" in result.output


def test_db_from_environment(runner, notes_db):
    result = runner.invoke(cli, ["list"], env={"NOTEFILTER_DB": str(notes_db)})
    assert result.exit_code == 0
    assert "Total: 3 notes" in result.output


def test_search(invoke):
    result = invoke("search", "ROADMAP")
    assert result.exit_code == 0
    assert "Meeting notes" in result.output
    assert "Found: 1 notes matching 'ROADMAP'" in result.output


def test_search_skips_trash(invoke):
    result = invoke("search", "lisbon")
    assert result.exit_code == 0
    assert "No notes found matching 'lisbon'." in result.output


def test_search_invalid_pattern(invoke):
    result = invoke("search", "(")
    assert result.exit_code == 1
    assert "Invalid search pattern" in result.output


def test_fuzzy(invoke):
    result = invoke("fuzzy", "shoping")
    assert result.exit_code == 0
    assert result.output.splitlines()[0].startswith("Distance")
    assert "Shopping List" in result.output.splitlines()[2]


def test_fuzzy_finds_trashed(invoke):
    result = invoke("fuzzy", "trip plan")
    assert result.exit_code == 0
    assert "Trip Plan" in result.output.splitlines()[2]


def test_fuzzy_no_results(invoke):
    result = invoke("fuzzy", "zzqx")
    assert result.exit_code == 0
    assert "No notes found similar to 'zzqx'." in result.output


def test_show(invoke):
    result = invoke("show", "2")
    assert result.exit_code == 0
    assert "Title: Trip Plan" in result.output
    assert "Tags: travel, summer" in result.output
    assert "In trash: yes" in result.output
    assert "Visit Lisbon" in result.output


def test_show_missing_note(invoke):
    result = invoke("show", "99")
    assert result.exit_code == 1
    assert "Note not found: 99" in result.output


def test_missing_database(runner, tmp_path):
    result = runner.invoke(cli, ["--db", str(tmp_path / "nope.sqlite"), "list"])
    assert result.exit_code == 1
    assert "Notes database not found" in result.output
