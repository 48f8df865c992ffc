"""CLI entry point for notefilter."""

import re
from datetime import datetime

import click

from . import __version__
from . import db
from .collection import NoteCollection
from .converters import markdown_to_text
from .filters import FilterKind
from .logger import setup_logging
from .models import CollectionOptions, ConfigError
from .pagination import paginate

FILTER_NAMES = [kind.value for kind in FilterKind if kind is not FilterKind.NONE]


def format_date(timestamp: int | None) -> str:
    """Format a millisecond timestamp as a readable date."""
    if not timestamp:
        return "Unknown"
    try:
        return datetime.fromtimestamp(timestamp / 1000).strftime("%Y-%m-%d %H:%M")
    except (OverflowError, OSError, ValueError):
        return "Unknown"


def print_table(notes) -> None:
    """Display notes in a table format."""
    click.echo(f"{'ID':<10} {'Title':<40} {'Created':<18} {'Notebook'}")
    click.echo("-" * 80)

    for note in notes:
        raw_title = note.get("title") or "(Untitled)"
        if note.get("isFavorite"):
            raw_title = f"* {raw_title}"
        title = raw_title[:38] + ".." if len(raw_title) > 40 else raw_title
        created = format_date(note.get("created"))
        notebook = note.get("notebookId") or "-"
        click.echo(f"{note.get('id'):<10} {title:<40} {created:<18} {notebook}")


def load_collection(ctx: click.Context) -> NoteCollection:
    """Load the notes database into a collection using the CLI options."""
    try:
        notes = db.load_notes(ctx.obj["db"])
        return NoteCollection(notes, ctx.obj["options"])
    except db.DatabaseNotFoundError as e:
        raise click.ClickException(str(e))
    except db.DatabaseLockedError as e:
        raise click.ClickException(str(e))
    except db.NotesDBError as e:
        raise click.ClickException(f"Database error: {e}")


def apply_filter(collection: NoteCollection, name: str | None, query) -> None:
    try:
        collection.filter_list(name, query)
    except re.error as e:
        raise click.ClickException(f"Invalid search pattern '{query}': {e}")


@click.group()
@click.version_option(version=__version__, prog_name="notefilter")
@click.option("--db", "db_path", envvar="NOTEFILTER_DB", type=click.Path(dir_okay=False),
              help="Path to the notes database")
@click.option("--sort-field", envvar="NOTEFILTER_SORT_FIELD", default="created",
              show_default=True, help="Field to sort notes by")
@click.option("--sort-direction", envvar="NOTEFILTER_SORT_DIRECTION",
              type=click.Choice(["asc", "desc"]), default="desc", show_default=True)
@click.option("--per-page", envvar="NOTEFILTER_PER_PAGE", type=click.IntRange(min=1),
              default=10, show_default=True, help="Notes shown per page")
@click.option("--log-level", envvar="NOTEFILTER_LOG_LEVEL", default="WARNING",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
@click.pass_context
def cli(ctx, db_path, sort_field, sort_direction, per_page, log_level):
    """Filter, sort and search notes."""
    setup_logging(log_level)
    try:
        options = CollectionOptions(
            sort_field=sort_field,
            sort_direction=sort_direction,
            per_page=per_page,
        )
    except ConfigError as e:
        raise click.BadParameter(str(e))
    ctx.obj = {"db": db_path, "options": options}


@cli.command()
@click.option("--filter", "-f", "filter_name", type=click.Choice(FILTER_NAMES),
              help="Named filter to apply")
@click.option("--query", "-q", help="Filter parameter (notebook id, tag, search text)")
@click.option("--page", "-p", type=int, default=1, show_default=True)
@click.pass_context
def list(ctx, filter_name: str | None, query: str | None, page: int):
    """List notes, optionally filtered."""
    collection = load_collection(ctx)
    apply_filter(collection, filter_name, query)

    if not len(collection):
        click.echo("No notes found.")
        return

    page = min(max(page, 1), collection.total_pages)
    print_table(collection.page(page))
    click.echo(f"\nPage {page}/{collection.total_pages}, Total: {len(collection)} notes")


@cli.command()
@click.argument("text")
@click.option("--page", "-p", type=int, default=1, show_default=True)
@click.pass_context
def search(ctx, text: str, page: int):
    """Search notes by title and content.

    TEXT is a case-insensitive regular expression. Trashed notes are
    left out.
    """
    collection = load_collection(ctx)
    apply_filter(collection, FilterKind.SEARCH.value, text)
    notes = [note for note in collection if note.get("trash") == 0]

    if not notes:
        click.echo(f"No notes found matching '{text}'.")
        return

    print_table(paginate(notes, page, collection.options.per_page))
    click.echo(f"\nFound: {len(notes)} notes matching '{text}'")


@cli.command()
@click.argument("text")
@click.pass_context
def fuzzy(ctx, text: str):
    """Find notes with a title similar to TEXT."""
    collection = load_collection(ctx)
    results = collection.fuzzy_search_scored(text)

    if not results:
        click.echo(f"No notes found similar to '{text}'.")
        return

    click.echo(f"{'Distance':<9} {'ID':<10} {'Title'}")
    click.echo("-" * 60)
    for note, distance in results:
        title = note.get("title") or "(Untitled)"
        click.echo(f"{distance:<9.3f} {note.get('id'):<10} {title}")

    click.echo(f"\nFound: {len(results)} notes similar to '{text}'")


@cli.command()
@click.argument("note_id")
@click.pass_context
def show(ctx, note_id: str):
    """Show a note's content by ID."""
    try:
        note = db.get_note_by_id(note_id, ctx.obj["db"])
    except db.DatabaseNotFoundError as e:
        raise click.ClickException(str(e))
    except db.DatabaseLockedError as e:
        raise click.ClickException(str(e))
    except db.NotesDBError as e:
        raise click.ClickException(f"Database error: {e}")

    if not note:
        raise click.ClickException(f"Note not found: {note_id}")

    click.echo(f"Title: {note.title or '(Untitled)'}")
    click.echo(f"Notebook: {note.notebook_id or '-'}")
    click.echo(f"Tags: {', '.join(note.tags) or '-'}")
    click.echo(f"Tasks: {note.task_completed}/{note.task_all}")
    click.echo(f"Created: {format_date(note.created)}")
    if note.is_favorite:
        click.echo("Favorite: yes")
    if note.trash:
        click.echo("In trash: yes")
    click.echo("-" * 40)

    content = markdown_to_text(note.content)
    click.echo(content or "(No content)")


if __name__ == "__main__":
    cli()
