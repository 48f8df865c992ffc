"""SQLite read layer for stored notes."""

import json
import sqlite3
from pathlib import Path

from .converters import count_tasks
from .logger import get_logger
from .models import Note

logger = get_logger("db")

# Default database location
NOTES_DB_PATH = Path("~/.local/share/notefilter/notes.sqlite").expanduser()

NOTE_COLUMNS = (
    "id",
    "title",
    "content",
    "tags",
    "notebook_id",
    "is_favorite",
    "trash",
    "task_all",
    "task_completed",
    "created",
    "updated",
)


class NotesDBError(Exception):
    """Base exception for notes database errors."""
    pass


class DatabaseNotFoundError(NotesDBError):
    """Notes database file not found."""
    pass


class DatabaseLockedError(NotesDBError):
    """Notes database is locked by another process."""
    pass


def get_connection(path: Path | str | None = None) -> sqlite3.Connection:
    """Get a read-only connection to the notes database."""
    db_path = Path(path) if path else NOTES_DB_PATH
    if not db_path.exists():
        raise DatabaseNotFoundError(f"Notes database not found at {db_path}")

    try:
        conn = sqlite3.connect(
            f"file:{db_path}?mode=ro",
            uri=True,
            timeout=5.0
        )
        conn.row_factory = sqlite3.Row
        return conn
    except sqlite3.OperationalError as e:
        error_msg = str(e).lower()
        if "database is locked" in error_msg:
            raise DatabaseLockedError(
                "Notes database is locked. Please close other writers and try again."
            ) from e
        raise NotesDBError(f"Database error: {e}") from e


def parse_tags(value) -> list[str]:
    """Parse a stored tag list.

    Tags are stored either as a JSON array or as comma-separated text.
    """
    if not value:
        return []
    if isinstance(value, (list, tuple)):
        return [str(tag) for tag in value]

    text = str(value).strip()
    if text.startswith("["):
        try:
            tags = json.loads(text)
        except json.JSONDecodeError:
            tags = None
        if isinstance(tags, list):
            return [str(tag) for tag in tags]
    return [tag.strip() for tag in text.split(",") if tag.strip()]


def row_to_note(row: sqlite3.Row | dict) -> Note:
    """Build a note from a database row."""
    data = dict(row)
    data["tags"] = parse_tags(data.get("tags"))

    # Older rows have no task counts, derive them from the content
    if data.get("task_all") is None:
        data["task_all"], data["task_completed"] = count_tasks(data.get("content"))

    for key in ("is_favorite", "trash", "task_all", "task_completed", "created", "updated"):
        data[key] = int(data.get(key) or 0)
    data["title"] = data.get("title") or ""
    data["content"] = data.get("content") or ""
    return Note.from_dict(data)


def load_notes(path: Path | str | None = None) -> list[Note]:
    """Load every note from the database."""
    conn = get_connection(path)
    try:
        cursor = conn.cursor()
        cursor.execute(f"SELECT {', '.join(NOTE_COLUMNS)} FROM notes ORDER BY id")
        notes = [row_to_note(row) for row in cursor.fetchall()]
    except sqlite3.OperationalError as e:
        if "locked" in str(e).lower():
            raise DatabaseLockedError(
                "Notes database is locked. Please close other writers and try again."
            ) from e
        raise NotesDBError(f"Database error: {e}") from e
    finally:
        conn.close()

    logger.info("Loaded %d notes", len(notes))
    return notes


def get_note_by_id(note_id: str, path: Path | str | None = None) -> Note | None:
    """Get a note by its id."""
    conn = get_connection(path)
    try:
        cursor = conn.cursor()
        cursor.execute(
            f"SELECT {', '.join(NOTE_COLUMNS)} FROM notes WHERE id = ?",
            (note_id,),
        )
        row = cursor.fetchone()
    except sqlite3.OperationalError as e:
        raise NotesDBError(f"Database error: {e}") from e
    finally:
        conn.close()

    if row:
        return row_to_note(row)
    return None
