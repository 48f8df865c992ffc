import json
import sqlite3

import pytest

from notefilter.models import Note


@pytest.fixture
def notes():
    """A small backing set covering every filter."""
    return [
        Note(id="1", title="Shopping List", content="- [x] milk\n- [ ] eggs\n- [ ] bread",
             tags=["home"], task_all=3, task_completed=1, created=1000),
        Note(id="2", title="Trip Plan", content="Visit Lisbon", tags=["travel"],
             trash=1, created=2000),
        Note(id="3", title="Meeting notes", content="Discuss the ROADMAP\nnext steps",
             tags=["work", "home"], notebook_id="nb1", is_favorite=1, created=3000),
        Note(id="4", title="Recipes", content="Pancakes", notebook_id="nb1",
             created=3000),
        Note(id="5", title="Old ideas", content="", tags=["work"], notebook_id="nb2",
             trash=1, is_favorite=1, task_all=2, task_completed=2, created=500),
    ]


@pytest.fixture
def notes_db(tmp_path):
    """On-disk database in the layout the adapter reads."""
    path = tmp_path / "notes.sqlite"
    conn = sqlite3.connect(path)
    conn.execute(
        """
        CREATE TABLE notes (
            id TEXT PRIMARY KEY,
            title TEXT,
            content TEXT,
            tags TEXT,
            notebook_id TEXT,
            is_favorite INTEGER,
            trash INTEGER,
            task_all INTEGER,
            task_completed INTEGER,
            created INTEGER,
            updated INTEGER
        )
        """
    )
    rows = [
        ("1", "Shopping List", "- [x] milk\n- [ ] eggs", json.dumps(["home"]),
         None, 0, 0, None, None, 1700000000000, 0),
        ("2", "Trip Plan", "Visit **Lisbon**", "travel, summer",
         "nb1", 1, 1, 0, 0, 1700000100000, 0),
        ("3", "Meeting notes", "Discuss the roadmap", None,
         "nb1", 1, 0, 2, 2, 1700000200000, 0),
    ]
    conn.executemany("INSERT INTO notes VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)", rows)
    conn.commit()
    conn.close()
    return path
