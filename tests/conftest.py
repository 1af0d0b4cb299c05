"""Shared fixtures: a throwaway research store and a config pointing at it."""

from __future__ import annotations

import json
import sqlite3
import sys
from pathlib import Path

import pytest

# Ensure the repository's src/ directory is importable without installation.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))


SCHEMA = """
    CREATE TABLE items (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        slug TEXT NOT NULL UNIQUE,
        title TEXT NOT NULL,
        authors_json TEXT,
        type TEXT,
        date_published TEXT,
        created_at TEXT NOT NULL
    );
    CREATE TABLE tags (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL UNIQUE
    );
    CREATE TABLE item_tags (
        item_id INTEGER NOT NULL,
        tag_id INTEGER NOT NULL,
        PRIMARY KEY (item_id, tag_id)
    );
"""


class ResearchStore:
    """Small writer for test databases using the research item schema."""

    def __init__(self, path: Path):
        self.path = path
        conn = sqlite3.connect(path)
        conn.executescript(SCHEMA)
        conn.commit()
        conn.close()

    def add_item(
        self,
        slug: str,
        title: str = "Untitled",
        authors=None,
        item_type: str | None = "paper",
        date_published: str | None = None,
        created_at: str = "2020-01-01T00:00:00Z",
        tags=(),
        authors_json: str | None = None,
    ) -> None:
        if authors_json is None:
            authors_json = json.dumps(list(authors or []))
        conn = sqlite3.connect(self.path)
        cursor = conn.cursor()
        cursor.execute(
            """
            INSERT INTO items (slug, title, authors_json, type, date_published, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (slug, title, authors_json, item_type, date_published, created_at),
        )
        item_id = cursor.lastrowid
        for name in tags:
            cursor.execute("INSERT OR IGNORE INTO tags (name) VALUES (?)", (name,))
            tag_id = cursor.execute("SELECT id FROM tags WHERE name = ?", (name,)).fetchone()[0]
            cursor.execute("INSERT INTO item_tags (item_id, tag_id) VALUES (?, ?)", (item_id, tag_id))
        conn.commit()
        conn.close()

    def add_tag(self, name: str) -> None:
        conn = sqlite3.connect(self.path)
        conn.execute("INSERT OR IGNORE INTO tags (name) VALUES (?)", (name,))
        conn.commit()
        conn.close()


@pytest.fixture
def store(tmp_path) -> ResearchStore:
    return ResearchStore(tmp_path / "research.db")


@pytest.fixture
def research_root(tmp_path) -> Path:
    return tmp_path / "research"


@pytest.fixture
def config_path(tmp_path, store, research_root) -> Path:
    """Config file pointing at the ``store`` database and ``research_root``."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    path = config_dir / "config.yaml"
    path.write_text(
        (
            f"research_root: \"{research_root}\"\n"
            "database:\n"
            f"  path: \"{store.path}\"\n"
        ),
        encoding="utf-8",
    )
    return path
