"""
Read-only access to the research item store.

Schema (owned by the tool that writes the store):
- items(id, slug, title, authors_json, type, date_published, created_at)
- tags(id, name)
- item_tags(item_id, tag_id)
"""

import sqlite3
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator, List, Optional

from .paths import resolve_data_file

logger = logging.getLogger(__name__)

ITEM_TYPE_PAPER = 'paper'
ITEM_TYPE_ARTICLE = 'article'


class DatabaseManager:
    """Runs the item and tag queries against a SQLite store."""

    def __init__(self, config: Dict[str, Any]):
        """Resolve the database file path from config."""
        self.config = config
        self.db_path = str(resolve_data_file(config['database']['path']))

    def exists(self) -> bool:
        """Return True when the database file is present on disk."""
        return Path(self.db_path).is_file()

    @contextmanager
    def get_connection(self, row_factory: bool = True) -> Iterator[sqlite3.Connection]:
        """Context manager for read-only database connections.

        The store is opened with ``mode=ro`` so a missing file raises
        ``sqlite3.OperationalError`` instead of creating an empty database.

        Example:
            with db.get_connection() as conn:
                conn.execute("SELECT COUNT(*) FROM items")
        """
        uri = f"{Path(self.db_path).resolve().as_uri()}?mode=ro"
        conn = sqlite3.connect(uri, uri=True)
        if row_factory:
            conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def get_items_by_type(self, item_type: str) -> List[Dict[str, Any]]:
        """Return items of *item_type* ordered by effective date desc, slug asc.

        Each dict carries ``slug``, ``title``, ``authors_json`` and ``date``
        (``date_published`` falling back to ``created_at``).
        """
        with self.get_connection() as conn:
            cursor = conn.execute(
                """
                SELECT slug, title, authors_json,
                       COALESCE(date_published, created_at) AS date
                FROM items
                WHERE type = ?
                ORDER BY COALESCE(date_published, created_at) DESC, slug ASC
                """,
                (item_type,),
            )
            items = [dict(row) for row in cursor.fetchall()]
        logger.debug(f"Fetched {len(items)} items of type '{item_type}'")
        return items

    def get_item_tags(self, slug: str) -> List[str]:
        """Return tag names attached to the item *slug*, alphabetically."""
        with self.get_connection() as conn:
            cursor = conn.execute(
                """
                SELECT t.name
                FROM tags t
                JOIN item_tags it ON it.tag_id = t.id
                JOIN items i ON i.id = it.item_id
                WHERE i.slug = ?
                ORDER BY t.name ASC
                """,
                (slug,),
            )
            return [row['name'] for row in cursor.fetchall()]

    def count_items(self, item_type: Optional[str] = None) -> int:
        """Count items, optionally restricted to one type."""
        query = "SELECT COUNT(*) FROM items"
        params: tuple = ()
        if item_type is not None:
            query += " WHERE type = ?"
            params = (item_type,)
        with self.get_connection(row_factory=False) as conn:
            return conn.execute(query, params).fetchone()[0]

    def count_tags(self) -> int:
        """Count all tags."""
        with self.get_connection(row_factory=False) as conn:
            return conn.execute("SELECT COUNT(*) FROM tags").fetchone()[0]
