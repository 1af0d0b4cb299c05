"""
Markdown index generation for research items.

Renders papers and blog posts (articles) from the item store into a single
``_INDEX.md`` document, newest first.
"""

import datetime
import json
import logging
from typing import Any, Dict, List, Optional

from ..core.database import ITEM_TYPE_ARTICLE, ITEM_TYPE_PAPER

logger = logging.getLogger(__name__)

INDEX_HEADING = "# Research Index"

# (section heading, item type) in render order
SECTIONS = (
    ("Papers", ITEM_TYPE_PAPER),
    ("Blog Posts", ITEM_TYPE_ARTICLE),
)


def parse_authors(authors_json: Optional[str]) -> List[str]:
    """Decode the stored author list.

    Anything other than a JSON array of strings yields an empty list.

    Examples:
        >>> parse_authors('["Ada Lovelace", "Charles Babbage"]')
        ['Ada Lovelace', 'Charles Babbage']
        >>> parse_authors('not json')
        []
    """
    if not authors_json:
        return []
    try:
        authors = json.loads(authors_json)
    except (TypeError, ValueError):
        return []
    if not isinstance(authors, list) or not all(isinstance(a, str) for a in authors):
        return []
    return authors


def author_display(authors: List[str]) -> str:
    """Return ``""``, the sole author, or ``"<first> et al."``."""
    if not authors:
        return ""
    if len(authors) == 1:
        return authors[0]
    return f"{authors[0]} et al."


def _parse_timestamp(date_str: str) -> Optional[datetime.datetime]:
    text = date_str.strip()
    if text.endswith(('Z', 'z')):
        text = text[:-1] + '+00:00'
    try:
        return datetime.datetime.fromisoformat(text)
    except ValueError:
        return None


def year_from(date_str: Optional[Any]) -> str:
    """Extract a four-character year from a stored date value.

    Examples:
        >>> year_from("2023-05-01")
        '2023'
        >>> year_from("")
        ''
    """
    if date_str is None:
        return ""
    date_str = str(date_str)
    if not date_str:
        return ""
    if len(date_str) >= 4 and date_str[:4].isdigit():
        return date_str[:4]
    parsed = _parse_timestamp(date_str)
    if parsed is not None:
        return f"{parsed.year:04d}"
    if len(date_str) >= 4:
        return date_str[:4]
    return ""


def format_line(item: Dict[str, Any], tags: List[str]) -> str:
    """Render one index bullet for *item* (with trailing newline)."""
    authors = author_display(parse_authors(item.get('authors_json')))
    year = year_from(item.get('date'))
    return f"- [{item['title']}]({item['slug']}.md) - {authors} ({year}) [{', '.join(tags)}]\n"


class IndexGenerator:
    """Builds the markdown research index from the item store."""

    def __init__(self, heading: str = INDEX_HEADING):
        self.heading = heading

    def generate_index_from_database(self, db_manager) -> str:
        """
        Render the full index document.

        Args:
            db_manager: Database manager instance used for item and tag queries

        Returns:
            The markdown document. Query errors propagate so callers never
            receive a partial index.
        """
        parts = [f"{self.heading}\n\n"]
        for section_title, item_type in SECTIONS:
            parts.append(f"## {section_title}\n")
            items = db_manager.get_items_by_type(item_type)
            for item in items:
                tags = db_manager.get_item_tags(item['slug'])
                parts.append(format_line(item, tags))
            parts.append("\n")
            logger.info(f"Rendered {len(items)} entries under '{section_title}'")
        return "".join(parts)
