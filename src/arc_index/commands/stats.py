"""
Stats command implementation.
Counts papers, articles, all items and tags in the item store.
"""

import logging
import sqlite3
from dataclasses import asdict, dataclass
from typing import Callable, Optional, Union

from ..core.command_context import CommandContext
from ..core.database import ITEM_TYPE_ARTICLE, ITEM_TYPE_PAPER, DatabaseManager
from ..core.output import OutputFormat, emit, resolve_output

logger = logging.getLogger(__name__)


@dataclass
class IndexStats:
    papers: int = 0
    articles: int = 0
    total: int = 0
    tags: int = 0

    def to_dict(self) -> dict:
        return asdict(self)

    def table_lines(self) -> list[str]:
        return [
            f"Papers:   {self.papers}",
            f"Articles: {self.articles}",
            f"Total:    {self.total}",
            f"Tags:     {self.tags}",
        ]


def _safe_count(label: str, query: Callable[[], int]) -> int:
    """Run one count query; a database error counts as zero."""
    try:
        return query()
    except sqlite3.Error as exc:
        logger.warning(f"Count of {label} failed, reporting 0: {exc}")
        return 0


def collect_stats(db_manager: DatabaseManager) -> IndexStats:
    """Best-effort item and tag counts; each count fails independently."""
    return IndexStats(
        papers=_safe_count('papers', lambda: db_manager.count_items(ITEM_TYPE_PAPER)),
        articles=_safe_count('articles', lambda: db_manager.count_items(ITEM_TYPE_ARTICLE)),
        total=_safe_count('items', db_manager.count_items),
        tags=_safe_count('tags', db_manager.count_tags),
    )


def run(config_path: Optional[str], output: Union[str, OutputFormat] = OutputFormat.TABLE) -> IndexStats:
    """Collect stats and print them in the requested format.

    Args:
        config_path: Path to the main configuration file
        output: One of table, json, yaml, quiet
    """
    fmt = resolve_output(output)
    with CommandContext(config_path) as ctx:
        stats = collect_stats(ctx.db)
    logger.debug(f"Stats collected: {stats}")
    emit(stats.to_dict(), fmt, stats.table_lines())
    return stats
