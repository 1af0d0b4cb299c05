"""
Rebuild command implementation.
Regenerates the markdown research index (_INDEX.md) from the item store.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ..core.command_context import CommandContext
from ..core.database import DatabaseManager
from ..core.output import OutputFormat, emit, resolve_output
from ..core.paths import expand_path
from ..processors.index_generator import IndexGenerator

logger = logging.getLogger(__name__)


class RebuildError(RuntimeError):
    """Raised when the index cannot be generated or written."""


def rebuild_index(db_manager: DatabaseManager, output_path: Union[str, Path]) -> Path:
    """Render the index from *db_manager* and write it to *output_path*.

    The document is rendered in full before anything touches the disk, so a
    failed query leaves any existing index file untouched.

    Raises:
        RebuildError: on query, directory creation or write failures
    """
    output_path = Path(output_path)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise RebuildError(f"failed to create output directory: {exc}") from exc

    try:
        content = IndexGenerator().generate_index_from_database(db_manager)
    except Exception as exc:
        raise RebuildError(f"failed to generate index: {exc}") from exc

    try:
        with open(output_path, 'w', encoding='utf-8', newline='\n') as f:
            f.write(content)
    except OSError as exc:
        raise RebuildError(f"failed to write index file to {output_path}: {exc}") from exc

    logger.info(f"Wrote index ({len(content)} bytes) to {output_path}")
    return output_path


def run(
    config_path: Optional[str],
    out_file: Optional[str] = None,
    output: Union[str, OutputFormat] = OutputFormat.TABLE,
) -> Dict[str, Any]:
    """Rebuild the index and report where it was written.

    Args:
        config_path: Path to the main configuration file
        out_file: Optional index path (default: {research_root}/_INDEX.md)
        output: One of table, json, yaml, quiet

    Returns:
        The structured result: ``{"path", "research", "status"}``
    """
    fmt = resolve_output(output)
    logger.info("Starting rebuild command")

    with CommandContext(config_path) as ctx:
        if out_file:
            output_path = expand_path(out_file)
        else:
            output_path = ctx.config_manager.get_default_index_path()

        written = rebuild_index(ctx.db, output_path)

        result = {
            'path': str(written),
            'research': str(ctx.research_root),
            'status': 'rebuilt',
        }

    emit(result, fmt, [f"Index rebuilt successfully: {result['path']}"])
    return result
