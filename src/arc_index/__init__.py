from __future__ import annotations

import os
from typing import Any, Dict, Optional

from .commands import rebuild as rebuild_cmd
from .commands import stats as stats_cmd
from .core.config import ConfigManager, DEFAULT_CONFIG_PATH
from .core.database import DatabaseManager

_DEFAULT_CONFIG = str(DEFAULT_CONFIG_PATH)

__all__ = [
    'rebuild',
    'stats',
    'status',
]


def rebuild(
    out_file: Optional[str] = None,
    output: str = 'quiet',
    config_path: Optional[str] = None,
) -> Dict[str, Any]:
    """Regenerate the research index programmatically.

    Args:
        out_file: Optional index path; defaults to {research_root}/_INDEX.md.
        output: Output format echoed to stdout (default: quiet).
        config_path: Path to main YAML config; defaults to the data dir config.

    Returns:
        ``{"path", "research", "status"}`` for the written index.
    """
    cfg_path = config_path or _DEFAULT_CONFIG
    return rebuild_cmd.run(cfg_path, out_file, output)


def stats(output: str = 'quiet', config_path: Optional[str] = None) -> Dict[str, int]:
    """Return ``{"papers", "articles", "total", "tags"}`` counts."""
    cfg_path = config_path or _DEFAULT_CONFIG
    return stats_cmd.run(cfg_path, output).to_dict()


def status(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Return configuration and database status for programmatic use."""
    cfg_path = config_path or _DEFAULT_CONFIG
    info: Dict[str, Any] = {'config_path': cfg_path}
    if not os.path.exists(cfg_path):
        info.update({'valid': False, 'error': f'Config file not found: {cfg_path}'})
        return info
    try:
        cm = ConfigManager(cfg_path)
        valid = cm.validate_config()
        info['valid'] = bool(valid)
        if valid:
            db = DatabaseManager(cm.load_config())
            info.update({
                'research_root': str(cm.get_research_root()),
                'index_path': str(cm.get_default_index_path()),
                'db_path': db.db_path,
                'db_exists': db.exists(),
            })
        return info
    except Exception as e:
        info.update({'valid': False, 'error': str(e)})
        return info
