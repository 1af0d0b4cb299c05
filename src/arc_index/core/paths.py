"""Utilities for locating the runtime data directory and user-supplied paths."""

from __future__ import annotations

import os
from pathlib import Path

_ENV_VAR = "ARC_INDEX_DATA_DIR"
_DEFAULT_DIRNAME = ".arc_index"
_REPO_ROOT = Path(__file__).resolve().parents[3]


def expand_path(path: str | os.PathLike[str]) -> Path:
    """Expand ``~`` and ``$VARS`` in *path* without resolving symlinks."""
    return Path(os.path.expandvars(os.path.expanduser(os.fspath(path))))


def get_data_dir() -> Path:
    """Return the configured runtime data directory.

    Honors the ARC_INDEX_DATA_DIR environment variable; otherwise defaults
    to ~/.arc_index on the current platform.
    """
    override = os.getenv(_ENV_VAR)
    if override is not None:
        cleaned = override.strip()
        if not cleaned:
            return (_REPO_ROOT / _DEFAULT_DIRNAME).resolve()
        candidate = expand_path(cleaned)
        if not candidate.is_absolute():
            candidate = (_REPO_ROOT / candidate).resolve()
        else:
            candidate = candidate.resolve()
        return candidate
    return (Path.home() / _DEFAULT_DIRNAME).resolve()


def ensure_data_dir() -> Path:
    """Ensure the data directory exists on disk and return it."""
    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def resolve_data_file(path: str, ensure_parent: bool = False) -> Path:
    """Resolve a configured file path against the data directory.

    Absolute paths (after ``~``/``$VAR`` expansion) are used as-is. Relative
    paths are interpreted relative to the runtime data dir.
    """
    candidate = expand_path(path)
    if not candidate.is_absolute():
        candidate = ensure_data_dir() / candidate
    if ensure_parent:
        candidate.parent.mkdir(parents=True, exist_ok=True)
    return candidate


__all__ = [
    "expand_path",
    "get_data_dir",
    "ensure_data_dir",
    "resolve_data_file",
]
