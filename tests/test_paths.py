"""Tests for runtime data directory resolution helpers."""

from __future__ import annotations

import os
import sys
import unittest
from pathlib import Path
from tempfile import TemporaryDirectory
from unittest import mock

# Ensure the repository's src/ directory is importable without installation.
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from arc_index.core.paths import ensure_data_dir, expand_path, get_data_dir, resolve_data_file  # noqa: E402


class DataDirEnvironmentOverrideTests(unittest.TestCase):
    """Verify that ARC_INDEX_DATA_DIR overrides the runtime data dir."""

    def test_get_data_dir_honors_environment_override(self) -> None:
        with TemporaryDirectory() as tmp:
            override = Path(tmp) / "custom-location"
            with mock.patch.dict(os.environ, {"ARC_INDEX_DATA_DIR": str(override)}, clear=False):
                data_dir = get_data_dir()
        self.assertEqual(data_dir, override.resolve())

    def test_ensure_data_dir_creates_environment_override_directory(self) -> None:
        with TemporaryDirectory() as tmp:
            override = Path(tmp) / "nested" / "override"
            with mock.patch.dict(os.environ, {"ARC_INDEX_DATA_DIR": str(override)}, clear=False):
                data_dir = ensure_data_dir()
                self.assertTrue(override.exists(), "override directory was not created")
        self.assertEqual(data_dir, override.resolve())

    def test_relative_file_resolves_under_data_dir(self) -> None:
        with TemporaryDirectory() as tmp:
            with mock.patch.dict(os.environ, {"ARC_INDEX_DATA_DIR": tmp}, clear=False):
                resolved = resolve_data_file("db/research.db", ensure_parent=True)
                self.assertTrue(resolved.parent.is_dir())
        self.assertEqual(resolved, Path(tmp).resolve() / "db" / "research.db")


class ExpandPathTests(unittest.TestCase):

    def test_expands_home_and_environment_variables(self) -> None:
        with mock.patch.dict(os.environ, {"HOME": "/home/tester", "ARC_NOTES": "notes"}, clear=False):
            self.assertEqual(expand_path("~/$ARC_NOTES/_INDEX.md"), Path("/home/tester/notes/_INDEX.md"))

    def test_absolute_path_is_unchanged(self) -> None:
        self.assertEqual(expand_path("/srv/research/_INDEX.md"), Path("/srv/research/_INDEX.md"))


if __name__ == "__main__":
    unittest.main()
