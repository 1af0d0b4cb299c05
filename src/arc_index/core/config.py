"""Configuration management for the YAML-based config file."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .paths import expand_path, get_data_dir

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = get_data_dir() / "config"
DEFAULT_CONFIG_PATH = DEFAULT_CONFIG_DIR / "config.yaml"
INDEX_FILENAME = "_INDEX.md"

_DEFAULT_CONFIG_TEMPLATE = """# Auto-generated default configuration for arc-index
research_root: "~/research"

database:
  path: "research.db"
"""


def _write_template(path: Path, content: str) -> None:
    """Write templated YAML content to disk with a trailing newline."""
    path.write_text(content.strip() + "\n", encoding="utf-8")


class ConfigManager:
    """Manages loading and validation of the YAML configuration file."""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize the manager and ensure a baseline config file exists."""
        path = Path(config_path or DEFAULT_CONFIG_PATH).expanduser()
        if not path.is_absolute():
            path = path.resolve()
        self.config_path = str(path)
        self.base_dir = str(path.parent)
        self._config = None
        self._ensure_default_config()

    def load_config(self) -> Dict[str, Any]:
        """Load the main configuration file."""
        if self._config is None:
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    self._config = yaml.safe_load(f) or {}
                logger.info(f"Loaded configuration from {self.config_path}")
            except Exception as e:
                logger.error(f"Failed to load config from {self.config_path}: {e}")
                raise

        return self._config

    def _ensure_default_config(self) -> None:
        """Create the default configuration file if it is missing."""
        config_file = Path(self.config_path)
        if config_file.exists():
            return
        config_file.parent.mkdir(parents=True, exist_ok=True)
        _write_template(config_file, _DEFAULT_CONFIG_TEMPLATE)
        logger.info("Created default config.yaml at %s", config_file)

    def get_research_root(self) -> Path:
        """Return the research root with ``~`` and environment variables expanded."""
        config = self.load_config()
        return expand_path(config.get('research_root') or '.')

    def get_default_index_path(self) -> Path:
        """Return ``{research_root}/_INDEX.md``."""
        return self.get_research_root() / INDEX_FILENAME

    def get_database_path(self) -> str:
        """Return the configured (unresolved) database path."""
        return self.load_config()['database']['path']

    def validate_config(self) -> bool:
        """Validate the configuration file."""
        try:
            config = self.load_config()
            if not isinstance(config, dict):
                logger.error("Configuration root must be a mapping")
                return False

            db_config = config.get('database')
            if not isinstance(db_config, dict):
                logger.error("Missing required section 'database' in main config")
                return False
            db_path = db_config.get('path')
            if not isinstance(db_path, str) or not db_path.strip():
                logger.error("'database.path' must be a non-empty string")
                return False

            research_root = config.get('research_root')
            if research_root is None:
                logger.warning("'research_root' not set; defaulting to the current directory")
            elif not isinstance(research_root, str):
                logger.error("'research_root' must be a string path")
                return False

            logger.debug("Configuration validation passed")
            return True

        except Exception as e:
            logger.error(f"Configuration validation failed: {e}")
            return False


__all__ = [
    "ConfigManager",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_CONFIG_DIR",
    "INDEX_FILENAME",
]
