"""
Command context for shared initialization across CLI commands.

Loads and validates the config, then builds the ``DatabaseManager`` that is
handed to each command's operation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .config import ConfigManager
from .database import DatabaseManager


logger = logging.getLogger(__name__)


class CommandContext:
    """Encapsulates config loading and database wiring for CLI commands.

    Example:
        ```python
        with CommandContext(config_path) as ctx:
            content = IndexGenerator().generate_index_from_database(ctx.db)
        ```
    """

    def __init__(self, config_path: Optional[str] = None):
        """Initialize command context with config and database.

        Args:
            config_path: Path to main config file (None = use default)

        Raises:
            ValueError: If configuration is invalid
        """
        self.config_manager = ConfigManager(config_path)

        if not self.config_manager.validate_config():
            raise ValueError("Invalid configuration. Run 'arc-index status' for details.")

        self.config = self.config_manager.load_config()
        self.db = DatabaseManager(self.config)

        logger.debug(f"CommandContext initialized with config from {self.config_manager.config_path}")

    @property
    def research_root(self) -> Path:
        return self.config_manager.get_research_root()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        # DatabaseManager opens and closes a connection per query
        pass
