#!/usr/bin/env python3
"""
Base runner class containing shared setup for the coursework entry scripts.
"""
import logging
from typing import Optional

from .config_manager import ConfigManager
from .typed_config import AppConfig, TypedConfigLoader
from .user_output import UserOutput


class BaseRunner:
    """Loads configuration, configures logging and owns the user output."""

    def __init__(self, config_path: str, output: Optional[UserOutput] = None):
        """Initialize runner with configuration."""
        config_manager = ConfigManager()
        self.config = config_manager.load_config(config_path)
        if not config_manager.validate_config_structure(self.config):
            raise ValueError(f"Invalid configuration structure: {config_path}")

        self.typed_config: AppConfig = TypedConfigLoader().parse(self.config)

        self.setup_logging()
        self.output = output or UserOutput(logger=self.logger)

    def setup_logging(self):
        """Set up logging configuration."""
        logging_config = self.typed_config.logging
        logging_config.ensure_log_dir_exists()

        logging.basicConfig(
            level=getattr(logging, logging_config.level, logging.INFO),
            format='%(asctime)s - %(levelname)s - %(message)s',
            handlers=[
                logging.FileHandler(logging_config.file),
                logging.StreamHandler()
            ]
        )
        self.logger = logging.getLogger(__name__)

    def report_checks(self, title: str, results) -> int:
        """Print self-check results under a header and return the process exit code."""
        self.output.section(title)
        return 0 if self.output.check_summary(results) else 1
