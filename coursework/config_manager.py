"""
Configuration Manager Utility

Reads coursework.yaml and layers an optional coursework.local.yaml over it.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load the YAML configuration, applying local overrides when present."""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__}.ConfigManager")

    def load_config(self, config_path: str) -> Dict[str, Any]:
        """
        Load configuration from YAML file with automatic local overrides.

        Args:
            config_path: Path to base configuration file (e.g., 'coursework.yaml')

        Returns:
            Merged configuration dictionary

        Raises:
            FileNotFoundError: If base config file doesn't exist
            ValueError: If the base file is not a YAML mapping
            yaml.YAMLError: If the base file can't be parsed
        """
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        config = self._read_yaml(config_file)
        if config is None:
            self.logger.warning(f"Configuration file is empty: {config_path}")
            config = {}
        elif not isinstance(config, dict):
            raise ValueError(
                f"Configuration file must contain a mapping, got {type(config).__name__}: {config_path}"
            )

        local_path = config_file.parent / f"{config_file.stem}.local.yaml"
        if not local_path.exists():
            return config

        self.logger.info(f"Applying local overrides from: {local_path}")
        try:
            overrides = self._read_yaml(local_path)
        except (yaml.YAMLError, OSError) as e:
            # Broken overrides never block the base config
            self.logger.error(f"Ignoring unreadable local configuration {local_path}: {e}")
            return config

        if isinstance(overrides, dict):
            return self.deep_merge(config, overrides)

        self.logger.warning(f"Ignoring local configuration without a mapping: {local_path}")
        return config

    def _read_yaml(self, path: Path) -> Any:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)

    def deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge override into a copy of base, recursing into nested mappings.

        Example:
            base = {'a': {'b': 1, 'c': 2}, 'd': 3}
            override = {'a': {'b': 99}, 'e': 4}
            result = {'a': {'b': 99, 'c': 2}, 'd': 3, 'e': 4}
        """
        merged = dict(base)
        for key, value in override.items():
            if isinstance(merged.get(key), dict) and isinstance(value, dict):
                merged[key] = self.deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged

    def validate_config_structure(
        self, config: Dict[str, Any], required_keys: Optional[List[str]] = None
    ) -> bool:
        """
        Check that the required top-level sections are present.

        Args:
            config: Configuration dictionary to validate
            required_keys: Required top-level keys (default: 'logging')
        """
        missing = [key for key in required_keys or ['logging'] if key not in config]
        if missing:
            self.logger.error(f"Configuration is missing required keys: {', '.join(missing)}")
            return False
        return True
