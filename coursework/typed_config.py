"""
Typed Configuration Classes

Dataclass views of coursework.yaml so callers get attribute access and
defaults in one place instead of nested dictionary lookups.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from .digit_math import DEFAULT_BASE
from .dynamic_array import DEFAULT_CAPACITY


DEFAULT_SAMPLE_DATA = ["Java", "Python", "C", "C++", "Fortran"]
DEFAULT_LOG_FILE = "data/logs/coursework.log"


@dataclass
class MultiplyConfig:
    """Digit multiplier settings."""
    default_base: int = DEFAULT_BASE


@dataclass
class DynamicArrayConfig:
    """Dynamic array demo settings."""
    default_capacity: int = DEFAULT_CAPACITY
    strict_index: bool = False
    sample_data: List[Optional[str]] = field(default_factory=lambda: list(DEFAULT_SAMPLE_DATA))
    find: str = "C++"


@dataclass
class LoggingConfig:
    """Logging configuration."""
    file: str = DEFAULT_LOG_FILE
    level: str = "INFO"

    def ensure_log_dir_exists(self) -> None:
        """Create log directory if it doesn't exist."""
        Path(self.file).parent.mkdir(parents=True, exist_ok=True)


@dataclass
class AppConfig:
    """
    Root configuration object.

    Usage:
        config = TypedConfigLoader().load("coursework.yaml")
        print(config.multiply.default_base)
    """
    multiply: MultiplyConfig = field(default_factory=MultiplyConfig)
    dynamic_array: DynamicArrayConfig = field(default_factory=DynamicArrayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _section(raw: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return a top-level section; missing or null sections are empty."""
    section = raw.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(section).__name__}")
    return section


def _value(raw: Dict[str, Any], key: str, default: Any) -> Any:
    """Look up key, treating an explicit null like a missing key."""
    value = raw.get(key)
    return default if value is None else value


def _int(raw: Dict[str, Any], key: str, default: int, section: str) -> int:
    value = _value(raw, key, default)
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{section}.{key} must be an integer: {value!r}") from e


class TypedConfigLoader:
    """
    Load configuration from YAML into typed dataclasses.

    Usage:
        config = TypedConfigLoader().load("coursework.yaml")
    """

    def load(self, config_path: str) -> AppConfig:
        """Load and parse a configuration file (plus its local overrides)."""
        from .config_manager import ConfigManager

        raw_config = ConfigManager().load_config(config_path)
        return self.parse(raw_config)

    def parse(self, raw: Dict[str, Any]) -> AppConfig:
        """
        Parse raw dictionary into typed config.

        Raises:
            ValueError: If a section or value has the wrong shape
        """
        return AppConfig(
            multiply=self._parse_multiply(_section(raw, 'multiply')),
            dynamic_array=self._parse_dynamic_array(_section(raw, 'dynamic_array')),
            logging=self._parse_logging(_section(raw, 'logging')),
        )

    def _parse_multiply(self, raw: Dict[str, Any]) -> MultiplyConfig:
        base = _int(raw, 'default_base', DEFAULT_BASE, 'multiply')
        if base < 2:
            raise ValueError(f"multiply.default_base must be >= 2: {base}")
        return MultiplyConfig(default_base=base)

    def _parse_dynamic_array(self, raw: Dict[str, Any]) -> DynamicArrayConfig:
        sample_data = _value(raw, 'sample_data', DEFAULT_SAMPLE_DATA)
        if not isinstance(sample_data, list):
            raise ValueError("dynamic_array.sample_data must be a list")
        return DynamicArrayConfig(
            default_capacity=_int(raw, 'default_capacity', DEFAULT_CAPACITY, 'dynamic_array'),
            strict_index=bool(_value(raw, 'strict_index', False)),
            # YAML null entries stay None, everything else becomes a string
            sample_data=[None if item is None else str(item) for item in sample_data],
            find=str(_value(raw, 'find', 'C++')),
        )

    def _parse_logging(self, raw: Dict[str, Any]) -> LoggingConfig:
        return LoggingConfig(
            file=str(_value(raw, 'file', DEFAULT_LOG_FILE)),
            level=str(_value(raw, 'level', 'INFO')).upper(),
        )
