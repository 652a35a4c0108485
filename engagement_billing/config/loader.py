"""
Configuration management and loading.

Handles logging and invoice display settings.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict

import yaml


class LogLevel(Enum):
    """Supported log levels."""
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


@dataclass(frozen=True)
class LoggingConfig:
    """Logging settings for the CLI."""
    level: LogLevel = LogLevel.WARNING


@dataclass(frozen=True)
class InvoiceConfig:
    """Invoice display settings."""
    show_summary: bool = True


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    invoice: InvoiceConfig = field(default_factory=InvoiceConfig)


DEFAULT_CONFIG = AppConfig()


def load_app_config(path: str) -> AppConfig:
    """Load and validate application configuration from YAML file.

    Every section and key is optional; unknown keys are rejected.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated AppConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        yaml.YAMLError: If YAML is invalid
        ValueError: If configuration is invalid
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        try:
            raw_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Invalid YAML in config file {path}: {e}")

    if raw_config is None:
        return DEFAULT_CONFIG
    if not isinstance(raw_config, dict):
        raise ValueError("Configuration must be a dictionary")

    allowed_top_keys = {'logging', 'invoice'}
    unknown_keys = set(raw_config.keys()) - allowed_top_keys
    if unknown_keys:
        raise ValueError(f"Unknown configuration keys: {unknown_keys}")

    logging_data = _section(raw_config, 'logging', {'level'})
    invoice_data = _section(raw_config, 'invoice', {'show_summary'})

    return AppConfig(
        logging=_parse_logging_config(logging_data),
        invoice=_parse_invoice_config(invoice_data)
    )


def _section(raw_config: Dict, name: str, allowed_keys: set) -> Dict:
    data = raw_config.get(name) or {}
    if not isinstance(data, dict):
        raise ValueError(f"'{name}' must be a dictionary")

    unknown_keys = set(data.keys()) - allowed_keys
    if unknown_keys:
        raise ValueError(f"Unknown keys in {name}: {unknown_keys}")
    return data


def _parse_logging_config(data: Dict) -> LoggingConfig:
    if 'level' not in data:
        return LoggingConfig()

    level_str = data['level']
    if not isinstance(level_str, str):
        raise ValueError("'level' in logging must be a string")

    try:
        level = LogLevel(level_str.lower())
    except ValueError:
        valid_levels = [level.value for level in LogLevel]
        raise ValueError(f"'level' in logging must be one of: {valid_levels}")

    return LoggingConfig(level=level)


def _parse_invoice_config(data: Dict) -> InvoiceConfig:
    if 'show_summary' not in data:
        return InvoiceConfig()

    show_summary = data['show_summary']
    if not isinstance(show_summary, bool):
        raise ValueError("'show_summary' in invoice must be a boolean")

    return InvoiceConfig(show_summary=show_summary)
