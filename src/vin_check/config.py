"""
VIN Check Configuration - Centralized Settings
==============================================

All configurable parameters in one place.
Supports environment variable overrides and YAML/JSON config files.

Usage:
    from vin_check.config import get_config
    config = get_config()
    print(config.logging.level)

Environment Variables:
    VIN_LOG_LEVEL=DEBUG
    VIN_LOG_FILE=/var/log/vin-check.log
    VIN_OUTPUT_JSON=true
    VIN_JSON_INDENT=4
"""

import os
import json
import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any, Union

import yaml

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_YAML_SUFFIXES = ('.yaml', '.yml')
_JSON_SUFFIXES = ('.json',)


def _get_env_int(key: str, default: int) -> int:
    """Get int from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Invalid int for {key}: {value}, using default {default}")
    return default


def _get_env_bool(key: str, default: bool) -> bool:
    """Get bool from environment variable."""
    value = os.environ.get(key)
    if value is not None:
        lowered = value.strip().lower()
        if lowered in ('true', '1', 'yes', 'on'):
            return True
        if lowered in ('false', '0', 'no', 'off'):
            return False
        logger.warning(f"Invalid bool for {key}: {value}, using default {default}")
    return default


def _get_env_str(key: str, default: str) -> str:
    """Get string from environment variable."""
    return os.environ.get(key, default)


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: _get_env_str('VIN_LOG_LEVEL', 'WARNING')
    )
    format: str = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    date_format: str = '%Y-%m-%d %H:%M:%S'

    # File logging (optional)
    log_file: Optional[str] = field(
        default_factory=lambda: os.environ.get('VIN_LOG_FILE')
    )


@dataclass
class OutputConfig:
    """CLI output configuration."""

    json_output: bool = field(
        default_factory=lambda: _get_env_bool('VIN_OUTPUT_JSON', False)
    )
    json_indent: int = field(
        default_factory=lambda: _get_env_int('VIN_JSON_INDENT', 2)
    )


@dataclass
class CheckConfig:
    """Complete vin_check configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    def save(self, path: Union[str, Path]):
        """Save configuration to a YAML or JSON file, chosen by suffix."""
        path = Path(path)
        suffix = path.suffix.lower()
        with open(path, 'w') as f:
            if suffix in _YAML_SUFFIXES:
                yaml.dump(self.to_dict(), f, default_flow_style=False)
            elif suffix in _JSON_SUFFIXES:
                json.dump(self.to_dict(), f, indent=2)
            else:
                raise ConfigurationError(
                    f"Unsupported config file type: {path.name}",
                    config_key="path",
                    expected="one of .yaml, .yml, .json",
                )

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'CheckConfig':
        """
        Load configuration from a YAML or JSON file.

        Sections and keys not known to the dataclasses are ignored;
        missing ones keep their (environment-aware) defaults.
        """
        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in _YAML_SUFFIXES + _JSON_SUFFIXES:
            raise ConfigurationError(
                f"Unsupported config file type: {path.name}",
                config_key="path",
                expected="one of .yaml, .yml, .json",
            )

        try:
            with open(path) as f:
                if suffix in _YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except OSError as e:
            raise ConfigurationError(f"Cannot read {path}: {e}", config_key="path") from e
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Cannot parse {path}: {e}", config_key="path") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Top level of {path.name} must be a mapping",
                expected="mapping",
            )

        config = cls()

        # Update known sections
        for name in ('logging', 'output'):
            section = data.get(name) or {}
            if not isinstance(section, dict):
                raise ConfigurationError(
                    f"Section '{name}' of {path.name} must be a mapping",
                    config_key=name,
                    expected="mapping",
                )
            target = getattr(config, name)
            for key, value in section.items():
                if hasattr(target, key):
                    setattr(target, key, value)

        logger.debug(f"Loaded configuration from {path}")
        return config


# Global configuration instance (singleton pattern)
_config: Optional[CheckConfig] = None


def get_config() -> CheckConfig:
    """
    Get the global configuration instance.

    Creates a new instance on first call, returns cached instance thereafter.
    """
    global _config
    if _config is None:
        config = CheckConfig()
        setup_logging(config.logging)
        _config = config
    return _config


def set_config(config: CheckConfig) -> CheckConfig:
    """Install ``config`` as the global instance and apply its logging settings."""
    global _config
    setup_logging(config.logging)
    _config = config
    return config


def reset_config():
    """Reset configuration to defaults (useful for testing)."""
    global _config
    _config = None


def setup_logging(config: LoggingConfig):
    """Configure logging based on settings."""
    level = logging.getLevelName(str(config.level).upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level}",
            config_key="logging.level",
            expected="DEBUG, INFO, WARNING, ERROR or CRITICAL",
        )

    handlers = [logging.StreamHandler()]

    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    logging.basicConfig(
        level=level,
        format=config.format,
        datefmt=config.date_format,
        handlers=handlers,
        force=True,
    )
