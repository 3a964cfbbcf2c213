"""
Database configuration and engine management
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool
from copy import deepcopy
from pathlib import Path
from typing import Dict, Any, Optional, Union
from jsonschema import Draft7Validator
import yaml
import logging

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


DEFAULT_CONFIG = {
    'database': {
        'url': '',              # SQLAlchemy URL for blocking calls
        'async_url': None,      # SQLAlchemy URL with an async driver, defaults to url
        'echo': False,          # Echo SQL through SQLAlchemy's own logger
    },
    'logging': {
        'level': 'INFO',
        'log_file': None,       # Log to stderr when unset
    }
}

CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "database": {
            "type": "object",
            "properties": {
                "url": {"type": "string"},
                "async_url": {"type": ["string", "null"]},
                "echo": {"type": "boolean"}
            }
        },
        "logging": {
            "type": "object",
            "properties": {
                "level": {"type": "string", "enum": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]},
                "log_file": {"type": ["string", "null"]}
            }
        }
    }
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    result = deepcopy(base)

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = deepcopy(value)

    return result


def _load_yaml_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    try:
        with open(path, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Failed to parse YAML file {path}: {e}") from e

    # An empty file is an empty override
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file must contain a mapping, got {type(config).__name__}")
    return config


def validate_config(config: Dict[str, Any]) -> None:
    """
    Validate a configuration dictionary against ``CONFIG_SCHEMA``

    Raises:
        ConfigurationError: Listing every schema violation found
    """
    errors = sorted(Draft7Validator(CONFIG_SCHEMA).iter_errors(config), key=lambda e: list(e.path))
    if errors:
        details = '; '.join(
            f"{'.'.join(str(p) for p in error.path) or '<root>'}: {error.message}" for error in errors
        )
        raise ConfigurationError(f"Invalid configuration: {details}")


def load_config(path: Optional[Union[str, Path]] = None,
                overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load configuration from defaults, an optional YAML file and overrides

    Args:
        path: Optional YAML file merged over ``DEFAULT_CONFIG``
        overrides: Optional dictionary merged last

    Returns:
        Validated configuration dictionary
    """
    config = deepcopy(DEFAULT_CONFIG)

    if path is not None:
        config = _deep_merge(config, _load_yaml_file(Path(path)))
        logger.info(f"Loaded configuration from: {path}")

    if overrides:
        config = _deep_merge(config, overrides)

    validate_config(config)
    return config


class DatabaseConfig:
    """Engine factory for connection strings"""

    @staticmethod
    def get_engine(url: str, echo: bool = False) -> Engine:
        """
        Create a blocking SQLAlchemy engine without connection pooling

        Args:
            url: SQLAlchemy database URL
            echo: Echo SQL through SQLAlchemy's logger

        Returns:
            SQLAlchemy Engine instance
        """
        if not url or not url.strip():
            raise ConfigurationError("No connection string has been provided.")

        engine = create_engine(url, poolclass=NullPool, echo=echo)
        logger.info(f"Created {engine.dialect.name} engine: {engine.url.render_as_string(hide_password=True)}")
        return engine

    @staticmethod
    def get_async_engine(url: str, echo: bool = False) -> AsyncEngine:
        """
        Create an asyncio SQLAlchemy engine without connection pooling

        Args:
            url: SQLAlchemy database URL naming an async driver
            echo: Echo SQL through SQLAlchemy's logger

        Returns:
            SQLAlchemy AsyncEngine instance
        """
        if not url or not url.strip():
            raise ConfigurationError("No connection string has been provided.")

        engine = create_async_engine(url, poolclass=NullPool, echo=echo)
        logger.info(f"Created async {engine.dialect.name} engine: {engine.url.render_as_string(hide_password=True)}")
        return engine
