"""
Connection handles, configuration and statement execution
"""

from .config import DatabaseConfig, DEFAULT_CONFIG, load_config, validate_config
from .connection import Database
from .executor import QueryExecutor, Record, create_command, read_all

__all__ = [
    'DatabaseConfig',
    'DEFAULT_CONFIG',
    'load_config',
    'validate_config',
    'Database',
    'QueryExecutor',
    'Record',
    'create_command',
    'read_all'
]
