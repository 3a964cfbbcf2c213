"""
sqlhelper: a thin SQL helper library.

Components:
- query: immutable SELECT builder and named parameters
- schema: column types, constraints and CREATE TABLE rendering
- database: connection handles, configuration and statement execution

There is no global connection. ``connect()`` returns a ``Database`` handle
that is passed explicitly to everything that needs one::

    import sqlhelper

    db = sqlhelper.connect("sqlite:///app.db")
    executor = sqlhelper.QueryExecutor(db)
    executor.execute_non_query(
        sqlhelper.create_table("users")
        .add_column("id", sqlhelper.SqlType.INTEGER,
                    sqlhelper.ColumnConstraint.PRIMARY_KEY | sqlhelper.ColumnConstraint.AUTO_INCREMENT)
        .add_column("name", sqlhelper.SqlType.TEXT, sqlhelper.ColumnConstraint.NOT_NULL)
        .build()
    )
    rows = executor.execute_reader(*sqlhelper.SelectBuilder().from_("users").where("id", 1).build())
    sqlhelper.close(db)
"""

from typing import Optional

__version__ = "1.0.0"

from .errors import SqlHelperError, ConfigurationError, UnsupportedTypeError
from .query import SqlParameter, build_parameters, BuiltQuery, SelectBuilder
from .schema import SqlType, ColumnConstraint, ColumnDefinition, TableBuilder
from .database import Database, DatabaseConfig, QueryExecutor, load_config
from .logging_utils import setup_logging


def connect(connection_string: str, async_connection_string: Optional[str] = None,
            echo: bool = False) -> Database:
    """Create a handle and open its current connection."""
    database = Database(connection_string, async_connection_string, echo=echo)
    database.connect()
    return database


async def connect_async(connection_string: str, async_connection_string: Optional[str] = None,
                        echo: bool = False) -> Database:
    """Create a handle and open its current connection asynchronously."""
    database = Database(connection_string, async_connection_string, echo=echo)
    await database.connect_async()
    return database


def close(database: Database) -> None:
    """Close the handle's current connection if one is open."""
    database.close()


def is_connected(database: Database) -> bool:
    """Whether the handle's current connection is open."""
    return database.is_open


def create_table(table_name: str) -> TableBuilder:
    """Start a CREATE TABLE statement for ``table_name``."""
    return TableBuilder(table_name)


__all__ = [
    'SqlHelperError',
    'ConfigurationError',
    'UnsupportedTypeError',
    'SqlParameter',
    'build_parameters',
    'BuiltQuery',
    'SelectBuilder',
    'SqlType',
    'ColumnConstraint',
    'ColumnDefinition',
    'TableBuilder',
    'Database',
    'DatabaseConfig',
    'QueryExecutor',
    'load_config',
    'setup_logging',
    'connect',
    'connect_async',
    'close',
    'is_connected',
    'create_table'
]
