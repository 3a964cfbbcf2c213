"""
Database connection handle.

A ``Database`` carries the connection strings and the engines built from
them, and is passed explicitly to every operation that needs a connection.
Engines use ``NullPool``: every ``create()`` opens a fresh DBAPI connection
and closing it really closes it.
"""

from typing import Any, Dict, Optional, Union
import logging

from sqlalchemy.engine import Connection, Engine, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from .config import DatabaseConfig
from ..errors import ConfigurationError
from ..logging_utils import log_connection_event

logger = logging.getLogger(__name__)


class Database:
    """
    Explicit connection handle.

    Besides creating per-call connections for the executor, a handle can hold
    one "current" connection opened with ``connect()``/``connect_async()``.
    That state belongs to the handle only; one handle must not be connected
    or closed from several threads at once.
    """

    def __init__(self, connection_string: str, async_connection_string: Optional[str] = None,
                 echo: bool = False):
        """
        Args:
            connection_string: SQLAlchemy URL used for blocking connections
            async_connection_string: SQLAlchemy URL with an async driver;
                defaults to ``connection_string``
            echo: Echo SQL through SQLAlchemy's logger
        """
        self.connection_string = connection_string or ''
        self.async_connection_string = async_connection_string
        self.echo = echo

        self._engine: Optional[Engine] = None
        self._async_engine: Optional[AsyncEngine] = None
        self._connection: Optional[Union[Connection, AsyncConnection]] = None

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> 'Database':
        """Create a handle from a configuration produced by ``load_config``"""
        db_config = config.get('database', {})
        return cls(
            db_config.get('url', ''),
            async_connection_string=db_config.get('async_url'),
            echo=db_config.get('echo', False),
        )

    def __repr__(self) -> str:
        return f"Database({self._safe_url(self.connection_string)!r})"

    @staticmethod
    def _safe_url(url: str) -> str:
        if not url:
            return ''
        try:
            return make_url(url).render_as_string(hide_password=True)
        except ArgumentError:
            # Not a URL SQLAlchemy understands; don't echo it back verbatim
            return '***'

    def _require(self, url: Optional[str]) -> str:
        if url is None or not url.strip():
            raise ConfigurationError("No connection string has been provided.")
        return url

    @property
    def engine(self) -> Engine:
        """Blocking engine, created on first use"""
        if self._engine is None:
            self._engine = DatabaseConfig.get_engine(self._require(self.connection_string), self.echo)
        return self._engine

    @property
    def async_engine(self) -> AsyncEngine:
        """Async engine, created on first use"""
        if self._async_engine is None:
            url = self.async_connection_string or self.connection_string
            self._async_engine = DatabaseConfig.get_async_engine(self._require(url), self.echo)
        return self._async_engine

    def create(self) -> Connection:
        """
        Open a new blocking connection.

        The caller owns the connection and must close it, typically with
        ``with database.create() as connection:``.

        Raises:
            ConfigurationError: If no connection string has been provided
        """
        self._require(self.connection_string)
        connection = self.engine.connect()
        log_connection_event(logger, 'opened', context=self.engine.dialect.name)
        return connection

    async def create_async(self) -> AsyncConnection:
        """
        Open a new async connection; it is already started when returned.

        The caller owns the connection and must ``await connection.close()``.

        Raises:
            ConfigurationError: If no connection string has been provided
        """
        self._require(self.async_connection_string or self.connection_string)
        connection = await self.async_engine.connect()
        log_connection_event(logger, 'opened', 'async', context=self.async_engine.dialect.name)
        return connection

    @property
    def is_open(self) -> bool:
        """Whether the handle's current connection is open"""
        return self._connection is not None and not self._connection.closed

    def get(self) -> Optional[Union[Connection, AsyncConnection]]:
        """Return the current connection, or None if none was opened"""
        return self._connection

    def connect(self) -> Connection:
        """Open the handle's current connection, closing a previous one first"""
        if self.is_open:
            self.close()
        self._connection = self.create()
        return self._connection

    async def connect_async(self) -> AsyncConnection:
        """Async version of ``connect``"""
        if self.is_open:
            await self.close_async()
        self._connection = await self.create_async()
        return self._connection

    def close(self) -> None:
        """
        Close the current connection if one is open

        Raises:
            RuntimeError: If the current connection was opened with
                ``connect_async()``; close it with ``close_async()``
        """
        if self.is_open:
            if isinstance(self._connection, AsyncConnection):
                raise RuntimeError("Current connection is async; use close_async()")
            self._connection.close()
            log_connection_event(logger, 'closed')

    async def close_async(self) -> None:
        """Close the current connection if one is open"""
        if self.is_open:
            if isinstance(self._connection, AsyncConnection):
                await self._connection.close()
            else:
                self._connection.close()
            log_connection_event(logger, 'closed')

    def dispose(self) -> None:
        """
        Release both engines and close a blocking current connection

        An async current connection cannot be closed without awaiting, so it
        is left open for ``close_async()``; ``dispose_async()`` releases
        everything. Engines use ``NullPool`` and hold no idle connections, so
        the async engine is released without awaiting.
        """
        if not isinstance(self._connection, AsyncConnection):
            self.close()
        if self._async_engine is not None:
            self._async_engine.sync_engine.dispose()
            self._async_engine = None
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
        log_connection_event(logger, 'disposed')

    async def dispose_async(self) -> None:
        """Close the current connection and release both engines"""
        await self.close_async()
        if self._async_engine is not None:
            await self._async_engine.dispose()
            self._async_engine = None
        if self._engine is not None:
            self._engine.dispose()
            self._engine = None
        log_connection_event(logger, 'disposed')

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.dispose()
