"""
Statement execution over a ``Database`` handle using SQLAlchemy Core
"""

from sqlalchemy import text
from sqlalchemy.engine import CursorResult
from sqlalchemy.sql.elements import TextClause
from typing import List, Dict, Any, Callable, Optional, Mapping, Tuple
import logging
import re
import time

from .connection import Database
from ..logging_utils import log_query

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


def create_command(sql: str, parameters: Optional[Mapping[str, Any]] = None) -> Tuple[TextClause, Dict[str, Any]]:
    """
    Bind SQL text and a parameter mapping into an executable statement

    Parameter names may carry the ``@`` prefix generated by ``SelectBuilder``
    (``@age_0``) or SQLAlchemy's ``:`` prefix. ``@`` tokens in the SQL text
    are rewritten to SQLAlchemy named binds so every driver receives them in
    its own paramstyle.

    Args:
        sql: SQL text
        parameters: Optional name to value mapping

    Returns:
        Tuple of (statement, bind values)
    """
    values: Dict[str, Any] = {}
    if not parameters:
        return text(sql), values

    for name, value in parameters.items():
        bind_name = name.lstrip('@:')
        if name.startswith('@'):
            sql = re.sub(r'(?<![\w@])' + re.escape(name) + r'(?!\w)', lambda _: f":{bind_name}", sql)
        values[bind_name] = value

    return text(sql), values


def read_all(result: CursorResult) -> List[Record]:
    """
    Copy every row of a result into a record

    Keys follow the result set's column order; database NULL is ``None``
    with the key still present. A statement that returns no rows
    (UPDATE, DDL) gives an empty list.
    """
    if not result.returns_rows:
        return []
    return [dict(row._mapping) for row in result]


def read_scalar(result: CursorResult) -> Any:
    """First column of the first row, or None when there is none"""
    if not result.returns_rows:
        return None
    return result.scalar()


class QueryExecutor:
    """
    Runs statements with one dedicated connection per call

    Every mode commits its statement once the result has been read, so a
    write sent through ``execute_scalar`` (``INSERT ... RETURNING id``) is as
    permanent as one sent through ``execute_non_query``. When execution fails
    the connection is closed without committing.
    """

    def __init__(self, database: Database):
        """
        Initialize executor with a connection handle

        Args:
            database: Handle the executor opens connections from
        """
        self.database = database

    def execute_non_query(self, sql: str, parameters: Optional[Mapping[str, Any]] = None) -> int:
        """
        Execute a statement and commit it

        Args:
            sql: SQL statement (INSERT, UPDATE, DELETE, DDL)
            parameters: Optional parameter mapping

        Returns:
            Number of affected rows as reported by the driver
        """
        return self._execute(sql, parameters, lambda result: result.rowcount)

    def execute_scalar(self, sql: str, parameters: Optional[Mapping[str, Any]] = None) -> Any:
        """
        Execute a statement and return the first column of the first row

        Additional rows and columns are ignored.

        Returns:
            The value, or None if the statement produced no rows
        """
        return self._execute(sql, parameters, read_scalar)

    def execute_reader(self, sql: str, parameters: Optional[Mapping[str, Any]] = None) -> List[Record]:
        """
        Execute a statement and return all rows as records

        Rows are read eagerly; this is not a cursor.

        Returns:
            List of row dictionaries
        """
        return self._execute(sql, parameters, read_all)

    async def execute_non_query_async(self, sql: str, parameters: Optional[Mapping[str, Any]] = None) -> int:
        """Async version of ``execute_non_query``"""
        return await self._execute_async(sql, parameters, lambda result: result.rowcount)

    async def execute_scalar_async(self, sql: str, parameters: Optional[Mapping[str, Any]] = None) -> Any:
        """Async version of ``execute_scalar``"""
        return await self._execute_async(sql, parameters, read_scalar)

    async def execute_reader_async(self, sql: str, parameters: Optional[Mapping[str, Any]] = None) -> List[Record]:
        """Async version of ``execute_reader``"""
        return await self._execute_async(sql, parameters, read_all)

    def _execute(self, sql: str, parameters: Optional[Mapping[str, Any]],
                 read: Callable[[CursorResult], Any]) -> Any:
        statement, values = create_command(sql, parameters)
        start_time = time.perf_counter()

        with self.database.create() as connection:
            # Rows must be consumed before the commit
            output = read(connection.execute(statement, values))
            connection.commit()
            dialect = connection.dialect.name

        log_query(logger, sql, parameters, time.perf_counter() - start_time, context=dialect)
        return output

    async def _execute_async(self, sql: str, parameters: Optional[Mapping[str, Any]],
                             read: Callable[[CursorResult], Any]) -> Any:
        statement, values = create_command(sql, parameters)
        start_time = time.perf_counter()

        connection = await self.database.create_async()
        try:
            output = read(await connection.execute(statement, values))
            await connection.commit()
            dialect = connection.dialect.name
        finally:
            await connection.close()

        log_query(logger, sql, parameters, time.perf_counter() - start_time, context=dialect)
        return output
