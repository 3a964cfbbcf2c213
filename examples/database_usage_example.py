"""
Example usage of sqlhelper against a local SQLite file
"""

import asyncio
import logging
import tempfile
from pathlib import Path

import sqlhelper
from sqlhelper import ColumnConstraint, QueryExecutor, SelectBuilder, SqlParameter, SqlType, build_parameters

# Set up logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def example_basic_usage(db_file: Path):
    """Create a table, insert rows and query them back"""
    print("=== Basic Usage ===")

    db = sqlhelper.connect(f"sqlite:///{db_file}", async_connection_string=f"sqlite+aiosqlite:///{db_file}")
    print(f"Connected: {sqlhelper.is_connected(db)}")
    executor = QueryExecutor(db)

    ddl = (
        sqlhelper.create_table("employees")
        .add_column("id", SqlType.INTEGER, ColumnConstraint.PRIMARY_KEY | ColumnConstraint.AUTO_INCREMENT)
        .add_column("name", SqlType.TEXT, ColumnConstraint.NOT_NULL)
        .add_column("department", "varchar(64)")
        .add_column("age", SqlType.INTEGER)
        .build()
    )
    print(ddl)
    executor.execute_non_query(ddl)

    for i in range(1, 21):
        executor.execute_non_query(
            "INSERT INTO employees (name, department, age) VALUES (@name, @department, @age)",
            build_parameters(
                SqlParameter("@name", f"User_{i}"),
                SqlParameter("@department", ["Engineering", "Marketing", None][i % 3]),
                SqlParameter("@age", 20 + i),
            ),
        )

    print(f"Total employees: {executor.execute_scalar('SELECT COUNT(*) FROM employees')}")

    query = (
        SelectBuilder()
        .select("name", "age")
        .from_("employees")
        .where("department", "Engineering")
        .order_by("age", ascending=False)
        .limit(3)
        .build()
    )
    print(f"\n{query.sql}  {dict(query.parameters)}")
    for row in executor.execute_reader(*query):
        print(f"  {row}")

    sqlhelper.close(db)
    print(f"Connected after close: {sqlhelper.is_connected(db)}")
    return db


async def example_async_usage(db):
    """Run the same kind of queries through the async executor"""
    print("\n=== Async Usage ===")
    executor = QueryExecutor(db)

    unassigned = await executor.execute_reader_async(
        *SelectBuilder().select("name", "department").from_("employees").where("department", None).build()
    )
    # NULL never equals NULL, so the equality predicate matches nothing
    print(f"Rows matching department = NULL: {len(unassigned)}")

    rows = await executor.execute_reader_async("SELECT name, department FROM employees WHERE department IS NULL")
    print(f"Rows with department IS NULL: {len(rows)}, first: {rows[0]}")

    await db.dispose_async()


if __name__ == "__main__":
    with tempfile.TemporaryDirectory() as tmpdir:
        database = example_basic_usage(Path(tmpdir) / "example.db")
        asyncio.run(example_async_usage(database))
