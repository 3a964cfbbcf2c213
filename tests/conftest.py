"""Shared test fixtures for sqlhelper."""

import pytest

from sqlhelper import ColumnConstraint, Database, QueryExecutor, SqlType, create_table


@pytest.fixture
def db_path(tmp_path):
    """Path of a SQLite database file private to one test"""
    return tmp_path / "test.db"


@pytest.fixture
def database(db_path):
    """Handle with blocking and async URLs pointing at the same SQLite file"""
    db = Database(f"sqlite:///{db_path}", async_connection_string=f"sqlite+aiosqlite:///{db_path}")
    yield db
    db.dispose()


@pytest.fixture
def users_table(database):
    """Create and populate a ``users`` table, return the executor used"""
    executor = QueryExecutor(database)
    executor.execute_non_query(
        create_table("users")
        .add_column("id", SqlType.INTEGER, ColumnConstraint.PRIMARY_KEY | ColumnConstraint.AUTO_INCREMENT)
        .add_column("name", SqlType.TEXT, ColumnConstraint.NOT_NULL)
        .add_column("email", SqlType.VARCHAR, ColumnConstraint.UNIQUE)
        .add_column("age", SqlType.INTEGER)
        .build()
    )
    for name, email, age in [
        ("Alice", "alice@example.com", 30),
        ("Bob", None, 25),
        ("Charlie", "charlie@example.com", 30),
    ]:
        executor.execute_non_query(
            "INSERT INTO users (name, email, age) VALUES (@name, @email, @age)",
            {"@name": name, "@email": email, "@age": age},
        )
    return executor
