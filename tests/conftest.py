"""Global pytest configuration and fixtures."""

from collections.abc import Generator

import pytest

from tablekit import (
    Column,
    ColumnKey,
    SQLiteConnection,
    SQLType,
    Table,
    setup_test_logging,
)

from tests.fakes import RecordingConnection, User


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Setup test logging for all tests."""
    setup_test_logging()


@pytest.fixture
def user_columns() -> list[Column]:
    """Columns of the users table."""
    return [
        Column("id", SQLType.INT, key=ColumnKey.PRIMARY_KEY, extra="AUTO_INCREMENT"),
        Column("first_name", SQLType.VARCHAR, length=100),
        Column("email", SQLType.VARCHAR, length=255),
    ]


@pytest.fixture
def recording_connection() -> RecordingConnection:
    """Connection that records statements instead of running them."""
    return RecordingConnection()


@pytest.fixture
def recorded_users(
    recording_connection: RecordingConnection, user_columns: list[Column]
) -> Table[User]:
    """Users table built on the recording connection (MySQL dialect)."""
    return Table(recording_connection, "users", user_columns, model=User)


@pytest.fixture
def sqlite_connection() -> Generator[SQLiteConnection, None, None]:
    """Open in-memory SQLite connection."""
    with SQLiteConnection(":memory:") as connection:
        yield connection


@pytest.fixture
def users(
    sqlite_connection: SQLiteConnection, user_columns: list[Column]
) -> Table[User]:
    """Created users table on an in-memory SQLite database."""
    table = Table(sqlite_connection, "users", user_columns, model=User)
    table.create()
    return table
