"""SQLite database connection implementation."""

import sqlite3
from pathlib import Path
from typing import Any

from tablekit.config import MEMORY_DATABASE
from tablekit.database.interfaces import DatabaseConnection, PreparedStatement
from tablekit.exceptions import DriverError
from tablekit.log import get_logger
from tablekit.types import RowType

logger = get_logger(__name__)


class SQLiteStatement(PreparedStatement):
    """SQLite prepared statement.

    Result rows are buffered on execute so that ``row_count`` is exact for
    SELECT statements, which ``sqlite3`` reports as -1.
    """

    def __init__(self, connection: "SQLiteConnection", query: str) -> None:
        super().__init__(query)
        self._connection = connection
        self._rows: list[RowType] = []
        self._row_count = -1

    def execute(self) -> None:
        cursor = self._connection.run(self.query, self.params)
        if cursor.description is not None:
            self._rows = [dict(row) for row in cursor.fetchall()]
            self._row_count = len(self._rows)
        else:
            self._rows = []
            self._row_count = cursor.rowcount
        cursor.close()

    def row_count(self) -> int:
        return self._row_count

    def fetch_one(self) -> RowType | None:
        if not self._rows:
            return None
        return self._rows.pop(0)

    def fetch_all(self) -> list[RowType]:
        rows, self._rows = self._rows, []
        return rows


class SQLiteConnection(DatabaseConnection):
    """SQLite database connection implementation."""

    dialect = "sqlite"

    def __init__(self, db_path: str | Path, timeout: float = 60.0) -> None:
        """Initialize SQLite connection.

        Args:
            db_path: Path to SQLite database file, or ":memory:"
            timeout: Seconds to wait for a locked database
        """
        self.db_path = db_path
        self.timeout = timeout
        self._connection: sqlite3.Connection | None = None
        self._last_row_id: int | None = None

    def connect(self) -> None:
        """Establish SQLite database connection."""
        try:
            if str(self.db_path) != MEMORY_DATABASE:
                Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)
            self._connection = sqlite3.connect(
                self.db_path,
                check_same_thread=False,
                timeout=self.timeout,
            )
            self._connection.row_factory = sqlite3.Row
            self._configure_connection()
            logger.info(f"Connected to SQLite: {self.db_path}")
        except sqlite3.Error as e:
            logger.error(f"Failed to connect to SQLite database: {e}")
            raise DriverError(
                str(e), component=type(self).__name__, operation="connect"
            ) from e

    def disconnect(self) -> None:
        """Close SQLite database connection."""
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("Disconnected from SQLite")

    def prepare(self, query: str) -> SQLiteStatement:
        if not self._connection:
            raise RuntimeError("Database not connected")
        return SQLiteStatement(self, query)

    def last_insert_id(self) -> int | None:
        return self._last_row_id

    @property
    def is_connected(self) -> bool:
        """Check if database is connected."""
        return self._connection is not None

    def run(self, query: str, params: dict[str, Any]) -> sqlite3.Cursor:
        """Execute a query and commit.

        Args:
            query: SQL query
            params: Named parameters

        Returns:
            Cursor positioned before the first result row
        """
        if not self._connection:
            raise RuntimeError("Database not connected")

        try:
            cursor = self._connection.cursor()
            cursor.execute(query, params)
            self._connection.commit()
            if cursor.lastrowid:
                self._last_row_id = cursor.lastrowid
            return cursor
        except sqlite3.Error as e:
            logger.error(f"Query execution failed: {e}")
            self._connection.rollback()
            raise DriverError(
                str(e), component=type(self).__name__, operation="execute"
            ) from e

    def _configure_connection(self) -> None:
        """Configure SQLite connection settings."""
        if not self._connection:
            return

        self._connection.execute("PRAGMA foreign_keys = ON")
        self._connection.execute(f"PRAGMA busy_timeout = {int(self.timeout * 1000)}")
        self._connection.execute("PRAGMA cache_size = -64000")  # 64MB cache
