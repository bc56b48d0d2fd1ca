"""Models and test doubles shared by the tests."""

from collections import deque
from typing import Any

from pydantic import BaseModel

from tablekit.database.interfaces import DatabaseConnection, PreparedStatement
from tablekit.types import RowType


class User(BaseModel):
    """User model used across table tests."""

    id: int | None = None
    first_name: str = ""
    email: str = ""


class RecordingStatement(PreparedStatement):
    """Statement that records what it was asked to run."""

    def __init__(self, connection: "RecordingConnection", query: str) -> None:
        super().__init__(query)
        self._connection = connection
        self._rows: list[RowType] = []
        self._row_count = 0

    def execute(self) -> None:
        self._connection.executed.append((self.query, dict(self.params)))
        if self.query.startswith("SELECT"):
            results = self._connection.results
            self._rows = list(results.popleft()) if results else []
            self._row_count = len(self._rows)
        else:
            self._row_count = self._connection.affected

    def row_count(self) -> int:
        return self._row_count

    def fetch_one(self) -> RowType | None:
        return self._rows.pop(0) if self._rows else None

    def fetch_all(self) -> list[RowType]:
        rows, self._rows = self._rows, []
        return rows


class RecordingConnection(DatabaseConnection):
    """Connection that records statements and replays queued result sets."""

    dialect = "mysql"

    def __init__(self, last_id: Any = 1, affected: int = 1) -> None:
        self.executed: list[tuple[str, dict[str, Any]]] = []
        self.results: deque[list[RowType]] = deque()
        self.affected = affected
        self._last_id = last_id
        self._connected = False

    def queue(self, *rows: RowType) -> None:
        """Queue the rows returned by the next SELECT."""
        self.results.append(list(rows))

    def connect(self) -> None:
        self._connected = True

    def disconnect(self) -> None:
        self._connected = False

    def prepare(self, query: str) -> RecordingStatement:
        return RecordingStatement(self, query)

    def last_insert_id(self) -> Any:
        return self._last_id

    @property
    def is_connected(self) -> bool:
        return self._connected

    @property
    def last_query(self) -> str:
        return self.executed[-1][0]

    @property
    def last_params(self) -> dict[str, Any]:
        return self.executed[-1][1]
