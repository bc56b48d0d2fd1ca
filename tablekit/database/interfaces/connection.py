"""Database connection interface."""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Any

from tablekit.types import RowType


class PreparedStatement(ABC):
    """A single SQL statement with named placeholders."""

    def __init__(self, query: str) -> None:
        """Initialize statement.

        Args:
            query: SQL text with ``:name`` placeholders
        """
        self.query = query
        self.params: dict[str, Any] = {}

    def bind(self, name: str, value: Any) -> None:
        """Bind a value to a placeholder.

        Args:
            name: Placeholder name, with or without the leading colon
            value: Value to bind
        """
        self.params[name.lstrip(":")] = value

    @abstractmethod
    def execute(self) -> None:
        """Execute the statement with the bound values."""
        pass

    @abstractmethod
    def row_count(self) -> int:
        """Number of rows returned by a query or affected by a write."""
        pass

    @abstractmethod
    def fetch_one(self) -> RowType | None:
        """Fetch the next row, or None when exhausted."""
        pass

    @abstractmethod
    def fetch_all(self) -> list[RowType]:
        """Fetch all remaining rows."""
        pass


class DatabaseConnection(ABC):
    """Abstract database connection interface."""

    dialect = "mysql"

    @abstractmethod
    def connect(self) -> None:
        """Establish database connection."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close database connection."""
        pass

    @abstractmethod
    def prepare(self, query: str) -> PreparedStatement:
        """Prepare a parameterized statement.

        Args:
            query: SQL text with ``:name`` placeholders

        Returns:
            Statement ready for binding
        """
        pass

    @abstractmethod
    def last_insert_id(self) -> Any:
        """Identifier generated by the most recent INSERT."""
        pass

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Check if connection is active."""
        pass

    def execute(self, query: str) -> PreparedStatement:
        """Execute a statement that takes no parameters.

        Args:
            query: SQL text

        Returns:
            The executed statement, ready for fetching
        """
        statement = self.prepare(query)
        statement.execute()
        return statement

    def __enter__(self) -> "DatabaseConnection":
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Context manager exit."""
        self.disconnect()
