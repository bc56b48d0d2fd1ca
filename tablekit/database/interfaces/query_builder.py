"""Query builder interface for different SQL dialects."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from tablekit.database.schema import Column, Condition, OrderSpec, quote
from tablekit.database.utils import (
    field_list,
    limit_clause,
    order_clause,
    pseudo_assignments,
    select_clause,
    where_clause,
)
from tablekit.exceptions import SchemaError

WHERE_PREFIX = "where_"


class QueryBuilder(ABC):
    """Builds statement text for one SQL dialect.

    Only placeholders are emitted for values; table and column names are
    interpolated into the text and must come from a trusted schema.
    """

    dialect = ""

    @abstractmethod
    def column_definition(self, column: Column) -> str:
        """Render one column for CREATE TABLE."""
        pass

    @abstractmethod
    def insert_sql(self, table: str, columns: Sequence[Column]) -> str:
        """Build INSERT binding every column by name."""
        pass

    def create_table_sql(self, table: str, columns: Sequence[Column]) -> str:
        """Build CREATE TABLE IF NOT EXISTS from the column definitions."""
        fields = field_list(columns, definition=self.column_definition)
        return f"CREATE TABLE IF NOT EXISTS {quote(table)} ({fields})"

    def drop_table_sql(self, table: str) -> str:
        return f"DROP TABLE IF EXISTS {quote(table)}"

    def update_sql(
        self,
        table: str,
        columns: Sequence[Column],
        where: Sequence[Condition],
    ) -> str:
        """Build UPDATE setting every non-key column.

        Where placeholders carry the ``where_`` prefix so a column may appear
        both in SET and in WHERE.

        Raises:
            SchemaError: If every column is the primary key
        """
        assignments = pseudo_assignments(columns, include_pk=False)
        if not assignments:
            raise SchemaError(
                f"Table {table!r} has no non-key column to update",
                component=type(self).__name__,
                operation="update",
            )
        query = f"UPDATE {quote(table)} SET {assignments}"
        return self._append(query, self._where(where, WHERE_PREFIX))

    def delete_sql(self, table: str, where: Sequence[Condition]) -> str:
        return self._append(f"DELETE FROM {quote(table)}", self._where(where))

    def select_sql(
        self,
        table: str,
        select: Sequence[Column] | None = None,
        where: Sequence[Condition] | None = None,
        order: Sequence[OrderSpec] | None = None,
        limit: int | str | None = None,
    ) -> str:
        """Build SELECT; empty clauses are left out of the text."""
        query = f"SELECT {select_clause(select)} FROM {quote(table)}"
        query = self._append(query, self._where(where or []))
        query = self._append(query, order_clause(order))
        return self._append(query, limit_clause(limit))

    @staticmethod
    def _where(conditions: Sequence[Condition], prefix: str = "") -> str:
        clause = where_clause(conditions, prefix)
        return f"WHERE {clause}" if clause else ""

    @staticmethod
    def _append(query: str, clause: str) -> str:
        return f"{query} {clause}" if clause else query
