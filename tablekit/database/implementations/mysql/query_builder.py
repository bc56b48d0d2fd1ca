"""MySQL-specific query builder implementation."""

from collections.abc import Sequence

from tablekit.database.interfaces.query_builder import QueryBuilder
from tablekit.database.schema import Column, quote
from tablekit.database.utils import pseudo_assignments


class MySQLQueryBuilder(QueryBuilder):
    """MySQL-specific query builder."""

    dialect = "mysql"

    def column_definition(self, column: Column) -> str:
        return column.definition()

    def insert_sql(self, table: str, columns: Sequence[Column]) -> str:
        """Build ``INSERT INTO `t` SET `a` = :a, ...``.

        The primary key is part of the assignment list; an auto-increment key
        is bound as NULL and generated by the server.
        """
        return f"INSERT INTO {quote(table)} SET {pseudo_assignments(columns)}"
