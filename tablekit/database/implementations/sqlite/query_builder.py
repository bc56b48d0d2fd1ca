"""SQLite-specific query builder implementation."""

from collections.abc import Sequence

from tablekit.database.interfaces.query_builder import QueryBuilder
from tablekit.database.schema import Column, quote
from tablekit.database.utils import COMMA, field_list
from tablekit.exceptions import SchemaError

AUTO_INCREMENT = "AUTO_INCREMENT"


class SQLiteQueryBuilder(QueryBuilder):
    """SQLite-specific query builder."""

    dialect = "sqlite"

    def column_definition(self, column: Column) -> str:
        """Render a column for SQLite.

        A primary key with integer affinity (``INT``, ``BIGINT``, ``INT(11)``)
        becomes ``INTEGER PRIMARY KEY`` so it aliases the rowid, and
        ``AUTO_INCREMENT`` becomes ``AUTOINCREMENT``, which SQLite only accepts
        on that key.

        Raises:
            SchemaError: If ``AUTO_INCREMENT`` is set on any other column
        """
        auto_increment = column.extra.upper() == AUTO_INCREMENT
        if column.is_primary_key and "INT" in column.type.upper():
            col_def = f"{quote(column.name)} INTEGER PRIMARY KEY"
            if auto_increment:
                col_def += " AUTOINCREMENT"
            return col_def

        if auto_increment:
            raise SchemaError(
                f"AUTO_INCREMENT on column {column.name!r} needs an integer "
                "primary key in SQLite",
                component=type(self).__name__,
                operation="column_definition",
            )
        return column.definition()

    def insert_sql(self, table: str, columns: Sequence[Column]) -> str:
        """Build ``INSERT INTO `t` (`a`, ...) VALUES (:a, ...)``."""
        names = [column.name for column in columns if column.name]
        placeholders = COMMA.join(f":{name}" for name in names)
        return (
            f"INSERT INTO {quote(table)} ({field_list(columns, full_info=False)}) "
            f"VALUES ({placeholders})"
        )
