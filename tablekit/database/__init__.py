"""Table abstraction: schema, clause assembly, CRUD engine and drivers."""

from .implementations import (
    MySQLQueryBuilder,
    SQLiteConnection,
    SQLiteQueryBuilder,
    create_connection,
    create_query_builder,
)
from .interfaces import DatabaseConnection, PreparedStatement, QueryBuilder
from .schema import LIKE, Column, ColumnKey, Condition, OrderSpec, SQLType
from .table import Table
from .utils import accessor_name, get_value, hydrate, set_value

__all__ = [
    "LIKE",
    "Column",
    "ColumnKey",
    "Condition",
    "DatabaseConnection",
    "MySQLQueryBuilder",
    "OrderSpec",
    "PreparedStatement",
    "QueryBuilder",
    "SQLType",
    "SQLiteConnection",
    "SQLiteQueryBuilder",
    "Table",
    "accessor_name",
    "create_connection",
    "create_query_builder",
    "get_value",
    "hydrate",
    "set_value",
]
