"""Database implementations package."""

from tablekit.config import Settings
from tablekit.database.interfaces import DatabaseConnection, QueryBuilder

from .mysql import MySQLQueryBuilder
from .sqlite import SQLiteConnection, SQLiteQueryBuilder, SQLiteStatement

QUERY_BUILDERS: dict[str, type[QueryBuilder]] = {
    MySQLQueryBuilder.dialect: MySQLQueryBuilder,
    SQLiteQueryBuilder.dialect: SQLiteQueryBuilder,
}


def create_query_builder(dialect: str) -> QueryBuilder:
    """Create the query builder for a dialect.

    Args:
        dialect: Dialect name ("mysql" or "sqlite")

    Returns:
        Query builder instance

    Raises:
        ValueError: If the dialect is not supported
    """
    try:
        return QUERY_BUILDERS[dialect.lower()]()
    except KeyError:
        raise ValueError(f"Unsupported SQL dialect: {dialect}") from None


def create_connection(settings: Settings) -> DatabaseConnection:
    """Create an unopened connection from settings.

    Raises:
        ValueError: If no driver ships for the configured dialect
    """
    if settings.dialect == SQLiteConnection.dialect:
        return SQLiteConnection(
            settings.database_location, timeout=settings.sqlite_timeout
        )
    raise ValueError(f"No bundled driver for SQL dialect: {settings.dialect}")


__all__ = [
    "MySQLQueryBuilder",
    "SQLiteConnection",
    "SQLiteQueryBuilder",
    "SQLiteStatement",
    "create_connection",
    "create_query_builder",
]
