"""SQLite database implementation package."""

from .query_builder import SQLiteQueryBuilder
from .sqlite_connection import SQLiteConnection, SQLiteStatement

__all__ = [
    "SQLiteConnection",
    "SQLiteQueryBuilder",
    "SQLiteStatement",
]
