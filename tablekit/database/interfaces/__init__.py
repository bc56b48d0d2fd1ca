"""Database interfaces module."""

from .connection import DatabaseConnection, PreparedStatement
from .query_builder import QueryBuilder

__all__ = [
    "DatabaseConnection",
    "PreparedStatement",
    "QueryBuilder",
]
