"""MySQL dialect package."""

from .query_builder import MySQLQueryBuilder

__all__ = ["MySQLQueryBuilder"]
