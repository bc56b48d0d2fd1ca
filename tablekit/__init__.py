"""Minimal relational table abstraction for tablekit."""

from .config import Settings, load_settings, settings
from .database import (
    Column,
    ColumnKey,
    Condition,
    DatabaseConnection,
    OrderSpec,
    SQLiteConnection,
    SQLType,
    Table,
    create_connection,
)
from .exceptions import (
    DriverError,
    MissingObjectError,
    SchemaError,
    TableError,
    UnfilteredDeleteError,
)
from .log import (
    get_logger,
    setup_logging,
    setup_production_logging,
    setup_test_logging,
)
from .types import Environment, Severity, SortOrder

__all__ = [
    "Column",
    "ColumnKey",
    "Condition",
    "DatabaseConnection",
    "DriverError",
    "Environment",
    "MissingObjectError",
    "OrderSpec",
    "SQLType",
    "SQLiteConnection",
    "SchemaError",
    "Settings",
    "Severity",
    "SortOrder",
    "Table",
    "TableError",
    "UnfilteredDeleteError",
    "create_connection",
    "get_logger",
    "load_settings",
    "settings",
    "setup_logging",
    "setup_production_logging",
    "setup_test_logging",
]
