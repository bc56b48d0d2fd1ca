"""Common type definitions for tablekit."""

from enum import Enum
from typing import Any, TypeAlias

RowType: TypeAlias = dict[str, Any]


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Severity(str, Enum):
    """How serious a reported table error is."""

    WARNING = "warning"
    ERROR = "error"
    FATAL = "fatal"


class SortOrder(str, Enum):
    """ORDER BY direction keyword."""

    ASC = "ASC"
    DESC = "DESC"
