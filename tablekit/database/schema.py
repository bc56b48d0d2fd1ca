"""Table schema definitions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from tablekit.types import SortOrder

LIKE = "like"


class SQLType(str, Enum):
    """Common SQL column types. Any other type string is accepted by Column."""

    INT = "INT"
    DECIMAL = "DECIMAL(8, 4)"
    VARCHAR = "VARCHAR"
    TEXT = "TEXT"
    DATE = "DATE"
    TIME = "TIME"
    DATETIME = "DATETIME"
    TIMESTAMP = "TIMESTAMP"


class ColumnKey(str, Enum):
    """Key role of a column."""

    NONE = ""
    PRIMARY_KEY = "PRIMARY KEY"


def quote(name: str) -> str:
    """Quote an identifier with backticks."""
    return f"`{name}`"


@dataclass(frozen=True)
class Column:
    """Definition of a single table column.

    A column with an empty name is a placeholder that every clause builder
    skips.
    """

    name: str
    type: str = SQLType.VARCHAR.value
    length: int | None = None
    key: ColumnKey = ColumnKey.NONE
    extra: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.type, Enum):
            object.__setattr__(self, "type", self.type.value)
        if not isinstance(self.key, ColumnKey):
            object.__setattr__(self, "key", ColumnKey(self.key))

    @property
    def is_primary_key(self) -> bool:
        return self.key == ColumnKey.PRIMARY_KEY

    @property
    def is_like(self) -> bool:
        return self.extra == LIKE

    @property
    def sql_type(self) -> str:
        """Type with its length, e.g. ``VARCHAR(255)``."""
        if self.length:
            return f"{self.type}({self.length})"
        return self.type

    def definition(self) -> str:
        """Return the column fragment used inside CREATE TABLE."""
        parts = [quote(self.name), self.sql_type]
        if self.is_primary_key:
            parts.append(self.key.value)
        if self.extra and not self.is_like:
            parts.append(self.extra)
        return " ".join(parts)


@dataclass(frozen=True)
class Condition:
    """A column paired with the value it is compared against in one query."""

    column: Column
    value: Any
    like: bool = False

    @property
    def name(self) -> str:
        return self.column.name

    @property
    def is_like(self) -> bool:
        return self.like or self.column.is_like

    def bound_value(self) -> Any:
        """Value to bind for this condition, wrapped in ``%`` for LIKE."""
        if self.is_like:
            return f"%{self.value}%"
        return self.value


@dataclass(frozen=True)
class OrderSpec:
    """A column and the direction to sort it in."""

    column: Column
    order: SortOrder = SortOrder.ASC

    def __post_init__(self) -> None:
        if not isinstance(self.order, SortOrder):
            object.__setattr__(self, "order", SortOrder(str(self.order).upper()))

    def sql(self) -> str:
        return f"{quote(self.column.name)} {self.order.value}"
