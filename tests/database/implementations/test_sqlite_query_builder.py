"""Tests for SQLite query builder."""

import pytest

from tablekit.database.implementations import (
    MySQLQueryBuilder,
    SQLiteQueryBuilder,
    create_query_builder,
)
from tablekit.database.schema import Column, ColumnKey, SQLType
from tablekit.exceptions import SchemaError


@pytest.fixture
def query_builder() -> SQLiteQueryBuilder:
    """Create SQLite query builder instance."""
    return SQLiteQueryBuilder()


def test_create_table_uses_rowid_key(
    query_builder: SQLiteQueryBuilder, user_columns: list[Column]
) -> None:
    """Test that an INT primary key becomes INTEGER PRIMARY KEY."""
    query = query_builder.create_table_sql("users", user_columns)

    assert query == (
        "CREATE TABLE IF NOT EXISTS `users` ("
        "`id` INTEGER PRIMARY KEY AUTOINCREMENT, "
        "`first_name` VARCHAR(100), "
        "`email` VARCHAR(255))"
    )


def test_column_definition_without_autoincrement(
    query_builder: SQLiteQueryBuilder,
) -> None:
    """Test key column rendering without AUTO_INCREMENT."""
    key = Column("id", SQLType.INT, key=ColumnKey.PRIMARY_KEY)
    code = Column("code", "CHAR(3)", key=ColumnKey.PRIMARY_KEY)
    hits = Column("hits", SQLType.INT)

    assert query_builder.column_definition(key) == "`id` INTEGER PRIMARY KEY"
    assert query_builder.column_definition(code) == "`code` CHAR(3) PRIMARY KEY"
    assert query_builder.column_definition(hits) == "`hits` INT"


@pytest.mark.parametrize(
    "column",
    [
        Column("id", "BIGINT", key=ColumnKey.PRIMARY_KEY, extra="AUTO_INCREMENT"),
        Column("id", "INT(11)", key=ColumnKey.PRIMARY_KEY, extra="auto_increment"),
        Column(
            "id", "int", length=11, key=ColumnKey.PRIMARY_KEY, extra="AUTO_INCREMENT"
        ),
    ],
)
def test_integer_affinity_key_keeps_autoincrement(
    query_builder: SQLiteQueryBuilder, column: Column
) -> None:
    """Test that every integer key type aliases the rowid."""
    assert query_builder.column_definition(column) == (
        "`id` INTEGER PRIMARY KEY AUTOINCREMENT"
    )


@pytest.mark.parametrize(
    "column",
    [
        Column("hits", SQLType.INT, extra="AUTO_INCREMENT"),
        Column("code", "CHAR(3)", key=ColumnKey.PRIMARY_KEY, extra="AUTO_INCREMENT"),
    ],
)
def test_autoincrement_outside_integer_key_rejected(
    query_builder: SQLiteQueryBuilder, column: Column
) -> None:
    """Test that AUTO_INCREMENT is never dropped silently."""
    with pytest.raises(SchemaError, match="needs an integer primary key") as exc_info:
        query_builder.column_definition(column)

    assert exc_info.value.component == "SQLiteQueryBuilder"


def test_insert(query_builder: SQLiteQueryBuilder, user_columns: list[Column]) -> None:
    """Test INSERT ... VALUES statement."""
    query = query_builder.insert_sql("users", [Column(""), *user_columns])

    assert query == (
        "INSERT INTO `users` (`id`, `first_name`, `email`) "
        "VALUES (:id, :first_name, :email)"
    )


@pytest.mark.parametrize(
    "dialect, expected",
    [
        ("sqlite", SQLiteQueryBuilder),
        ("mysql", MySQLQueryBuilder),
        ("MySQL", MySQLQueryBuilder),
    ],
)
def test_create_query_builder(dialect: str, expected: type) -> None:
    """Test query builder lookup by dialect."""
    assert isinstance(create_query_builder(dialect), expected)


def test_create_query_builder_unknown_dialect() -> None:
    """Test unsupported dialects."""
    with pytest.raises(ValueError, match="Unsupported SQL dialect"):
        create_query_builder("oracle")
