"""Generic CRUD engine mapping one database table to one model type."""

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Generic, NoReturn, TypeVar

from tablekit.database.implementations import create_query_builder
from tablekit.database.interfaces import (
    DatabaseConnection,
    PreparedStatement,
    QueryBuilder,
)
from tablekit.database.interfaces.query_builder import WHERE_PREFIX
from tablekit.database.schema import Column, Condition, OrderSpec
from tablekit.database.utils import (
    get_value,
    hydrate,
    model_name_from_table,
    where_params,
)
from tablekit.exceptions import (
    MissingObjectError,
    SchemaError,
    TableError,
    UnfilteredDeleteError,
)
from tablekit.log import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_KEY = "id"


class Table(Generic[T]):
    """Common operations on one database table.

    The table only holds its schema. Values used by a query travel in the
    Condition objects passed to each call, so one instance can be shared.

    Example:
        >>> users = Table(conn, "users", [Column("id", SQLType.INT,
        ...     key=ColumnKey.PRIMARY_KEY), Column("email")], model=User)
        >>> users.create()
        >>> user_id = users.insert(User(email="a@x.com"))
        >>> users.read(where=[users.condition("id", user_id)])
    """

    def __init__(
        self,
        connection: DatabaseConnection,
        name: str,
        columns: Iterable[Column] = (),
        model: Callable[[], T] | None = None,
        model_name: str = "",
        query_builder: QueryBuilder | None = None,
    ) -> None:
        """Initialize table.

        Args:
            connection: Driver used to run statements
            name: Table name
            columns: Column definitions in declaration order
            model: Zero-argument factory for empty model instances;
                rows are returned as dicts when omitted
            model_name: Model name; derived from the table name when empty
            query_builder: Statement builder; chosen from the connection's
                dialect when omitted
        """
        self.connection = connection
        self.name = name
        self.model: Callable[[], Any] = model or dict
        self.model_name = model_name or model_name_from_table(name)
        self.query_builder = query_builder or create_query_builder(
            connection.dialect
        )
        self._columns: list[Column] = []
        for column in columns:
            self.add_column(column)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r} model={self.model_name!r}>"

    @property
    def columns(self) -> tuple[Column, ...]:
        return tuple(self._columns)

    @property
    def primary_key(self) -> Column | None:
        """The primary key column, if the table has one."""
        for column in self._columns:
            if column.is_primary_key:
                return column
        return None

    def add_column(self, column: Column) -> None:
        """Append a column to the schema.

        Raises:
            SchemaError: If the column would be a second primary key
        """
        if column.is_primary_key and self.primary_key is not None:
            self._fail(
                SchemaError,
                "add_column",
                f"Table {self.name!r} already has a primary key",
            )
        self._columns.append(column)

    def find_column(self, name: str) -> Column | None:
        for column in self._columns:
            if column.name == name:
                return column
        return None

    def selection(self, name: str) -> Column:
        """Column to project in a SELECT."""
        return self._require_column(name, "selection")

    def condition(self, name: str, value: Any, like: bool = False) -> Condition:
        """Condition comparing a column against a value."""
        return Condition(self._require_column(name, "condition"), value, like)

    def condition_from(self, obj: Any, name: str, like: bool = False) -> Condition:
        """Condition comparing a column against the value it has on ``obj``."""
        column = self._require_column(name, "condition_from")
        return Condition(column, get_value(obj, name), like)

    def create(self) -> None:
        """Create this table in the database.

        Raises:
            SchemaError: If the table has no name or no columns
        """
        self._require_name("create")
        if not self._columns:
            self._fail(
                SchemaError, "create", "Table must contain at least one column"
            )

        query = self.query_builder.create_table_sql(self.name, self._columns)
        logger.debug(query)
        self.connection.execute(query)
        logger.info(f"Created table {self.name}")

    def drop(self) -> None:
        """Drop this table from the database.

        Raises:
            SchemaError: If the table has no name
        """
        self._require_name("drop")
        query = self.query_builder.drop_table_sql(self.name)
        logger.debug(query)
        self.connection.execute(query)
        logger.info(f"Dropped table {self.name}")

    def count(self) -> int:
        """Count the records in this table."""
        key = self._key_column()
        select = [key] if key is not None else None
        return len(self.read(select, as_list=True))

    def insert(self, obj: T) -> Any:
        """Insert a record built from ``obj``.

        Every column, the primary key included, is bound from the object.

        Returns:
            Identifier generated for the new row
        """
        self._require_object(obj, "insert")
        query = self.query_builder.insert_sql(self.name, self._columns)
        statement = self.connection.prepare(query)
        self._bind_object(statement, obj, include_pk=True)

        logger.debug(f"{query} {statement.params}")
        statement.execute()
        return self.connection.last_insert_id()

    def update(self, obj: T, where: Sequence[Condition] | None = None) -> int:
        """Update records from ``obj``.

        Args:
            obj: Source of the new column values
            where: Conditions selecting the records; defaults to the record
                whose primary key matches the object's

        Returns:
            Number of updated records
        """
        self._require_object(obj, "update")
        if not where:
            key = self._key_column()
            if key is None:
                self._fail(
                    SchemaError,
                    "update",
                    f"Table {self.name!r} has no key column to update by",
                )
            where = [Condition(key, get_value(obj, key.name))]

        query = self.query_builder.update_sql(self.name, self._columns, where)
        statement = self.connection.prepare(query)
        self._bind_object(statement, obj, include_pk=False)
        self._bind_conditions(statement, where, WHERE_PREFIX)

        logger.debug(f"{query} {statement.params}")
        statement.execute()
        return statement.row_count()

    def delete(self, where: Sequence[Condition], all_rows: bool = False) -> int:
        """Delete records matching ``where``.

        Args:
            where: Conditions selecting the records
            all_rows: Allow an empty ``where`` to delete every record

        Returns:
            Number of deleted records

        Raises:
            UnfilteredDeleteError: If ``where`` is empty and ``all_rows`` is not set
        """
        conditions = [condition for condition in where if condition.name]
        if not conditions and not all_rows:
            self._fail(
                UnfilteredDeleteError,
                "delete",
                f"Refusing to delete every record of {self.name!r} "
                "without all_rows=True",
            )

        query = self.query_builder.delete_sql(self.name, conditions)
        statement = self.connection.prepare(query)
        self._bind_conditions(statement, conditions)

        logger.debug(f"{query} {statement.params}")
        statement.execute()
        return statement.row_count()

    def read(
        self,
        select: Sequence[Column] | None = None,
        where: Sequence[Condition] | None = None,
        as_list: bool = False,
        limit: int | str | None = None,
        order: Sequence[OrderSpec] | None = None,
    ) -> T | list[T]:
        """Fetch records from this table.

        Args:
            select: Columns to fetch; all columns when empty
            where: Conditions filtering the records
            as_list: Return a single match as a one-element list
            limit: LIMIT value, e.g. ``10`` or ``"20, 10"``
            order: Sort specification

        Returns:
            A single model when exactly one record matches (unless
            ``as_list``), otherwise a list of models, empty when nothing matches
        """
        query = self.query_builder.select_sql(self.name, select, where, order, limit)

        if where:
            statement = self.connection.prepare(query)
            self._bind_conditions(statement, where)
            logger.debug(f"{query} {statement.params}")
            statement.execute()
        else:
            logger.debug(query)
            statement = self.connection.execute(query)

        return self._fetch(statement, as_list)

    def _fetch(self, statement: PreparedStatement, as_list: bool) -> T | list[T]:
        rows = statement.row_count()
        if rows == 1:
            row = statement.fetch_one()
            if row is None:
                return []
            instance = hydrate(self.model, row)
            return [instance] if as_list else instance
        if rows > 1:
            return [hydrate(self.model, row) for row in statement.fetch_all()]
        return []

    def _bind_object(
        self, statement: PreparedStatement, obj: T, include_pk: bool
    ) -> None:
        for column in self._columns:
            if not column.name:
                continue
            if not include_pk and column.is_primary_key:
                continue
            statement.bind(column.name, get_value(obj, column.name))

    @staticmethod
    def _bind_conditions(
        statement: PreparedStatement,
        conditions: Sequence[Condition],
        prefix: str = "",
    ) -> None:
        for name, value in where_params(conditions, prefix).items():
            statement.bind(name, value)

    def _key_column(self) -> Column | None:
        return self.primary_key or self.find_column(DEFAULT_KEY)

    def _require_name(self, operation: str) -> None:
        if not self.name:
            self._fail(SchemaError, operation, "Table must have a name")

    def _require_object(self, obj: Any, operation: str) -> None:
        if obj is None:
            self._fail(MissingObjectError, operation, f"Object to {operation} is empty")

    def _require_column(self, name: str, operation: str) -> Column:
        column = self.find_column(name)
        if column is None:
            self._fail(
                SchemaError, operation, f"Table {self.name!r} has no column {name!r}"
            )
        return column

    def _fail(
        self, error: type[TableError], operation: str, message: str
    ) -> NoReturn:
        exc = error(message, component=type(self).__name__, operation=operation)
        logger.error(str(exc))
        raise exc
