"""Helpers shared by the table engine and the query builders.

Two concerns live here: moving values between model objects and columns,
and assembling SQL clause text from ordered column sequences.
"""

import inspect
from collections.abc import Callable, Iterable, Mapping, MutableMapping, Sequence
from typing import Any, TypeVar

from tablekit.database.schema import Column, Condition, OrderSpec, quote
from tablekit.types import RowType

T = TypeVar("T")

COMMA = ", "
AND = " AND "


def remove_suffix(text: str, suffix: str) -> str:
    """Remove ``suffix`` from the end of ``text`` if it is there.

    Example:
        >>> remove_suffix("users", "s")
        "user"
    """
    if suffix and text.endswith(suffix):
        return text[: len(text) - len(suffix)]
    return text


def _capitalize_segments(name: str) -> str:
    return "".join(segment[:1].upper() + segment[1:] for segment in name.split("_"))


def accessor_name(property_name: str) -> str:
    """Build the getter name for a column name.

    Example:
        >>> accessor_name("user_profile_photo")
        "getUserProfilePhoto"
    """
    if not property_name:
        return ""
    return "get" + _capitalize_segments(property_name)


def model_name_from_table(table_name: str) -> str:
    """Derive a model name from a table name.

    Example:
        >>> model_name_from_table("user_profiles")
        "UserProfile"
    """
    return remove_suffix(_capitalize_segments(table_name), "s")


def get_value(obj: Any, property_name: str) -> Any:
    """Read a column value from an arbitrary object.

    Tried in order: a ``getFirstName()`` style accessor, a ``get_first_name()``
    accessor, a mapping key, then the attribute itself. Returns None when the
    object exposes none of them.
    """
    if obj is None or not property_name:
        return None

    for getter in (accessor_name(property_name), f"get_{property_name}"):
        method = getattr(obj, getter, None)
        if callable(method):
            return method()

    if isinstance(obj, Mapping):
        return obj.get(property_name)

    return getattr(obj, property_name, None)


def _declared_fields(cls: type) -> set[str]:
    names: set[str] = set()
    for klass in cls.__mro__:
        names.update(getattr(klass, "__annotations__", {}))
    return names


def _is_assignable(cls: type, name: str) -> bool:
    """False for methods and read-only properties declared on the class."""
    attribute = inspect.getattr_static(cls, name, None)
    if isinstance(attribute, property):
        return attribute.fset is not None
    if isinstance(attribute, (staticmethod, classmethod)):
        return False
    return not inspect.isroutine(attribute)


def set_value(obj: Any, property_name: str, value: Any) -> bool:
    """Assign a column value to a model instance.

    Returns:
        True if the model exposes the field and it was assigned
    """
    if isinstance(obj, MutableMapping):
        obj[property_name] = value
        return True

    if not _is_assignable(type(obj), property_name):
        return False

    if hasattr(obj, property_name) or property_name in _declared_fields(type(obj)):
        setattr(obj, property_name, value)
        return True

    return False


def hydrate(model: Callable[[], T], row: RowType) -> T:
    """Build a model instance from a result row.

    Args:
        model: Zero-argument factory returning an empty model
        row: Column name to value mapping

    Returns:
        The populated model; row keys the model does not expose are ignored
    """
    instance = model()
    for name, value in row.items():
        set_value(instance, name, value)
    return instance


def field_list(
    columns: Iterable[Column],
    include_pk: bool = True,
    full_info: bool = True,
    definition: Callable[[Column], str] | None = None,
) -> str:
    """Join columns into a field list.

    Args:
        columns: Columns in output order
        include_pk: Whether to keep the primary key column
        full_info: Column definitions (CREATE TABLE) instead of quoted names
        definition: Renders one column definition; defaults to Column.definition

    Returns:
        Fields separated by commas

    Example:
        >>> field_list([Column("id", "INT"), Column("name")], full_info=False)
        "`id`, `name`"
    """
    render = definition or Column.definition
    fields: list[str] = []
    for column in columns:
        if not column.name:
            continue
        if not include_pk and column.is_primary_key:
            continue
        fields.append(render(column) if full_info else quote(column.name))
    return COMMA.join(fields)


def pseudo_assignments(columns: Iterable[Column], include_pk: bool = True) -> str:
    """Build the ``SET`` assignment list.

    Example:
        >>> pseudo_assignments([Column("id"), Column("name")])
        "`id` = :id, `name` = :name"
    """
    assignments: list[str] = []
    for column in columns:
        if not column.name:
            continue
        if not include_pk and column.is_primary_key:
            continue
        assignments.append(f"{quote(column.name)} = :{column.name}")
    return COMMA.join(assignments)


def _placeholders(
    conditions: Iterable[Condition], prefix: str
) -> list[tuple[Condition, str]]:
    """Pair each named condition with a placeholder unique within the clause.

    The first condition on a column uses the column name; repeats get a
    numeric suffix (``id``, ``id_2``, ``id_3``).
    """
    pairs: list[tuple[Condition, str]] = []
    used: set[str] = set()
    for condition in conditions:
        if not condition.name:
            continue
        placeholder = f"{prefix}{condition.name}"
        index = 1
        while placeholder in used:
            index += 1
            placeholder = f"{prefix}{condition.name}_{index}"
        used.add(placeholder)
        pairs.append((condition, placeholder))
    return pairs


def where_clause(conditions: Iterable[Condition], prefix: str = "") -> str:
    """Build the body of a WHERE clause, without the WHERE keyword.

    Args:
        conditions: Conditions joined with AND
        prefix: Prepended to each placeholder name

    Returns:
        Clause text, or an empty string when there are no conditions

    Example:
        >>> where_clause([Condition(Column("email"), "a@x.com", like=True)])
        "`email` LIKE :email"
    """
    clauses: list[str] = []
    for condition, placeholder in _placeholders(conditions, prefix):
        operator = "LIKE" if condition.is_like else "="
        clauses.append(f"{quote(condition.name)} {operator} :{placeholder}")
    return AND.join(clauses)


def where_params(conditions: Iterable[Condition], prefix: str = "") -> dict[str, Any]:
    """Map the placeholders of ``where_clause`` to their bound values."""
    return {
        placeholder: condition.bound_value()
        for condition, placeholder in _placeholders(conditions, prefix)
    }


def select_clause(columns: Sequence[Column] | None) -> str:
    """Quoted column names for SELECT, or ``*`` when none are given."""
    fields = field_list(columns or [], full_info=False)
    return fields or "*"


def order_clause(order: Iterable[OrderSpec] | None) -> str:
    """Build an ORDER BY clause.

    Example:
        >>> order_clause([OrderSpec(Column("name"), SortOrder.DESC)])
        "ORDER BY `name` DESC"
    """
    specs = [spec.sql() for spec in order or [] if spec.column.name]
    if not specs:
        return ""
    return f"ORDER BY {COMMA.join(specs)}"


def limit_clause(limit: int | str | None) -> str:
    """Build a LIMIT clause. ``limit`` may be a count or ``"offset, count"``."""
    if limit is None or limit == "":
        return ""
    return f"LIMIT {limit}"
