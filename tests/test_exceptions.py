"""Tests for the table error taxonomy."""

import pytest

from tablekit.exceptions import (
    DriverError,
    MissingObjectError,
    SchemaError,
    TableError,
    UnfilteredDeleteError,
)
from tablekit.types import Severity


@pytest.mark.parametrize(
    "error, severity",
    [
        (SchemaError, Severity.FATAL),
        (MissingObjectError, Severity.FATAL),
        (UnfilteredDeleteError, Severity.ERROR),
        (DriverError, Severity.ERROR),
    ],
)
def test_default_severity(error: type[TableError], severity: Severity) -> None:
    """Test each error's default severity."""
    exc = error("boom")

    assert isinstance(exc, TableError)
    assert exc.severity is severity


def test_error_carries_location() -> None:
    """Test component and operation are kept and shown."""
    exc = SchemaError(
        "Table must have a name",
        component="UsersTable",
        operation="create",
        severity=Severity.WARNING,
    )

    assert exc.message == "Table must have a name"
    assert exc.severity is Severity.WARNING
    assert str(exc) == "Table must have a name in UsersTable.create()"


def test_error_without_location() -> None:
    """Test the plain message when no location is given."""
    assert str(TableError("boom")) == "boom"
