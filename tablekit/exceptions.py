"""Exceptions raised by tablekit."""

from tablekit.types import Severity


class TableError(Exception):
    """Base exception for table errors.

    Carries the component and operation that failed so callers can log or
    route the error without parsing the message.
    """

    default_severity = Severity.ERROR

    def __init__(
        self,
        message: str,
        *,
        component: str = "",
        operation: str = "",
        severity: Severity | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.component = component
        self.operation = operation
        self.severity = severity or self.default_severity

    def __str__(self) -> str:
        location = ".".join(part for part in (self.component, self.operation) if part)
        if not location:
            return self.message
        return f"{self.message} in {location}()"


class SchemaError(TableError):
    """Raised when a table definition is incomplete or inconsistent."""

    default_severity = Severity.FATAL


class MissingObjectError(TableError):
    """Raised when insert or update receives no object."""

    default_severity = Severity.FATAL


class UnfilteredDeleteError(TableError):
    """Raised when delete is called without conditions and without opting in."""

    pass


class DriverError(TableError):
    """Raised by a database driver when the underlying database call fails."""

    pass
