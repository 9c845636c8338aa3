"""
memtable - Custom Exceptions.

Every error is a caller-input error raised synchronously by the operation
that was violated. Codes are stable and machine-readable.
"""

from typing import Any


class MemtableException(Exception):
    """Base exception for memtable."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ):
        self.code = code
        self.message = message
        self.details = details
        super().__init__(message)


class TableAlreadyExistsException(MemtableException):
    """Raised by create_table when the name is already registered."""

    def __init__(self, table_name: str):
        self.table_name = table_name
        super().__init__(
            code="TABLE_ALREADY_EXISTS",
            message=f"Table {table_name} already exists.",
            details={"table": table_name},
        )


class TableDoesNotExistException(MemtableException):
    """Raised when an operation targets a table that was never created."""

    def __init__(self, table_name: str):
        self.table_name = table_name
        super().__init__(
            code="TABLE_DOES_NOT_EXIST",
            message=f"Table {table_name} does not exist.",
            details={"table": table_name},
        )


class UnknownColumnException(MemtableException):
    """Raised by insert_into when a row key is not a declared column."""

    def __init__(self, column_name: str, table_name: str):
        self.column_name = column_name
        self.table_name = table_name
        super().__init__(
            code="UNKNOWN_COLUMN",
            message=f"Column {column_name} does not exist in table {table_name}.",
            details={"column": column_name, "table": table_name},
        )


class TypeMismatchException(MemtableException):
    """Raised by insert_into when a value disagrees with its column type."""

    def __init__(self, column_name: str, table_name: str, expected_type: str):
        self.column_name = column_name
        self.table_name = table_name
        self.expected_type = expected_type
        super().__init__(
            code="TYPE_MISMATCH",
            message=(
                f"Type mismatch for column {column_name} in table {table_name}. "
                f"Expected {expected_type}."
            ),
            details={
                "column": column_name,
                "table": table_name,
                "expected_type": expected_type,
            },
        )


class SchemaValidationException(MemtableException):
    """Raised by create_table for malformed column definitions."""

    def __init__(self, table_name: str, errors: list[dict[str, Any]] | None = None):
        self.table_name = table_name
        details: dict[str, Any] = {"table": table_name}
        if errors:
            details["errors"] = errors
        super().__init__(
            code="SCHEMA_VALIDATION_ERROR",
            message=f"Invalid column definitions for table {table_name}.",
            details=details,
        )
