"""
Row Validator - insert-time checks of a row against its table schema.

Responsibility:
- Reject keys that are not declared columns
- Reject present values whose type differs from the declared column type
- Report only the first violation
- NO coercion, NO defaulting of missing fields
"""

from collections.abc import Mapping
from typing import Any

from memtable.exceptions import TypeMismatchException, UnknownColumnException
from memtable.schemas import TableSchema


class RowValidator:
    """Validates rows before they are appended to a table."""

    @staticmethod
    def validate(table: TableSchema, row: Mapping[str, Any]) -> None:
        """
        Validate ``row`` against ``table``'s declared columns.

        The column-existence pass runs over every row key before any type
        check, so an unknown column always wins over a type mismatch.

        Args:
            table: Target table
            row: Candidate row

        Raises:
            UnknownColumnException: First row key not declared on the table
            TypeMismatchException: First declared column (schema order) whose
                present value has the wrong type
        """
        declared = set(table.column_names)
        unknown = [name for name in row if name not in declared]
        if unknown:
            raise UnknownColumnException(unknown[0], table.name)

        for column in table.columns:
            value = row.get(column.name)
            # None stands for an absent field
            if value is not None and not column.type.accepts(value):
                raise TypeMismatchException(column.name, table.name, column.type.value)


__all__ = ["RowValidator"]
