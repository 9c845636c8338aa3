"""
memtable - Schemas.

Pydantic models describing tables and their columns.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

Row = dict[str, Any]


class ColumnType(str, Enum):
    NUMBER = "number"
    STRING = "string"
    BOOLEAN = "boolean"

    def accepts(self, value: Any) -> bool:
        """True when ``value``'s runtime type is exactly this column type.

        bool subclasses int, so it is excluded from NUMBER explicitly.
        """
        if self is ColumnType.BOOLEAN:
            return isinstance(value, bool)
        if self is ColumnType.NUMBER:
            return isinstance(value, (int, float)) and not isinstance(value, bool)
        return isinstance(value, str)


class ColumnSchema(BaseModel):
    """A declared column: name plus primitive type."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Column name, unique within its table")
    type: ColumnType = Field(..., description="Declared primitive type")


class TableSchema(BaseModel):
    """A table: its declared columns and the rows stored so far."""

    name: str
    columns: list[ColumnSchema]
    rows: list[Row] = Field(default_factory=list)

    @field_validator("columns")
    @classmethod
    def _unique_column_names(cls, columns: list[ColumnSchema]) -> list[ColumnSchema]:
        seen: set[str] = set()
        for column in columns:
            if column.name in seen:
                raise ValueError(f"duplicate column name: {column.name}")
            seen.add(column.name)
        return columns

    @property
    def column_names(self) -> list[str]:
        return [column.name for column in self.columns]
