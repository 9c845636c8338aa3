"""
memtable - minimal in-process tabular data store.

Create tables with a fixed column schema, insert schema-checked rows,
project columns on read, and update or delete rows by predicate.
"""

from memtable.config import Settings, get_settings
from memtable.core import TableStore, to_dataframe
from memtable.exceptions import (
    MemtableException,
    SchemaValidationException,
    TableAlreadyExistsException,
    TableDoesNotExistException,
    TypeMismatchException,
    UnknownColumnException,
)
from memtable.schemas import ColumnSchema, ColumnType, Row, TableSchema

__version__ = "0.1.0"

__all__ = [
    "ColumnSchema",
    "ColumnType",
    "MemtableException",
    "Row",
    "SchemaValidationException",
    "Settings",
    "TableAlreadyExistsException",
    "TableDoesNotExistException",
    "TableSchema",
    "TableStore",
    "TypeMismatchException",
    "UnknownColumnException",
    "get_settings",
    "to_dataframe",
]
