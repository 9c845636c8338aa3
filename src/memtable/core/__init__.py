"""
memtable Core - the table store engine.

Components:
- row_validator: insert-time schema checks
- table_store: TableStore, owner of all tables
- frames: pandas projection of a table
"""

from memtable.core.frames import to_dataframe
from memtable.core.row_validator import RowValidator
from memtable.core.table_store import Predicate, TableStore

__all__ = ["Predicate", "RowValidator", "TableStore", "to_dataframe"]
