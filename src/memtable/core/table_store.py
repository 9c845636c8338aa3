from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager, nullcontext
from threading import RLock
from types import MappingProxyType
from typing import Any

from pydantic import TypeAdapter, ValidationError

from memtable.config import Settings, get_settings
from memtable.core.row_validator import RowValidator
from memtable.exceptions import (
    MemtableException,
    SchemaValidationException,
    TableAlreadyExistsException,
    TableDoesNotExistException,
)
from memtable.observability.metrics import MetricsStore, get_metrics_store
from memtable.schemas import ColumnSchema, Row, TableSchema

logger = logging.getLogger(__name__)

Predicate = Callable[[Row], bool]

_COLUMNS_ADAPTER = TypeAdapter(list[ColumnSchema])


class TableStore:
    """
    In-memory collection of named tables.

    Inserts are validated against the declared columns; updates are not.
    Every public operation runs under one re-entrant lock when
    ``settings.thread_safe`` is set.
    """

    def __init__(self, settings: Settings | None = None, metrics: MetricsStore | None = None):
        self._settings = settings or get_settings()
        self._lock = RLock() if self._settings.thread_safe else nullcontext()
        self._metrics = metrics or get_metrics_store()
        self._tables: dict[str, TableSchema] = {}

    @property
    def metrics(self) -> MetricsStore:
        return self._metrics

    @property
    def tables(self) -> Mapping[str, TableSchema]:
        """Live view of the registered tables keyed by name.

        The mapping is read-only but the TableSchema values are the stored
        objects; mutating them bypasses validation and the lock. Use
        get_table for a detached snapshot.
        """
        return MappingProxyType(self._tables)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @contextmanager
    def _operation(self, name: str) -> Iterator[None]:
        """Hold the store lock and record latency/errors for one call."""
        with self._lock:
            start = time.perf_counter()
            try:
                yield
            except MemtableException as e:
                logger.info(f"{name} rejected: {e.code} ({e.message})")
                if self._settings.metrics_enabled:
                    self._metrics.record_operation_error(name, e.code)
                raise
            except Exception as e:
                if self._settings.metrics_enabled:
                    self._metrics.record_operation_error(name, type(e).__name__)
                raise
            else:
                if self._settings.metrics_enabled:
                    self._metrics.record_latency(name, (time.perf_counter() - start) * 1000)

    def _require(self, table_name: str) -> TableSchema:
        table = self._tables.get(table_name)
        if table is None:
            raise TableDoesNotExistException(table_name)
        return table

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def create_table(self, table_name: str, columns: Sequence[ColumnSchema | Mapping[str, Any]]) -> None:
        """
        Register a new, empty table.

        Raises:
            TableAlreadyExistsException: If the name is taken
            SchemaValidationException: If a column has an unknown type or a
                duplicate name
        """
        with self._operation("create_table"):
            if table_name in self._tables:
                raise TableAlreadyExistsException(table_name)
            try:
                declared = _COLUMNS_ADAPTER.validate_python(list(columns))
                table = TableSchema(name=table_name, columns=declared)
            except ValidationError as exc:
                errors = [
                    {"loc": list(err["loc"]), "msg": err["msg"]}
                    for err in exc.errors()
                ]
                raise SchemaValidationException(table_name, errors) from exc
            self._tables[table_name] = table
            logger.debug(f"Created table {table_name} with columns {table.column_names}")

    def get_table(self, table_name: str) -> TableSchema:
        """Deep copy of the table; changes to it never reach the store."""
        with self._operation("get_table"):
            return self._require(table_name).model_copy(deep=True)

    def has_table(self, table_name: str) -> bool:
        with self._lock:
            return table_name in self._tables

    def table_names(self) -> list[str]:
        """Names of all tables in creation order."""
        with self._lock:
            return list(self._tables)

    def row_count(self, table_name: str) -> int:
        with self._operation("row_count"):
            return len(self._require(table_name).rows)

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def insert_into(self, table_name: str, row: Mapping[str, Any]) -> None:
        """
        Validate ``row`` and append it to the table.

        Nothing is appended unless the whole row passes validation.

        Raises:
            TableDoesNotExistException: If the table was never created
            UnknownColumnException: If a key is not a declared column
            TypeMismatchException: If a present value has the wrong type
        """
        with self._operation("insert_into"):
            table = self._require(table_name)
            RowValidator.validate(table, row)
            table.rows.append(dict(row))
            logger.debug(f"Inserted row into {table_name} ({len(table.rows)} rows)")

    def select_from(self, table_name: str, columns: Sequence[str] | None = None) -> list[Row]:
        """
        Project every stored row onto ``columns``.

        Empty or missing ``columns`` selects all declared columns in declared
        order. A requested column missing from a row comes back as None.
        """
        with self._operation("select_from"):
            table = self._require(table_name)
            selected = list(columns) if columns else table.column_names
            return [{name: row.get(name) for name in selected} for row in table.rows]

    def update(self, table_name: str, updates: Mapping[str, Any], predicate: Predicate) -> None:
        """
        Merge ``updates`` into every row matching ``predicate``, in place.

        Values are not checked against the schema. All predicates run before
        any row is modified.
        """
        with self._operation("update"):
            table = self._require(table_name)
            matched = [row for row in table.rows if predicate(row)]
            for row in matched:
                row.update(updates)
            logger.debug(f"Updated {len(matched)} row(s) in {table_name}")

    def delete_from(self, table_name: str, predicate: Predicate) -> None:
        """Drop every row matching ``predicate``, keeping the others in order."""
        with self._operation("delete_from"):
            table = self._require(table_name)
            kept = [row for row in table.rows if not predicate(row)]
            removed = len(table.rows) - len(kept)
            table.rows = kept
            logger.debug(f"Deleted {removed} row(s) from {table_name}")


__all__ = ["Predicate", "TableStore"]
