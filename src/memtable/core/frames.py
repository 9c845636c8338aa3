"""
DataFrame projection of a table.

Rows come from TableStore.select_from, so column selection and missing-value
rules are identical to a plain select.
"""

from __future__ import annotations

from collections.abc import Sequence

import pandas as pd

from memtable.core.table_store import TableStore


def to_dataframe(store: TableStore, table_name: str, columns: Sequence[str] | None = None) -> pd.DataFrame:
    """Return the selected columns of ``table_name`` as a DataFrame."""
    selected = list(columns) if columns else store.get_table(table_name).column_names
    rows = store.select_from(table_name, selected)
    return pd.DataFrame.from_records(rows, columns=selected)
