from dataclasses import dataclass
from typing import Optional

import pandas as pd

from columns import find_column

ASC = "asc"
DESC = "desc"


@dataclass(frozen=True)
class SortState:
    key: str
    direction: str = ASC

    def __post_init__(self):
        if self.direction not in (ASC, DESC):
            raise ValueError(f"Unknown sort direction '{self.direction}'")


def toggle_sort(current: Optional[SortState], column_key: str) -> SortState:
    """Next sort state after clicking ``column_key``.

    A new column starts ascending; the same column flips direction. Once a
    sort is engaged it never returns to unsorted.
    """
    if current is None or current.key != column_key:
        return SortState(column_key, ASC)
    if current.direction == ASC:
        return SortState(column_key, DESC)
    return SortState(column_key, ASC)


def toggle_column_sort(current: Optional[SortState], column) -> Optional[SortState]:
    if not column.sortable:
        return current
    return toggle_sort(current, column.key)


def _sort_values(values: pd.Series, ascending: bool) -> pd.Index:
    try:
        ordered = values.sort_values(
            ascending=ascending, kind="mergesort", na_position="last"
        )
    except TypeError:
        # mixed types that do not compare; order by their text instead
        as_text = values.where(values.isna(), values.astype(str))
        ordered = as_text.sort_values(
            ascending=ascending, kind="mergesort", na_position="last"
        )
    return ordered.index


def sort_rows(rows, sort_state: Optional[SortState], columns) -> list:
    rows = list(rows)
    if sort_state is None or len(rows) < 2:
        return rows
    column = find_column(columns, sort_state.key)
    if column is None:
        return rows
    values = pd.Series([column.value_of(row) for row in rows], dtype=object)
    order = _sort_values(values, ascending=sort_state.direction == ASC)
    return [rows[i] for i in order]
