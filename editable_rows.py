import copy
import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional

# reasons a mutation was rejected
AT_MAX_ROWS = "at_max_rows"
AT_MIN_ROWS = "at_min_rows"


@dataclass(frozen=True)
class MutationOutcome:
    applied: bool
    rows: list
    reason: Optional[str] = None


def can_add_row(rows, max_rows: Optional[int] = None) -> bool:
    return not max_rows or len(rows) < max_rows


def can_remove_row(rows, min_rows: int = 0) -> bool:
    return len(rows) > min_rows


def attempt_add_row(rows, factory: Callable[[], Any], max_rows: Optional[int] = None):
    if not can_add_row(rows, max_rows):
        return MutationOutcome(False, rows, AT_MAX_ROWS)
    return MutationOutcome(True, [*rows, factory()])


def attempt_remove_row(rows, index: int, min_rows: int = 0):
    """Remove the row at ``index``; an out-of-range index raises IndexError."""
    if not can_remove_row(rows, min_rows):
        return MutationOutcome(False, rows, AT_MIN_ROWS)
    if not -len(rows) <= index < len(rows):
        raise IndexError(f"row index {index} out of range")
    index = index % len(rows)
    return MutationOutcome(True, [*rows[:index], *rows[index + 1 :]])


def add_row(rows, factory: Callable[[], Any], max_rows: Optional[int] = None) -> list:
    return attempt_add_row(rows, factory, max_rows).rows


def remove_row(rows, index: int, min_rows: int = 0) -> list:
    return attempt_remove_row(rows, index, min_rows).rows


def replace_field(row, field_key: str, value):
    """Copy of ``row`` with one field replaced; ``row`` itself is left alone."""
    if isinstance(row, Mapping):
        return {**row, field_key: value}
    if dataclasses.is_dataclass(row) and not isinstance(row, type):
        return dataclasses.replace(row, **{field_key: value})
    if isinstance(row, tuple) and hasattr(row, "_replace"):
        return row._replace(**{field_key: value})
    patched = copy.copy(row)
    setattr(patched, field_key, value)
    return patched


def patch_field(rows, index: int, field_key: str, value) -> list:
    patched = list(rows)
    patched[index] = replace_field(rows[index], field_key, value)
    return patched
