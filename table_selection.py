from typing import Callable, FrozenSet, Iterable

from columns import RowKey

CHECKED = "checked"
INDETERMINATE = "indeterminate"
UNCHECKED = "unchecked"

Selection = FrozenSet[RowKey]


def toggle_row(selected: Iterable[RowKey], key: RowKey) -> Selection:
    selected = frozenset(selected)
    if key in selected:
        return selected - {key}
    return selected | {key}


def toggle_all(selected: Iterable[RowKey], keys: Iterable[RowKey]) -> Selection:
    """Select every key, or nothing when everything is already selected.

    Never lands on a partial selection.
    """
    selected = frozenset(selected)
    keys = frozenset(keys)
    if len(selected) == len(keys):
        return frozenset()
    return keys


def clear(_selected=None) -> Selection:
    return frozenset()


def is_all_selected(selected, keys) -> bool:
    count = len(frozenset(selected))
    return count > 0 and count == len(frozenset(keys))


def is_partially_selected(selected, keys) -> bool:
    return 0 < len(frozenset(selected)) < len(frozenset(keys))


def header_checkbox_state(selected, keys) -> str:
    if is_all_selected(selected, keys):
        return CHECKED
    if is_partially_selected(selected, keys):
        return INDETERMINATE
    return UNCHECKED


def get_selected_rows(rows, selected, row_key: Callable) -> list:
    """Selected rows in row-list order, not in the order they were picked."""
    selected = frozenset(selected)
    return [row for row in rows if row_key(row) in selected]


def prune_selection(selected, keys) -> Selection:
    """Drop selected keys that no longer appear in the row list."""
    return frozenset(selected) & frozenset(keys)


def ordered_keys(selected, keys) -> list[RowKey]:
    """Selected keys in row-list order; stale keys follow, sorted by text."""
    selected = frozenset(selected)
    keys = list(keys)
    present = [key for key in keys if key in selected]
    stale = sorted(selected - frozenset(keys), key=str)
    return present + stale
