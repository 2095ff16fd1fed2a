from dataclasses import dataclass
from typing import Any, Callable, Optional

import table_selection
from columns import find_column, row_key_accessor
from table_sort import SortState, sort_rows, toggle_column_sort


@dataclass(frozen=True)
class BulkAction:
    label: str
    on_click: Callable[[list], Any]
    variant: str = "default"  # default | primary | danger
    icon: Any = None


@dataclass(frozen=True)
class RowAction:
    label: str
    on_click: Callable[[Any], Any]
    variant: str = "default"
    hover_only: bool = False
    icon: Any = None


class DataTable:
    """Sortable, selectable view over a host-owned row list.

    Sort and selection changes are computed here and pushed to the host
    through ``on_sort_change(key, direction)`` and
    ``on_selection_change(keys)``; local copies track what was last emitted.
    """

    def __init__(
        self,
        columns,
        rows,
        row_key="id",
        selectable: bool = False,
        sort_config: Optional[SortState] = None,
        selected_keys=(),
        on_sort_change: Optional[Callable[[str, str], None]] = None,
        on_selection_change: Optional[Callable[[list], None]] = None,
        bulk_actions=(),
        actions=(),
        paginator=None,
        prune_stale_selection: bool = False,
        empty_title: str = "No data",
        empty_description: Optional[str] = None,
        set_status: Optional[Callable[[str, float], None]] = None,
    ):
        self.columns = list(columns)
        self.rows = list(rows)
        self.row_key = row_key_accessor(row_key)
        self.selectable = selectable
        self.sort_config = sort_config
        self.selected_keys = frozenset(selected_keys)
        self.on_sort_change = on_sort_change
        self.on_selection_change = on_selection_change
        self.bulk_actions = list(bulk_actions)
        self.actions = list(actions)
        self.paginator = paginator
        self.prune_stale_selection = prune_stale_selection
        self.empty_title = empty_title
        self.empty_description = empty_description
        self._status_sink = set_status
        if self.paginator is not None:
            self.paginator.update_total_items(len(self.rows))

    def _set_status(self, msg, seconds=3):
        if self._status_sink is not None:
            self._status_sink(msg, seconds)

    @property
    def keys(self) -> list:
        return [self.row_key(row) for row in self.rows]

    # ----- rows -----
    def set_rows(self, rows):
        self.rows = list(rows)
        if self.paginator is not None:
            self.paginator.update_total_items(len(self.rows))
        if self.prune_stale_selection:
            pruned = table_selection.prune_selection(self.selected_keys, self.keys)
            if pruned != self.selected_keys:
                dropped = len(self.selected_keys) - len(pruned)
                self._emit_selection(pruned)
                self._set_status(
                    f"Cleared {dropped} stale selection{'s' if dropped != 1 else ''}", 2
                )

    def visible_rows(self) -> list:
        ordered = sort_rows(self.rows, self.sort_config, self.columns)
        if self.paginator is None:
            return ordered
        return ordered[self.paginator.page_start : self.paginator.page_end]

    def is_empty(self) -> bool:
        return not self.rows

    def find_row(self, key):
        for row in self.rows:
            if self.row_key(row) == key:
                return row
        return None

    def render_row(self, row) -> list:
        return [col.cell(row) for col in self.columns]

    # ----- sorting -----
    def sort_direction(self, column_key: str) -> Optional[str]:
        if self.sort_config is not None and self.sort_config.key == column_key:
            return self.sort_config.direction
        return None

    def sort_by(self, column_key: str) -> bool:
        column = find_column(self.columns, column_key)
        if column is None:
            return False
        toggled = toggle_column_sort(self.sort_config, column)
        if toggled is self.sort_config:
            return False
        self.sort_config = toggled
        if self.on_sort_change is not None:
            self.on_sort_change(self.sort_config.key, self.sort_config.direction)
        self._set_status(
            f"Sorted by {column.header or column.key} ({self.sort_config.direction})", 2
        )
        return True

    # ----- selection -----
    def _emit_selection(self, selected):
        self.selected_keys = frozenset(selected)
        if self.on_selection_change is not None:
            self.on_selection_change(
                table_selection.ordered_keys(self.selected_keys, self.keys)
            )

    def set_selected_keys(self, keys):
        """Adopt a selection set by the host without echoing it back."""
        self.selected_keys = frozenset(keys)

    def toggle_row(self, key) -> bool:
        if not self.selectable:
            return False
        self._emit_selection(table_selection.toggle_row(self.selected_keys, key))
        return True

    def toggle_all(self) -> bool:
        if not self.selectable:
            return False
        self._emit_selection(table_selection.toggle_all(self.selected_keys, self.keys))
        return True

    def clear_selection(self) -> bool:
        if not self.selectable:
            return False
        self._emit_selection(table_selection.clear(self.selected_keys))
        return True

    def is_selected(self, key) -> bool:
        return key in self.selected_keys

    @property
    def selected_count(self) -> int:
        return len(self.selected_keys)

    def selected_rows(self) -> list:
        return table_selection.get_selected_rows(
            self.rows, self.selected_keys, self.row_key
        )

    def is_all_selected(self) -> bool:
        return table_selection.is_all_selected(self.selected_keys, self.keys)

    def is_partially_selected(self) -> bool:
        return table_selection.is_partially_selected(self.selected_keys, self.keys)

    def header_checkbox_state(self) -> str:
        return table_selection.header_checkbox_state(self.selected_keys, self.keys)

    # ----- actions -----
    def bulk_actions_visible(self) -> bool:
        return self.selectable and bool(self.bulk_actions) and self.selected_count > 0

    def run_bulk_action(self, label: str) -> bool:
        for action in self.bulk_actions:
            if action.label == label:
                rows = self.selected_rows()
                action.on_click(rows)
                self._set_status(
                    f"{label}: {len(rows)} row{'s' if len(rows) != 1 else ''}", 2
                )
                return True
        self._set_status(f"Unknown bulk action '{label}'", 3)
        return False

    def row_actions(self, hovered: bool = False) -> list:
        return [a for a in self.actions if hovered or not a.hover_only]

    def run_row_action(self, label: str, key) -> bool:
        row = self.find_row(key)
        if row is None:
            self._set_status(f"No row with key {key!r}", 3)
            return False
        for action in self.actions:
            if action.label == label:
                action.on_click(row)
                return True
        self._set_status(f"Unknown row action '{label}'", 3)
        return False
