from typing import Any, Callable, Optional

import editable_rows
from cell_coercion import coerce_cell_value
from columns import EditableColumn, find_column, read_field
from editable_table_undo import EditableTableUndo


class EditableTable:
    """Editable row collection wired to a host ``on_change`` callback.

    The host owns the canonical row list. Every applied edit hands it a brand
    new list through ``on_change``; the table also holds on to that list so
    follow-up edits in the same event cycle see the latest rows.
    """

    def __init__(
        self,
        columns,
        rows,
        create_row: Callable[[], Any],
        on_change: Optional[Callable[[list], None]] = None,
        min_rows: int = 0,
        max_rows: Optional[int] = None,
        show_row_numbers: bool = False,
        add_label: str = "Add row",
        loading: bool = False,
        undo_max_depth: int = 50,
        set_status: Optional[Callable[[str, float], None]] = None,
    ):
        if min_rows < 0:
            raise ValueError(f"min_rows must be >= 0, got {min_rows}")
        if max_rows and min_rows > max_rows:
            raise ValueError(f"min_rows ({min_rows}) exceeds max_rows ({max_rows})")
        self.columns = list(columns)
        self.rows = list(rows)
        self.create_row = create_row
        self.on_change = on_change
        self.min_rows = min_rows
        self.max_rows = max_rows
        self.show_row_numbers = show_row_numbers
        self.add_label = add_label
        self.loading = loading
        self._status_sink = set_status
        self.undo_mgr = EditableTableUndo(self, max_depth=undo_max_depth)

    def _set_status(self, msg, seconds=3):
        if self._status_sink is not None:
            self._status_sink(msg, seconds)

    def _commit(self, rows):
        self.rows = rows
        if self.on_change is not None:
            self.on_change(rows)

    def _restore_rows(self, rows):
        self._commit(list(rows))

    def _blocked_by_loading(self, what: str) -> bool:
        if self.loading:
            self._set_status(f"Loading; {what} unavailable", 2)
            return True
        return False

    def set_rows(self, rows):
        """Adopt a row list replaced by the host; history no longer applies."""
        self.rows = list(rows)
        self.undo_mgr.reset()

    # ----- derived flags -----
    @property
    def can_add_row(self) -> bool:
        return editable_rows.can_add_row(self.rows, self.max_rows)

    @property
    def can_remove_row(self) -> bool:
        return editable_rows.can_remove_row(self.rows, self.min_rows)

    def row_number(self, index: int) -> Optional[int]:
        return index + 1 if self.show_row_numbers else None

    # ----- row operations -----
    def add_row(self) -> bool:
        outcome = editable_rows.attempt_add_row(
            self.rows, self.create_row, self.max_rows
        )
        if not outcome.applied:
            self._set_status(f"Row limit reached ({self.max_rows})", 2)
            return False
        self.undo_mgr.push_undo()
        self._commit(outcome.rows)
        self._set_status(f"Added row {len(outcome.rows)}", 2)
        return True

    def remove_row(self, index: int) -> bool:
        if self._blocked_by_loading("remove"):
            return False
        outcome = editable_rows.attempt_remove_row(self.rows, index, self.min_rows)
        if not outcome.applied:
            noun = "row" if self.min_rows == 1 else "rows"
            self._set_status(f"At least {self.min_rows} {noun} required", 2)
            return False
        position = index % len(self.rows) + 1
        self.undo_mgr.push_undo()
        self._commit(outcome.rows)
        self._set_status(f"Removed row {position}", 2)
        return True

    def update_cell(self, index: int, field_key: str, value) -> bool:
        if self._blocked_by_loading("edit"):
            return False
        patched = editable_rows.patch_field(self.rows, index, field_key, value)
        self.undo_mgr.push_undo()
        self._commit(patched)
        return True

    def commit_cell_text(self, index: int, field_key: str, text) -> bool:
        column = find_column(self.columns, field_key)
        if column is not None:
            values = [column.value_of(row) for row in self.rows]
        else:
            values = [read_field(row, field_key) for row in self.rows]
        try:
            value = coerce_cell_value(values, text)
        except ValueError:
            self._set_status(f"Invalid value for column '{field_key}'", 3)
            return False
        return self.update_cell(index, field_key, value)

    def cell_change_handler(self, index: int) -> Callable[[str, Any], None]:
        def on_change(field_key, value):
            self.update_cell(index, field_key, value)

        return on_change

    # ----- history -----
    def undo(self) -> bool:
        if self._blocked_by_loading("undo"):
            return False
        return self.undo_mgr.undo()

    def redo(self) -> bool:
        if self._blocked_by_loading("redo"):
            return False
        return self.undo_mgr.redo()

    # ----- rendering -----
    def render_row(self, index: int) -> list:
        row = self.rows[index]
        on_change = self.cell_change_handler(index)
        cells = []
        for col in self.columns:
            if isinstance(col, EditableColumn):
                cells.append(col.cell(row, index, on_change))
            else:
                cells.append(col.cell(row))
        return cells
