class EditableTableUndo:
    """Manages undo/redo stacks of row-list snapshots for EditableTable."""

    def __init__(self, table, max_depth: int = 50):
        self.table = table
        self.max_depth = max(1, max_depth)
        self.undo_stack: list[list] = []
        self.redo_stack: list[list] = []

    # ---------- snapshots ----------
    def snapshot_state(self):
        # rows are replaced, never edited in place, so a shallow copy is enough
        return list(self.table.rows)

    def _trim(self, stack):
        if len(stack) > self.max_depth:
            stack.pop(0)

    # ---------- stack helpers ----------
    def push_undo(self):
        self.undo_stack.append(self.snapshot_state())
        self._trim(self.undo_stack)
        self.redo_stack.clear()

    def reset(self):
        self.undo_stack.clear()
        self.redo_stack.clear()

    # ---------- undo/redo ----------
    def undo(self):
        if not self.undo_stack:
            self.table._set_status("Nothing to undo", 2)
            return False
        self.redo_stack.append(self.snapshot_state())
        self._trim(self.redo_stack)
        self.table._restore_rows(self.undo_stack.pop())
        remaining = len(self.undo_stack)
        self.table._set_status(
            f"Undone ({remaining} more)" if remaining else "Undone", 2
        )
        return True

    def redo(self):
        if not self.redo_stack:
            self.table._set_status("Nothing to redo", 2)
            return False
        self.undo_stack.append(self.snapshot_state())
        self._trim(self.undo_stack)
        self.table._restore_rows(self.redo_stack.pop())
        remaining = len(self.redo_stack)
        self.table._set_status(
            f"Redone ({remaining} more)" if remaining else "Redone", 2
        )
        return True
