import sys
import time
from importlib.metadata import PackageNotFoundError, version

import pandas as pd

import config_paths
from columns import Column, EditableColumn
from data_table import BulkAction, DataTable, RowAction
from editable_table import EditableTable
from frame_rows import rows_from_frame
from pagination import Paginator
from status_bar import render_footer

try:
    __version__ = version("wardgrid")
except PackageNotFoundError:
    __version__ = "0.0.0"

USAGE = (
    "wardgrid - table grid engine demo\n\nUsage:\n"
    "  wardgrid [--page-size N]\n  wardgrid -v\n  wardgrid -h\n"
)
WIDTH = 78


class StatusLine:
    def __init__(self):
        self.status_msg = None
        self.status_msg_until = 0

    def set(self, msg, seconds=3):
        self.status_msg = msg
        self.status_msg_until = time.time() + seconds

    def context(self):
        return {"status_msg": self.status_msg, "status_until": self.status_msg_until}


def demo_patients() -> pd.DataFrame:
    return pd.DataFrame(
        [
            ("PAT-001", "Sarah Jenkins", 45, "Hypertension", "admitted", "2024-01-15"),
            ("PAT-002", "Michael Chen", 32, "Fracture", "discharged", "2024-01-14"),
            ("PAT-003", "Emily Davis", 28, "Diabetes Type 2", "observation", "2024-01-15"),
            ("PAT-004", "James Wilson", 56, "Cardiac Arrhythmia", "admitted", "2024-01-13"),
        ],
        columns=["id", "name", "age", "condition", "status", "lastVisit"],
    )


def _format_row(cells, widths):
    return " ".join(str("" if c is None else c).ljust(w)[:w] for c, w in zip(cells, widths))


def _parse_page_size(args, default):
    if "--page-size" not in args:
        return default
    idx = args.index("--page-size")
    try:
        size = int(args[idx + 1])
    except (IndexError, ValueError):
        raise SystemExit("--page-size needs a positive integer")
    if size <= 0:
        raise SystemExit("--page-size needs a positive integer")
    return size


def show_patients(cfg, page_size, out):
    status = StatusLine()
    columns = [
        Column("id", "ID", sortable=True, width="100px"),
        Column("name", "Patient", sortable=True, render=lambda v, row: f"{v} ({row['age']})"),
        Column("condition", "Condition", sortable=True),
        Column("status", "Status", render=lambda v, _row: str(v).capitalize()),
        Column("lastVisit", "Last Visit", align="right"),
    ]
    exported = []
    table = DataTable(
        columns,
        rows_from_frame(demo_patients()),
        row_key="id",
        selectable=True,
        bulk_actions=[BulkAction("Export", exported.extend, variant="primary")],
        actions=[RowAction("View", lambda row: None)],
        paginator=Paginator(0, page_size, page_size_options=cfg["PAGE_SIZE_OPTIONS"]),
        prune_stale_selection=cfg["PRUNE_STALE_SELECTION"],
        set_status=status.set,
    )
    table.sort_by("name")
    table.toggle_row("PAT-001")
    table.toggle_row("PAT-003")
    table.run_bulk_action("Export")

    widths = [9, 22, 20, 12, 11]
    out.write(_format_row([c.header for c in columns], widths).rstrip() + "\n")
    for row in table.visible_rows():
        mark = "x" if table.is_selected(table.row_key(row)) else " "
        out.write(f"[{mark}] " + _format_row(table.render_row(row), widths).rstrip() + "\n")
    pager = table.paginator
    out.write(
        render_footer(
            {
                "current_page": pager.current_page,
                "total_pages": pager.page_count,
                "total_items": pager.total_items,
                "page_size": pager.page_size,
                "selected_count": table.selected_count,
            },
            WIDTH,
        ).rstrip()
        + "\n"
    )
    out.write(render_footer(status.context(), WIDTH).rstrip() + "\n")


def show_invoice(cfg, out):
    status = StatusLine()
    counter = iter(range(3, 1000))
    columns = [
        EditableColumn("description", "Description", width="40%"),
        EditableColumn("quantity", "Qty", align="center"),
        EditableColumn("unitPrice", "Unit Price", align="right"),
        Column(
            "id",
            "Total",
            align="right",
            render=lambda _v, row: f"${row['quantity'] * row['unitPrice']:.2f}",
        ),
    ]
    table = EditableTable(
        columns,
        [
            {"id": "1", "description": "Medical consultation", "quantity": 1, "unitPrice": 150},
            {"id": "2", "description": "Blood test panel", "quantity": 2, "unitPrice": 45},
        ],
        create_row=lambda: {
            "id": str(next(counter)),
            "description": "",
            "quantity": 1,
            "unitPrice": 0,
        },
        show_row_numbers=True,
        add_label="Add item",
        max_rows=10,
        undo_max_depth=cfg["UNDO_MAX_DEPTH"],
        set_status=status.set,
    )
    table.add_row()
    table.update_cell(2, "description", "X-ray")
    table.commit_cell_text(2, "unitPrice", "80")

    widths = [4, 24, 5, 11, 10]
    out.write(_format_row(["#"] + [c.header for c in columns], widths).rstrip() + "\n")
    for index in range(len(table.rows)):
        cells = [table.row_number(index)] + table.render_row(index)
        out.write(_format_row(cells, widths).rstrip() + "\n")
    total = sum(r["quantity"] * r["unitPrice"] for r in table.rows)
    out.write(f"Total: ${total:.2f}\n")
    out.write(render_footer(status.context(), WIDTH).rstrip() + "\n")


def main():
    args = sys.argv[1:]

    if "-v" in args or "-V" in args:
        print(__version__)
        return

    if "-h" in args:
        print(USAGE)
        return

    cfg = config_paths.load_config()
    page_size = _parse_page_size(args, cfg["PAGE_SIZE"])
    show_patients(cfg, page_size, sys.stdout)
    sys.stdout.write("\n")
    show_invoice(cfg, sys.stdout)


if __name__ == "__main__":
    main()
