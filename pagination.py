import math
from dataclasses import dataclass
from typing import Callable, Optional, Union

ELLIPSIS = "…"
DEFAULT_PAGE_SIZE_OPTIONS = [10, 50, 100]

PageItem = Union[int, str]


def compute_total_pages(total_items: int, page_size: int) -> int:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    return max(1, math.ceil(max(0, total_items) / page_size))


def compute_page_sequence(current: int, total: int) -> list[PageItem]:
    """Page numbers to show, with gaps bridged by a single ELLIPSIS.

    Page 1, the last page and every page within one of ``current`` are kept.
    """
    pages: list[PageItem] = []
    for page in range(1, total + 1):
        if page == 1 or page == total or current - 1 <= page <= current + 1:
            pages.append(page)
        elif pages[-1] != ELLIPSIS:
            pages.append(ELLIPSIS)
    return pages


def item_range(current: int, page_size: int, total_items: int) -> tuple[int, int]:
    """1-based inclusive (start, end) of the items on ``current``."""
    if total_items <= 0:
        return 0, 0
    start = (current - 1) * page_size + 1
    end = min(current * page_size, total_items)
    return start, end


@dataclass(frozen=True)
class PaginationState:
    current_page: int = 1
    page_size: int = 10
    total_items: int = 0

    def __post_init__(self):
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.current_page < 1:
            raise ValueError(f"current_page must be >= 1, got {self.current_page}")
        if self.total_items < 0:
            raise ValueError(f"total_items must be >= 0, got {self.total_items}")

    @property
    def total_pages(self) -> int:
        return compute_total_pages(self.total_items, self.page_size)


class Paginator:
    """Page cursor for a table surface; reports changes through callbacks."""

    def __init__(
        self,
        total_items: int,
        page_size: int = 10,
        on_page_change: Optional[Callable[[int], None]] = None,
        on_items_per_page_change: Optional[Callable[[int], None]] = None,
        page_size_options=None,
    ):
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size
        self.current_page = 1
        self.total_items = max(0, total_items)
        self.on_page_change = on_page_change
        self.on_items_per_page_change = on_items_per_page_change
        self.page_size_options = list(page_size_options or DEFAULT_PAGE_SIZE_OPTIONS)
        self._clamp()

    def _clamp(self):
        self.current_page = max(1, min(self.current_page, self.page_count))

    def _emit_page(self):
        if self.on_page_change is not None:
            self.on_page_change(self.current_page)

    def update_total_items(self, total_items: int):
        self.total_items = max(0, total_items)
        before = self.current_page
        self._clamp()
        if self.current_page != before:
            self._emit_page()

    def go_to(self, page: int):
        before = self.current_page
        self.current_page = page
        self._clamp()
        if self.current_page != before:
            self._emit_page()

    def next_page(self):
        if self.can_next:
            self.go_to(self.current_page + 1)

    def prev_page(self):
        if self.can_prev:
            self.go_to(self.current_page - 1)

    def set_page_size(self, page_size: int):
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.page_size = page_size
        if self.on_items_per_page_change is not None:
            self.on_items_per_page_change(page_size)
        # always back to the first page, even when already there
        self.current_page = 1
        self._emit_page()

    def page_sequence(self) -> list[PageItem]:
        return compute_page_sequence(self.current_page, self.page_count)

    def item_range(self) -> tuple[int, int]:
        return item_range(self.current_page, self.page_size, self.total_items)

    @property
    def can_prev(self) -> bool:
        return self.current_page > 1

    @property
    def can_next(self) -> bool:
        return self.current_page < self.page_count

    @property
    def page_start(self) -> int:
        return (self.current_page - 1) * self.page_size

    @property
    def page_end(self) -> int:
        return min(self.total_items, self.page_start + self.page_size)

    @property
    def page_count(self) -> int:
        return compute_total_pages(self.total_items, self.page_size)

    @property
    def state(self) -> PaginationState:
        return PaginationState(self.current_page, self.page_size, self.total_items)
