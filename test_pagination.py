import pytest

from pagination import (
    ELLIPSIS,
    PaginationState,
    Paginator,
    compute_page_sequence,
    compute_total_pages,
    item_range,
)


@pytest.mark.parametrize(
    "current, total, expected",
    [
        (5, 10, [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]),
        (1, 5, [1, 2, 3, 4, 5]),
        (1, 10, [1, 2, ELLIPSIS, 10]),
        (10, 10, [1, ELLIPSIS, 9, 10]),
        (3, 10, [1, 2, 3, 4, ELLIPSIS, 10]),
        (1, 1, [1]),
        (1, 0, []),
        (2, 3, [1, 2, 3]),
    ],
)
def test_compute_page_sequence(current, total, expected):
    assert compute_page_sequence(current, total) == expected


@pytest.mark.parametrize("total", range(1, 15))
def test_page_sequence_bounds_and_no_double_ellipsis(total):
    for current in range(1, total + 1):
        seq = compute_page_sequence(current, total)
        assert seq[0] == 1
        assert seq[-1] == total
        for a, b in zip(seq, seq[1:]):
            assert not (a == ELLIPSIS and b == ELLIPSIS)


def test_total_pages_clamped_to_one():
    assert compute_total_pages(48, 10) == 5
    assert compute_total_pages(0, 10) == 1
    assert compute_total_pages(50, 10) == 5
    assert compute_total_pages(51, 10) == 6


def test_total_pages_rejects_bad_page_size():
    with pytest.raises(ValueError):
        compute_total_pages(10, 0)


def test_item_range():
    assert item_range(1, 10, 48) == (1, 10)
    assert item_range(5, 10, 48) == (41, 48)
    assert item_range(1, 10, 0) == (0, 0)


def test_pagination_state_validation():
    assert PaginationState(1, 10, 48).total_pages == 5
    with pytest.raises(ValueError):
        PaginationState(1, 0, 48)
    with pytest.raises(ValueError):
        PaginationState(0, 10, 48)


def test_scenario_48_items_page_size_10():
    pager = Paginator(48, page_size=10)
    assert pager.page_count == 5
    assert pager.page_sequence() == [1, 2, 3, 4, 5]


def test_navigation_guards():
    pager = Paginator(48, page_size=10)
    assert not pager.can_prev
    assert pager.can_next
    pager.prev_page()
    assert pager.current_page == 1
    pager.go_to(5)
    assert not pager.can_next
    pager.next_page()
    assert pager.current_page == 5


def test_go_to_clamps_and_reports_changes():
    pages = []
    pager = Paginator(48, page_size=10, on_page_change=pages.append)
    pager.go_to(99)
    pager.go_to(5)
    pager.go_to(0)
    assert pages == [5, 1]


def test_changing_page_size_resets_to_first_page():
    pages, sizes = [], []
    pager = Paginator(
        480, page_size=10, on_page_change=pages.append, on_items_per_page_change=sizes.append
    )
    pager.go_to(3)
    pager.set_page_size(50)
    assert pager.current_page == 1
    assert pager.page_size == 50
    assert sizes == [50]
    assert pages == [3, 1]


def test_update_total_items_reclamps():
    pager = Paginator(48, page_size=10)
    pager.go_to(5)
    pager.update_total_items(12)
    assert pager.current_page == 2
    assert (pager.page_start, pager.page_end) == (10, 12)
    assert pager.item_range() == (11, 12)


def test_state_snapshot_and_options():
    pager = Paginator(48, page_size=10)
    assert pager.state == PaginationState(1, 10, 48)
    assert pager.page_size_options == [10, 50, 100]
