from table_selection import (
    CHECKED,
    INDETERMINATE,
    UNCHECKED,
    clear,
    get_selected_rows,
    header_checkbox_state,
    is_all_selected,
    is_partially_selected,
    ordered_keys,
    prune_selection,
    toggle_all,
    toggle_row,
)

KEYS = ["PAT-001", "PAT-002", "PAT-003", "PAT-004"]
ROWS = [{"id": key} for key in KEYS]


def _key(row):
    return row["id"]


def test_toggle_row_adds_then_removes():
    selected = toggle_row(frozenset(), "PAT-002")
    assert selected == {"PAT-002"}
    assert toggle_row(selected, "PAT-002") == frozenset()


def test_toggle_row_does_not_mutate_input():
    original = {"PAT-001"}
    toggle_row(original, "PAT-002")
    assert original == {"PAT-001"}


def test_partial_selection_scenario():
    selected = {"PAT-001", "PAT-003"}
    assert is_partially_selected(selected, KEYS)
    assert not is_all_selected(selected, KEYS)
    assert header_checkbox_state(selected, KEYS) == INDETERMINATE
    assert toggle_all(selected, KEYS) == frozenset(KEYS)


def test_toggle_all_from_full_clears():
    assert toggle_all(KEYS, KEYS) == frozenset()


def test_toggle_all_twice_returns_to_start():
    for start in (frozenset(), frozenset(KEYS)):
        assert toggle_all(toggle_all(start, KEYS), KEYS) == start


def test_empty_selection_predicates():
    assert not is_all_selected(frozenset(), KEYS)
    assert not is_partially_selected(frozenset(), KEYS)
    assert header_checkbox_state(frozenset(), KEYS) == UNCHECKED
    assert header_checkbox_state(KEYS, KEYS) == CHECKED
    assert not is_all_selected(frozenset(), [])


def test_clear():
    assert clear({"PAT-001"}) == frozenset()


def test_selected_rows_follow_row_order():
    selected = toggle_row(toggle_row(frozenset(), "PAT-004"), "PAT-001")
    assert get_selected_rows(ROWS, selected, _key) == [ROWS[0], ROWS[3]]


def test_select_all_materializes_every_row_in_order():
    assert get_selected_rows(ROWS, toggle_all(frozenset(), KEYS), _key) == ROWS


def test_prune_selection_drops_stale_keys():
    assert prune_selection({"PAT-001", "PAT-999"}, KEYS) == {"PAT-001"}


def test_ordered_keys_puts_stale_keys_last():
    selected = {"PAT-003", "PAT-001", "OLD-2", "OLD-1"}
    assert ordered_keys(selected, KEYS) == ["PAT-001", "PAT-003", "OLD-1", "OLD-2"]


def test_numeric_keys():
    keys = [1, 2, 3]
    assert toggle_all({2}, keys) == {1, 2, 3}
    assert ordered_keys({3, 1}, keys) == [1, 3]
