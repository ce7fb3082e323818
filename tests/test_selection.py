import random

import pytest

from energy_breakdown.selection import SelectionState

COLUMNS = [f"Config {i:02d}" for i in range(40)]


def test_select_all_truncates_to_limit_in_table_order():
    state = SelectionState(COLUMNS)

    assert state.select_all() is True
    assert state.selected == tuple(COLUMNS[:32])
    assert not state.is_all_selected


def test_select_all_toggles_off_when_everything_is_selected():
    state = SelectionState(["Base", "Alt1", "Alt2"])

    state.select_all()
    assert state.is_all_selected
    state.select_all()
    assert state.selected == ()


def test_select_all_with_no_columns_is_noop():
    state = SelectionState([])
    assert state.select_all() is False
    assert state.selected == ()
    assert not state.is_all_selected


def test_toggle_keeps_interaction_order():
    state = SelectionState(["Base", "Alt1", "Alt2", "Alt3"])

    for column in ["Alt2", "Base", "Alt3"]:
        state.toggle(column)
    assert state.selected == ("Alt2", "Base", "Alt3")

    state.toggle("Base")
    assert state.selected == ("Alt2", "Alt3")


def test_toggle_is_its_own_inverse():
    state = SelectionState(COLUMNS, selected=["Config 05", "Config 01"])
    before = state.selected

    state.toggle("Config 10")
    state.toggle("Config 10")

    assert state.selected == before


def test_toggle_rejected_at_limit_is_noop_both_times():
    state = SelectionState(COLUMNS)
    state.select_all()
    before = state.selected

    assert state.toggle("Config 35") is False
    assert state.selected == before
    assert state.toggle("Config 35") is False
    assert state.selected == before
    assert not state.can_add("Config 35")


def test_remove_always_allowed_at_limit():
    state = SelectionState(COLUMNS)
    state.select_all()

    assert state.toggle("Config 00") is True
    assert len(state) == 31
    assert state.toggle("Config 39") is True
    assert state.selected[-1] == "Config 39"
    assert state.is_full


def test_toggle_unknown_column_is_ignored(caplog):
    state = SelectionState(["Base"])

    assert state.toggle("Nope") is False
    assert state.selected == ()
    assert "Nope" in caplog.text


def test_clear_empties_selection():
    state = SelectionState(["Base", "Alt1"], selected=["Alt1"])
    assert state.clear() is True
    assert state.selected == ()
    assert state.clear() is False


def test_size_never_exceeds_limit_under_random_actions():
    rng = random.Random(7)
    state = SelectionState(COLUMNS)
    for _ in range(2000):
        action = rng.random()
        if action < 0.05:
            state.select_all()
        elif action < 0.08:
            state.clear()
        else:
            state.toggle(rng.choice(COLUMNS))
        assert len(state) <= 32
        assert len(set(state.selected)) == len(state)


def test_custom_limit():
    state = SelectionState(["a", "b", "c"], limit=2)
    state.select_all()
    assert state.selected == ("a", "b")
    with pytest.raises(ValueError):
        SelectionState([], limit=0)


def test_reset_selects_all_available_up_to_limit():
    state = SelectionState()
    state.reset(COLUMNS[:5])
    assert state.selected == tuple(COLUMNS[:5])
    assert state.is_all_selected

    state.reset(COLUMNS)
    assert state.selected == tuple(COLUMNS[:32])


def test_filter_available_is_case_insensitive_substring():
    state = SelectionState(["Reference", "MEA + Heat Pumps", "CC-CaL", "Tail-end CaL"])
    state.toggle("Reference")

    assert state.filter_available("cal") == ["CC-CaL", "Tail-end CaL"]
    assert state.filter_available("  HEAT ") == ["MEA + Heat Pumps"]
    assert state.filter_available("") == list(state.available)
    assert state.filter_available(None) == list(state.available)
    assert state.filter_available("zzz") == []
    assert state.selected == ("Reference",)


def test_listeners_notified_only_on_change():
    state = SelectionState(["Base", "Alt1"])
    seen = []
    unsubscribe = state.subscribe(seen.append)

    state.toggle("Base")
    state.clear()
    state.clear()
    state.toggle("Missing")
    assert seen == [("Base",), ()]

    unsubscribe()
    state.toggle("Alt1")
    assert len(seen) == 2
