from datetime import datetime, timezone

import pytest

from BackEnd.models.table_session import TableSession, parse_table_label
from BackEnd.repos.session_store import SessionStore


def test_fresh_store_has_one_zeroed_session_per_table():
    store = SessionStore.fresh(5, 200)
    sessions = store.all()
    assert len(store) == 5
    assert [s.table_number for s in sessions] == [1, 2, 3, 4, 5]
    for s in sessions:
        assert s.player_name == ""
        assert s.hourly_rate == 200
        assert s.start_time is None
        assert s.elapsed_sec == 0
        assert s.total_fees == 0
        assert s.active is False


def test_update_replaces_only_named_fields():
    store = SessionStore.fresh(3, 200)
    store.update(1, player_name="Efren", elapsed_sec=42)
    s = store.get(1)
    assert s.player_name == "Efren"
    assert s.elapsed_sec == 42
    assert s.hourly_rate == 200
    assert s.table_number == 2
    # other tables untouched
    assert store.get(0).player_name == ""


def test_update_rejects_table_number_change_and_unknown_fields():
    store = SessionStore.fresh(2, 200)
    with pytest.raises(ValueError):
        store.update(0, table_number=9)
    with pytest.raises(TypeError):
        store.update(0, colour="green")


def test_get_out_of_range():
    store = SessionStore.fresh(2, 200)
    with pytest.raises(IndexError):
        store.get(2)
    with pytest.raises(IndexError):
        store.get(-1)


def test_all_returns_snapshot():
    store = SessionStore.fresh(2, 200)
    snapshot = store.all()
    snapshot.clear()
    assert len(store) == 2


def test_control_gating():
    s = TableSession.fresh(1, 200)
    assert (s.can_start, s.can_pause, s.can_stop) == (True, False, False)
    s.start_time = datetime(2026, 1, 1, tzinfo=timezone.utc)
    s.active = True
    assert (s.can_start, s.can_pause, s.can_stop) == (False, True, True)
    s.active = False
    assert (s.can_start, s.can_pause, s.can_stop) == (True, False, True)


def test_parse_table_label():
    assert parse_table_label("Table 3") == 3
    assert parse_table_label("Table 12") == 12
    assert parse_table_label(4) == 4
    with pytest.raises(ValueError):
        parse_table_label("Bar")

