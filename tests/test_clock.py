from datetime import datetime, timezone

from BackEnd.core.clock import fmt_hms, local_today_str, parse_iso, to_iso


def test_fmt_hms():
    assert fmt_hms(0) == "00:00:00"
    assert fmt_hms(1800) == "00:30:00"
    assert fmt_hms(3725) == "01:02:05"


def test_today_tab_name_is_iso_date():
    today = local_today_str()
    assert datetime.strptime(today, "%Y-%m-%d").date().isoformat() == today


def test_parse_iso_variants():
    expected = datetime(2026, 3, 14, 18, 30, tzinfo=timezone.utc)
    assert parse_iso("2026-03-14T18:30:00+00:00") == expected
    assert parse_iso("2026-03-14T18:30:00Z") == expected
    assert parse_iso("2026-03-14T18:30:00") == expected
    assert parse_iso(datetime(2026, 3, 14, 18, 30)) == expected
    assert parse_iso("") is None
    assert parse_iso(None) is None


def test_to_iso():
    assert to_iso(None) == ""
    assert to_iso(datetime(2026, 3, 14, 18, 30, tzinfo=timezone.utc)) == "2026-03-14T18:30:00+00:00"
