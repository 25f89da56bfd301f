from openpyxl import load_workbook

import reset_sessions
from BackEnd.models.table_session import TableSession
from BackEnd.repos import workbook_repo


def make_workbook(path, *days):
    for day in days:
        workbook_repo.save_day(path, [TableSession(1, "P", 200.0, None, 60, 3.33)], today=day)


def test_drop_one_day_keeps_the_others(tmp_path):
    path = tmp_path / "sessions.xlsx"
    make_workbook(path, "2026-03-13", "2026-03-14")

    assert reset_sessions.main(["--file", str(path), "--day", "2026-03-13", "--yes"]) == 0

    assert load_workbook(path).sheetnames == ["2026-03-14"]


def test_dropping_last_day_deletes_file(tmp_path):
    path = tmp_path / "sessions.xlsx"
    make_workbook(path, "2026-03-14")

    assert reset_sessions.main(["--file", str(path), "--day", "2026-03-14", "--yes"]) == 0

    assert not path.exists()


def test_delete_all_after_confirmation(tmp_path):
    path = tmp_path / "sessions.xlsx"
    make_workbook(path, "2026-03-14")

    assert reset_sessions.main(["--file", str(path)], ask=lambda prompt: "y") == 0

    assert not path.exists()


def test_declined_confirmation_keeps_file(tmp_path):
    path = tmp_path / "sessions.xlsx"
    make_workbook(path, "2026-03-14")

    assert reset_sessions.main(["--file", str(path)], ask=lambda prompt: "no") == 1

    assert path.exists()


def test_unknown_day_and_missing_file(tmp_path):
    path = tmp_path / "sessions.xlsx"
    assert reset_sessions.main(["--file", str(path), "--yes"]) == 0

    make_workbook(path, "2026-03-14")
    assert reset_sessions.main(["--file", str(path), "--day", "2020-01-01", "--yes"]) == 1
    assert load_workbook(path).sheetnames == ["2026-03-14"]
