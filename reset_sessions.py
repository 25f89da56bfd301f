"""
Reset saved table sessions.

With no options the whole workbook is deleted. --day drops a single
day-tab and keeps the others; the tracker writes a fresh tab for that date
the next time it starts on it.

    python reset_sessions.py                 # delete every day
    python reset_sessions.py --day 2026-03-14
    python reset_sessions.py --yes           # no confirmation prompt
"""

import argparse
import sys
from pathlib import Path

from BackEnd.core.paths import workbook_path
from BackEnd.repos import workbook_repo


def day_tabs(path):
    """Tab names in the workbook, or [] when it can't be read."""
    try:
        return workbook_repo.open_workbook(path).sheetnames
    except Exception:
        return []


def drop_day(path, day):
    """Remove one day-tab. The file is deleted when it was the last tab."""
    wb = workbook_repo.open_workbook(path)
    if day not in wb.sheetnames:
        return False
    if len(wb.sheetnames) == 1:
        Path(path).unlink()
        return True
    wb.remove(wb[day])
    workbook_repo.write_workbook(wb, path)
    return True


def build_parser():
    p = argparse.ArgumentParser(prog="reset_sessions.py", description="Delete saved pool table sessions.")
    p.add_argument("--file", default=None, help="Workbook path (default: the tracker's workbook)")
    p.add_argument("--day", help="Only drop this day-tab (YYYY-MM-DD)")
    p.add_argument("--yes", action="store_true", help="Don't ask for confirmation")
    return p


def main(argv=None, ask=input):
    args = build_parser().parse_args(argv)
    path = Path(args.file) if args.file else workbook_path()

    if not path.exists():
        print(f"No workbook at {path}. Nothing to reset.")
        return 0

    tabs = day_tabs(path)
    print(f"Workbook: {path}")
    print(f"Days saved: {', '.join(tabs) if tabs else '(unreadable)'}")

    if args.day and args.day not in tabs:
        print(f"No tab for {args.day}.")
        return 1

    what = f"the {args.day} sessions" if args.day else "ALL saved sessions"
    if not args.yes:
        answer = ask(f"Delete {what}? This cannot be undone. (yes/no): ")
        if answer.strip().lower() not in ("yes", "y"):
            print("Reset cancelled.")
            return 1

    try:
        if args.day:
            drop_day(path, args.day)
        else:
            path.unlink()
    except OSError as e:
        print(f"Reset failed: {e}")
        return 2
    print(f"Deleted {what}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
