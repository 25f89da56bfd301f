"""Day-tab persistence in an .xlsx workbook.

One tab per local calendar date (YYYY-MM-DD), one row per table. Saves are a
whole-file read-modify-write with no locking: last writer wins.
"""
import logging
from pathlib import Path

from openpyxl import Workbook, load_workbook

from BackEnd.core.clock import local_today_str
from BackEnd.models.table_session import HEADERS, TableSession
from BackEnd.repos.session_store import SessionStore

log = logging.getLogger(__name__)


def open_workbook(path):
	"""Open the workbook at path. Raises on missing/corrupt files."""
	return load_workbook(Path(path))


def new_workbook():
	"""Empty workbook with no tabs (openpyxl's default sheet removed)."""
	wb = Workbook()
	wb.remove(wb.active)
	return wb


def write_day_tab(wb, sessions, today):
	"""Replace today's tab in place, or append it after the existing tabs."""
	if today in wb.sheetnames:
		position = wb.sheetnames.index(today)
		wb.remove(wb[today])
		ws = wb.create_sheet(title=today, index=position)
	else:
		ws = wb.create_sheet(title=today)
	ws.append(HEADERS)
	for session in sessions:
		ws.append(session.to_row(today))
	return ws


def write_workbook(wb, path):
	path = Path(path)
	path.parent.mkdir(parents=True, exist_ok=True)
	wb.save(path)


def read_day_tab(ws, count, default_rate):
	"""Parse a day-tab into exactly `count` sessions, ordered by table number.

	Tables without a row get fresh records; rows for unknown tables are dropped.
	"""
	rows = ws.iter_rows(values_only=True)
	header = next(rows, None)
	if not header:
		raise ValueError(f"Tab {ws.title!r} has no header row")
	header = [str(h).strip() if h is not None else "" for h in header]
	if "Table" not in header:
		raise ValueError(f"Tab {ws.title!r} has no Table column")

	by_number = {}
	for values in rows:
		if values is None or all(v is None or v == "" for v in values):
			continue
		session = TableSession.from_row(dict(zip(header, values)), default_rate)
		if not 1 <= session.table_number <= count:
			log.warning("Ignoring row for %s: only %d tables configured", session.label, count)
			continue
		by_number[session.table_number] = session

	return [by_number.get(n) or TableSession.fresh(n, default_rate) for n in range(1, count + 1)]


def load_or_initialize(path, count, default_rate, today=None):
	"""Return today's sessions, creating (and writing) a fresh tab if needed.

	Any failure to open the file is treated like a missing file: a new
	workbook is written to path. Nothing is raised for unreadable input.
	"""
	today = today or local_today_str()
	try:
		wb = open_workbook(path)
	except Exception as e:
		log.warning("Workbook %s unreadable (%s); initializing a fresh one", path, e)
		return _initialize(new_workbook(), path, count, default_rate, today)

	if today not in wb.sheetnames:
		log.info("No tab for %s in %s; adding one", today, path)
		return _initialize(wb, path, count, default_rate, today)

	try:
		sessions = read_day_tab(wb[today], count, default_rate)
	except Exception as e:
		log.warning("Tab %s in %s could not be parsed (%s); rebuilding it", today, path, e)
		return _initialize(wb, path, count, default_rate, today)

	log.info("Loaded %d table sessions from %s [%s]", len(sessions), path, today)
	return sessions


def _initialize(wb, path, count, default_rate, today):
	sessions = SessionStore.fresh(count, default_rate).all()
	write_day_tab(wb, sessions, today)
	try:
		write_workbook(wb, path)
	except OSError:
		# Nothing on disk yet; the in-memory sessions still work until the next save
		log.exception("Could not write initial workbook %s", path)
	else:
		log.info("%s has been initialized [%s]", path, today)
	return sessions


def save_day(path, sessions, today=None):
	"""Rewrite today's tab with every session and save the whole file.

	OSError from the write propagates to the caller.
	"""
	today = today or local_today_str()
	try:
		wb = open_workbook(path)
	except Exception as e:
		log.warning("Workbook %s unreadable on save (%s); writing a new one", path, e)
		wb = new_workbook()
	write_day_tab(wb, sessions, today)
	write_workbook(wb, path)
	log.info("Session data saved to %s [%s]", path, today)
	return Path(path)
