import math
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from BackEnd.core.clock import parse_iso, to_iso
from BackEnd.services.fee_calc import fmt_money, parse_rate

# Column order of a day-tab
HEADERS = ["Date", "Table", "Player", "Hourly Rate", "Start Time", "Elapsed Time", "Total Fees"]

_LABEL_RE = re.compile(r"(\d+)")


def _non_negative(value, column) -> float:
	"""Numeric cell that must be finite and >= 0. Empty cells read as 0."""
	if value is None or str(value).strip() == "":
		return 0.0
	number = float(value)
	if not math.isfinite(number) or number < 0:
		raise ValueError(f"{column} must be a non-negative number, got {value!r}")
	return number


def table_label(table_number: int) -> str:
	return f"Table {table_number}"


def parse_table_label(label) -> int:
	"""'Table 3' -> 3. Plain numbers are accepted too."""
	if isinstance(label, int):
		return label
	m = _LABEL_RE.search(str(label or ""))
	if not m:
		raise ValueError(f"No table number in {label!r}")
	return int(m.group(1))


@dataclass
class TableSession:
	table_number: int
	player_name: str = ""
	hourly_rate: float = 200.0
	start_time: Optional[datetime] = None
	elapsed_sec: int = 0
	total_fees: float = 0.0
	active: bool = False

	@property
	def label(self) -> str:
		return table_label(self.table_number)

	@property
	def can_start(self) -> bool:
		return not self.active

	@property
	def can_pause(self) -> bool:
		return self.active

	@property
	def can_stop(self) -> bool:
		# Enabled once the table has ever been started, paused included
		return self.start_time is not None

	@property
	def state(self) -> str:
		if self.active:
			return "running"
		if self.start_time is None:
			return "idle"
		return "paused"

	@staticmethod
	def fresh(table_number: int, hourly_rate: float) -> "TableSession":
		return TableSession(table_number=table_number, hourly_rate=float(hourly_rate))

	def to_row(self, date_str: str) -> list:
		"""Row values in HEADERS order."""
		return [
			date_str,
			self.label,
			self.player_name or None,
			self.hourly_rate,
			to_iso(self.start_time) or None,
			int(self.elapsed_sec),
			fmt_money(self.total_fees),
		]

	@staticmethod
	def from_row(row: dict, default_rate: float) -> "TableSession":
		"""Build a session from a {header: value} mapping.

		A missing or unusable rate (negative, NaN, inf, text) falls back to
		default_rate; missing elapsed/fees become zero. Negative or non-finite
		elapsed/fees raise ValueError. Loaded sessions are never active.
		"""
		try:
			rate = parse_rate(row.get("Hourly Rate"))
		except ValueError:
			rate = default_rate
		elapsed = _non_negative(row.get("Elapsed Time"), "Elapsed Time")
		fees = _non_negative(row.get("Total Fees"), "Total Fees")
		return TableSession(
			table_number=parse_table_label(row.get("Table")),
			player_name=str(row.get("Player") or ""),
			hourly_rate=float(rate),
			start_time=parse_iso(row.get("Start Time")),
			elapsed_sec=int(elapsed),
			total_fees=fees,
			active=False,
		)
