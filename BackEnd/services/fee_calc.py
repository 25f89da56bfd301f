import math
from decimal import Decimal, ROUND_HALF_UP

_CENT = Decimal("0.01")


def round2(value) -> float:
	"""Round half-up to two decimals."""
	return float(Decimal(str(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def compute_fees(elapsed_sec: int, hourly_rate: float) -> float:
	"""Whole duration billed at the given rate: round2(elapsed / 3600 * rate)."""
	return round2(elapsed_sec / 3600 * hourly_rate)


def parse_rate(text) -> float:
	"""
	Parse a user-entered hourly rate.
	Accepts "200", " 150.5 ", "1,200". Raises ValueError for anything that is
	empty, not a number, NaN/inf or negative.
	"""
	if text is None:
		raise ValueError("Rate is empty")
	s = str(text).strip().replace(",", "")
	if not s:
		raise ValueError("Rate is empty")
	value = float(s)
	if math.isnan(value) or math.isinf(value):
		raise ValueError("Invalid numeric rate")
	if value < 0:
		raise ValueError("Rate cannot be negative")
	return value


def fmt_money(value) -> str:
	"""Two-decimal string, e.g. 100 -> '100.00'."""
	return f"{round2(value):.2f}"
