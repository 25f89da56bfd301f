"""Runtime settings, read once from the environment at import time.

Every value has a default so the tracker runs without any setup.
"""
import logging
import os


def _env_int(name, default):
	try:
		value = int(os.environ.get(name, default))
	except (TypeError, ValueError):
		return default
	return value if value > 0 else default


def _env_float(name, default):
	try:
		value = float(os.environ.get(name, default))
	except (TypeError, ValueError):
		return default
	# rejects NaN too
	return value if value >= 0 else default


def _env_level(name, default):
	value = os.environ.get(name, default).strip().upper()
	# getLevelName maps known names to their int level
	return value if isinstance(logging.getLevelName(value), int) else default


# Number of physical tables. Fixed for the lifetime of the process.
TABLE_COUNT = _env_int("POOL_TABLE_COUNT", 5)
DEFAULT_HOURLY_RATE = _env_float("POOL_DEFAULT_RATE", 200.0)

WORKBOOK_NAME = os.environ.get("POOL_WORKBOOK_NAME", "KingsTableSessions.xlsx")
# Full path override; empty means "<user data dir>/<WORKBOOK_NAME>"
WORKBOOK_PATH = os.environ.get("POOL_WORKBOOK_PATH", "")

CURRENCY = os.environ.get("POOL_CURRENCY", "₱")
LOG_LEVEL = _env_level("POOL_LOG_LEVEL", "INFO")
