import os
from pathlib import Path

from BackEnd.core import config

def user_data_dir(app_name="PoolTableTracker"):
	"""Return per-user data dir (Windows/macOS/Linux)."""
	if os.name == "nt":
		base = os.environ.get("LOCALAPPDATA", os.path.expanduser("~\\AppData\\Local"))
	elif os.name == "posix":
		base = os.environ.get("XDG_DATA_HOME", os.path.expanduser("~/.local/share"))
	else:
		base = os.path.expanduser("~")
	path = Path(base) / app_name
	path.mkdir(parents=True, exist_ok=True)
	return path

def workbook_path():
	"""Return Path to the sessions workbook.

	POOL_WORKBOOK_PATH wins when set; otherwise the workbook lives in the user data dir.
	"""
	if config.WORKBOOK_PATH:
		return Path(config.WORKBOOK_PATH).expanduser()
	return user_data_dir() / config.WORKBOOK_NAME

def log_path():
	"""Return Path to tracker.log inside user data dir."""
	return user_data_dir() / "tracker.log"
