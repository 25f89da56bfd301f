from datetime import datetime, timezone

def utc_now():
	"""Return current UTC time as an aware datetime (no microseconds)."""
	return datetime.now(timezone.utc).replace(microsecond=0)

def local_today_str():
	"""Return local date as YYYY-MM-DD string (used as the day-tab name)."""
	return datetime.now().date().isoformat()

def to_iso(dt):
	"""ISO8601 string for a datetime, or '' for None."""
	return dt.isoformat() if dt is not None else ""

def parse_iso(value):
	"""Parse an ISO8601 timestamp cell. Empty values give None.

	Naive timestamps are treated as UTC.
	"""
	if value is None:
		return None
	if isinstance(value, datetime):
		dt = value
	else:
		s = str(value).strip()
		if not s:
			return None
		dt = datetime.fromisoformat(s.replace("Z", "+00:00"))
	if dt.tzinfo is None:
		dt = dt.replace(tzinfo=timezone.utc)
	return dt

def fmt_hms(seconds: int) -> str:
	"""Format seconds as HH:MM:SS."""
	h = seconds // 3600
	m = (seconds % 3600) // 60
	s = seconds % 60
	return f"{h:02}:{m:02}:{s:02}"
