import logging

from BackEnd.core import config
from BackEnd.core.paths import log_path

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

def configure_logging(level=None, log_file=None):
	"""Console + file logging for the whole app. Call once at startup."""
	level = level or config.LOG_LEVEL
	unknown = None
	if not isinstance(level, int):
		level = str(level).upper()
		if not isinstance(logging.getLevelName(level), int):
			unknown, level = level, "INFO"
	logging.basicConfig(level=level, format=LOG_FORMAT)
	if unknown:
		logging.warning("Unknown log level %r, using INFO", unknown)

	# File log so a packaged build (no console) still leaves a trail
	try:
		target = log_file or log_path()
		file_handler = logging.FileHandler(target, mode="a", encoding="utf-8")
		file_handler.setLevel(level)
		file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
		logging.getLogger().addHandler(file_handler)
		logging.info("File logging enabled: %s", target)
	except OSError as e:
		logging.warning("Could not set up file logging: %s", e)
