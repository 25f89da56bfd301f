import logging
import time
from functools import partial

from PySide6.QtCore import QObject, Qt, QTimer, Signal

from BackEnd.core.clock import utc_now
from BackEnd.repos import workbook_repo
from BackEnd.services.fee_calc import compute_fees, parse_rate

log = logging.getLogger(__name__)


class TimerService(QObject):
	"""Per-table timers over a SessionStore.

	Each table has its own repeating QTimer, so starting or pausing one table
	never touches the others.
	"""
	tick = Signal(int, int)  # table index, elapsed seconds
	state_changed = Signal(int, str)  # table index, 'idle', 'running', 'paused', 'stopped'
	saved = Signal(str)  # workbook path
	save_failed = Signal(str)  # error message

	def __init__(self, store, workbook_path, clock=time.monotonic, parent=None):
		super().__init__(parent)
		self.store = store
		self.workbook_path = workbook_path
		self._clock = clock
		self._timers = {}  # table index -> QTimer
		self._marks = {}  # table index -> clock reading of the last credited second

	def _timer_for(self, index):
		timer = self._timers.get(index)
		if timer is None:
			timer = QTimer(self)
			timer.setInterval(1000)
			timer.setTimerType(Qt.TimerType.PreciseTimer)
			timer.timeout.connect(partial(self._on_tick, index))
			self._timers[index] = timer
		return timer

	def _halt(self, index):
		timer = self._timers.get(index)
		if timer is not None:
			timer.stop()
		self._marks.pop(index, None)

	def is_ticking(self, index):
		timer = self._timers.get(index)
		return timer is not None and timer.isActive()

	def start(self, index):
		"""Start or resume a table. Elapsed time is kept; start_time is refreshed."""
		session = self.store.get(index)
		if session.active:
			return
		self.store.update(index, start_time=utc_now(), active=True)
		self._marks[index] = self._clock()
		self._timer_for(index).start()
		log.info("%s started at %s/h (elapsed %ss)", session.label, session.hourly_rate, session.elapsed_sec)
		self.state_changed.emit(index, 'running')

	def pause(self, index):
		session = self.store.get(index)
		if not session.active:
			return
		self._halt(index)
		self.store.update(index, active=False)
		log.info("%s paused at %ss", session.label, session.elapsed_sec)
		self.state_changed.emit(index, 'paused')

	def stop(self, index):
		"""Stop a table, bill its elapsed time and save every table to today's tab.

		Ignored for a table that was never started. Returns True if the save succeeded.
		"""
		session = self.store.get(index)
		if not session.can_stop:
			return False
		self._halt(index)
		fees = compute_fees(session.elapsed_sec, session.hourly_rate)
		self.store.update(index, active=False, total_fees=fees)
		log.info("%s stopped: %ss at %s/h = %.2f", session.label, session.elapsed_sec, session.hourly_rate, fees)
		self.state_changed.emit(index, 'stopped')
		return self.save()

	def save(self):
		try:
			path = workbook_repo.save_day(self.workbook_path, self.store.all())
		except OSError as e:
			log.exception("Saving sessions to %s failed", self.workbook_path)
			self.save_failed.emit(str(e))
			return False
		self.saved.emit(str(path))
		return True

	def set_player(self, index, name):
		self.store.update(index, player_name=name or "")

	def set_rate(self, index, text):
		"""Apply a user-entered hourly rate. Bad input keeps the previous rate and returns False."""
		try:
			rate = parse_rate(text)
		except ValueError as e:
			log.warning("Rejected hourly rate %r for table index %d: %s", text, index, e)
			return False
		self.store.update(index, hourly_rate=rate)
		return True

	def shutdown(self):
		"""Stop every timer without saving."""
		for index in list(self._timers):
			self._halt(index)

	def _on_tick(self, index):
		session = self.store.get(index)
		if not session.active:
			self._halt(index)
			return
		now = self._clock()
		mark = self._marks.setdefault(index, now)
		# Credit wall-clock seconds since the last credit, rounded to the nearest
		# second: a slightly early timeout still counts, a late or missed one
		# (sleep, busy loop) is not lost. mark only moves by whole seconds.
		credit = int(now - mark + 0.5)
		if credit <= 0:
			return
		self._marks[index] = mark + credit
		updated = self.store.update(index, elapsed_sec=session.elapsed_sec + credit)
		self.tick.emit(index, updated.elapsed_sec)
