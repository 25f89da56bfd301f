from dataclasses import fields, replace

from BackEnd.models.table_session import TableSession

_FIELDS = {f.name for f in fields(TableSession)}


class SessionStore:
	"""Ordered in-memory table sessions. Index i holds table number i + 1."""

	def __init__(self, sessions=None):
		self._sessions = list(sessions or [])

	@classmethod
	def fresh(cls, count, default_rate):
		return cls(TableSession.fresh(n, default_rate) for n in range(1, count + 1))

	def __len__(self):
		return len(self._sessions)

	def all(self):
		"""Snapshot of every session, in table order."""
		return list(self._sessions)

	def get(self, index):
		if not 0 <= index < len(self._sessions):
			raise IndexError(f"No table at index {index}")
		return self._sessions[index]

	def update(self, index, **changes):
		"""Replace the named fields of one session, keeping the rest. Returns the new record."""
		current = self.get(index)
		unknown = set(changes) - _FIELDS
		if unknown:
			raise TypeError(f"Unknown session fields: {sorted(unknown)}")
		if "table_number" in changes and changes["table_number"] != current.table_number:
			raise ValueError("table_number cannot change")
		updated = replace(current, **changes)
		self._sessions[index] = updated
		return updated
