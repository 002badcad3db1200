"""
Driving compander from your own editor.

Any object with ``active_editor()``, ``begin_undo()`` and ``end_undo()`` can
act as the host, as long as its editor's ``take`` offers ``count_notes()``,
``get_note()`` and ``set_velocity()``. This example wraps a plain list of
note dictionaries, the sort of thing a piano-roll widget might keep.
"""

import logging

import compander
import compander.take


logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class ListTake:

	"""Adapts a list of note dicts to the note sequence protocol."""

	def __init__ (self, rows: list) -> None:

		self.rows = rows


	def count_notes (self) -> int:

		return len(self.rows)


	def get_note (self, index: int) -> compander.take.NoteInfo:

		row = self.rows[index]
		return compander.take.NoteInfo(selected=row["selected"], pitch=row["pitch"], velocity=row["velocity"])


	def set_velocity (self, index: int, velocity: int) -> None:

		self.rows[index]["velocity"] = velocity


class PianoRoll:

	"""A one-window editor that keeps a text log instead of real undo."""

	def __init__ (self, rows: list) -> None:

		self.take = ListTake(rows)
		self.history: list = []


	def active_editor (self) -> "PianoRoll":

		return self


	def begin_undo (self) -> None:

		self.history.append([dict(row) for row in self.take.rows])


	def end_undo (self, description: str) -> None:

		logger.info(f"Undo point: {description}")


rows = [
	{"pitch": 60, "velocity": 40, "selected": True},
	{"pitch": 60, "velocity": 60, "selected": True},
	{"pitch": 60, "velocity": 80, "selected": True},
	{"pitch": 67, "velocity": 120, "selected": True},
	{"pitch": 67, "velocity": 20, "selected": False},
]

roll = PianoRoll(rows)

compander.run(roll, pitch_rate=50, global_rate=25)

for row in rows:
	logger.info(f"pitch {row['pitch']:3d}  velocity {row['velocity']:3d}{'' if row['selected'] else '  (not selected)'}")
