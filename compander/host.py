"""
The host editing surface.

Compander never talks to a real editor directly. Anything that can report an
active editor, hand over its take, and bracket edits in an undo block can
drive it - see ``Host``. ``EditorHost`` is the in-memory implementation used
by the command line and the test suite.
"""

import dataclasses
import logging
import typing

import compander.take

logger = logging.getLogger(__name__)


@typing.runtime_checkable
class NoteSequence (typing.Protocol):

	"""
	Protocol for an editable note sequence (a take).
	"""

	def count_notes (self) -> int:
		...

	def get_note (self, index: int) -> compander.take.NoteInfo:
		...

	def set_velocity (self, index: int, velocity: int) -> None:
		...


@typing.runtime_checkable
class Editor (typing.Protocol):

	"""
	Protocol for a note-editing surface. ``take`` is ``None`` when the editor
	has nothing editable open.
	"""

	take: typing.Optional[NoteSequence]


@typing.runtime_checkable
class Host (typing.Protocol):

	"""
	Protocol for the host application that owns editors and undo history.
	"""

	def active_editor (self) -> typing.Optional[Editor]:
		...

	def begin_undo (self) -> None:
		...

	def end_undo (self, description: str) -> None:
		...


@dataclasses.dataclass
class EditorWindow:

	"""
	An open editor in an ``EditorHost``.
	"""

	take: typing.Optional[compander.take.Take] = None


@dataclasses.dataclass
class UndoBlock:

	"""
	A closed undo block: its description and the velocities it replaced.
	"""

	description: str
	take: compander.take.Take
	velocities: typing.List[int]


class EditorHost:

	"""
	In-memory host with a single editor slot and a velocity undo history.
	"""

	def __init__ (self) -> None:

		"""
		Initialize a host with no open editor and an empty undo history.
		"""

		self._editor: typing.Optional[EditorWindow] = None
		self._pending: typing.Optional[typing.Tuple[compander.take.Take, typing.List[int]]] = None
		self.undo_history: typing.List[UndoBlock] = []


	def open_editor (self, take: typing.Optional[compander.take.Take] = None) -> EditorWindow:

		"""Open an editor on a take and make it the active one."""

		self._editor = EditorWindow(take=take)
		return self._editor


	def close_editor (self) -> None:

		"""Close the active editor, if any."""

		self._editor = None


	def active_editor (self) -> typing.Optional[EditorWindow]:

		"""Return the active editor, or ``None``."""

		return self._editor


	def begin_undo (self) -> None:

		"""
		Open an undo block by snapshotting the active take's velocities.

		Raises:
			RuntimeError: If a block is already open or no take is being edited.
		"""

		if self._pending is not None:
			raise RuntimeError("An undo block is already open")

		if self._editor is None or self._editor.take is None:
			raise RuntimeError("No take is open for editing")

		take = self._editor.take
		self._pending = (take, take.velocities())


	def end_undo (self, description: str) -> None:

		"""
		Close the open undo block under a human-readable description.
		"""

		if self._pending is None:
			raise RuntimeError("No undo block is open")

		take, velocities = self._pending
		self._pending = None

		self.undo_history.append(UndoBlock(description=description, take=take, velocities=velocities))
		logger.debug(f"Undo point: {description}")


	def undo (self) -> typing.Optional[str]:

		"""
		Restore the velocities replaced by the most recent undo block.

		Returns:
			The description of the undone block, or ``None`` if the history is empty.
		"""

		if not self.undo_history:
			return None

		block = self.undo_history.pop()

		for index, velocity in enumerate(block.velocities):
			if block.take.notes[index].velocity != velocity:
				block.take.set_velocity(index, velocity)

		logger.info(f"Undo: {block.description}")

		return block.description
