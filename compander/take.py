import dataclasses
import typing

import mido

import compander.constants.velocity


@dataclasses.dataclass
class Note:

	"""
	Represents a single MIDI note event inside a take.
	"""

	position: int
	pitch: int
	velocity: int
	duration: int
	channel: int = 0
	selected: bool = False


class NoteInfo (typing.NamedTuple):

	"""
	Read-only snapshot of the note fields the compressor consumes.
	"""

	selected: bool
	pitch: int
	velocity: int


def _check_note (pitch: int, velocity: int, channel: int) -> None:

	"""Validate MIDI data bytes by building the equivalent note_on message."""

	mido.Message('note_on', channel=channel, note=pitch, velocity=velocity)


class Take:

	"""
	An editable sequence of note events.

	Notes are addressed by their index in the take, which is the identifier
	the compressor passes back to ``set_velocity()``.
	"""

	def __init__ (self, name: str = "") -> None:

		"""
		Initialize an empty take.
		"""

		self.name = name
		self.notes: typing.List[Note] = []


	def add_note (self, position: int, pitch: int, velocity: int, duration: int, channel: int = 0, selected: bool = False) -> int:

		"""
		Append a note at a pulse position and return its identifier.
		"""

		if position < 0:
			raise ValueError("Note position cannot be negative")

		if duration <= 0:
			raise ValueError("Note duration must be positive")

		_check_note(pitch, velocity, channel)

		self.notes.append(
			Note(
				position = position,
				pitch = pitch,
				velocity = velocity,
				duration = duration,
				channel = channel,
				selected = selected
			)
		)

		return len(self.notes) - 1


	def add_sequence (self, pitches: typing.List[int], velocities: typing.List[int], step_duration: int, note_duration: int = 6, selected: bool = True) -> typing.List[int]:

		"""
		Add one note per step, pairing pitches and velocities in order.
		"""

		if len(pitches) != len(velocities):
			raise ValueError(f"Got {len(pitches)} pitches but {len(velocities)} velocities")

		return [
			self.add_note(
				position = i * step_duration,
				pitch = pitch,
				velocity = velocity,
				duration = note_duration,
				selected = selected
			)
			for i, (pitch, velocity) in enumerate(zip(pitches, velocities))
		]


	def count_notes (self) -> int:

		"""Return the number of note events in the take."""

		return len(self.notes)


	def get_note (self, index: int) -> NoteInfo:

		"""
		Return the selection flag, pitch and velocity of one note.
		"""

		note = self._note(index)

		return NoteInfo(selected=note.selected, pitch=note.pitch, velocity=note.velocity)


	def set_velocity (self, index: int, velocity: int) -> None:

		"""
		Rewrite one note's velocity in place.

		Pitch, timing, channel and selection are left untouched.

		Raises:
			IndexError: If no note has this identifier.
			ValueError: If the velocity is outside 0-127.
		"""

		note = self._note(index)

		if not compander.constants.velocity.MIN_VELOCITY <= velocity <= compander.constants.velocity.MAX_VELOCITY:
			raise ValueError(f"Velocity {velocity} for note {index} is outside 0-127")

		_check_note(note.pitch, velocity, note.channel)

		note.velocity = velocity


	def select (self, indices: typing.Iterable[int], selected: bool = True) -> None:

		"""Set the selection flag on the given notes."""

		for index in indices:
			self._note(index).selected = selected


	def select_all (self, selected: bool = True) -> None:

		"""Select (or deselect) every note in the take."""

		for note in self.notes:
			note.selected = selected


	def velocities (self) -> typing.List[int]:

		"""Return every note's velocity in take order."""

		return [note.velocity for note in self.notes]


	def _note (self, index: int) -> Note:

		if not 0 <= index < len(self.notes):
			raise IndexError(f"Take '{self.name}' has no note {index}")

		return self.notes[index]
