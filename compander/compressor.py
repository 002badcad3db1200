"""
Velocity compression and expansion.

Every function here is pure apart from ``compress_note_array()``, which
writes its results back through the take it is given. Velocity mappings are
keyed by note identifier (the note's index in the take).
"""

import logging
import math
import typing

import compander.constants.velocity
import compander.host

logger = logging.getLogger(__name__)

Number = typing.Union[int, float]


def saturate (value: Number, low: typing.Optional[Number] = None, high: typing.Optional[Number] = None) -> Number:

	"""Keep a value within a range.

	Either bound may be ``None``, which leaves that side unlimited. Values
	already inside the range are returned unchanged.

	Parameters:
		value: The value to limit.
		low: Lower bound, or ``None`` to bypass.
		high: Upper bound, or ``None`` to bypass.
	"""

	if low is not None and value < low:
		return low

	if high is not None and value > high:
		return high

	return value


def round_half_away (number: float) -> int:

	"""
	Round to the nearest integer, with halves rounded away from zero.

	``round()`` rounds halves to even, so 62.5 and 63.5 would land on the same
	side. Here 63.5 -> 64, 62.5 -> 63 and -0.5 -> -1.
	"""

	if number >= 0:
		return math.floor(number + 0.5)

	return math.ceil(number - 0.5)


def group_by_pitch (take: compander.host.NoteSequence) -> typing.Dict[int, typing.Dict[int, int]]:

	"""Group the take's selected notes by pitch.

	Returns:
		A mapping of pitch to ``{note identifier: velocity}``. Unselected
		notes are left out, so a take with no selection gives ``{}``.
	"""

	groups: typing.Dict[int, typing.Dict[int, int]] = {}

	for index in range(take.count_notes()):

		note = take.get_note(index)

		if note.selected:
			groups.setdefault(note.pitch, {})[index] = note.velocity

	return groups


def selected_velocities (take: compander.host.NoteSequence) -> typing.Dict[int, int]:

	"""Return ``{note identifier: velocity}`` for every selected note, ungrouped."""

	velocities: typing.Dict[int, int] = {}

	for index in range(take.count_notes()):

		note = take.get_note(index)

		if note.selected:
			velocities[index] = note.velocity

	return velocities


def compress_velocities (velocities: typing.Mapping[int, int], rate: Number) -> typing.Dict[int, int]:

	"""
	Move each velocity toward (or away from) the collection's mean.

	Each note moves by ``rate`` percent of its distance from the mean, and the
	result is rounded half away from zero and clamped to 0-127.

	Parameters:
		velocities: Mapping of note identifier to velocity.
		rate: Compression percentage. 100 flattens every note to the mean,
			0 changes nothing, negative values expand. Values above 100
			make notes cross the mean, inverting their relative dynamics;
			no limit is applied here.

	Returns:
		Mapping of note identifier to new velocity. Empty input gives an
		empty mapping.

	Example:
		```python
		compress_velocities({0: 40, 1: 60, 2: 80}, 50)
		# {0: 50, 1: 60, 2: 70}
		```
	"""

	if not velocities:
		return {}

	mean = sum(velocities.values()) / len(velocities)

	result: typing.Dict[int, int] = {}

	for note_id, velocity in velocities.items():
		delta = (velocity - mean) * rate / 100

		# Huge rates overflow to +/-inf, which cannot be rounded; clamp first.
		result[note_id] = round_half_away(saturate(
			velocity - delta,
			compander.constants.velocity.MIN_VELOCITY,
			compander.constants.velocity.MAX_VELOCITY
		))

	return result


def compress_note_array (take: compander.host.NoteSequence, velocities: typing.Mapping[int, int], rate: Number) -> typing.Dict[int, int]:

	"""
	Compress a collection of notes and write the new velocities to the take.

	Only velocities are rewritten; every other note attribute is untouched.
	Returns the mapping that was written.
	"""

	new_velocities = compress_velocities(velocities, rate)

	for note_id, velocity in new_velocities.items():
		take.set_velocity(note_id, velocity)

	if new_velocities:
		logger.debug(
			"Compressed %d notes at %s%% around mean %.2f",
			len(new_velocities),
			rate,
			sum(velocities.values()) / len(velocities)
		)

	return new_velocities
