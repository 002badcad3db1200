import logging

import compander.compressor
import compander.constants
import compander.constants.velocity
import compander.host

logger = logging.getLogger(__name__)


def compress_take (take: compander.host.NoteSequence, pitch_rate: compander.compressor.Number, global_rate: compander.compressor.Number) -> None:

	"""
	Compress the take's selected notes by pitch, then across the whole selection.

	The pitch phase compresses each pitch group around its own mean, with the
	rate capped at 100 so loud and soft notes of one pitch never swap places.
	The global phase then compresses every selected note around the
	selection's mean, reading the velocities the pitch phase wrote. Its rate
	is used as given, without the cap. A zero rate skips its phase.

	Parameters:
		take: The note sequence to edit.
		pitch_rate: Per-pitch compression percentage (negative expands).
		global_rate: Whole-selection compression percentage (negative expands).
	"""

	if pitch_rate != 0:

		rate = compander.compressor.saturate(pitch_rate, None, compander.constants.velocity.MAX_PITCH_RATE)
		groups = compander.compressor.group_by_pitch(take)

		logger.debug(f"Pitch phase: {len(groups)} pitch groups at {rate}%")

		for velocities in groups.values():
			compander.compressor.compress_note_array(take, velocities, rate)

	if global_rate != 0:

		velocities = compander.compressor.selected_velocities(take)

		if len(velocities) > 1:
			logger.debug(f"Global phase: {len(velocities)} notes at {global_rate}%")
			compander.compressor.compress_note_array(take, velocities, global_rate)


def run (host: compander.host.Host, pitch_rate: compander.compressor.Number, global_rate: compander.compressor.Number, description: str = compander.constants.UNDO_DESCRIPTION) -> bool:

	"""
	Compress the selection in the host's active editor as one undoable edit.

	Returns ``False`` without touching anything when there is no active
	editor or the editor has no take, otherwise ``True``.
	"""

	editor = host.active_editor()

	if editor is None:
		logger.debug("No active editor - nothing to do")
		return False

	take = editor.take

	if take is None:
		logger.debug("Active editor has no take - nothing to do")
		return False

	host.begin_undo()

	try:
		compress_take(take, pitch_rate, global_rate)
	finally:
		host.end_undo(description)

	return True
