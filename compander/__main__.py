import argparse
import logging
import typing

import compander.config
import compander.constants
import compander.constants.gm_drums
import compander.constants.pulses
import compander.host
import compander.prompt
import compander.runner
import compander.take


logger = logging.getLogger(__name__)


def demo_take () -> compander.take.Take:

	"""
	Build a one-bar drum take with uneven dynamics, all notes selected.
	"""

	kick = compander.constants.gm_drums.KICK_1
	snare = compander.constants.gm_drums.SNARE_1
	hat = compander.constants.gm_drums.HI_HAT_CLOSED

	sixteenth = compander.constants.pulses.MIDI_SIXTEENTH_NOTE
	eighth = compander.constants.pulses.MIDI_EIGHTH_NOTE
	quarter = compander.constants.pulses.MIDI_QUARTER_NOTE

	take = compander.take.Take(name="demo")

	# Kick on every beat, hats on every eighth, snare on 2 and 4
	for i, velocity in enumerate([118, 96, 110, 84]):
		take.add_note(i * quarter, kick, velocity, sixteenth, selected=True)

	for i, velocity in enumerate([90, 52, 78, 40, 95, 60, 71, 33]):
		take.add_note(i * eighth, hat, velocity, sixteenth, selected=True)

	take.add_note(quarter, snare, 101, sixteenth, selected=True)
	take.add_note(3 * quarter, snare, 122, sixteenth, selected=True)

	# A ghost snare left out of the selection
	take.add_note(14 * sixteenth, snare, 30, sixteenth, selected=False)

	return take


def main (argv: typing.Optional[typing.Sequence[str]] = None) -> int:

	"""
	Prompt for compression rates and apply them to the demo take.
	"""

	parser = argparse.ArgumentParser(description="Compress or expand MIDI note velocities by pitch and globally")
	parser.add_argument("--config", default=compander.config.DEFAULT_CONFIG_PATH, help=f"YAML settings file (default: {compander.config.DEFAULT_CONFIG_PATH})")
	args = parser.parse_args(argv)

	settings = compander.config.load_config(args.config)
	logging.basicConfig(level=settings.log_level)

	take = demo_take()
	host = compander.host.EditorHost()
	host.open_editor(take)

	ok, text = compander.prompt.prompt_rates(
		defaults = settings.defaults,
		labels = compander.constants.PROMPT_LABELS[:settings.fields]
	)

	rates = compander.prompt.parse_rates(text, settings.fields) if ok else None

	if rates is None:
		logger.info("Cancelled - no notes changed")
		return 0

	pitch_rate = rates[0]
	global_rate = rates[1] if settings.fields == 2 else 0.0

	before = take.velocities()

	compander.runner.run(host, pitch_rate, global_rate, description=settings.undo_description)

	lines = [f"{settings.undo_description} (pitch {pitch_rate:g}%, global {global_rate:g}%)"]

	for note, old in zip(take.notes, before):
		marker = "" if note.selected else "  (not selected)"
		lines.append(f"  pulse {note.position:3d}  pitch {note.pitch:3d}  velocity {old:3d} -> {note.velocity:3d}{marker}")

	logger.info("\n".join(lines))

	return 0


if __name__ == "__main__":
	raise SystemExit(main())
