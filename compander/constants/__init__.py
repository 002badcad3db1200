"""Constants for Compander.

- ``compander.constants.velocity`` - MIDI velocity range and default rates
- ``compander.constants.pulses`` - Pulse-based note timing
- ``compander.constants.gm_drums`` - General MIDI drum note numbers

The undo and prompt strings below are shown to the user by the host.
"""

UNDO_DESCRIPTION = "MIDI: Each pitch compressed separately"

PROMPT_TITLE = "MIDI compression for each pitch"
PROMPT_LABELS = ("Pitch compression %", "Global compression %")
