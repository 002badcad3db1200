"""Pulse-based MIDI timing constants.

Note positions and durations in a take are counted in pulses, at **24 pulses
per quarter note** (PPQN = 24).
"""

MIDI_SIXTEENTH_NOTE = 6
MIDI_EIGHTH_NOTE = 12
MIDI_QUARTER_NOTE = 24
