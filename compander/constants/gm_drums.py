"""General MIDI drum notes.

Standard percussion note numbers for channel 10 (0-indexed channel 9), as
used by the demo take.
"""

KICK_1 = 36
SNARE_1 = 38
HI_HAT_CLOSED = 42
