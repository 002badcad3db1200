"""MIDI velocity constants.

Velocity is the MIDI attack strength (0-127). These constants define the
legal range and the default compression rates offered to the user.
"""

# MIDI standard range
MIN_VELOCITY = 0
MAX_VELOCITY = 127

# Compression rates are percentages. Above this, a group's dynamics invert.
MAX_PITCH_RATE = 100

# Default prompt text
DEFAULT_RATES = "75,25"             # pitch compression %, global compression %
DEFAULT_PITCH_ONLY_RATES = "75"     # single-field prompt
