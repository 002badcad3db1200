import logging
import math
import typing

import compander.constants
import compander.constants.velocity

logger = logging.getLogger(__name__)


def prompt_rates (
	input_fn: typing.Optional[typing.Callable[[str], str]] = None,
	defaults: str = compander.constants.velocity.DEFAULT_RATES,
	labels: typing.Sequence[str] = compander.constants.PROMPT_LABELS,
	title: str = compander.constants.PROMPT_TITLE
) -> typing.Tuple[bool, str]:

	"""
	Ask the user for comma-separated compression percentages.

	An empty answer accepts ``defaults``. Ctrl+C or end of input cancels.

	Parameters:
		input_fn: Reads one line given a prompt (``input`` by default).
		defaults: Text used when the user just presses Enter.
		labels: One label per expected field.
		title: Heading printed above the prompt.

	Returns:
		``(True, text)`` on success, ``(False, "")`` when cancelled.
	"""

	if input_fn is None:
		input_fn = input

	print(f"\n{title}\n")

	try:
		text = input_fn(f"{','.join(labels)} [{defaults}]: ")
	except (EOFError, KeyboardInterrupt):
		print()
		return False, ""

	if not text.strip():
		text = defaults

	return True, text


def parse_rates (text: str, count: int = 2) -> typing.Optional[typing.Tuple[float, ...]]:

	"""Parse the first ``count`` comma-separated numbers from the prompt text.

	Fields beyond ``count`` are ignored, and whitespace around each field is
	allowed.

	Returns:
		A tuple of ``count`` floats, or ``None`` if a field is missing,
		empty, not a number, or not finite.
	"""

	fields = text.split(",")

	if len(fields) < count:
		logger.debug(f"Expected {count} rates, got {len(fields)}: {text!r}")
		return None

	rates = []

	for field in fields[:count]:

		try:
			value = float(field.strip())
		except ValueError:
			logger.debug(f"Not a number: {field!r}")
			return None

		if not math.isfinite(value):
			return None

		rates.append(value)

	return tuple(rates)
