import dataclasses
import logging
import os
import typing

import yaml

import compander.constants
import compander.constants.velocity

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "compander.yaml"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclasses.dataclass
class Settings:

	"""
	User-adjustable defaults for the command line.

	``fields`` is 2 to ask for pitch and global rates, or 1 to ask for the
	pitch rate only (the global phase is then skipped).
	"""

	defaults: str = compander.constants.velocity.DEFAULT_RATES
	fields: int = 2
	undo_description: str = compander.constants.UNDO_DESCRIPTION
	log_level: str = "INFO"


def _section (config: typing.Dict[str, typing.Any], name: str) -> typing.Dict[str, typing.Any]:

	section = config.get(name) or {}

	if not isinstance(section, dict):
		raise ValueError(f"Config section '{name}' must be a mapping")

	return section


def load_config (config_path: str = DEFAULT_CONFIG_PATH) -> Settings:

	"""
	Load settings from a YAML file.

	A missing file is not an error: a warning is logged and the defaults are
	used. Sections or keys that are absent keep their defaults.

	Raises:
		yaml.YAMLError: If the file is not valid YAML.
		ValueError: If a section is not a mapping or a value is out of range.
	"""

	if not os.path.exists(config_path):
		logger.warning(f"Config file {config_path} not found. Using defaults.")
		return Settings()

	with open(config_path, 'r') as f:
		config = yaml.safe_load(f) or {}

	if not isinstance(config, dict):
		raise ValueError(f"Config file {config_path} must contain a mapping")

	prompt = _section(config, 'prompt')
	run = _section(config, 'run')
	log = _section(config, 'logging')

	fields = prompt.get('fields', 2)

	if isinstance(fields, bool) or fields not in (1, 2):
		raise ValueError(f"prompt.fields must be 1 or 2, got {fields!r}")

	if fields == 1:
		default_rates = compander.constants.velocity.DEFAULT_PITCH_ONLY_RATES
	else:
		default_rates = compander.constants.velocity.DEFAULT_RATES

	level = str(log.get('level', 'INFO')).upper()

	if level not in _LOG_LEVELS:
		raise ValueError(f"logging.level must be one of {', '.join(_LOG_LEVELS)}, got {level!r}")

	return Settings(
		defaults = str(prompt.get('defaults', default_rates)),
		fields = int(fields),
		undo_description = str(run.get('undo_description', compander.constants.UNDO_DESCRIPTION)),
		log_level = level
	)
