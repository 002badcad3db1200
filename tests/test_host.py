import pytest

import compander.host
import compander.take


def _take () -> compander.take.Take:

	take = compander.take.Take()
	take.add_sequence(pitches=[60, 60], velocities=[40, 80], step_duration=6)

	return take


def test_no_editor_by_default (host) -> None:

	"""A fresh host has no active editor."""

	assert host.active_editor() is None


def test_open_and_close_editor (host) -> None:

	"""The opened editor becomes active until closed."""

	take = _take()
	editor = host.open_editor(take)

	assert host.active_editor() is editor
	assert editor.take is take

	host.close_editor()

	assert host.active_editor() is None


def test_editor_host_is_a_host (host) -> None:

	"""EditorHost satisfies the Host protocol."""

	assert isinstance(host, compander.host.Host)


def test_undo_restores_velocities (host) -> None:

	"""Undo puts back the velocities captured when the block opened."""

	take = _take()
	host.open_editor(take)

	host.begin_undo()
	take.set_velocity(0, 60)
	take.set_velocity(1, 60)
	host.end_undo("Flatten")

	assert [block.description for block in host.undo_history] == ["Flatten"]
	assert host.undo() == "Flatten"
	assert take.velocities() == [40, 80]
	assert host.undo_history == []


def test_undo_with_empty_history (host) -> None:

	"""Undo with nothing to undo returns None."""

	assert host.undo() is None


def test_begin_undo_requires_take (host) -> None:

	"""An undo block cannot be opened without a take being edited."""

	with pytest.raises(RuntimeError):
		host.begin_undo()

	host.open_editor(None)

	with pytest.raises(RuntimeError):
		host.begin_undo()


def test_undo_blocks_do_not_nest (host) -> None:

	"""Opening a second block before closing the first is an error."""

	host.open_editor(_take())
	host.begin_undo()

	with pytest.raises(RuntimeError):
		host.begin_undo()


def test_end_undo_without_begin (host) -> None:

	"""Closing a block that was never opened is an error."""

	with pytest.raises(RuntimeError):
		host.end_undo("Nothing")
