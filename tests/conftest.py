import typing

import pytest

import compander.host
import compander.take


class RecordingTake (compander.take.Take):

	"""Take that records every velocity write for assertions."""

	def __init__ (self, name: str = "") -> None:

		"""Start with an empty write log."""

		super().__init__(name=name)
		self.writes: typing.List[typing.Tuple[int, int]] = []


	def set_velocity (self, index: int, velocity: int) -> None:

		"""Log the write, then apply it."""

		self.writes.append((index, velocity))
		super().set_velocity(index, velocity)


class FailingTake (compander.take.Take):

	"""Take whose velocity writes always fail."""

	def set_velocity (self, index: int, velocity: int) -> None:

		"""Refuse every write."""

		raise RuntimeError("Take is locked")


class FakeEditor:

	"""Minimal editor stub holding an optional take."""

	def __init__ (self, take: typing.Optional[compander.take.Take] = None) -> None:

		"""Store the take (None for an editor with nothing open)."""

		self.take = take


class FakeHost:

	"""Host stub that records undo block calls."""

	def __init__ (self, editor: typing.Optional[FakeEditor] = None) -> None:

		"""Store the editor (None for no active editor)."""

		self.editor = editor
		self.calls: typing.List[typing.Tuple[str, ...]] = []


	def active_editor (self) -> typing.Optional[FakeEditor]:

		"""Return the stored editor."""

		return self.editor


	def begin_undo (self) -> None:

		"""Record the block opening."""

		self.calls.append(("begin",))


	def end_undo (self, description: str) -> None:

		"""Record the block closing with its description."""

		self.calls.append(("end", description))


def _build_take (notes: typing.Sequence[typing.Tuple[int, int]], selected: bool = True, take_class: typing.Type[compander.take.Take] = RecordingTake) -> compander.take.Take:

	"""Build a take from (pitch, velocity) pairs, one note per sixteenth."""

	take = take_class(name="test")

	for i, (pitch, velocity) in enumerate(notes):
		take.add_note(position=i * 6, pitch=pitch, velocity=velocity, duration=6, selected=selected)

	return take


@pytest.fixture
def make_take () -> typing.Callable[..., compander.take.Take]:

	"""Factory for recording takes built from (pitch, velocity) pairs."""

	return _build_take


@pytest.fixture
def failing_take () -> compander.take.Take:

	"""A selected two-note take that rejects every write."""

	return _build_take([(60, 40), (60, 80)], take_class=FailingTake)


@pytest.fixture
def host () -> compander.host.EditorHost:

	"""An in-memory host with no editor open."""

	return compander.host.EditorHost()


@pytest.fixture
def fake_host () -> typing.Callable[..., FakeHost]:

	"""Factory for recording hosts. Pass ``take=None`` for an empty editor, or ``editor=False`` for no editor."""

	def _make (take: typing.Optional[compander.take.Take] = None, editor: bool = True) -> FakeHost:
		return FakeHost(editor=FakeEditor(take) if editor else None)

	return _make
