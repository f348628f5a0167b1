"""Tests for FakeAudioSystem test infrastructure."""

from hyprdots.core.audio.abc import Sink
from tests.fakes.audio import FakeAudioSystem


def test_set_default_sink_changes_reported_default() -> None:
    audio = FakeAudioSystem(sinks=[Sink(index=1, name="a", description="A")], default_sink="a")

    audio.set_default_sink("b")

    assert audio.get_default_sink() == "b"
    assert audio.set_default_calls == ["b"]


def test_move_sink_input_is_only_recorded() -> None:
    audio = FakeAudioSystem(sink_inputs=[3])

    audio.move_sink_input(3, "b")

    assert audio.list_sink_inputs() == [3]
    assert audio.move_calls == [(3, "b")]
