"""Cycle the default audio output between configured sinks."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from hyprdots.core.audio.abc import AudioSystem, Sink
from hyprdots.core.errors import AudioError
from hyprdots.core.notifier import Notifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OutputSwitch:
    sink: Sink
    moved_streams: int


def select_sinks(sinks: Sequence[Sink], patterns: Sequence[str]) -> list[Sink]:
    """Sinks to cycle through, in pattern order.

    Each pattern picks the first sink whose name or description contains it.
    With no patterns every sink takes part, in the order the server lists them.
    """
    if not patterns:
        return list(sinks)
    selected: list[Sink] = []
    for pattern in patterns:
        match = next((s for s in sinks if pattern in s.name or pattern in s.description), None)
        if match is None:
            logger.debug("No audio output matches %r", pattern)
        elif match not in selected:
            selected.append(match)
    return selected


def next_sink(candidates: Sequence[Sink], current_name: str | None) -> Sink:
    """The candidate after the current default; the first one if the default is elsewhere."""
    for position, sink in enumerate(candidates):
        if sink.name == current_name:
            return candidates[(position + 1) % len(candidates)]
    return candidates[0]


def switch_output(
    audio: AudioSystem, notifier: Notifier, *, patterns: Sequence[str]
) -> OutputSwitch:
    """Make the next configured sink the default and move playing streams to it.

    Raises:
        AudioError: If fewer than two configured outputs are connected
    """
    candidates = select_sinks(audio.list_sinks(), patterns)
    if len(candidates) < 2:
        wanted = ", ".join(patterns) if patterns else "any two outputs"
        raise AudioError(
            f"Need two connected audio outputs to switch between ({wanted}); "
            f"found {len(candidates)}"
        )

    target = next_sink(candidates, audio.get_default_sink())
    logger.info("Switching audio output to %s", target.name)
    audio.set_default_sink(target.name)

    streams = audio.list_sink_inputs()
    for stream in streams:
        audio.move_sink_input(stream, target.name)

    notifier.notify("Audio Output", f"Switched to {target.description}")
    return OutputSwitch(sink=target, moved_streams=len(streams))
