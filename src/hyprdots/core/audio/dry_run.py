"""No-op audio wrapper for dry-run mode.

Queries go to the real sound server; changes print the pactl command that
would run.
"""

from collections.abc import Sequence

import click

from hyprdots.cli.output import user_output
from hyprdots.core.audio.abc import AudioSystem, Sink


class DryRunAudioSystem(AudioSystem):
    """Wrapper that prints pactl changes instead of executing them."""

    def __init__(self, wrapped: AudioSystem) -> None:
        self._wrapped = wrapped

    def list_sinks(self) -> list[Sink]:
        return self._wrapped.list_sinks()

    def get_default_sink(self) -> str | None:
        return self._wrapped.get_default_sink()

    def set_default_sink(self, sink_name: str) -> None:
        _announce(("pactl", "set-default-sink", sink_name))

    def list_sink_inputs(self) -> list[int]:
        return self._wrapped.list_sink_inputs()

    def move_sink_input(self, input_index: int, sink_name: str) -> None:
        _announce(("pactl", "move-sink-input", str(input_index), sink_name))


def _announce(cmd: Sequence[str]) -> None:
    user_output(click.style("[DRY RUN] ", fg="yellow") + "Would run: " + " ".join(cmd))
