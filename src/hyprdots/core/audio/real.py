"""Production audio implementation using pactl on pipewire-pulse."""

import json
import logging
from typing import Any

from hyprdots.core.audio.abc import AudioSystem, Sink
from hyprdots.core.errors import AudioError
from hyprdots.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


def _load_list(payload: str, what: str) -> list[Any]:
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise AudioError(f"pactl returned invalid JSON for {what}: {e}") from e
    if not isinstance(data, list):
        raise AudioError(f"pactl {what} output is not a list")
    return data


def parse_sinks(payload: str) -> list[Sink]:
    """Parse `pactl --format=json list sinks` output.

    Raises:
        AudioError: If the payload is not the expected JSON list
    """
    sinks: list[Sink] = []
    for item in _load_list(payload, "sinks"):
        try:
            sinks.append(
                Sink(
                    index=int(item["index"]),
                    name=str(item["name"]),
                    description=str(item.get("description") or item["name"]),
                )
            )
        except (KeyError, TypeError, ValueError) as e:
            raise AudioError(f"Unexpected sink entry from pactl: {item!r}") from e
    return sinks


def parse_sink_inputs(payload: str) -> list[int]:
    """Parse `pactl --format=json list sink-inputs` output into stream indices.

    Raises:
        AudioError: If the payload is not the expected JSON list
    """
    try:
        return [int(item["index"]) for item in _load_list(payload, "sink-inputs")]
    except (KeyError, TypeError, ValueError) as e:
        raise AudioError(f"Unexpected sink-input entry from pactl: {e}") from e


class RealAudioSystem(AudioSystem):
    """Production implementation that shells out to pactl."""

    def list_sinks(self) -> list[Sink]:
        result = run_subprocess_with_context(
            ["pactl", "--format=json", "list", "sinks"],
            operation_context="list audio outputs",
        )
        return parse_sinks(result.stdout)

    def get_default_sink(self) -> str | None:
        result = run_subprocess_with_context(
            ["pactl", "get-default-sink"],
            operation_context="read the default audio output",
        )
        return result.stdout.strip() or None

    def set_default_sink(self, sink_name: str) -> None:
        run_subprocess_with_context(
            ["pactl", "set-default-sink", sink_name],
            operation_context=f"set the default audio output to {sink_name}",
        )

    def list_sink_inputs(self) -> list[int]:
        result = run_subprocess_with_context(
            ["pactl", "--format=json", "list", "sink-inputs"],
            operation_context="list playing audio streams",
        )
        return parse_sink_inputs(result.stdout)

    def move_sink_input(self, input_index: int, sink_name: str) -> None:
        logger.debug("Moving stream %d to %s", input_index, sink_name)
        run_subprocess_with_context(
            ["pactl", "move-sink-input", str(input_index), sink_name],
            operation_context=f"move audio stream {input_index} to {sink_name}",
        )
