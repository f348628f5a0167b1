"""Audio output operations interface (PipeWire through pactl)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Sink:
    """An audio output as reported by `pactl list sinks`."""

    index: int
    name: str
    description: str


class AudioSystem(ABC):
    """Abstract interface for choosing where audio plays."""

    @abstractmethod
    def list_sinks(self) -> list[Sink]:
        ...

    @abstractmethod
    def get_default_sink(self) -> str | None:
        """Name of the current default sink, None if there is none."""
        ...

    @abstractmethod
    def set_default_sink(self, sink_name: str) -> None:
        ...

    @abstractmethod
    def list_sink_inputs(self) -> list[int]:
        """Indices of the streams that are currently playing."""
        ...

    @abstractmethod
    def move_sink_input(self, input_index: int, sink_name: str) -> None:
        """Move a playing stream to another sink."""
        ...
