"""Hyprland IPC operations interface (hyprctl)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class Monitor:
    """A connected output as reported by `hyprctl monitors -j`."""

    name: str
    width: int
    height: int
    refresh_rate: float
    x: int
    y: int
    scale: float

    @property
    def mode(self) -> str:
        """Mode string in hyprctl's `WxH@R` format."""
        return f"{self.width}x{self.height}@{round(self.refresh_rate)}"

    @property
    def position(self) -> str:
        return f"{self.x}x{self.y}"


class Hyprctl(ABC):
    """Abstract interface for talking to a running Hyprland instance."""

    @abstractmethod
    def get_monitors(self) -> list[Monitor]:
        """List connected monitors in Hyprland's order (first is primary)."""
        ...

    @abstractmethod
    def set_keyword(self, keyword: str, value: str) -> None:
        """Set a config keyword at runtime (`hyprctl keyword KEY VALUE`)."""
        ...

    @abstractmethod
    def dispatch(self, dispatcher: str, argument: str) -> str:
        """Run a dispatcher and return hyprctl's reply ("ok" on success)."""
        ...
