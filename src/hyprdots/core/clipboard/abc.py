"""Clipboard history operations interface (cliphist, wl-clipboard, wtype)."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class ClipEntry:
    """One entry of the clipboard history as listed by `cliphist list`."""

    entry_id: str
    preview: str

    @property
    def line(self) -> str:
        """The entry in cliphist's own `<id>\\t<preview>` list format."""
        return f"{self.entry_id}\t{self.preview}"


class Clipboard(ABC):
    """Abstract interface for the clipboard history and the Wayland clipboard."""

    @abstractmethod
    def history(self) -> list[ClipEntry]:
        """List history entries, most recent first."""
        ...

    @abstractmethod
    def decode(self, entry: ClipEntry) -> bytes:
        """Return the full stored content of a history entry."""
        ...

    @abstractmethod
    def copy(self, data: bytes) -> None:
        """Put `data` on the Wayland clipboard."""
        ...

    @abstractmethod
    def paste(self) -> None:
        """Send Ctrl+V to the focused window."""
        ...
