"""No-op clipboard wrapper for dry-run mode."""

import click

from hyprdots.cli.output import user_output
from hyprdots.core.clipboard.abc import ClipEntry, Clipboard
from hyprdots.core.clipboard.real import PASTE_COMMAND


class DryRunClipboard(Clipboard):
    """Wrapper that reads the real history but prints copy and paste instead."""

    def __init__(self, wrapped: Clipboard) -> None:
        self._wrapped = wrapped

    def history(self) -> list[ClipEntry]:
        return self._wrapped.history()

    def decode(self, entry: ClipEntry) -> bytes:
        return self._wrapped.decode(entry)

    def copy(self, data: bytes) -> None:
        _announce(f"Would copy {len(data)} byte(s) to the clipboard")

    def paste(self) -> None:
        _announce("Would run: " + " ".join(PASTE_COMMAND))


def _announce(message: str) -> None:
    user_output(click.style("[DRY RUN] ", fg="yellow") + message)
