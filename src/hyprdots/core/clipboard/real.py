"""Production clipboard implementation using cliphist, wl-copy and wtype."""

import logging
import subprocess

from hyprdots.core.clipboard.abc import ClipEntry, Clipboard
from hyprdots.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

PASTE_COMMAND = ("wtype", "-M", "ctrl", "-P", "v", "-m", "ctrl")


def parse_history(output: str) -> list[ClipEntry]:
    """Parse `cliphist list` output; lines without a numeric id are skipped."""
    entries: list[ClipEntry] = []
    for line in output.splitlines():
        entry_id, sep, preview = line.partition("\t")
        if not sep or not entry_id.isdigit():
            logger.debug("Skipping unexpected cliphist line %r", line)
            continue
        entries.append(ClipEntry(entry_id=entry_id, preview=preview))
    return entries


class RealClipboard(Clipboard):
    """Production implementation that shells out to the clipboard tools."""

    def history(self) -> list[ClipEntry]:
        result = run_subprocess_with_context(
            ["cliphist", "list"],
            operation_context="list clipboard history",
        )
        return parse_history(result.stdout)

    def decode(self, entry: ClipEntry) -> bytes:
        result = run_subprocess_with_context(
            ["cliphist", "decode"],
            operation_context=f"decode clipboard entry {entry.entry_id}",
            input=entry.line.encode("utf-8"),
            text=False,
            encoding=None,
        )
        return result.stdout

    def copy(self, data: bytes) -> None:
        # wl-copy forks a server that keeps the clipboard alive; it must not
        # inherit our pipes or run() would wait for it to exit
        run_subprocess_with_context(
            ["wl-copy"],
            operation_context="copy to the clipboard",
            input=data,
            text=False,
            encoding=None,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )

    def paste(self) -> None:
        run_subprocess_with_context(
            list(PASTE_COMMAND),
            operation_context="paste into the focused window",
        )
