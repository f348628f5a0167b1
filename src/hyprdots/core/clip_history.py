"""Paste an entry picked from the clipboard history."""

import logging

from hyprdots.core.clipboard.abc import ClipEntry, Clipboard
from hyprdots.core.picker import Picker
from hyprdots.core.time.abc import Time

logger = logging.getLogger(__name__)

# Time for the compositor to hand focus back from the menu before typing
PASTE_DELAY_SECONDS = 0.1


def paste_from_history(clipboard: Clipboard, picker: Picker, time: Time) -> ClipEntry | None:
    """Let the user pick a history entry, copy its full content and paste it.

    The menu shows previews without their ids; the first entry whose preview
    equals the chosen line is used, so identical previews resolve to the most
    recent entry.

    Returns:
        The pasted entry, or None if the history is empty or nothing was chosen
    """
    entries = clipboard.history()
    if not entries:
        logger.debug("Clipboard history is empty")
        return None

    choice = picker.choose([entry.preview for entry in entries])
    if choice is None:
        return None

    entry = next((e for e in entries if e.preview == choice), None)
    if entry is None:
        logger.debug("Chosen line %r matches no history entry", choice)
        return None

    clipboard.copy(clipboard.decode(entry))
    time.sleep(PASTE_DELAY_SECONDS)
    clipboard.paste()
    return entry
