"""Focus an existing window or launch the application that owns it."""

import logging
from collections.abc import Mapping, Sequence
from enum import Enum

from hyprdots.core.hyprctl.abc import Hyprctl
from hyprdots.core.shell import Shell

logger = logging.getLogger(__name__)


class FocusOutcome(Enum):
    FOCUSED = "focused"
    LAUNCHED = "launched"


def focus_or_launch(
    hyprctl: Hyprctl,
    shell: Shell,
    *,
    title_regex: str,
    argv: Sequence[str],
    env: Mapping[str, str],
) -> FocusOutcome:
    """Focus the first window whose title matches, else launch `argv`.

    Hyprland answers "ok" when a window was focused and an error text when
    no window matched.
    """
    reply = hyprctl.dispatch("focuswindow", f"title:{title_regex}")
    if reply == "ok":
        return FocusOutcome.FOCUSED

    logger.debug("No window matched %r (%s); launching", title_regex, reply)
    shell.launch_detached(argv, env)
    return FocusOutcome.LAUNCHED
