"""Production hyprctl implementation using subprocess calls."""

import json
import logging
from typing import Any

from hyprdots.core.errors import HyprctlError
from hyprdots.core.hyprctl.abc import Hyprctl, Monitor
from hyprdots.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


def parse_monitors(payload: str) -> list[Monitor]:
    """Parse `hyprctl monitors -j` output into Monitor values.

    Raises:
        HyprctlError: If the payload is not the expected JSON list
    """
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise HyprctlError(f"hyprctl returned invalid JSON for monitors: {e}") from e
    if not isinstance(data, list):
        raise HyprctlError("hyprctl monitors output is not a list")
    return [_parse_monitor(item) for item in data]


def _parse_monitor(item: Any) -> Monitor:
    try:
        return Monitor(
            name=str(item["name"]),
            width=int(item["width"]),
            height=int(item["height"]),
            refresh_rate=float(item["refreshRate"]),
            x=int(item["x"]),
            y=int(item["y"]),
            scale=float(item["scale"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise HyprctlError(f"Unexpected monitor entry from hyprctl: {item!r}") from e


class RealHyprctl(Hyprctl):
    """Production implementation that shells out to hyprctl."""

    def get_monitors(self) -> list[Monitor]:
        result = run_subprocess_with_context(
            ["hyprctl", "monitors", "-j"],
            operation_context="list monitors",
        )
        return parse_monitors(result.stdout)

    def set_keyword(self, keyword: str, value: str) -> None:
        result = run_subprocess_with_context(
            ["hyprctl", "keyword", keyword, value],
            operation_context=f"set Hyprland keyword '{keyword}'",
        )
        reply = result.stdout.strip()
        # hyprctl exits 0 even when it rejects a keyword
        if reply and reply != "ok":
            raise HyprctlError(f"hyprctl rejected '{keyword} {value}': {reply}")

    def dispatch(self, dispatcher: str, argument: str) -> str:
        result = run_subprocess_with_context(
            ["hyprctl", "dispatch", dispatcher, argument],
            operation_context=f"dispatch {dispatcher}",
            check=False,
        )
        reply = (result.stdout + result.stderr).strip()
        logger.debug("hyprctl dispatch %s %s -> %r", dispatcher, argument, reply)
        return reply
