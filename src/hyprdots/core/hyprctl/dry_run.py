"""No-op hyprctl wrapper for dry-run mode.

Monitor queries go to the running Hyprland instance; keyword changes and
dispatchers print the hyprctl command that would run and report success.
"""

import click

from hyprdots.cli.output import user_output
from hyprdots.core.hyprctl.abc import Hyprctl, Monitor


class DryRunHyprctl(Hyprctl):
    """Wrapper that prints hyprctl commands instead of executing them.

    Usage:
        noop_hyprctl = DryRunHyprctl(RealHyprctl())

        # Prints "[DRY RUN] Would run: hyprctl keyword env GDK_SCALE,2"
        noop_hyprctl.set_keyword("env", "GDK_SCALE,2")
    """

    def __init__(self, wrapped: Hyprctl) -> None:
        self._wrapped = wrapped

    def get_monitors(self) -> list[Monitor]:
        return self._wrapped.get_monitors()

    def set_keyword(self, keyword: str, value: str) -> None:
        _announce("keyword", keyword, value)

    def dispatch(self, dispatcher: str, argument: str) -> str:
        _announce("dispatch", dispatcher, argument)
        return "ok"


def _announce(*args: str) -> None:
    user_output(click.style("[DRY RUN] ", fg="yellow") + "Would run: hyprctl " + " ".join(args))
