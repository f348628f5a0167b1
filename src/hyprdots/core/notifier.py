"""Desktop notification operations (notify-send)."""

from abc import ABC, abstractmethod

import click

from hyprdots.cli.output import user_output
from hyprdots.core.subprocess import run_subprocess_with_context


class Notifier(ABC):
    """Abstract interface for desktop notifications."""

    @abstractmethod
    def notify(self, summary: str, body: str, *, timeout_ms: int | None = None) -> None:
        ...


class RealNotifier(Notifier):
    """Sends notifications through libnotify's notify-send."""

    def notify(self, summary: str, body: str, *, timeout_ms: int | None = None) -> None:
        cmd = ["notify-send", summary, body]
        if timeout_ms is not None:
            cmd += ["-t", str(timeout_ms)]
        run_subprocess_with_context(cmd, operation_context="send desktop notification")


class DryRunNotifier(Notifier):
    """Wrapper that prints notifications instead of showing them."""

    def __init__(self, wrapped: Notifier) -> None:
        self._wrapped = wrapped

    def notify(self, summary: str, body: str, *, timeout_ms: int | None = None) -> None:
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would notify: {summary}: {body}")
