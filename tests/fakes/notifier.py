"""Fake Notifier that records notifications instead of showing them."""

from hyprdots.core.notifier import Notifier


class FakeNotifier(Notifier):
    def __init__(self) -> None:
        self._notifications: list[tuple[str, str, int | None]] = []

    def notify(self, summary: str, body: str, *, timeout_ms: int | None = None) -> None:
        self._notifications.append((summary, body, timeout_ms))

    @property
    def notifications(self) -> list[tuple[str, str, int | None]]:
        """(summary, body, timeout_ms) tuples. For test assertions only."""
        return self._notifications.copy()
