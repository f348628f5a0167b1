"""Fake implementation of Hyprctl for testing."""

from hyprdots.core.hyprctl.abc import Hyprctl, Monitor


class FakeHyprctl(Hyprctl):
    """In-memory fake of a running Hyprland instance.

    Keyword changes are recorded, and a `monitor` keyword updates the scale
    of the named monitor so consecutive toggles see the new value.
    """

    def __init__(
        self,
        *,
        monitors: list[Monitor] | None = None,
        focusable_titles: set[str] | None = None,
    ) -> None:
        """Initialize fake with predetermined monitors and windows.

        Args:
            monitors: Monitors returned by get_monitors()
            focusable_titles: `title:<regex>` arguments that focuswindow
                answers "ok" to; everything else gets "No such window found"
        """
        self._monitors = list(monitors or [])
        self._focusable_titles = focusable_titles or set()
        self._keyword_calls: list[tuple[str, str]] = []
        self._dispatch_calls: list[tuple[str, str]] = []

    def get_monitors(self) -> list[Monitor]:
        return list(self._monitors)

    def set_keyword(self, keyword: str, value: str) -> None:
        self._keyword_calls.append((keyword, value))
        if keyword == "monitor":
            name, _mode, _position, scale = value.split(",")
            self._monitors = [
                Monitor(
                    name=m.name,
                    width=m.width,
                    height=m.height,
                    refresh_rate=m.refresh_rate,
                    x=m.x,
                    y=m.y,
                    scale=float(scale),
                )
                if m.name == name
                else m
                for m in self._monitors
            ]

    def dispatch(self, dispatcher: str, argument: str) -> str:
        self._dispatch_calls.append((dispatcher, argument))
        if dispatcher == "focuswindow" and argument in self._focusable_titles:
            return "ok"
        return "No such window found"

    @property
    def keyword_calls(self) -> list[tuple[str, str]]:
        """(keyword, value) pairs passed to set_keyword(). For test assertions only."""
        return self._keyword_calls.copy()

    @property
    def dispatch_calls(self) -> list[tuple[str, str]]:
        """(dispatcher, argument) pairs passed to dispatch(). For test assertions only."""
        return self._dispatch_calls.copy()
