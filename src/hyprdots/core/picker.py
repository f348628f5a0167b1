"""Interactive selection menu (walker in dmenu mode)."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from hyprdots.core.subprocess import run_subprocess_with_context


class Picker(ABC):
    """Abstract interface for letting the user pick one line from a list."""

    @abstractmethod
    def choose(self, options: Sequence[str]) -> str | None:
        """Show `options` and return the chosen line, or None if dismissed."""
        ...


class WalkerPicker(Picker):
    """Shows options through `walker --dmenu`, which prints the chosen line."""

    def choose(self, options: Sequence[str]) -> str | None:
        result = run_subprocess_with_context(
            ["walker", "--dmenu"],
            operation_context="show the selection menu",
            input="\n".join(options),
            check=False,
        )
        # Escape closes walker with a non-zero status and no output
        choice = result.stdout.rstrip("\n")
        if result.returncode != 0 or not choice:
            return None
        return choice
