"""Shell and process operations.

Covers tool lookup on PATH, the user's login shell from the passwd database,
and launching desktop applications detached from the calling process.
"""

import logging
import os
import pwd
import shutil
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

import click

from hyprdots.cli.output import user_output
from hyprdots.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)


class Shell(ABC):
    """Abstract interface for shell and process operations."""

    @abstractmethod
    def get_installed_tool_path(self, tool_name: str) -> str | None:
        """Check if a tool is installed and available in PATH.

        Args:
            tool_name: Name of the tool to check (e.g., "yay", "paru")

        Returns:
            Absolute path to the tool if found, None otherwise
        """
        ...

    @abstractmethod
    def get_login_shell(self) -> str | None:
        """Return the current user's login shell as recorded in the passwd database."""
        ...

    @abstractmethod
    def change_login_shell(self, shell_path: str) -> bool:
        """Change the current user's login shell.

        Returns:
            True if the change succeeded, False otherwise (never raises on refusal)
        """
        ...

    @abstractmethod
    def launch_detached(self, argv: Sequence[str], env: Mapping[str, str]) -> None:
        """Start a program in its own session without waiting for it.

        Args:
            argv: Program and arguments
            env: Variables added on top of the current environment
        """
        ...


class RealShell(Shell):
    """Production implementation using the passwd database, chsh and Popen."""

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return shutil.which(tool_name)

    def get_login_shell(self) -> str | None:
        try:
            entry = pwd.getpwuid(os.getuid())
        except KeyError:
            return None
        return entry.pw_shell or None

    def change_login_shell(self, shell_path: str) -> bool:
        # chsh asks for the user's password on the terminal
        try:
            result = run_subprocess_with_context(
                ["chsh", "-s", shell_path],
                operation_context=f"change login shell to {shell_path}",
                capture_output=False,
                check=False,
            )
        except RuntimeError:
            logger.warning("chsh is not available", exc_info=True)
            return False
        return result.returncode == 0

    def launch_detached(self, argv: Sequence[str], env: Mapping[str, str]) -> None:
        logger.debug("Launching %s with extra env %s", " ".join(argv), dict(env))
        subprocess.Popen(
            list(argv),
            env={**os.environ, **env},
            stdin=subprocess.DEVNULL,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            start_new_session=True,
        )


class DryRunShell(Shell):
    """Wrapper that reports login shell changes instead of performing them."""

    def __init__(self, wrapped: Shell) -> None:
        self._wrapped = wrapped

    def get_installed_tool_path(self, tool_name: str) -> str | None:
        return self._wrapped.get_installed_tool_path(tool_name)

    def get_login_shell(self) -> str | None:
        return self._wrapped.get_login_shell()

    def change_login_shell(self, shell_path: str) -> bool:
        user_output(click.style("[DRY RUN] ", fg="yellow") + f"Would run: chsh -s {shell_path}")
        return True

    def launch_detached(self, argv: Sequence[str], env: Mapping[str, str]) -> None:
        user_output(click.style("[DRY RUN] ", fg="yellow") + "Would launch: " + " ".join(argv))
