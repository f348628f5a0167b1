"""Output utilities for CLI commands with clear intent.

user_output() is for humans: progress, status, prompts' context. It goes to
stderr so stdout stays reserved for machine_output(), which commands like
`config list` use for parseable key=value data.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write machine-readable output to stdout."""
    click.echo(message, nl=nl)
