"""Clipboard commands."""

import click

from hyprdots.cli.error_boundary import cli_error_boundary
from hyprdots.core.clip_history import paste_from_history
from hyprdots.core.context import HyprdotsContext


@click.group("clipboard")
def clipboard_group() -> None:
    """Work with the clipboard history."""


@clipboard_group.command("pick")
@click.pass_obj
@cli_error_boundary
def pick_cmd(ctx: HyprdotsContext) -> None:
    """Choose an entry from the clipboard history and paste it into the focused window."""
    entry = paste_from_history(ctx.clipboard, ctx.picker, ctx.time)
    if entry is None:
        ctx.feedback.info("Nothing pasted")
        return
    ctx.feedback.success(f"✓ Pasted clipboard entry {entry.entry_id}")
