"""Display commands."""

import click

from hyprdots.cli.error_boundary import cli_error_boundary
from hyprdots.core.context import HyprdotsContext
from hyprdots.core.display import toggle_scale


@click.group("display")
def display_group() -> None:
    """Adjust monitor settings of the running Hyprland session."""


@display_group.command("toggle-scale")
@click.pass_obj
@cli_error_boundary
def toggle_scale_cmd(ctx: HyprdotsContext) -> None:
    """Cycle the primary monitor through 1.25x, 1.5x and 2x scaling."""
    step = toggle_scale(ctx.hyprctl, ctx.notifier)
    ctx.feedback.success(f"✓ Display scaling changed to {step.label}")
