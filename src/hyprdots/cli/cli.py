import logging
import os

import click

from hyprdots.cli.commands.audio import audio_group
from hyprdots.cli.commands.clipboard import clipboard_group
from hyprdots.cli.commands.config import config_group
from hyprdots.cli.commands.deps import deps_cmd
from hyprdots.cli.commands.display import display_group
from hyprdots.cli.commands.focus import focus_or_launch_cmd
from hyprdots.cli.commands.seed import seed_cmd
from hyprdots.cli.error_boundary import cli_error_boundary
from hyprdots.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="hyprdots")
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print package installs, config writes and desktop commands instead of running them.",
)
@click.option("-q", "--quiet", is_flag=True, help="Only show warnings and errors.")
@click.pass_context
@cli_error_boundary
def cli(ctx: click.Context, dry_run: bool, quiet: bool) -> None:
    """Install dependencies and wire up overrides for the Hyprland dotfiles."""
    # Enable debug logging if HYPRDOTS_DEBUG environment variable is set
    if os.environ.get("HYPRDOTS_DEBUG"):
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context(dry_run=dry_run, quiet=quiet)


cli.add_command(audio_group)
cli.add_command(clipboard_group)
cli.add_command(config_group)
cli.add_command(deps_cmd)
cli.add_command(display_group)
cli.add_command(focus_or_launch_cmd)
cli.add_command(seed_cmd)


def main() -> None:
    """CLI entry point used by the `hyprdots` console script."""
    cli()
