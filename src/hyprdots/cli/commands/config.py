"""Settings commands: inspect and create ~/.config/hyprdots/config.toml."""

import click

from hyprdots.cli.error_boundary import cli_error_boundary
from hyprdots.cli.output import machine_output, user_output
from hyprdots.core.context import HyprdotsContext
from hyprdots.core.global_config import GlobalConfig


def config_items(config: GlobalConfig) -> list[tuple[str, str]]:
    """Flatten settings into key/value pairs for display."""
    return [
        ("target_shell", str(config.target_shell)),
        ("aur_helpers", ",".join(config.aur_helpers)),
        ("hypr_config", str(config.hypr_config)),
        ("backup_dir", str(config.backup_dir)),
        ("anchor_line", config.anchor_line),
        ("marker", config.marker),
        ("override_files", ",".join(config.override_files)),
        ("audio_sinks", ",".join(config.audio_sinks)),
    ]


@click.group("config")
def config_group() -> None:
    """Show or create the hyprdots settings file."""


@config_group.command("list")
@click.pass_obj
def config_list(ctx: HyprdotsContext) -> None:
    """Print the effective settings as key=value lines."""
    source = ctx.config_store.path() if ctx.config_store.exists() else "defaults"
    user_output(click.style(f"Settings ({source}):", bold=True))
    for key, value in config_items(ctx.config):
        machine_output(f"{key}={value}")


@config_group.command("init")
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing settings file.")
@click.pass_obj
@cli_error_boundary
def config_init(ctx: HyprdotsContext, force: bool) -> None:
    """Write the current settings, with every key spelled out, to the settings file."""
    path = ctx.config_store.path()
    if ctx.config_store.exists() and not force:
        raise FileExistsError(f"{path} already exists (use --force to overwrite)")
    ctx.config_store.save(ctx.config)
    ctx.feedback.success(f"✓ Wrote {path}")
