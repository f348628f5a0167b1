"""The `focus-or-launch` command used by window-manager key bindings."""

import click

from hyprdots.cli.ensure import Ensure
from hyprdots.cli.error_boundary import cli_error_boundary
from hyprdots.core.context import HyprdotsContext
from hyprdots.core.focus import FocusOutcome, focus_or_launch


def _parse_env(pairs: tuple[str, ...]) -> dict[str, str]:
    env: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        Ensure.invariant(
            bool(sep) and bool(key), f"Invalid --env value '{pair}', expected KEY=VALUE"
        )
        env[key] = value
    return env


@click.command("focus-or-launch")
@click.option("--title", "title_regex", required=True, help="Regex matched against window titles.")
@click.option(
    "--env",
    "env_pairs",
    multiple=True,
    metavar="KEY=VALUE",
    help="Extra environment for the launched program (repeatable).",
)
@click.argument("command", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
@cli_error_boundary
def focus_or_launch_cmd(
    ctx: HyprdotsContext, title_regex: str, env_pairs: tuple[str, ...], command: tuple[str, ...]
) -> None:
    """Focus a window whose title matches, or run COMMAND to open one.

    Example:

        hyprdots focus-or-launch --title '.*Claude.*Zen Browser' \\
            --env MOZ_ENABLE_WAYLAND=1 -- uwsm app -- zen-browser --new-window https://claude.ai
    """
    env = _parse_env(env_pairs)
    outcome = focus_or_launch(
        ctx.hyprctl, ctx.shell, title_regex=title_regex, argv=command, env=env
    )
    if outcome is FocusOutcome.LAUNCHED:
        ctx.feedback.info(f"Launched {command[0]}")
