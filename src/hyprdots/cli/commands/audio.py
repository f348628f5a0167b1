"""Audio commands."""

import click

from hyprdots.cli.error_boundary import cli_error_boundary
from hyprdots.core.audio_output import switch_output
from hyprdots.core.context import HyprdotsContext


@click.group("audio")
def audio_group() -> None:
    """Control audio outputs of the running session."""


@audio_group.command("switch")
@click.option(
    "--sink",
    "sink_patterns",
    multiple=True,
    metavar="PATTERN",
    help="Output to cycle through, matched against sink names and descriptions "
    "(repeatable; defaults to the audio_sinks setting).",
)
@click.pass_obj
@cli_error_boundary
def switch_cmd(ctx: HyprdotsContext, sink_patterns: tuple[str, ...]) -> None:
    """Make the next audio output the default and move playing streams to it.

    Example:

        hyprdots audio switch --sink PCM2704 --sink PCM2902
    """
    patterns = sink_patterns if sink_patterns else ctx.config.audio_sinks
    switch = switch_output(ctx.audio, ctx.notifier, patterns=patterns)
    ctx.feedback.success(f"✓ Audio output switched to {switch.sink.description}")
    if switch.moved_streams:
        ctx.feedback.info(f"  Moved {switch.moved_streams} playing stream(s)")
