"""Rendering helpers for dependency reports and install summaries."""

from collections.abc import Sequence

import click
from rich.panel import Panel
from rich.text import Text

from hyprdots.cli.output import user_output
from hyprdots.core.installer import InstallSummary, ShellChangeOutcome
from hyprdots.core.packages import (
    InstallationState,
    PackageSource,
    PackageSpec,
    PackageStatus,
)


def _category_title(required: bool, source: PackageSource) -> str:
    kind = "Required Dependencies" if required else "Optional Applications"
    return f"{kind} ({source.label}):"


def render_dependency_report(specs: Sequence[PackageSpec], state: InstallationState) -> None:
    """Print every package grouped by required/optional and source.

    Installed packages get a green check. Missing required packages get a red
    cross with their description; missing optional ones a neutral circle.
    """
    for required in (True, False):
        for source in (PackageSource.OFFICIAL, PackageSource.AUR):
            group = [s for s in specs if s.required is required and s.source is source]
            if not group:
                continue
            user_output(click.style(_category_title(required, source), fg="yellow"))
            for spec in group:
                name = click.style(spec.name, fg="cyan")
                if state.get(spec.name) is PackageStatus.INSTALLED:
                    user_output(f"  {click.style('✓', fg='green')} {name}")
                elif required:
                    user_output(f"  {click.style('✗', fg='red')} {name} - {spec.description}")
                else:
                    user_output(f"  {click.style('○', fg='cyan')} {name} (not installed)")
            user_output()


def _names(specs: Sequence[PackageSpec]) -> str:
    return ", ".join(spec.name for spec in specs)


SHELL_OUTCOME_TEXT = {
    ShellChangeOutcome.ALREADY_SET: ("Login shell already set", "green"),
    ShellChangeOutcome.CHANGED: ("Login shell changed (log out to apply)", "green"),
    ShellChangeOutcome.DECLINED: ("Login shell change skipped", "yellow"),
    ShellChangeOutcome.FAILED: ("Login shell change failed", "yellow"),
}


def format_install_summary(summary: InstallSummary, shell_outcome: ShellChangeOutcome) -> Panel:
    """Format the final summary box with counts per outcome.

    Example:
        >>> panel = format_install_summary(summary, ShellChangeOutcome.CHANGED)
        >>> Console(stderr=True).print(panel)
    """
    lines: list[Text] = [
        Text(f"✓ Already satisfied: {len(summary.already_satisfied)}", style="green"),
    ]

    newly = f"+ Newly installed: {len(summary.newly_installed)}"
    if summary.newly_installed:
        newly += f" ({_names(summary.newly_installed)})"
    lines.append(Text(newly, style="green"))

    failed = f"✗ Failed: {len(summary.failed)}"
    if summary.failed:
        failed += f" ({_names(summary.failed)})"
    lines.append(Text(failed, style="red" if summary.failed else ""))

    lines.append(Text(f"○ Skipped: {len(summary.skipped)}", style="cyan"))

    shell_text, shell_style = SHELL_OUTCOME_TEXT[shell_outcome]
    lines.append(Text(""))
    lines.append(Text(shell_text, style=shell_style))

    if summary.required_missing:
        lines.append(Text(""))
        lines.append(
            Text(
                f"Required packages still missing: {_names(summary.required_missing)}",
                style="red bold",
            )
        )

    title = "Installation Complete" if summary.success else "Installation Incomplete"
    return Panel(
        Text("\n").join(lines),
        title=title,
        border_style="green" if summary.success else "red",
        padding=(1, 2),
    )
