"""The `seed` command: wire override files into the main Hyprland config."""

from pathlib import Path

import click

from hyprdots.cli.error_boundary import cli_error_boundary
from hyprdots.cli.output import user_output
from hyprdots.core.context import HyprdotsContext
from hyprdots.core.seeder import (
    OverrideBlock,
    SeedInspection,
    SeedState,
    check_config,
    preview_seed,
    seed_config,
)


def _describe(inspection: SeedInspection, config_path: Path) -> str:
    if inspection.state is SeedState.SEEDED:
        line = inspection.marker_indices[0] + 1
        return f"{config_path}: seeded (override block at line {line})"
    if inspection.state is SeedState.UNSEEDED:
        return f"{config_path}: not seeded"

    details: list[str] = []
    if len(inspection.marker_indices) > 1:
        details.append(f"marker appears {len(inspection.marker_indices)} times")
    if inspection.missing_directives:
        details.append(f"{len(inspection.missing_directives)} directive(s) missing")
    if inspection.duplicate_directives:
        details.append(f"{len(inspection.duplicate_directives)} directive(s) repeated")
    if inspection.anchor_index is not None:
        if inspection.marker_indices[0] < inspection.anchor_index:
            details.append("block is above the anchor line")
        elif inspection.marker_indices[0] > inspection.anchor_index + 1:
            details.append("block is not directly below the anchor line")
    if not details:
        details.append("directives altered or out of order")
    return f"{config_path}: corrupt ({'; '.join(details)})"


@click.command("seed")
@click.option(
    "--check",
    "check_only",
    is_flag=True,
    help="Report the seeding state without changing anything; exit 1 unless seeded.",
)
@click.option(
    "--config-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Hyprland config to seed (defaults to the hypr_config setting).",
)
@click.option(
    "--backup-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for timestamped backups (defaults to the backup_dir setting).",
)
@click.pass_obj
@cli_error_boundary
def seed_cmd(
    ctx: HyprdotsContext,
    check_only: bool,
    config_file: Path | None,
    backup_dir: Path | None,
) -> None:
    """Insert the override `source` block into hyprland.conf exactly once.

    Safe to run any number of times: an already seeded config is left
    untouched. Run it again after an upstream update rewrites the config.
    """
    config = ctx.config
    config_path = config_file if config_file is not None else config.hypr_config
    block = OverrideBlock.from_files(config.marker, config.override_files)

    if check_only:
        inspection = check_config(config_path, block, config.anchor_line)
        user_output(_describe(inspection, config_path))
        if inspection.state is not SeedState.SEEDED:
            raise SystemExit(1)
        return

    if ctx.dry_run:
        inspection = preview_seed(config_path, block, config.anchor_line)
        if inspection.state is SeedState.SEEDED:
            ctx.feedback.success(f"✓ {config_path} already seeded")
            return
        user_output(
            click.style("[DRY RUN] ", fg="yellow")
            + f"Would back up and rewrite {config_path} ({inspection.state.value}) "
            + f"with {len(block.directives)} override(s)"
        )
        return

    result = seed_config(
        config_path,
        block,
        config.anchor_line,
        backup_dir=backup_dir if backup_dir is not None else config.backup_dir,
        time=ctx.time,
    )

    if not result.changed:
        ctx.feedback.success(f"✓ {config_path} already seeded")
        return

    verb = "Repaired" if result.state_before is SeedState.CORRUPT else "Seeded"
    ctx.feedback.success(f"✓ {verb} {config_path} with {len(block.directives)} override(s)")
    ctx.feedback.info(f"  Backup: {result.backup_path}")
    ctx.feedback.info("  Reload Hyprland to apply: hyprctl reload")
