"""The `deps` command: check and install the packages the dotfiles rely on."""

from collections.abc import Sequence

import click
from rich.console import Console

from hyprdots.cli.error_boundary import cli_error_boundary
from hyprdots.cli.output import user_output
from hyprdots.cli.rendering import format_install_summary, render_dependency_report
from hyprdots.core.context import HyprdotsContext
from hyprdots.core.installer import (
    BatchResult,
    Confirm,
    InstallMode,
    ShellChangeOutcome,
    compute_missing,
    ensure_aur_helper,
    ensure_shell,
    install_batch,
    query_installation_state,
    summarize,
)
from hyprdots.core.packages import (
    DEFAULT_PACKAGES,
    InstallationState,
    PackageSource,
    PackageSpec,
    PackageStatus,
    optional_packages,
    required_packages,
)


def _confirmer(assume_yes: bool, *, default: bool) -> Confirm:
    def confirm(message: str) -> bool:
        if assume_yes:
            return True
        return click.confirm(message, default=default, err=True)

    return confirm


def _run_check(ctx: HyprdotsContext, specs: Sequence[PackageSpec]) -> None:
    state = query_installation_state(ctx.package_manager, specs)
    render_dependency_report(specs, state)

    missing = compute_missing(required_packages(specs), state)
    if not missing:
        ctx.feedback.success("✓ All required dependencies installed!")
        return

    official = sum(1 for spec in missing if spec.source is PackageSource.OFFICIAL)
    aur = len(missing) - official
    ctx.feedback.warning(f"⚠ Missing {official} official + {aur} AUR required dependencies")
    raise SystemExit(1)


def _select_optional(
    ctx: HyprdotsContext,
    mode: InstallMode,
    missing_optional: list[PackageSpec],
    confirm: Confirm,
) -> list[PackageSpec]:
    if mode is InstallMode.MINIMAL:
        ctx.feedback.info("→ Minimal mode: skipping optional applications")
        return []
    if not missing_optional:
        return []
    if mode is InstallMode.ALL:
        return missing_optional

    names = ", ".join(spec.name for spec in missing_optional)
    ctx.feedback.info(f"Optional applications not installed: {names}")
    if confirm("Install optional applications?"):
        return missing_optional
    ctx.feedback.info("→ Skipping optional applications")
    return []


def _state_after(
    ctx: HyprdotsContext, selected: Sequence[PackageSpec], results: Sequence[BatchResult]
) -> InstallationState:
    if not ctx.dry_run:
        return query_installation_state(ctx.package_manager, selected)
    # Nothing was installed; assume every batch that would run succeeds
    installed = {name for batch in results if batch.success for name in batch.names}
    return {
        spec.name: PackageStatus.INSTALLED if spec.name in installed else PackageStatus.MISSING
        for spec in selected
    }


def _report_shell(ctx: HyprdotsContext, outcome: ShellChangeOutcome) -> None:
    target = ctx.config.target_shell
    if outcome is ShellChangeOutcome.ALREADY_SET:
        ctx.feedback.success(f"✓ Already using {target}")
    elif outcome is ShellChangeOutcome.CHANGED:
        ctx.feedback.success(f"✓ Shell changed to {target}")
        ctx.feedback.warning("⚠ You must log out and back in for this to take effect")
    elif outcome is ShellChangeOutcome.DECLINED:
        ctx.feedback.info("→ Skipping shell change")
        ctx.feedback.warning(f"  Remember to change your shell later with: chsh -s {target}")
    else:
        ctx.feedback.error("✗ Failed to change shell")
        ctx.feedback.warning(f"You can change it manually later with: chsh -s {target}")


@click.command("deps")
@click.option(
    "--minimal", "mode", flag_value=InstallMode.MINIMAL.value, help="Only required dependencies."
)
@click.option(
    "--all", "mode", flag_value=InstallMode.ALL.value, help="Required plus optional applications."
)
@click.option(
    "--check",
    "mode",
    flag_value=InstallMode.CHECK.value,
    help="Report what is installed; exit 1 if a required package is missing.",
)
@click.option("-y", "--yes", "assume_yes", is_flag=True, help="Answer yes to every prompt.")
@click.pass_obj
@cli_error_boundary
def deps_cmd(ctx: HyprdotsContext, mode: str | None, assume_yes: bool) -> None:
    """Install the packages the dotfiles depend on.

    Without a mode flag the installer runs interactively and asks before
    installing optional applications and before changing the login shell.
    Already installed packages are skipped, so re-running after a failure
    only retries what is still missing.
    """
    install_mode = InstallMode(mode) if mode else InstallMode.INTERACTIVE
    specs = DEFAULT_PACKAGES

    if install_mode is InstallMode.CHECK:
        _run_check(ctx, specs)
        return

    before = query_installation_state(ctx.package_manager, specs)
    selected = compute_missing(required_packages(specs), before)
    selected += _select_optional(
        ctx,
        install_mode,
        compute_missing(optional_packages(specs), before),
        _confirmer(assume_yes, default=False),
    )

    results: list[BatchResult] = []
    if selected:
        aur_helper: str | None = None
        if any(spec.source is PackageSource.AUR for spec in selected):
            aur_helper = ensure_aur_helper(
                ctx.shell,
                ctx.package_manager,
                ctx.config.aur_helpers,
                _confirmer(assume_yes, default=False),
            )
            ctx.feedback.success(f"✓ AUR helper: {aur_helper}")

        ctx.feedback.info("Packages to install: " + " ".join(spec.name for spec in selected))
        results = install_batch(ctx.package_manager, selected, aur_helper=aur_helper)
        for batch in results:
            if batch.success:
                ctx.feedback.success(f"✓ {batch.source.label} packages installed")
            else:
                ctx.feedback.error(
                    f"✗ {batch.source.label} install failed (exit {batch.result.returncode}): "
                    + " ".join(batch.names)
                )
    else:
        ctx.feedback.success("✓ All selected packages already installed")

    summary = summarize(specs, before, selected, _state_after(ctx, selected, results))

    outcome = ensure_shell(
        ctx.shell, ctx.config.target_shell, _confirmer(assume_yes, default=True)
    )
    _report_shell(ctx, outcome)

    Console(stderr=True).print(format_install_summary(summary, outcome))

    if not summary.success:
        ctx.feedback.error("Re-run `hyprdots deps` to retry the missing packages.")
        raise SystemExit(1)

    user_output("Next steps:")
    user_output("  1. Seed the Hyprland overrides:  hyprdots seed")
    user_output(f"  2. Reload shell:                 exec {ctx.config.target_shell.name}")
    user_output("  3. Reload Hyprland:              hyprctl reload")
