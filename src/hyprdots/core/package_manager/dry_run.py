"""No-op package manager wrapper for dry-run mode.

Queries are delegated to the wrapped implementation so the report reflects the
real system; installs print the command that would run and report success.
"""

from collections.abc import Sequence

import click

from hyprdots.cli.output import user_output
from hyprdots.core.package_manager.abc import InstallResult, PackageManager
from hyprdots.core.package_manager.real import AUR_BASE_URL
from hyprdots.core.packages import PackageSource


class DryRunPackageManager(PackageManager):
    """Wrapper that prints install commands instead of executing them.

    Usage:
        real_ops = RealPackageManager()
        noop_ops = DryRunPackageManager(real_ops)

        # Prints "[DRY RUN] Would run: sudo pacman -S --needed jq"
        noop_ops.install(["jq"], PackageSource.OFFICIAL, aur_helper=None)
    """

    def __init__(self, wrapped: PackageManager) -> None:
        self._wrapped = wrapped

    def is_installed(self, name: str) -> bool:
        return self._wrapped.is_installed(name)

    def install(
        self,
        names: Sequence[str],
        source: PackageSource,
        *,
        aur_helper: str | None,
    ) -> InstallResult:
        if source is PackageSource.AUR:
            cmd = (aur_helper or "<aur-helper>", "-S", "--needed", *names)
        else:
            cmd = ("sudo", "pacman", "-S", "--needed", *names)
        _announce(cmd)
        return InstallResult(success=True, returncode=0, command=cmd)

    def bootstrap_aur_helper(self, helper: str) -> InstallResult:
        cmd = ("makepkg", "-si", "--noconfirm")
        _announce(("git", "clone", f"{AUR_BASE_URL}/{helper}.git"))
        _announce(cmd)
        return InstallResult(success=True, returncode=0, command=cmd)


def _announce(cmd: Sequence[str]) -> None:
    user_output(click.style("[DRY RUN] ", fg="yellow") + "Would run: " + " ".join(cmd))
