"""Production package manager backed by pacman and an AUR helper."""

import logging
import subprocess
import tempfile
from collections.abc import Sequence
from pathlib import Path

from hyprdots.core.package_manager.abc import InstallResult, PackageManager
from hyprdots.core.packages import PackageSource
from hyprdots.core.subprocess import run_subprocess_with_context

logger = logging.getLogger(__name__)

AUR_BASE_URL = "https://aur.archlinux.org"


class RealPackageManager(PackageManager):
    """Runs pacman, sudo and the AUR helper as subprocesses.

    Install commands are not captured: pacman and the helpers prompt for
    confirmation and sudo passwords on the terminal.
    """

    def is_installed(self, name: str) -> bool:
        result = run_subprocess_with_context(
            ["pacman", "-Q", name],
            operation_context=f"query installed package '{name}'",
            check=False,
            capture_output=False,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        logger.debug("pacman -Q %s -> %d", name, result.returncode)
        return result.returncode == 0

    def install(
        self,
        names: Sequence[str],
        source: PackageSource,
        *,
        aur_helper: str | None,
    ) -> InstallResult:
        if source is PackageSource.AUR:
            if aur_helper is None:
                raise ValueError("An AUR helper is required to install AUR packages")
            cmd = [aur_helper, "-S", "--needed", *names]
        else:
            cmd = ["sudo", "pacman", "-S", "--needed", *names]
        return self._run_interactive(cmd, f"install {source.label} packages")

    def bootstrap_aur_helper(self, helper: str) -> InstallResult:
        deps = self._run_interactive(
            ["sudo", "pacman", "-S", "--needed", "git", "base-devel"],
            "install AUR build dependencies",
        )
        if not deps.success:
            return deps

        with tempfile.TemporaryDirectory(prefix="hyprdots-") as build_root:
            checkout = Path(build_root) / helper
            clone = self._run_interactive(
                ["git", "clone", f"{AUR_BASE_URL}/{helper}.git", str(checkout)],
                f"clone {helper} from the AUR",
            )
            if not clone.success:
                return clone
            return self._run_interactive(
                ["makepkg", "-si", "--noconfirm"],
                f"build and install {helper}",
                cwd=checkout,
            )

    def _run_interactive(
        self, cmd: list[str], operation_context: str, cwd: Path | None = None
    ) -> InstallResult:
        try:
            result = run_subprocess_with_context(
                cmd,
                operation_context=operation_context,
                cwd=cwd,
                capture_output=False,
                check=False,
            )
        except RuntimeError:
            # Binary missing (no sudo, no helper); report like any failed command
            logger.warning("Could not %s", operation_context, exc_info=True)
            return InstallResult(success=False, returncode=127, command=tuple(cmd))
        return InstallResult(
            success=result.returncode == 0,
            returncode=result.returncode,
            command=tuple(cmd),
        )
