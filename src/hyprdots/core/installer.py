"""Dependency installation: query, diff, batch install, login shell.

The installer is re-runnable by construction. Installed state is queried fresh
on every run, so packages installed by an earlier (possibly partially failed)
run are skipped and only what is still missing gets retried.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from hyprdots.core.errors import MissingHelperError
from hyprdots.core.package_manager.abc import InstallResult, PackageManager
from hyprdots.core.packages import (
    InstallationState,
    PackageSource,
    PackageSpec,
    PackageStatus,
)
from hyprdots.core.shell import Shell

logger = logging.getLogger(__name__)

Confirm = Callable[[str], bool]


class InstallMode(Enum):
    """How the `deps` command treats optional packages."""

    INTERACTIVE = "interactive"
    MINIMAL = "minimal"
    ALL = "all"
    CHECK = "check"


class ShellChangeOutcome(Enum):
    ALREADY_SET = "already_set"
    CHANGED = "changed"
    DECLINED = "declined"
    FAILED = "failed"


@dataclass(frozen=True)
class BatchResult:
    """One bulk install invocation for all selected packages of a source."""

    source: PackageSource
    names: tuple[str, ...]
    result: InstallResult

    @property
    def success(self) -> bool:
        return self.result.success


@dataclass(frozen=True)
class InstallSummary:
    """Final counts reported after an install run."""

    already_satisfied: tuple[PackageSpec, ...]
    newly_installed: tuple[PackageSpec, ...]
    failed: tuple[PackageSpec, ...]
    skipped: tuple[PackageSpec, ...]

    @property
    def required_missing(self) -> tuple[PackageSpec, ...]:
        """Required packages that are still not installed. Non-empty means exit 1."""
        return tuple(spec for spec in self.failed if spec.required)

    @property
    def success(self) -> bool:
        return not self.required_missing


def detect_aur_helper(shell: Shell, candidates: Sequence[str]) -> str | None:
    """Return the first AUR helper from `candidates` found on PATH, or None."""
    for candidate in candidates:
        path = shell.get_installed_tool_path(candidate)
        if path is not None:
            logger.debug("AUR helper %s found at %s", candidate, path)
            return candidate
    return None


def ensure_aur_helper(
    shell: Shell,
    package_manager: PackageManager,
    candidates: Sequence[str],
    confirm: Confirm,
) -> str:
    """Detect an AUR helper, offering to build the preferred one if none exists.

    Raises:
        MissingHelperError: If the user declines the install or the build fails
    """
    helper = detect_aur_helper(shell, candidates)
    if helper is not None:
        return helper

    preferred = candidates[0]
    if not confirm(f"No AUR helper detected. Install {preferred}?"):
        raise MissingHelperError(tuple(candidates), "installation declined")

    result = package_manager.bootstrap_aur_helper(preferred)
    if not result.success:
        raise MissingHelperError(
            tuple(candidates),
            f"building {preferred} failed (exit {result.returncode})",
        )
    return preferred


def check_installed(package_manager: PackageManager, spec: PackageSpec) -> bool:
    return package_manager.is_installed(spec.name)


def query_installation_state(
    package_manager: PackageManager, specs: Sequence[PackageSpec]
) -> InstallationState:
    """Query the package manager for every spec. Never cached."""
    state: InstallationState = {}
    for spec in specs:
        installed = check_installed(package_manager, spec)
        state[spec.name] = PackageStatus.INSTALLED if installed else PackageStatus.MISSING
    return state


def compute_missing(
    specs: Sequence[PackageSpec], state: InstallationState
) -> list[PackageSpec]:
    """Specs whose queried status is MISSING, in declaration order.

    Specs absent from `state` are treated as missing.
    """
    return [
        spec
        for spec in specs
        if state.get(spec.name, PackageStatus.MISSING) is PackageStatus.MISSING
    ]


def install_batch(
    package_manager: PackageManager,
    missing: Sequence[PackageSpec],
    *,
    aur_helper: str | None,
) -> list[BatchResult]:
    """Install `missing` with one package manager invocation per source.

    Official packages go first so AUR builds can depend on them. A failed
    batch is reported as-is; there is no per-package retry.

    Raises:
        ValueError: If AUR packages are requested without a helper
    """
    results: list[BatchResult] = []
    for source in (PackageSource.OFFICIAL, PackageSource.AUR):
        names = tuple(spec.name for spec in missing if spec.source is source)
        if not names:
            continue
        if source is PackageSource.AUR and aur_helper is None:
            raise ValueError(f"AUR packages selected without an AUR helper: {', '.join(names)}")
        logger.info("Installing %d %s package(s): %s", len(names), source.value, " ".join(names))
        result = package_manager.install(names, source, aur_helper=aur_helper)
        if not result.success:
            logger.warning("%s batch failed with exit code %d", source.label, result.returncode)
        results.append(BatchResult(source=source, names=names, result=result))
    return results


def summarize(
    considered: Sequence[PackageSpec],
    before: InstallationState,
    attempted: Sequence[PackageSpec],
    after: InstallationState,
) -> InstallSummary:
    """Classify every considered package after an install attempt.

    Args:
        considered: Every package the run looked at
        before: Installed state queried before installing
        attempted: Packages handed to install_batch
        after: Installed state re-queried for the attempted packages
    """
    attempted_names = {spec.name for spec in attempted}
    already: list[PackageSpec] = []
    newly: list[PackageSpec] = []
    failed: list[PackageSpec] = []
    skipped: list[PackageSpec] = []

    for spec in considered:
        if before.get(spec.name) is PackageStatus.INSTALLED:
            already.append(spec)
        elif spec.name not in attempted_names:
            if spec.required:
                failed.append(spec)
            else:
                skipped.append(spec)
        elif after.get(spec.name) is PackageStatus.INSTALLED:
            newly.append(spec)
        else:
            failed.append(spec)

    return InstallSummary(
        already_satisfied=tuple(already),
        newly_installed=tuple(newly),
        failed=tuple(failed),
        skipped=tuple(skipped),
    )


def _same_shell(current: str, target: Path) -> bool:
    if Path(current) == target:
        return True
    # /bin is a symlink to /usr/bin on Arch
    return Path(current).resolve() == target.resolve()


def ensure_shell(shell: Shell, target_shell: Path, confirm: Confirm) -> ShellChangeOutcome:
    """Make `target_shell` the login shell, asking first.

    Declining or a failed change is reported, never raised: the rest of the
    configuration still works under another login shell.
    """
    current = shell.get_login_shell()
    if current is not None and _same_shell(current, target_shell):
        return ShellChangeOutcome.ALREADY_SET

    if not confirm(f"Change login shell from {current or 'unknown'} to {target_shell}?"):
        return ShellChangeOutcome.DECLINED

    if shell.change_login_shell(str(target_shell)):
        return ShellChangeOutcome.CHANGED
    logger.warning("Changing login shell to %s failed", target_shell)
    return ShellChangeOutcome.FAILED
