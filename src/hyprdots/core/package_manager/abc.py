"""Package manager operations interface.

This module defines the abstract interface the installer uses to talk to
pacman and the AUR helpers. Answers come back as typed values so callers never
parse package manager output.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass

from hyprdots.core.packages import PackageSource


@dataclass(frozen=True)
class InstallResult:
    """Outcome of one package manager invocation."""

    success: bool
    returncode: int
    command: tuple[str, ...]


class PackageManager(ABC):
    """Abstract interface for querying and installing packages.

    All implementations (real, fake, dry-run) must implement this interface.
    """

    @abstractmethod
    def is_installed(self, name: str) -> bool:
        """Check whether a package with exactly this name is installed.

        A package that is not installed is a normal answer (False), never an error.
        """
        ...

    @abstractmethod
    def install(
        self,
        names: Sequence[str],
        source: PackageSource,
        *,
        aur_helper: str | None,
    ) -> InstallResult:
        """Install all names from one source in a single invocation.

        Args:
            names: Package names, all from `source`
            source: Official repos (pacman) or AUR (through aur_helper)
            aur_helper: AUR helper binary; required when source is AUR
        """
        ...

    @abstractmethod
    def bootstrap_aur_helper(self, helper: str) -> InstallResult:
        """Build and install an AUR helper from source.

        Needs network access and sudo. Installs git and base-devel first.
        """
        ...
