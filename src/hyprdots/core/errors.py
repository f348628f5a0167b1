"""Error taxonomy for hyprdots operations.

Every fatal condition raised by the core layer derives from HyprdotsError so
the CLI error boundary can print a clean message and exit non-zero. Conditions
that are only warnings (optional install failures, a declined or failed shell
change) are returned as values instead of raised.
"""

from pathlib import Path


class HyprdotsError(Exception):
    """Base class for fatal, user-reportable errors."""


class MissingHelperError(HyprdotsError):
    """No AUR helper is available and none could be installed."""

    def __init__(self, candidates: tuple[str, ...], reason: str) -> None:
        self.candidates = candidates
        super().__init__(
            f"No AUR helper available ({' or '.join(candidates)}): {reason}\n"
            "Install one manually:\n"
            "  https://github.com/Jguer/yay\n"
            "  https://github.com/morganamilo/paru"
        )


class BackupError(HyprdotsError):
    """The pre-mutation backup could not be written; the config was left untouched."""

    def __init__(self, config_path: Path, backup_dir: Path, cause: OSError) -> None:
        self.config_path = config_path
        self.backup_dir = backup_dir
        super().__init__(
            f"Could not back up {config_path} into {backup_dir}: {cause}\n"
            "The config file was not modified."
        )


class ConfigWriteError(HyprdotsError):
    """Writing the config file failed; the original content is unchanged."""

    def __init__(self, config_path: Path, cause: OSError) -> None:
        self.config_path = config_path
        super().__init__(f"Could not write {config_path}: {cause}\nThe original file is unchanged.")


class AnchorNotFoundError(HyprdotsError):
    """The anchor line the override block must follow is absent from the config."""

    def __init__(self, config_path: Path, anchor_line: str) -> None:
        self.config_path = config_path
        self.anchor_line = anchor_line
        super().__init__(
            f"Anchor line not found in {config_path}:\n  {anchor_line}\n"
            "Set 'anchor_line' in the hyprdots config to the last upstream source line."
        )


class ConfigChangedError(HyprdotsError):
    """The config file changed between reading it and writing the seeded version."""

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path
        super().__init__(
            f"{config_path} was modified while seeding; nothing was written. Re-run the command."
        )


class HyprctlError(HyprdotsError):
    """hyprctl returned something the desktop helpers cannot act on."""


class AudioError(HyprdotsError):
    """The sound server's outputs cannot be switched as configured."""
