"""Application context with dependency injection."""

from dataclasses import dataclass

from hyprdots.core.audio.abc import AudioSystem
from hyprdots.core.audio.dry_run import DryRunAudioSystem
from hyprdots.core.audio.real import RealAudioSystem
from hyprdots.core.clipboard.abc import Clipboard
from hyprdots.core.clipboard.dry_run import DryRunClipboard
from hyprdots.core.clipboard.real import RealClipboard
from hyprdots.core.global_config import ConfigStore, FilesystemConfigStore, GlobalConfig
from hyprdots.core.hyprctl.abc import Hyprctl
from hyprdots.core.hyprctl.dry_run import DryRunHyprctl
from hyprdots.core.hyprctl.real import RealHyprctl
from hyprdots.core.notifier import DryRunNotifier, Notifier, RealNotifier
from hyprdots.core.package_manager.abc import PackageManager
from hyprdots.core.package_manager.dry_run import DryRunPackageManager
from hyprdots.core.package_manager.real import RealPackageManager
from hyprdots.core.picker import Picker, WalkerPicker
from hyprdots.core.shell import DryRunShell, RealShell, Shell
from hyprdots.core.time.abc import Time
from hyprdots.core.time.real import RealTime
from hyprdots.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback


@dataclass(frozen=True)
class HyprdotsContext:
    """Immutable context holding all dependencies for hyprdots operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime. Operations read
    paths and the target shell from `config`, never from the process
    environment or working directory.
    """

    package_manager: PackageManager
    shell: Shell
    hyprctl: Hyprctl
    notifier: Notifier
    clipboard: Clipboard
    picker: Picker
    audio: AudioSystem
    time: Time
    config_store: ConfigStore
    feedback: UserFeedback
    config: GlobalConfig
    dry_run: bool


def create_context(*, dry_run: bool, quiet: bool = False) -> HyprdotsContext:
    """Create production context with real implementations.

    Called at CLI entry point to create the context for the entire
    command execution.

    Args:
        dry_run: If True, wrap mutating integrations with dry-run wrappers that
                 print intended actions without executing them
        quiet: If True, use SuppressedFeedback to hide informational output

    Raises:
        ValueError: If the settings file is malformed
    """
    config_store = FilesystemConfigStore()
    config = config_store.load()

    package_manager: PackageManager = RealPackageManager()
    shell: Shell = RealShell()
    hyprctl: Hyprctl = RealHyprctl()
    notifier: Notifier = RealNotifier()
    clipboard: Clipboard = RealClipboard()
    audio: AudioSystem = RealAudioSystem()

    feedback: UserFeedback
    if quiet:
        feedback = SuppressedFeedback()
    else:
        feedback = InteractiveFeedback()

    if dry_run:
        package_manager = DryRunPackageManager(package_manager)
        shell = DryRunShell(shell)
        hyprctl = DryRunHyprctl(hyprctl)
        notifier = DryRunNotifier(notifier)
        clipboard = DryRunClipboard(clipboard)
        audio = DryRunAudioSystem(audio)

    return HyprdotsContext(
        package_manager=package_manager,
        shell=shell,
        hyprctl=hyprctl,
        notifier=notifier,
        clipboard=clipboard,
        picker=WalkerPicker(),
        audio=audio,
        time=RealTime(),
        config_store=config_store,
        feedback=feedback,
        config=config,
        dry_run=dry_run,
    )
