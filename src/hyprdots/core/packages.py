"""Declared package dependencies of the dotfiles."""

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeAlias


class PackageSource(Enum):
    """Where a package is built from."""

    OFFICIAL = "official"
    AUR = "aur"

    @property
    def label(self) -> str:
        return "Official Repos" if self is PackageSource.OFFICIAL else "AUR"


class PackageStatus(Enum):
    INSTALLED = "installed"
    MISSING = "missing"


@dataclass(frozen=True)
class PackageSpec:
    """One installable dependency. Immutable and fixed per run."""

    name: str
    source: PackageSource
    required: bool
    description: str


# Point-in-time query result keyed by package name. Never cached across runs.
InstallationState: TypeAlias = dict[str, PackageStatus]


def _official(name: str, description: str, *, required: bool) -> PackageSpec:
    return PackageSpec(
        name=name, source=PackageSource.OFFICIAL, required=required, description=description
    )


def _aur(name: str, description: str, *, required: bool) -> PackageSpec:
    return PackageSpec(
        name=name, source=PackageSource.AUR, required=required, description=description
    )


DEFAULT_PACKAGES: tuple[PackageSpec, ...] = (
    _official("zsh", "ZSH shell (dotfiles use .zshrc)", required=True),
    _official("cliphist", "Clipboard history backend", required=True),
    _official("wl-clipboard", "Wayland clipboard (wl-paste, wl-copy)", required=True),
    _official("walker", "Clipboard UI selector", required=True),
    _official("hyprpicker", "Color picker", required=True),
    _official("jq", "JSON parsing (resolution toggle)", required=True),
    _official("wireplumber", "Audio control (wpctl)", required=True),
    _official("pipewire-pulse", "Audio streams (pactl)", required=True),
    _official("libnotify", "Desktop notifications", required=True),
    _official("xdg-utils", "Terminal exec", required=True),
    _official("fuzzel", "Rofimoji selector", required=True),
    _official("rofimoji", "Emoji picker", required=True),
    _aur("vicinae", "Application launcher", required=True),
    _official("nautilus", "File manager (SUPER+SHIFT+F)", required=False),
    _official("btop", "System monitor (SUPER+SHIFT+T)", required=False),
    _official("lazydocker", "Docker TUI (SUPER+SHIFT+D)", required=False),
    _official("signal-desktop", "Messaging (SUPER+SHIFT+G)", required=False),
    _official("obsidian", "Note-taking (SUPER+SHIFT+O)", required=False),
    _official("spotify-launcher", "Music player (SUPER+SHIFT+M)", required=False),
    _aur("inkdrop", "Note-taking (SUPER+SHIFT+I)", required=False),
    _aur("1password", "Password manager (SUPER+SHIFT+/)", required=False),
)


def required_packages(specs: Sequence[PackageSpec]) -> list[PackageSpec]:
    return [spec for spec in specs if spec.required]


def optional_packages(specs: Sequence[PackageSpec]) -> list[PackageSpec]:
    return [spec for spec in specs if not spec.required]
