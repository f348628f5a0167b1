"""Global configuration data structures and loading.

Provides immutable settings loaded from ~/.config/hyprdots/config.toml. The
file is optional: every field has a default matching a stock Omarchy/Hyprland
layout, and the settings file only needs the keys a user wants to change.
"""

import os
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import tomlkit

DEFAULT_MARKER = "# hyprdots: user overrides (managed block, do not edit)"
DEFAULT_ANCHOR_LINE = "source = ~/.config/omarchy/current/theme/hyprland.conf"
DEFAULT_OVERRIDE_FILES = (
    "~/.config/hypr/overrides/envs.conf",
    "~/.config/hypr/overrides/looknfeel.conf",
    "~/.config/hypr/overrides/input.conf",
    "~/.config/hypr/overrides/bindings.conf",
    "~/.config/hypr/overrides/windows.conf",
    "~/.config/hypr/overrides/autostart.conf",
)


@dataclass(frozen=True)
class GlobalConfig:
    """Immutable settings for a hyprdots run.

    Loaded once at CLI entry point and stored in HyprdotsContext.
    All fields are read-only after construction.
    """

    target_shell: Path = Path("/usr/bin/zsh")
    aur_helpers: tuple[str, ...] = ("yay", "paru")
    hypr_config: Path = field(
        default_factory=lambda: Path.home() / ".config" / "hypr" / "hyprland.conf"
    )
    backup_dir: Path = field(
        default_factory=lambda: Path.home() / ".config" / "hypr" / "backups"
    )
    anchor_line: str = DEFAULT_ANCHOR_LINE
    override_files: tuple[str, ...] = DEFAULT_OVERRIDE_FILES
    marker: str = DEFAULT_MARKER
    audio_sinks: tuple[str, ...] = ()


def default_config_path() -> Path:
    """Location of the settings file, honoring $XDG_CONFIG_HOME."""
    xdg = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg) if xdg else Path.home() / ".config"
    return base / "hyprdots" / "config.toml"


def _expect_str(data: dict[str, Any], key: str, source: Path) -> str | None:
    if key not in data:
        return None
    value = data[key]
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"'{key}' in {source} must be a non-empty string")
    return value


def _expect_str_list(
    data: dict[str, Any], key: str, source: Path, *, allow_empty: bool = False
) -> tuple[str, ...] | None:
    if key not in data:
        return None
    value = data[key]
    expected = "a list of strings" if allow_empty else "a non-empty list of strings"
    if not isinstance(value, list) or (not value and not allow_empty):
        raise ValueError(f"'{key}' in {source} must be {expected}")
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ValueError(f"'{key}' in {source} must be {expected}")
    return tuple(value)


def parse_global_config(text: str, source: Path) -> GlobalConfig:
    """Build a GlobalConfig from TOML text, falling back to defaults per key.

    Raises:
        ValueError: If the TOML is malformed or a key has the wrong type
    """
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ValueError(f"Invalid TOML in {source}: {e}") from e

    config = GlobalConfig()

    target_shell = _expect_str(data, "target_shell", source)
    if target_shell is not None:
        config = replace(config, target_shell=Path(target_shell).expanduser())

    aur_helpers = _expect_str_list(data, "aur_helpers", source)
    if aur_helpers is not None:
        config = replace(config, aur_helpers=aur_helpers)

    hypr_config = _expect_str(data, "hypr_config", source)
    if hypr_config is not None:
        config = replace(config, hypr_config=Path(hypr_config).expanduser())

    backup_dir = _expect_str(data, "backup_dir", source)
    if backup_dir is not None:
        config = replace(config, backup_dir=Path(backup_dir).expanduser())

    anchor_line = _expect_str(data, "anchor_line", source)
    if anchor_line is not None:
        config = replace(config, anchor_line=anchor_line.strip())

    # Override paths stay unexpanded: Hyprland resolves ~ itself
    override_files = _expect_str_list(data, "override_files", source)
    if override_files is not None:
        config = replace(config, override_files=override_files)

    marker = _expect_str(data, "marker", source)
    if marker is not None:
        if not marker.lstrip().startswith("#"):
            raise ValueError(f"'marker' in {source} must be a comment line starting with '#'")
        config = replace(config, marker=marker.strip())

    audio_sinks = _expect_str_list(data, "audio_sinks", source, allow_empty=True)
    if audio_sinks is not None:
        config = replace(config, audio_sinks=audio_sinks)

    return config


def render_global_config(config: GlobalConfig) -> str:
    """Serialize a GlobalConfig to TOML with every key spelled out."""
    doc = tomlkit.document()
    doc.add(tomlkit.comment("hyprdots settings"))
    doc.add("target_shell", str(config.target_shell))
    doc.add("aur_helpers", list(config.aur_helpers))
    doc.add(tomlkit.nl())
    doc.add(tomlkit.comment("Config seeding"))
    doc.add("hypr_config", str(config.hypr_config))
    doc.add("backup_dir", str(config.backup_dir))
    doc.add("anchor_line", config.anchor_line)
    doc.add("marker", config.marker)
    override_files = tomlkit.array()
    override_files.extend(config.override_files)
    override_files.multiline(True)
    doc.add("override_files", override_files)
    doc.add(tomlkit.nl())
    doc.add(tomlkit.comment("Audio outputs cycled by `audio switch` (empty: every output)"))
    doc.add("audio_sinks", list(config.audio_sinks))
    return tomlkit.dumps(doc)


class ConfigStore(ABC):
    """Abstract interface for settings file access.

    Provides dependency injection for config access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Check if the settings file exists."""
        ...

    @abstractmethod
    def load(self) -> GlobalConfig:
        """Load settings, returning defaults when no settings file exists.

        Raises:
            ValueError: If the file is malformed
        """
        ...

    @abstractmethod
    def save(self, config: GlobalConfig) -> None:
        """Write settings, replacing any existing file."""
        ...

    @abstractmethod
    def path(self) -> Path:
        """Get the path to the settings file (for messages and debugging)."""
        ...


class FilesystemConfigStore(ConfigStore):
    """Production implementation that reads/writes the TOML settings file."""

    def __init__(self, config_path: Path | None = None) -> None:
        self._config_path = config_path if config_path is not None else default_config_path()

    def exists(self) -> bool:
        return self._config_path.exists()

    def load(self) -> GlobalConfig:
        if not self._config_path.exists():
            return GlobalConfig()
        text = self._config_path.read_text(encoding="utf-8")
        return parse_global_config(text, self._config_path)

    def save(self, config: GlobalConfig) -> None:
        """Write the settings file.

        Raises:
            PermissionError: If directory or file cannot be written
        """
        parent = self._config_path.parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except PermissionError:
            raise PermissionError(
                f"Cannot create directory: {parent}\n"
                f"Check permissions on your home directory."
            ) from None

        if self._config_path.exists() and not os.access(self._config_path, os.W_OK):
            raise PermissionError(
                f"Cannot write to file: {self._config_path}\n"
                f"The file exists but is not writable."
            )

        self._config_path.write_text(render_global_config(config), encoding="utf-8")

    def path(self) -> Path:
        return self._config_path


class InMemoryConfigStore(ConfigStore):
    """Test implementation that stores settings in memory without touching filesystem."""

    def __init__(self, config: GlobalConfig | None = None) -> None:
        """Initialize in-memory store.

        Args:
            config: Initial settings (None = no settings file saved yet)
        """
        self._config = config

    def exists(self) -> bool:
        return self._config is not None

    def load(self) -> GlobalConfig:
        if self._config is None:
            return GlobalConfig()
        return self._config

    def save(self, config: GlobalConfig) -> None:
        self._config = config

    def path(self) -> Path:
        return Path("/fake/hyprdots/config.toml")
