"""Tests for settings parsing, rendering and storage."""

from pathlib import Path

import pytest

from hyprdots.core.global_config import (
    DEFAULT_ANCHOR_LINE,
    DEFAULT_OVERRIDE_FILES,
    FilesystemConfigStore,
    GlobalConfig,
    InMemoryConfigStore,
    default_config_path,
    parse_global_config,
    render_global_config,
)

SOURCE = Path("/home/u/.config/hyprdots/config.toml")


def test_empty_file_yields_defaults() -> None:
    assert parse_global_config("", SOURCE) == GlobalConfig()


def test_defaults_match_stock_layout() -> None:
    config = GlobalConfig()

    assert config.target_shell == Path("/usr/bin/zsh")
    assert config.aur_helpers == ("yay", "paru")
    assert config.hypr_config == Path.home() / ".config" / "hypr" / "hyprland.conf"
    assert config.anchor_line == DEFAULT_ANCHOR_LINE
    assert config.override_files == DEFAULT_OVERRIDE_FILES


def test_partial_file_overrides_only_given_keys() -> None:
    text = 'aur_helpers = ["paru"]\nanchor_line = "  source = ~/theme.conf  "\n'

    config = parse_global_config(text, SOURCE)

    assert config.aur_helpers == ("paru",)
    assert config.anchor_line == "source = ~/theme.conf"
    assert config.target_shell == Path("/usr/bin/zsh")


def test_paths_are_expanded_but_override_files_are_not() -> None:
    text = (
        'hypr_config = "~/dots/hyprland.conf"\n'
        'backup_dir = "~/dots/backups"\n'
        'override_files = ["~/dots/a.conf"]\n'
    )

    config = parse_global_config(text, SOURCE)

    assert config.hypr_config == Path.home() / "dots" / "hyprland.conf"
    assert config.backup_dir == Path.home() / "dots" / "backups"
    assert config.override_files == ("~/dots/a.conf",)


def test_invalid_toml_raises_value_error() -> None:
    with pytest.raises(ValueError, match="Invalid TOML"):
        parse_global_config("target_shell = ", SOURCE)


@pytest.mark.parametrize(
    "text",
    [
        "target_shell = 5",
        'target_shell = ""',
        'aur_helpers = "yay"',
        "aur_helpers = []",
        'override_files = ["a", 3]',
    ],
)
def test_wrong_types_raise_value_error(text: str) -> None:
    with pytest.raises(ValueError, match=str(SOURCE)):
        parse_global_config(text, SOURCE)


def test_marker_must_be_a_comment() -> None:
    with pytest.raises(ValueError, match="comment line"):
        parse_global_config('marker = "hyprdots block"', SOURCE)


def test_render_then_parse_preserves_settings() -> None:
    config = GlobalConfig(
        target_shell=Path("/usr/bin/fish"),
        aur_helpers=("paru",),
        hypr_config=Path("/tmp/h/hyprland.conf"),
        backup_dir=Path("/tmp/h/backups"),
        anchor_line="source = ~/x.conf",
        override_files=("~/o/a.conf", "~/o/b.conf"),
        marker="# managed",
        audio_sinks=("PCM2704", "PCM2902"),
    )

    assert parse_global_config(render_global_config(config), SOURCE) == config


def test_default_audio_sinks_render_as_empty_list() -> None:
    text = render_global_config(GlobalConfig())

    assert "audio_sinks = []" in text
    assert parse_global_config(text, SOURCE).audio_sinks == ()


def test_audio_sinks_reject_non_strings() -> None:
    with pytest.raises(ValueError, match="must be a list of strings"):
        parse_global_config("audio_sinks = [1]", SOURCE)


def test_default_config_path_honors_xdg(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert default_config_path() == tmp_path / "hyprdots" / "config.toml"


def test_default_config_path_falls_back_to_home(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)

    assert default_config_path() == Path.home() / ".config" / "hyprdots" / "config.toml"


def test_filesystem_store_missing_file_loads_defaults(tmp_path: Path) -> None:
    store = FilesystemConfigStore(tmp_path / "config.toml")

    assert not store.exists()
    assert store.load() == GlobalConfig()


def test_filesystem_store_save_creates_parent_and_loads_back(tmp_path: Path) -> None:
    store = FilesystemConfigStore(tmp_path / "hyprdots" / "config.toml")
    config = GlobalConfig(aur_helpers=("paru", "yay"))

    store.save(config)

    assert store.exists()
    assert store.load() == config


def test_filesystem_store_load_reports_malformed_file(tmp_path: Path) -> None:
    path = tmp_path / "config.toml"
    path.write_text("aur_helpers = 1\n", encoding="utf-8")

    with pytest.raises(ValueError, match="aur_helpers"):
        FilesystemConfigStore(path).load()


def test_in_memory_store() -> None:
    store = InMemoryConfigStore()
    assert not store.exists()
    assert store.load() == GlobalConfig()

    store.save(GlobalConfig(aur_helpers=("paru",)))

    assert store.exists()
    assert store.load().aur_helpers == ("paru",)
