"""Tests for backup writing and atomic replacement."""

import os
import stat
from datetime import datetime
from pathlib import Path
from unittest.mock import patch

import pytest

from hyprdots.core.errors import BackupError, ConfigWriteError
from hyprdots.core.file_ops import atomic_write, backup_path_for, write_backup

STAMP = datetime(2024, 5, 1, 9, 30, 0)


def test_backup_path_for_first_attempt_has_no_suffix(tmp_path: Path) -> None:
    path = backup_path_for(Path("/home/u/.config/hypr/hyprland.conf"), tmp_path, STAMP)

    assert path == tmp_path / "hyprland.conf.20240501-093000.bak"


def test_backup_path_for_later_attempts_are_numbered(tmp_path: Path) -> None:
    path = backup_path_for(Path("hyprland.conf"), tmp_path, STAMP, attempt=2)

    assert path.name == "hyprland.conf.20240501-093000-2.bak"


def test_write_backup_creates_directory_and_copies_bytes(tmp_path: Path) -> None:
    backup_dir = tmp_path / "nested" / "backups"

    path = write_backup(b"source = a\n", Path("hyprland.conf"), backup_dir, STAMP)

    assert path.parent == backup_dir
    assert path.read_bytes() == b"source = a\n"


def test_write_backup_never_overwrites_existing_backup(tmp_path: Path) -> None:
    """Two backups in the same second both survive."""
    first = write_backup(b"first", Path("hyprland.conf"), tmp_path, STAMP)
    second = write_backup(b"second", Path("hyprland.conf"), tmp_path, STAMP)

    assert first != second
    assert second.name == "hyprland.conf.20240501-093000-1.bak"
    assert first.read_bytes() == b"first"
    assert second.read_bytes() == b"second"


def test_write_backup_wraps_os_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "backups"
    blocker.write_text("file, not a directory", encoding="utf-8")

    with pytest.raises(BackupError) as exc_info:
        write_backup(b"x", Path("hyprland.conf"), blocker, STAMP)

    assert exc_info.value.backup_dir == blocker
    assert "was not modified" in str(exc_info.value)


def test_atomic_write_replaces_content(tmp_path: Path) -> None:
    target = tmp_path / "hyprland.conf"
    target.write_bytes(b"old\n")

    atomic_write(target, b"new\n")

    assert target.read_bytes() == b"new\n"
    assert [p.name for p in tmp_path.iterdir()] == ["hyprland.conf"]


def test_atomic_write_preserves_file_mode(tmp_path: Path) -> None:
    target = tmp_path / "hyprland.conf"
    target.write_bytes(b"old\n")
    os.chmod(target, 0o640)

    atomic_write(target, b"new\n")

    assert stat.S_IMODE(target.stat().st_mode) == 0o640


def test_atomic_write_creates_missing_file(tmp_path: Path) -> None:
    target = tmp_path / "fresh.conf"

    atomic_write(target, b"content")

    assert target.read_bytes() == b"content"


def test_atomic_write_failure_leaves_original_and_no_temp_file(tmp_path: Path) -> None:
    target = tmp_path / "hyprland.conf"
    target.write_bytes(b"original\n")

    with patch("hyprdots.core.file_ops.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(ConfigWriteError) as exc_info:
            atomic_write(target, b"replacement\n")

    assert target.read_bytes() == b"original\n"
    assert [p.name for p in tmp_path.iterdir()] == ["hyprland.conf"]
    assert exc_info.value.config_path == target
    assert "disk full" in str(exc_info.value)


def test_atomic_write_into_missing_directory_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigWriteError):
        atomic_write(tmp_path / "absent" / "hyprland.conf", b"x")
