"""Tests for parsing `hyprctl monitors -j` output."""

import json

import pytest

from hyprdots.core.errors import HyprctlError
from hyprdots.core.hyprctl.abc import Monitor
from hyprdots.core.hyprctl.real import parse_monitors

MONITORS_JSON = json.dumps(
    [
        {
            "id": 0,
            "name": "eDP-1",
            "description": "BOE 0x095F",
            "width": 2880,
            "height": 1920,
            "refreshRate": 120.00000,
            "x": 0,
            "y": 0,
            "scale": 1.50,
            "focused": True,
        },
        {
            "id": 1,
            "name": "DP-2",
            "width": 3840,
            "height": 2160,
            "refreshRate": 59.99700,
            "x": 1920,
            "y": 0,
            "scale": 2.00,
        },
    ]
)


def test_parse_monitors_reads_every_entry_in_order() -> None:
    monitors = parse_monitors(MONITORS_JSON)

    assert [m.name for m in monitors] == ["eDP-1", "DP-2"]
    assert monitors[0] == Monitor(
        name="eDP-1", width=2880, height=1920, refresh_rate=120.0, x=0, y=0, scale=1.5
    )


def test_monitor_mode_rounds_refresh_rate() -> None:
    monitor = parse_monitors(MONITORS_JSON)[1]

    assert monitor.mode == "3840x2160@60"
    assert monitor.position == "1920x0"


def test_parse_monitors_empty_list() -> None:
    assert parse_monitors("[]") == []


def test_parse_monitors_rejects_invalid_json() -> None:
    with pytest.raises(HyprctlError, match="invalid JSON"):
        parse_monitors("Couldn't connect to /tmp/hypr/.socket.sock")


def test_parse_monitors_rejects_non_list() -> None:
    with pytest.raises(HyprctlError, match="not a list"):
        parse_monitors('{"name": "eDP-1"}')


def test_parse_monitors_rejects_incomplete_entry() -> None:
    with pytest.raises(HyprctlError, match="Unexpected monitor entry"):
        parse_monitors('[{"name": "eDP-1", "width": 1920}]')
