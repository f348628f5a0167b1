"""Tests for FakeClipboard and FakePicker test infrastructure."""

import pytest

from hyprdots.core.clipboard.abc import ClipEntry
from tests.fakes.clipboard import FakeClipboard, FakePicker


def test_decode_returns_stored_content() -> None:
    entry = ClipEntry(entry_id="1", preview="hello")
    clipboard = FakeClipboard(history=[(entry, b"hello world")])

    assert clipboard.history() == [entry]
    assert clipboard.decode(entry) == b"hello world"


def test_decode_unknown_entry_raises_like_cliphist() -> None:
    with pytest.raises(RuntimeError, match="decode clipboard entry 9"):
        FakeClipboard().decode(ClipEntry(entry_id="9", preview="gone"))


def test_picker_records_every_menu() -> None:
    picker = FakePicker(choice="b")

    assert picker.choose(["a", "b"]) == "b"
    assert picker.choose(["c"]) == "b"
    assert picker.shown == [["a", "b"], ["c"]]
