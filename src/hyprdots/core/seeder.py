"""Idempotent seeding of override `source` directives into hyprland.conf.

The main Hyprland config is owned by an upstream installer that may rewrite it
at any time. Seeding wires the user's override files back in: a marker comment
followed by one `source = ...` line per override file, placed right after the
anchor line (the last upstream default). Hyprland applies files in the order
they are sourced, so overrides shadow the defaults above them.

The file is modelled as a list of lines and positions are integer indices, so
every state decision is a list comparison rather than a text search.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path

from hyprdots.core.errors import AnchorNotFoundError, ConfigChangedError
from hyprdots.core.file_ops import atomic_write, write_backup
from hyprdots.core.time.abc import Time

logger = logging.getLogger(__name__)


class SeedState(Enum):
    UNSEEDED = "unseeded"
    SEEDED = "seeded"
    CORRUPT = "corrupt"


@dataclass(frozen=True)
class OverrideBlock:
    """Marker comment plus the ordered directives that must follow it."""

    marker: str
    directives: tuple[str, ...]

    @staticmethod
    def from_files(marker: str, override_files: Sequence[str]) -> "OverrideBlock":
        return OverrideBlock(
            marker=marker,
            directives=tuple(
                dict.fromkeys(f"source = {path.strip()}" for path in override_files)
            ),
        )

    @property
    def lines(self) -> tuple[str, ...]:
        return (self.marker, *self.directives)


@dataclass(frozen=True)
class ConfigDocument:
    """A config file as lines, without their line terminators.

    `newline` is "\\r\\n" only when every line in the file ends that way, so a
    file with mixed endings keeps its stray carriage returns as line content.
    """

    lines: tuple[str, ...]
    trailing_newline: bool
    newline: str = "\n"

    def render(self) -> str:
        text = self.newline.join(self.lines)
        if self.trailing_newline and self.lines:
            text += self.newline
        return text


@dataclass(frozen=True)
class SeedInspection:
    state: SeedState
    marker_indices: tuple[int, ...]
    anchor_index: int | None
    missing_directives: tuple[str, ...]
    duplicate_directives: tuple[str, ...]


@dataclass(frozen=True)
class SeedResult:
    config_path: Path
    state_before: SeedState
    backup_path: Path | None

    @property
    def changed(self) -> bool:
        return self.state_before is not SeedState.SEEDED


def parse_config(text: str) -> ConfigDocument:
    if not text:
        return ConfigDocument(lines=(), trailing_newline=False)
    line_count = text.count("\n")
    newline = "\r\n" if line_count and text.count("\r\n") == line_count else "\n"
    trailing_newline = text.endswith(newline)
    body = text[: -len(newline)] if trailing_newline else text
    return ConfigDocument(
        lines=tuple(body.split(newline)), trailing_newline=trailing_newline, newline=newline
    )


def _matches(line: str, expected: str) -> bool:
    return line.strip() == expected.strip()


def find_anchor(doc: ConfigDocument, anchor_line: str) -> int | None:
    """Index of the last line equal to `anchor_line`, ignoring surrounding whitespace."""
    for index in range(len(doc.lines) - 1, -1, -1):
        if _matches(doc.lines[index], anchor_line):
            return index
    return None


def inspect(doc: ConfigDocument, block: OverrideBlock, anchor_line: str) -> SeedInspection:
    """Classify a document as unseeded, seeded or corrupt.

    Seeded means exactly one marker, immediately after the anchor when the
    anchor is present, followed contiguously by exactly the declared
    directives in order, with no managed directive appearing anywhere else in
    the file. Anything else with a marker is corrupt.
    """
    marker_indices = tuple(
        index for index, line in enumerate(doc.lines) if _matches(line, block.marker)
    )
    anchor_index = find_anchor(doc, anchor_line)

    directive_set = set(block.directives)
    counts = Counter(line.strip() for line in doc.lines if line.strip() in directive_set)
    missing = tuple(d for d in block.directives if counts[d] == 0)
    duplicated = tuple(d for d in block.directives if counts[d] > 1)

    if not marker_indices:
        return SeedInspection(
            state=SeedState.UNSEEDED,
            marker_indices=(),
            anchor_index=anchor_index,
            missing_directives=block.directives,
            duplicate_directives=duplicated,
        )

    first = marker_indices[0]
    following = [line.strip() for line in doc.lines[first + 1 : first + 1 + len(block.directives)]]

    intact = following == list(block.directives) and not duplicated
    placed = anchor_index is None or first == anchor_index + 1
    if len(marker_indices) == 1 and intact and placed:
        state = SeedState.SEEDED
    else:
        state = SeedState.CORRUPT

    return SeedInspection(
        state=state,
        marker_indices=marker_indices,
        anchor_index=anchor_index,
        missing_directives=missing,
        duplicate_directives=duplicated,
    )


def strip_block(doc: ConfigDocument, block: OverrideBlock) -> ConfigDocument:
    """Remove every marker and every managed directive line, wherever it sits."""
    managed = {block.marker.strip(), *block.directives}
    kept = tuple(line for line in doc.lines if line.strip() not in managed)
    return replace(doc, lines=kept)


def render_seeded(
    doc: ConfigDocument, block: OverrideBlock, anchor_line: str, *, source: Path
) -> ConfigDocument:
    """Return `doc` with the canonical block directly after the anchor.

    Raises:
        AnchorNotFoundError: If the anchor line is absent
    """
    stripped = strip_block(doc, block)
    anchor_index = find_anchor(stripped, anchor_line)
    if anchor_index is None:
        raise AnchorNotFoundError(source, anchor_line)

    insert_at = anchor_index + 1
    lines = (*stripped.lines[:insert_at], *block.lines, *stripped.lines[insert_at:])
    return replace(stripped, lines=lines, trailing_newline=True)


def check_config(config_path: Path, block: OverrideBlock, anchor_line: str) -> SeedInspection:
    """Read-only state report for the config file."""
    text = config_path.read_bytes().decode("utf-8")
    return inspect(parse_config(text), block, anchor_line)


def preview_seed(config_path: Path, block: OverrideBlock, anchor_line: str) -> SeedInspection:
    """Inspect the config and confirm that seeding it would succeed, without writing.

    Raises:
        FileNotFoundError: If the config file does not exist
        AnchorNotFoundError: If the file needs seeding but the anchor line is absent
    """
    doc = parse_config(config_path.read_bytes().decode("utf-8"))
    inspection = inspect(doc, block, anchor_line)
    if inspection.state is not SeedState.SEEDED:
        render_seeded(doc, block, anchor_line, source=config_path)
    return inspection


def seed_config(
    config_path: Path,
    block: OverrideBlock,
    anchor_line: str,
    *,
    backup_dir: Path,
    time: Time,
) -> SeedResult:
    """Ensure the override block is present exactly once after the anchor.

    A seeded file is left alone: no write and no backup. Otherwise a backup of
    the current bytes is written first, the file is re-read to confirm it did
    not change underneath, and the new content replaces it atomically.

    Raises:
        FileNotFoundError: If the config file does not exist
        AnchorNotFoundError: If the anchor line is absent
        BackupError: If the backup cannot be written (config untouched)
        ConfigChangedError: If the file changed during the run (config untouched)
        ConfigWriteError: If the write fails (config untouched)
    """
    original = config_path.read_bytes()
    doc = parse_config(original.decode("utf-8"))
    inspection = inspect(doc, block, anchor_line)

    if inspection.state is SeedState.SEEDED:
        logger.debug("%s already seeded at line %d", config_path, inspection.marker_indices[0] + 1)
        return SeedResult(config_path=config_path, state_before=SeedState.SEEDED, backup_path=None)

    seeded = render_seeded(doc, block, anchor_line, source=config_path)
    backup_path = write_backup(original, config_path, backup_dir, time.now())

    if config_path.read_bytes() != original:
        raise ConfigChangedError(config_path)

    atomic_write(config_path, seeded.render().encode("utf-8"))
    logger.info(
        "Seeded %s (was %s), backup at %s", config_path, inspection.state.value, backup_path
    )
    return SeedResult(
        config_path=config_path,
        state_before=inspection.state,
        backup_path=backup_path,
    )
