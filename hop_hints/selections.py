"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Parse and render the target encodings exchanged with the editor.

Formats

    L.C,L.C         Kakoune selection description (anchor,cursor), 1-based
    L.C             a single position (anchor == cursor)
    LINE COLUMN     whitespace separated pair, one per stdin line
    label:L.C,L.C   a candidate still waiting for `label` to be typed

Malformed entries raise `SelectionParseError`; batch helpers drop them with
a warning so only valid targets reach the label code.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable

from .debug import debug_echo, warn
from .errors import SelectionParseError

POSITION_RE = re.compile(r"^\s*(\d+)\.(\d+)\s*$")
PAIR_RE = re.compile(r"^\s*(\d+)\s+(\d+)\s*$")


@dataclass(frozen=True, order=True)
class Position:
    line: int
    column: int

    def describe(self) -> str:
        return f"{self.line}.{self.column}"


@dataclass(frozen=True)
class Selection:
    """One selectable target, as an anchor and a cursor position."""

    anchor: Position
    cursor: Position

    @property
    def start(self) -> Position:
        return min(self.anchor, self.cursor)

    @property
    def end(self) -> Position:
        return max(self.anchor, self.cursor)

    @property
    def width(self) -> int | None:
        """Columns covered on a single line, or None for multi-line selections."""
        if self.anchor.line != self.cursor.line:
            return None
        return self.end.column - self.start.column + 1

    def describe(self) -> str:
        return f"{self.anchor.describe()},{self.cursor.describe()}"

    def range_describe(self) -> str:
        """Ordered `start,end` description used for highlighter ranges."""
        return f"{self.start.describe()},{self.end.describe()}"


def _make_position(line: str, column: str, text: str) -> Position:
    position = Position(int(line), int(column))
    if position.line < 1 or position.column < 1:
        raise SelectionParseError(f"positions are 1-based: {text!r}")
    return position


def parse_position(text: str) -> Position:
    """Parse `L.C`."""
    match = POSITION_RE.match(text)
    if not match:
        raise SelectionParseError(f"expected LINE.COLUMN: {text!r}")
    return _make_position(match.group(1), match.group(2), text)


def parse_position_pair(text: str) -> Selection:
    """Parse a `LINE COLUMN` pair into a one-character selection."""
    match = PAIR_RE.match(text)
    if not match:
        raise SelectionParseError(f"expected LINE COLUMN: {text!r}")
    position = _make_position(match.group(1), match.group(2), text)
    return Selection(position, position)


def parse_selection(text: str) -> Selection:
    """Parse `L.C,L.C` or a bare `L.C`."""
    parts = text.strip().split(",")
    if len(parts) == 1:
        position = parse_position(parts[0])
        return Selection(position, position)
    if len(parts) == 2:
        return Selection(parse_position(parts[0]), parse_position(parts[1]))
    raise SelectionParseError(f"expected ANCHOR,CURSOR: {text!r}")


def parse_target(text: str) -> Selection:
    """Parse either a selection description or a `LINE COLUMN` pair."""
    if PAIR_RE.match(text):
        return parse_position_pair(text)
    return parse_selection(text)


def parse_targets(entries: Iterable[str]) -> list[Selection]:
    """Parse a batch of targets, skipping blank and malformed entries."""
    targets: list[Selection] = []
    for entry in entries:
        if not entry.strip():
            continue
        try:
            targets.append(parse_target(entry))
        except SelectionParseError as exc:
            warn(f"skipping malformed target: {exc}")
    debug_echo(2, "parse", f"{len(targets)} target(s) parsed")
    return targets


def parse_candidate(text: str) -> tuple[str, Selection]:
    """Parse `label:L.C,L.C` into (label, selection)."""
    label, sep, desc = text.strip().rpartition(":")
    if not sep or not label:
        raise SelectionParseError(f"expected LABEL:ANCHOR,CURSOR: {text!r}")
    return label, parse_selection(desc)


def parse_candidates(entries: Iterable[str]) -> list[tuple[str, Selection]]:
    """Parse a batch of candidates, skipping blank and malformed entries."""
    pairs: list[tuple[str, Selection]] = []
    for entry in entries:
        if not entry.strip():
            continue
        try:
            pairs.append(parse_candidate(entry))
        except SelectionParseError as exc:
            warn(f"skipping malformed candidate: {exc}")
    return pairs


def format_candidate(label: str, selection: Selection) -> str:
    return f"{label}:{selection.describe()}"
