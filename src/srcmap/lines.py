from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence

from .spans import Position


def find_lower_bound(target: int, values: Sequence[int]) -> int:
    """Index of the greatest element <= target in ascending values, else -1."""
    return bisect_right(values, target) - 1


def position_from_offset(offset: int, line_breaks: Sequence[int]) -> Position:
    """Turn a character offset into a 1-based Position.

    A line break character belongs to the line it terminates; anything
    after it starts the next line.
    """
    line = find_lower_bound(offset, line_breaks)
    if line < 0 or line_breaks[line] != offset:
        line += 1
    begin = 0 if line == 0 else line_breaks[line - 1] + 1
    return Position(line=line + 1, character=offset - begin + 1)


class LineIndex:
    """Offsets of every line break in one source text."""

    __slots__ = ("source", "line_breaks")

    def __init__(self, source: str) -> None:
        self.source = source
        breaks: list[int] = []
        pos = source.find("\n")
        while pos >= 0:
            breaks.append(pos)
            pos = source.find("\n", pos + 1)
        self.line_breaks: tuple[int, ...] = tuple(breaks)

    def __repr__(self) -> str:
        return f"LineIndex(lines={self.line_count}, chars={len(self.source)})"

    @property
    def line_count(self) -> int:
        return len(self.line_breaks) + 1

    def position_from_offset(self, offset: int) -> Position:
        return position_from_offset(offset, self.line_breaks)

    def line_start(self, line: int) -> int | None:
        """Offset of the first character of a 1-based line."""
        if line < 1 or line > self.line_count:
            return None
        return 0 if line == 1 else self.line_breaks[line - 2] + 1

    def offset_from_position(self, position: Position) -> int | None:
        begin = self.line_start(position.line)
        if begin is None or position.character < 1:
            return None
        return begin + position.character - 1

    def line_text(self, line: int) -> str | None:
        begin = self.line_start(line)
        if begin is None:
            return None
        if line <= len(self.line_breaks):
            return self.source[begin : self.line_breaks[line - 1]]
        return self.source[begin:]
