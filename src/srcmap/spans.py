from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A line/column position in a source text.

    Both are 1-based, matching editor conventions.
    """

    line: int
    character: int


@dataclass(frozen=True, slots=True)
class PositionRange:
    """Line/column range of a location; both ends are None for invalid input."""

    start: Position | None = None
    end: Position | None = None

    @property
    def is_empty(self) -> bool:
        return self.start is None or self.end is None

    def format(self) -> str:
        if self.start is None or self.end is None:
            return ""

        return f"{self.start.line}:{self.start.character}-{self.end.line}:{self.end.character}"


@dataclass(frozen=True, slots=True)
class Location:
    """Decoded "start:length:file" range string.

    Components that could not be parsed are None.
    """

    start: int | None
    length: int | None
    file: int | None = 0

    @property
    def is_valid(self) -> bool:
        return (
            self.start is not None
            and self.length is not None
            and self.start >= 0
            and self.length >= 0
        )

    @property
    def end(self) -> int | None:
        if not self.is_valid:
            return None
        return self.start + self.length

    def same_range(self, other: Location) -> bool:
        # file is not compared: a single compilation unit is assumed.
        if None in (self.start, self.length, other.start, other.length):
            return False
        return self.start == other.start and self.length == other.length

    def contains(self, offset: int) -> bool:
        if not self.is_valid:
            return False
        return self.start <= offset <= self.start + self.length
