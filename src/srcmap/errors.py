from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class SourceMapError(Exception):
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        if self.hint:
            return f"{self.message}\nhint: {self.hint}"
        return self.message
