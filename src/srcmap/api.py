from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .errors import SourceMapError
from .lines import LineIndex
from .locations import location_from_node, location_from_src
from .locator import (
    find_node_at_source_location,
    innermost_node_at_offset,
    nodes_at_position,
    nodes_containing_offset,
)
from .spans import Location, Position, PositionRange
from .walker import AstWalker, JsonAstWalker, is_ast_node


logger = logging.getLogger(__name__)


class SourceMappings:
    """Lookups of AST nodes and line/column ranges for one source text."""

    def __init__(self, source: str, *, walker: AstWalker | None = None) -> None:
        self.index = LineIndex(source)
        self.walker: AstWalker = walker if walker is not None else JsonAstWalker()

    @property
    def source(self) -> str:
        return self.index.source

    @property
    def line_breaks(self) -> tuple[int, ...]:
        return self.index.line_breaks

    def position_from_offset(self, offset: int) -> Position:
        return self.index.position_from_offset(offset)

    def offset_from_position(self, position: Position) -> int | None:
        return self.index.offset_from_position(position)

    def nodes_at_position(self, node_type: str | None, location: Location, ast: Any) -> list[Any]:
        return nodes_at_position(node_type, location, ast, walker=self.walker)

    def find_node_at_source_location(self, node_type: str | None, location: Location, ast: Any) -> Any | None:
        return find_node_at_source_location(node_type, location, ast, walker=self.walker)

    def nodes_containing_offset(self, node_type: str | None, offset: int, ast: Any) -> list[Any]:
        return nodes_containing_offset(node_type, offset, ast, walker=self.walker)

    def innermost_node_at_offset(self, node_type: str | None, offset: int, ast: Any) -> Any | None:
        return innermost_node_at_offset(node_type, offset, ast, walker=self.walker)

    def location_to_line_column_range(self, location: Location) -> PositionRange:
        if not location.is_valid:
            return PositionRange(start=None, end=None)
        return PositionRange(
            start=self.position_from_offset(location.start),
            end=self.position_from_offset(location.start + location.length),
        )

    def src_to_line_column_range(self, src: str) -> PositionRange:
        """Line/column range of a "s:l:f" string; both ends None if invalid."""
        return self.location_to_line_column_range(location_from_src(src))

    def node_line_column_range(self, node: Any) -> PositionRange:
        loc = location_from_node(node)
        if loc is None:
            return PositionRange(start=None, end=None)
        return self.location_to_line_column_range(loc)


def _extract_ast(doc: Any, source_name: str | None) -> Any:
    if is_ast_node(doc):
        return doc
    if not isinstance(doc, Mapping):
        return None

    # {"ast": {...}} as written by some build tools.
    for key in ("ast", "AST"):
        if is_ast_node(doc.get(key)):
            return doc[key]

    sources = doc.get("sources")
    if not isinstance(sources, Mapping) or not sources:
        return None
    if source_name is None:
        source_name = next(iter(sources))
    entry = sources.get(source_name)
    if not isinstance(entry, Mapping):
        raise SourceMapError(
            message=f"source not found in compiler output: {source_name!r}",
            hint="available: " + ", ".join(sorted(str(k) for k in sources)),
        )
    for key in ("ast", "AST", "legacyAST"):
        if is_ast_node(entry.get(key)):
            return entry[key]
    return None


def read_source(path: str | Path) -> str:
    """Read a UTF-8 text file, turning I/O failures into SourceMapError."""
    p = Path(path).expanduser()
    try:
        return p.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise SourceMapError(message=f"file not found: {str(p)!r}") from None
    except IsADirectoryError:
        raise SourceMapError(message=f"is a directory: {str(p)!r}", hint="pass a file path") from None
    except OSError as e:
        raise SourceMapError(message=f"cannot read {str(p)!r}: {e.strerror or e}") from None
    except UnicodeDecodeError as e:
        raise SourceMapError(
            message=f"{p}: not valid UTF-8 at byte {e.start}",
            hint="re-encode the file as UTF-8",
        ) from None


def load_ast(path: str | Path, *, source_name: str | None = None) -> Any:
    """Load an AST from a bare JSON AST or solc (standard-json) output."""
    p = Path(path).expanduser().resolve()
    text = read_source(p)
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise SourceMapError(
            message=f"{p}:{e.lineno}:{e.colno}: invalid JSON: {e.msg}",
            hint="pass the compiler's JSON output or a JSON AST",
        ) from None

    ast = _extract_ast(doc, source_name)
    if ast is None:
        raise SourceMapError(
            message=f"no AST found in {str(p)!r}",
            hint='compile with outputSelection {"*": {"": ["ast"]}}',
        )
    logger.debug("loaded AST from %s (root nodeType=%r)", p, ast.get("nodeType"))
    return ast
