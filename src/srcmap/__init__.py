from __future__ import annotations

from .api import SourceMappings, load_ast
from .errors import SourceMapError
from .lines import LineIndex, find_lower_bound, position_from_offset
from .locations import format_src, location_from_node, location_from_src
from .locator import (
    find_node_at_source_location,
    innermost_node_at_offset,
    nodes_at_position,
    nodes_containing_offset,
)
from .spans import Location, Position, PositionRange
from .walker import AstWalker, JsonAstWalker, is_ast_node

__all__ = [
    "AstWalker",
    "JsonAstWalker",
    "LineIndex",
    "Location",
    "Position",
    "PositionRange",
    "SourceMapError",
    "SourceMappings",
    "find_lower_bound",
    "find_node_at_source_location",
    "format_src",
    "innermost_node_at_offset",
    "is_ast_node",
    "load_ast",
    "location_from_node",
    "location_from_src",
    "nodes_at_position",
    "nodes_containing_offset",
    "position_from_offset",
]
