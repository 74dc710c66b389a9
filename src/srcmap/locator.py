from __future__ import annotations

import logging
from typing import Any

from .locations import location_from_node, node_field
from .spans import Location
from .walker import AstWalker, JsonAstWalker


logger = logging.getLogger(__name__)


def _walker(walker: AstWalker | None) -> AstWalker:
    return walker if walker is not None else JsonAstWalker()


def nodes_at_position(
    node_type: str | None,
    location: Location,
    ast: Any,
    *,
    walker: AstWalker | None = None,
) -> list[Any]:
    """All nodes whose src range is exactly location, in traversal order.

    node_type restricts the match to one nodeType; a falsy value matches any.
    """
    found: list[Any] = []
    if ast is None:
        return found

    def visit(node: Any) -> bool:
        loc = location_from_node(node)
        if loc is not None and loc.same_range(location):
            if not node_type or node_field(node, "nodeType") == node_type:
                found.append(node)
        return True

    _walker(walker).walk_full(ast, visit)
    logger.debug(
        "nodes_at_position(%r, %s:%s): %d match(es)", node_type, location.start, location.length, len(found)
    )
    return found


def find_node_at_source_location(
    node_type: str | None,
    location: Location,
    ast: Any,
    *,
    walker: AstWalker | None = None,
) -> Any | None:
    """The node of node_type (None for any) whose src range is location.

    When several nodes share the range, the last one visited wins.
    """
    if ast is None:
        return None

    found: Any | None = None

    def visit(node: Any) -> bool:
        nonlocal found
        loc = location_from_node(node)
        if loc is not None and loc.same_range(location):
            if node_type is None or node_field(node, "nodeType") == node_type:
                found = node
        return True

    _walker(walker).walk_full(ast, visit)
    logger.debug(
        "find_node_at_source_location(%r, %s:%s): %s",
        node_type,
        location.start,
        location.length,
        "found" if found is not None else "no match",
    )
    return found


def nodes_containing_offset(
    node_type: str | None,
    offset: int,
    ast: Any,
    *,
    walker: AstWalker | None = None,
) -> list[Any]:
    found: list[Any] = []
    if ast is None:
        return found

    def visit(node: Any) -> bool:
        loc = location_from_node(node)
        if loc is not None and loc.contains(offset):
            if not node_type or node_field(node, "nodeType") == node_type:
                found.append(node)
        return True

    _walker(walker).walk_full(ast, visit)
    logger.debug("nodes_containing_offset(%r, %d): %d match(es)", node_type, offset, len(found))
    return found


def innermost_node_at_offset(
    node_type: str | None,
    offset: int,
    ast: Any,
    *,
    walker: AstWalker | None = None,
) -> Any | None:
    """Narrowest node containing offset; on equal length the last visited wins."""
    best: Any | None = None
    best_len = -1
    for node in nodes_containing_offset(node_type, offset, ast, walker=walker):
        length = location_from_node(node).length
        if best is None or length <= best_len:
            best, best_len = node, length
    return best
