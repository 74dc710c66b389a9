from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol


Visitor = Callable[[Any], bool]


class AstWalker(Protocol):
    """Anything that can visit every node of a tree, root first."""

    def walk_full(self, ast: Any, callback: Visitor) -> None: ...


def is_ast_node(value: object) -> bool:
    return isinstance(value, Mapping) and ("nodeType" in value or "src" in value)


class JsonAstWalker:
    """Full traversal of a decoded compiler JSON AST.

    Every mapping that carries a nodeType or src key is a node. Children
    are found in any mapping value or list/tuple item, in key order. The
    callback's return value is ignored; traversal never stops early.
    """

    def walk_full(self, ast: Any, callback: Visitor) -> None:
        if not is_ast_node(ast):
            return

        stack: list[Any] = [ast]
        while stack:
            node = stack.pop()
            callback(node)
            stack.extend(reversed(list(_children(node))))


def _children(node: Mapping[str, Any]):
    for value in node.values():
        if isinstance(value, (list, tuple)):
            for item in value:
                if item is not None and is_ast_node(item):
                    yield item
        elif is_ast_node(value):
            yield value
