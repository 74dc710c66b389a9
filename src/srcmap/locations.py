from __future__ import annotations

import re
from collections.abc import Mapping, Sequence

from .spans import Location


# Same leniency as JavaScript's parseInt(x, 10): sign, digits, ignore the rest.
_INT_PREFIX_RE = re.compile(r"\s*([+-]?[0-9]+)")


def _parse_int(field: str | None) -> int | None:
    if field is None:
        return None
    m = _INT_PREFIX_RE.match(field)
    if m is None:
        return None
    try:
        return int(m.group(1))
    except ValueError:
        # digit run longer than sys.get_int_max_str_digits()
        return None


def location_from_src(src: str) -> Location:
    """Break a compiler "src" string (s:l:f) into its components.

    Never raises; malformed fields come back as None and make the
    location invalid (see Location.is_valid).
    """
    parts: list[str | None] = list(src.split(":"))
    parts.extend([None] * (3 - len(parts)))
    return Location(
        start=_parse_int(parts[0]),
        length=_parse_int(parts[1]),
        file=_parse_int(parts[2]),
    )


def format_src(location: Location) -> str:
    return f"{location.start}:{location.length}:{location.file}"


def node_field(node: object, name: str) -> object:
    """Read a field from a JSON mapping or an attribute-style node."""
    if isinstance(node, Mapping):
        return node.get(name)
    return getattr(node, name, None)


def is_node_like(node: object) -> bool:
    if node is None:
        return False
    if isinstance(node, (str, bytes, int, float, bool)):
        return False
    if isinstance(node, Sequence):
        return False
    return True


def location_from_node(node: object) -> Location | None:
    """Location of an AST node's "src" attribute, or None if it has none."""
    if not is_node_like(node):
        return None
    src = node_field(node, "src")
    if not isinstance(src, str) or not src:
        return None
    return location_from_src(src)
