from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

from .api import SourceMappings, load_ast, read_source
from .errors import SourceMapError
from .locations import location_from_src
from .spans import PositionRange


logger = logging.getLogger(__name__)


def _range_json(r: PositionRange) -> dict[str, Any] | None:
    if r.start is None or r.end is None:
        return None
    return {
        "start": {"line": r.start.line, "character": r.start.character},
        "end": {"line": r.end.line, "character": r.end.character},
    }


def _node_summary(sm: SourceMappings, node: Any) -> dict[str, Any]:
    return {
        "id": node.get("id"),
        "nodeType": node.get("nodeType"),
        "src": node.get("src"),
        "range": _range_json(sm.node_line_column_range(node)),
    }


def _format_node(n: dict[str, Any]) -> str:
    r = n["range"]
    where = f"{r['start']['line']}:{r['start']['character']}" if r else "?"
    return f"{n['nodeType']} id={n['id']} src={n['src']} at {where}"


def _run(args: argparse.Namespace) -> dict[str, Any]:
    ast = load_ast(args.ast, source_name=args.source_name)
    src_path = Path(args.source).expanduser()
    source = read_source(src_path)
    for offset in args.offset:
        if offset < 0:
            raise SourceMapError(message=f"invalid offset: {offset}", hint="offsets start at 0")

    sm = SourceMappings(source)
    queries: list[dict[str, Any]] = []
    for src in args.src:
        loc = location_from_src(src)
        if not loc.is_valid:
            logger.debug("invalid src %r", src)
        nodes = sm.nodes_at_position(args.node_type, loc, ast) if loc.is_valid else []
        queries.append(
            {
                "src": src,
                "range": _range_json(sm.src_to_line_column_range(src)),
                "nodes": [_node_summary(sm, n) for n in nodes],
            }
        )
    for offset in args.offset:
        node = sm.innermost_node_at_offset(args.node_type, offset, ast)
        pos = sm.position_from_offset(offset)
        queries.append(
            {
                "offset": offset,
                "position": {"line": pos.line, "character": pos.character},
                "nodes": [] if node is None else [_node_summary(sm, node)],
            }
        )
    return {"source": str(src_path), "lines": sm.index.line_count, "queries": queries}


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="srcmap", description="Map compiler src ranges to AST nodes and lines")
    ap.add_argument("ast", help="JSON AST or solc compiler output")
    ap.add_argument("source", help="Source file the AST was compiled from")
    ap.add_argument("--src", action="append", default=[], help="Range string s:l:f (repeatable)")
    ap.add_argument("--offset", action="append", type=int, default=[], help="Character offset (repeatable)")
    ap.add_argument("--node-type", default=None, help="Only report nodes of this nodeType")
    ap.add_argument("--source-name", default=None, help="Source unit to pick from compiler output")
    ap.add_argument("--json", action="store_true", help="Print results as JSON")
    ap.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(name)s: %(message)s")

    try:
        payload = _run(args)
    except SourceMapError as e:
        print(f"srcmap: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(payload, indent=2, sort_keys=True))
        return 0

    for q in payload["queries"]:
        if "src" in q:
            r = q["range"]
            where = "invalid range" if r is None else (
                f"{r['start']['line']}:{r['start']['character']}-{r['end']['line']}:{r['end']['character']}"
            )
            print(f"{q['src']} -> {where}")
        else:
            p = q["position"]
            print(f"@{q['offset']} -> {p['line']}:{p['character']}")
        for n in q["nodes"]:
            print("  " + _format_node(n))
    return 0
