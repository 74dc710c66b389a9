from __future__ import annotations

import random
import string
from dataclasses import dataclass, field
from typing import Any


_KEYWORDS = {
    "contract",
    "function",
    "return",
    "returns",
    "uint",
    "public",
    "if",
    "else",
}


def _ident(r: random.Random) -> str:
    head = r.choice(string.ascii_letters + "_")
    tail = "".join(r.choice(string.ascii_letters + string.digits + "_") for _ in range(r.randint(0, 8)))
    s = head + tail
    if s in _KEYWORDS:
        return s + "_"
    return s


@dataclass(slots=True)
class _Writer:
    """Accumulates source text and hands out src strings for what it wrote."""

    file: int = 0
    parts: list[str] = field(default_factory=list)
    offset: int = 0
    next_id: int = 1

    def write(self, text: str) -> None:
        self.parts.append(text)
        self.offset += len(text)

    def node(self, node_type: str, start: int, **attrs: Any) -> dict[str, Any]:
        out: dict[str, Any] = {
            "id": self.next_id,
            "nodeType": node_type,
            "src": f"{start}:{self.offset - start}:{self.file}",
        }
        self.next_id += 1
        out.update(attrs)
        return out

    def text(self) -> str:
        return "".join(self.parts)


def generate_ast(*, seed: int, contracts: int = 2) -> tuple[str, dict[str, Any]]:
    """Generate a deterministic (source, JSON AST) pair.

    The AST mimics the compiler's JSON output: every node has an id, a
    nodeType and a src string that points at the text it was written from.
    Nested expressions share their parent's start, and an
    ExpressionStatement spans exactly the same text as its expression.
    """
    r = random.Random(seed)
    w = _Writer()
    w.write("// generated\n")
    nodes = []
    for _ in range(contracts):
        nodes.append(_gen_contract(r, w))
        w.write("\n")
    return w.text(), w.node("SourceUnit", 0, nodes=nodes)


def generate_corpus(*, seed: int, count: int) -> list[tuple[str, dict[str, Any]]]:
    r = random.Random(seed)
    return [generate_ast(seed=r.randrange(1 << 30), contracts=r.randint(1, 3)) for _ in range(count)]


def _gen_contract(r: random.Random, w: _Writer) -> dict[str, Any]:
    start = w.offset
    name = _ident(r)
    w.write(f"contract {name} {{\n")
    functions = []
    for _ in range(r.randint(0, 3)):
        w.write("    ")
        functions.append(_gen_function(r, w))
        w.write("\n")
    w.write("}")
    return w.node("ContractDefinition", start, name=name, nodes=functions)


def _gen_function(r: random.Random, w: _Writer) -> dict[str, Any]:
    start = w.offset
    name = _ident(r)
    w.write(f"function {name}() public ")
    body_start = w.offset
    w.write("{\n")
    statements = []
    for _ in range(r.randint(0, 4)):
        w.write("        ")
        statements.append(_gen_statement(r, w))
        w.write(";\n")
    w.write("    }")
    body = w.node("Block", body_start, statements=statements)
    return w.node("FunctionDefinition", start, name=name, body=body, parameters=None)


def _gen_statement(r: random.Random, w: _Writer) -> dict[str, Any]:
    start = w.offset
    expr = _gen_expression(r, w, depth=0)
    return w.node("ExpressionStatement", start, expression=expr)


def _gen_expression(r: random.Random, w: _Writer, *, depth: int) -> dict[str, Any]:
    start = w.offset
    if depth < 2 and r.random() < 0.5:
        left = _gen_expression(r, w, depth=depth + 1)
        op = r.choice(["+", "-", "*"])
        w.write(f" {op} ")
        right = _gen_expression(r, w, depth=depth + 1)
        return w.node(
            "BinaryOperation",
            start,
            operator=op,
            leftExpression=left,
            rightExpression=right,
        )
    if r.random() < 0.5:
        value = str(r.randint(0, 999))
        w.write(value)
        return w.node("Literal", start, value=value)
    name = _ident(r)
    w.write(name)
    return w.node("Identifier", start, name=name)
