from __future__ import annotations

from .corpus import generate_ast, generate_corpus

__all__ = ["generate_ast", "generate_corpus"]
