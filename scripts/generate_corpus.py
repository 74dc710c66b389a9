from __future__ import annotations

import argparse
import json
from pathlib import Path

from srcmap.testing import generate_corpus


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=100)
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve() / f"seed_{args.seed}_count_{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)

    for i, (source, ast) in enumerate(generate_corpus(seed=args.seed, count=args.count)):
        (out_dir / f"case_{i:06d}.sol").write_text(source, encoding="utf-8")
        (out_dir / f"case_{i:06d}.json").write_text(json.dumps(ast, indent=2), encoding="utf-8")

    print(str(out_dir))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
