#!/usr/bin/env python3
"""Maze structural diagnostics for specific seeds.

Usage:
  python scripts/diagnose_seeds.py 292372 730727
  python scripts/diagnose_seeds.py --range 0 200 --jobs 4

If no seeds are provided, a default list is used.
Exits with non-zero status if structural issues are detected.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from concurrent.futures import ProcessPoolExecutor
from typing import List

# Ensure project root on path if executed directly
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from mazegen.maze.debug_checks import check_seed  # noqa: E402 import after path fix

DEFAULT_SEEDS = [292372, 730727]


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Check generated mazes for structural issues.")
    parser.add_argument("seeds", nargs="*", type=int, help="Seeds to check")
    parser.add_argument("--range", dest="seed_range", nargs=2, type=int, metavar=("START", "STOP"))
    parser.add_argument("--jobs", type=int, default=1, help="Worker processes (independent seeds run in parallel)")
    return parser.parse_args(argv)


def main(argv: List[str]) -> int:
    args = parse_args(argv)
    seeds = list(args.seeds)
    if args.seed_range:
        seeds.extend(range(*args.seed_range))
    if not seeds:
        seeds = DEFAULT_SEEDS
    if args.jobs > 1:
        with ProcessPoolExecutor(max_workers=args.jobs) as pool:
            results = list(pool.map(check_seed, seeds))
    else:
        results = [check_seed(s) for s in seeds]
    print(json.dumps({"results": results}, indent=2))
    # Non-zero exit if any failure
    if not all(r["ok"] for r in results):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
