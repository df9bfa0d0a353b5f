#!/usr/bin/env python3
"""Maze structural diagnostics for specific seeds.

Usage:
  python scripts/diagnose_seeds.py 292372 730727
  python scripts/diagnose_seeds.py --width 20 --height 20 1 2 3

If no seeds are provided as CLI args, a default list is used.
Exits with non-zero status if any maze is not a perfect spanning tree or its
finish is not a single-entry leaf.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
from typing import List

# Ensure project root on path if executed directly
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from mazecraft.maze import Maze  # noqa: E402 import after path fix
from mazecraft.maze.analysis import analyze  # noqa: E402 import after path fix

DEFAULT_SEEDS = [292372, 730727]
FINISH_ENTRY_SIDES = {"west", "south"}


def run_for_seed(seed: int, width: int, height: int) -> dict:
    maze = Maze(seed=seed, width=width, height=height)
    res = analyze(maze.grid)
    finish_sides = res["finish_open_sides"]
    issues = {
        "unreachable": len(res["unreachable"]),
        "unfilled": len(res["unfilled"]),
        "asymmetric": len(res["asymmetric"]),
        "edge_delta": res["edges"] - res["expected_edges"],
        "finish_not_leaf": int(len(finish_sides) != 1 or not set(finish_sides) <= FINISH_ENTRY_SIDES),
        "start_walled_in": int(not res["start_open_sides"]),
    }
    return {"seed": seed, "width": width, "height": height, "issues": issues, "ok": all(v == 0 for v in issues.values())}


def main(argv: List[str]) -> int:
    parser = argparse.ArgumentParser(description="Check generated mazes for structural defects")
    parser.add_argument("seeds", nargs="*", type=int)
    parser.add_argument("--width", type=int, default=20)
    parser.add_argument("--height", type=int, default=20)
    args = parser.parse_args(argv)
    seeds = args.seeds or DEFAULT_SEEDS
    results = [run_for_seed(s, args.width, args.height) for s in seeds]
    print(json.dumps({"results": results}, indent=2))
    # Non-zero exit if any failure
    if not all(r["ok"] for r in results):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
