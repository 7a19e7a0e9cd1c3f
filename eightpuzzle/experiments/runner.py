#!/usr/bin/env python3
from __future__ import annotations
import argparse, csv, logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from eightpuzzle.domains.puzzle8 import GOAL, START, check_boards, pretty
from eightpuzzle.errors import InvalidBoard
from eightpuzzle.search.best_first import TIE_BREAKS, best_first

HEADER = [
    "algorithm","start","goal","tie_break","visited",
    "iterations","expanded","generated","duplicates","length","time_sec",
    "peak_open","termination","moves",
]
TRACE_HEADER = ["iteration","frontier","heuristic","depth"]

def _fmt_board(board) -> str:
    return "".join(str(x) for x in board)

def write_result(path: Path, res: Dict[str, Any], start, goal, visited: bool):
    """Append one result row, writing the header if the file is new."""
    path.parent.mkdir(parents=True, exist_ok=True)
    new = not path.exists() or path.stat().st_size == 0
    with path.open("a", newline="") as f:
        w = csv.writer(f)
        if new:
            w.writerow(HEADER)
        moves = res.get("moves")
        w.writerow([
            res["algorithm"], _fmt_board(start), _fmt_board(goal), res["tie_break"], int(visited),
            res["iterations"], res["expanded"], res["generated"], res["duplicates"],
            res["length"] if res["length"] is not None else "",
            f"{res['time']:.6f}",
            res["peak_open"], res["termination"],
            " ".join(str(m) for m in moves) if moves is not None else "",
        ])

def write_trace(path: Path, steps: List[Dict[str, int]]):
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="") as f:
        w = csv.DictWriter(f, fieldnames=TRACE_HEADER)
        w.writeheader()
        w.writerows(steps)

def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Greedy best-first 8-puzzle solver")
    ap.add_argument("--start", type=int, nargs=9, default=list(START), metavar="T",
                    help="Start board, 9 tiles row-major, 0 is the blank")
    ap.add_argument("--goal", type=int, nargs=9, default=list(GOAL), metavar="T",
                    help="Goal board, 9 tiles row-major")
    ap.add_argument("--tie_break", choices=list(TIE_BREAKS), default="lifo")
    ap.add_argument("--max_iterations", type=int, default=None, help="Cap on node selections")
    ap.add_argument("--timeout_sec", type=float, default=None, help="Wall-clock deadline")
    ap.add_argument("--visited", action="store_true", help="Skip boards that were already expanded")
    ap.add_argument("--allow_unsolvable", action="store_true",
                    help="Search even if start and goal differ in parity (use with a cap)")
    ap.add_argument("--out", type=Path, default=None, help="Append a result row to this CSV")
    ap.add_argument("--trace_out", type=Path, default=None, help="Write per-iteration trace CSV")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        start, goal = check_boards(args.start, args.goal, reject_unsolvable=not args.allow_unsolvable)
    except InvalidBoard as e:
        ap.error(str(e))

    res = best_first(start, goal,
                     tie_break=args.tie_break,
                     max_iterations=args.max_iterations,
                     timeout_sec=args.timeout_sec,
                     use_visited=args.visited,
                     trace=args.trace_out is not None)

    if args.out is not None:
        write_result(args.out, res, start, goal, args.visited)
        print(f"Wrote {args.out}")
    if args.trace_out is not None:
        write_trace(args.trace_out, res["trace"])
        print(f"Wrote {args.trace_out} ({len(res['trace'])} iterations)")

    print(f"iterations={res['iterations']} expanded={res['expanded']} "
          f"generated={res['generated']} peak_open={res['peak_open']} time={res['time']:.4f}s")

    if res["termination"] != "ok":
        print(f"No solution ({res['termination']}).")
        return 1

    moves = res["moves"]
    print(f"Solved in {len(moves)} moves: {' '.join(str(m) for m in moves) or '(already solved)'}")
    for i, board in enumerate(res["path"]):
        label = "start" if i == 0 else str(moves[i-1])
        print(f"\n[{i}] {label}\n{pretty(board)}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
