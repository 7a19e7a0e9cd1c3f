from __future__ import annotations
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, List, Optional, Sequence, Set, Tuple
from time import perf_counter
import heapq
import itertools
import logging

from eightpuzzle.domains.puzzle8 import (
    GOAL, Board, Move, apply_move, check_boards, is_legal, replay, validate_board,
)
from eightpuzzle.errors import SearchExhausted
from eightpuzzle.heuristics.composite import composite

logger = logging.getLogger(__name__)

TIE_BREAKS = ("lifo", "fifo")

@dataclass(frozen=True)
class Node:
    board: Board
    history: Tuple[Move, ...]
    heuristic: int

def is_reverse(move: Move, history: Sequence[Move]) -> bool:
    """True if `move` undoes the most recent move in `history`."""
    return bool(history) and move is history[-1].reverse

def expand(node: Node, hfun: Callable[[Board], int] = composite) -> List[Node]:
    """Legal successors of `node` in Move order, minus the one that backtracks."""
    out: List[Node] = []
    for move in Move:
        if not is_legal(move, node.board) or is_reverse(move, node.history):
            continue
        board = apply_move(move, node.board)
        out.append(Node(board=board, history=node.history + (move,), heuristic=hfun(board)))
    return out

def best_first(
    start: Sequence[int],
    goal: Sequence[int] = GOAL,
    hfun: Optional[Callable[[Board], int]] = None,
    tie_break: str = "lifo",
    max_iterations: int | None = None,
    timeout_sec: float | None = None,
    use_visited: bool = False,
    trace: bool = False,
) -> Dict[str, Any]:
    """
    Greedy best-first search on the heuristic alone (no path-cost term).
    hfun: callable(board) -> int, defaults to the composite heuristic scored against `goal`.
    tie_break: 'lifo' prefers the newest expansion among equal scores (then Move order),
               'fifo' the oldest.
    max_iterations / timeout_sec: optional caps, checked once per selection.
    use_visited: skip nodes whose board has already been expanded.
    """
    if tie_break not in TIE_BREAKS:
        raise ValueError(f"tie_break must be one of {TIE_BREAKS}, got {tie_break!r}")
    start = validate_board(start)
    goal = validate_board(goal)
    h = hfun or partial(composite, goal=goal)
    t0 = perf_counter()

    open_heap: List[Tuple[Tuple[int, ...], int, Node]] = []
    counter = itertools.count()
    batches = itertools.count()

    def priority_tuple(score: int, batch: int, k: int, ctr: int) -> Tuple[int, ...]:
        if tie_break == "fifo": return (score, ctr)
        return (score, -batch, k)

    def push_all(nodes: List[Node]):
        batch = next(batches)
        for k, n in enumerate(nodes):
            ctr = next(counter)
            heapq.heappush(open_heap, (priority_tuple(n.heuristic, batch, k, ctr), ctr, n))

    push_all([Node(board=start, history=(), heuristic=h(start))])
    closed: Set[Board] = set()

    iterations = 0
    expanded = 0
    generated = 0
    duplicates = 0
    peak_open = 1
    steps: List[Dict[str, int]] = []

    logger.debug("best-first search from %s to %s (tie_break=%s)", start, goal, tie_break)

    def finish(termination: str, node: Optional[Node] = None) -> Dict[str, Any]:
        moves = list(node.history) if node is not None else None
        res = {
            "moves": moves,
            "path": replay(moves, start) if moves is not None else None,
            "length": len(moves) if moves is not None else None,
            "iterations": iterations,
            "expanded": expanded,
            "generated": generated,
            "duplicates": duplicates,
            "peak_open": peak_open,
            "time": perf_counter() - t0,
            "algorithm": "GBFS",
            "tie_break": tie_break,
            "termination": termination,
            "trace": steps if trace else None,
        }
        logger.info("search finished: %s after %d iterations (%d expanded)",
                    termination, iterations, expanded)
        return res

    while open_heap:
        if max_iterations is not None and iterations >= max_iterations:
            return finish("max_iterations")
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return finish("timeout")

        peak_open = max(peak_open, len(open_heap))
        _, _, node = heapq.heappop(open_heap)
        iterations += 1
        if trace:
            steps.append({
                "iteration": iterations,
                "frontier": len(open_heap) + 1,
                "heuristic": node.heuristic,
                "depth": len(node.history),
            })

        if node.board == goal:
            return finish("ok", node)

        if use_visited:
            if node.board in closed:
                duplicates += 1
                continue
            closed.add(node.board)

        children = expand(node, h)
        expanded += 1
        generated += len(children)
        push_all(children)

    return finish("exhausted")

def solve(
    start: Sequence[int],
    goal: Sequence[int] = GOAL,
    reject_unsolvable: bool = True,
    **options: Any,
) -> List[Move]:
    """Moves (oldest first) that take `start` to `goal`.

    Raises InvalidBoard / UnsolvableBoard before searching, and SearchExhausted if
    a cap in `options` (see best_first) stops the search first.
    """
    start, goal = check_boards(start, goal, reject_unsolvable=reject_unsolvable)
    res = best_first(start, goal, **options)
    if res["termination"] != "ok":
        raise SearchExhausted(
            f"no solution after {res['iterations']} iterations ({res['termination']})", res)
    return res["moves"]
