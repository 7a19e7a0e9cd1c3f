from __future__ import annotations

from eightpuzzle.domains.puzzle8 import GOAL, Board, locate

# NOTE: the per-piece distance is |drow + dcol|, not |drow| + |dcol|.
# Opposite-signed deltas cancel, so this under-counts diagonal displacement
# and is not admissible. Search order depends on it; keep as is.

def manhattan_distance(piece: int, board: Board, goal: Board = GOAL) -> int:
    r, c = divmod(locate(piece, board), 3)
    gr, gc = divmod(locate(piece, goal), 3)
    return abs((r - gr) + (c - gc))

def manhattan_sum(board: Board, goal: Board = GOAL) -> int:
    """Distance summed over all nine pieces, blank included."""
    return sum(manhattan_distance(piece, board, goal) for piece in board)

def misplaced_count(board: Board, goal: Board = GOAL) -> int:
    """Pieces (blank included) not on their goal cell."""
    return sum(1 for a, b in zip(board, goal) if a != b)

def composite(board: Board, goal: Board = GOAL) -> int:
    return manhattan_sum(board, goal) + misplaced_count(board, goal)
