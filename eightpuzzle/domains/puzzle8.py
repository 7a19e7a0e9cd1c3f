from __future__ import annotations
from enum import Enum
from typing import Iterable, List, Sequence, Tuple

from eightpuzzle.errors import IllegalMove, InvalidBoard, UnsolvableBoard

Board = Tuple[int, ...]  # 9-length tuple, row-major, 0 is blank

# 1 2 3
# 8 0 4
# 7 6 5
GOAL: Board = (1,2,3,8,0,4,7,6,5)

# Solved by [down, right]
START: Board = (0,2,3,1,8,4,7,6,5)


class Move(Enum):
    """Direction the blank slides. Declaration order is the expansion order."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    def __str__(self) -> str:
        return self.value

    @property
    def reverse(self) -> "Move":
        return _REVERSE[self]


_REVERSE = {
    Move.UP: Move.DOWN,
    Move.DOWN: Move.UP,
    Move.LEFT: Move.RIGHT,
    Move.RIGHT: Move.LEFT,
}

# Index offset of the cell the blank trades places with
_OFFSET = {Move.UP: -3, Move.DOWN: 3, Move.LEFT: -1, Move.RIGHT: 1}

# ---------------- Board model ----------------

def locate(piece: int, board: Board) -> int:
    """Index of `piece` on `board`."""
    try:
        return board.index(piece)
    except ValueError:
        raise InvalidBoard(f"piece {piece!r} is not on board {board!r}") from None

def swap(pos1: int, pos2: int, board: Board) -> Board:
    lst = list(board)
    lst[pos1], lst[pos2] = lst[pos2], lst[pos1]
    return tuple(lst)

def validate_board(board: Sequence[int]) -> Board:
    """Return `board` as a tuple, or raise InvalidBoard if it is not a permutation of 0..8."""
    try:
        s = tuple(board)
    except TypeError:
        raise InvalidBoard(f"board must be a sequence, got {board!r}") from None
    if len(s) != 9:
        raise InvalidBoard(f"board must have 9 cells, got {len(s)}")
    if any(isinstance(x, bool) or not isinstance(x, int) for x in s):
        raise InvalidBoard(f"board cells must be integers: {s!r}")
    if sorted(s) != list(range(9)):
        raise InvalidBoard(f"board must contain each of 0..8 exactly once: {s!r}")
    return s

def inversions(board: Board) -> int:
    arr = [x for x in board if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i+1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    return inv

def is_solvable(board: Board, goal: Board = GOAL) -> bool:
    """On a 3x3 grid two boards are mutually reachable iff their inversion parities match."""
    return inversions(board) % 2 == inversions(goal) % 2

def check_boards(start: Sequence[int], goal: Sequence[int] = GOAL,
                 reject_unsolvable: bool = True) -> Tuple[Board, Board]:
    """Validate a (start, goal) pair before searching."""
    s = validate_board(start)
    g = validate_board(goal)
    if reject_unsolvable and not is_solvable(s, g):
        raise UnsolvableBoard(f"{s!r} cannot reach {g!r} (inversion parity differs)")
    return s, g

def pretty(board: Board) -> str:
    rows = []
    for r in range(3):
        cells = board[3*r:3*r+3]
        rows.append(" ".join("." if v == 0 else str(v) for v in cells))
    return "\n".join(rows)

# ---------------- Move engine ----------------

def is_legal(move: Move, board: Board) -> bool:
    p = locate(0, board)
    if move is Move.UP:
        return p > 2
    if move is Move.DOWN:
        return p < 6
    if move is Move.LEFT:
        return p % 3 != 0
    if move is Move.RIGHT:
        return p % 3 != 2
    raise TypeError(f"not a Move: {move!r}")

def apply_move(move: Move, board: Board) -> Board:
    """Slide the blank one cell in direction `move`."""
    if not is_legal(move, board):
        raise IllegalMove(f"{move} is not legal on {board!r}")
    p = locate(0, board)
    return swap(p, p + _OFFSET[move], board)

def legal_moves(board: Board) -> List[Move]:
    return [m for m in Move if is_legal(m, board)]

def replay(moves: Iterable[Move], board: Board) -> List[Board]:
    """Boards visited while applying `moves` in order, `board` first."""
    path = [board]
    for m in moves:
        board = apply_move(m, board)
        path.append(board)
    return path
