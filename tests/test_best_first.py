import pytest

from eightpuzzle.domains.puzzle8 import GOAL, START, Move, apply_move, replay
from eightpuzzle.errors import InvalidBoard, SearchExhausted, UnsolvableBoard
from eightpuzzle.heuristics.composite import composite
from eightpuzzle.search.best_first import Node, best_first, expand, is_reverse, solve

UNSOLVABLE = (2, 1, 3, 8, 0, 4, 7, 6, 5)


def make_node(board, history=()):
    return Node(board=board, history=tuple(history), heuristic=composite(board))


def test_is_reverse():
    assert not is_reverse(Move.UP, ())
    assert is_reverse(Move.DOWN, (Move.UP,))
    assert is_reverse(Move.RIGHT, (Move.UP, Move.LEFT))
    assert not is_reverse(Move.LEFT, (Move.LEFT,))


def test_expand_root_keeps_all_legal_moves():
    children = expand(make_node(GOAL))
    assert [c.history for c in children] == [(Move.UP,), (Move.DOWN,), (Move.LEFT,), (Move.RIGHT,)]
    for c in children:
        assert c.board == apply_move(c.history[-1], GOAL)
        assert c.heuristic == composite(c.board)


def test_expand_skips_reverse_of_last_move():
    node = make_node(GOAL, [Move.LEFT, Move.UP])
    children = expand(node)
    assert [c.history[-1] for c in children] == [Move.UP, Move.LEFT, Move.RIGHT]
    for c in children:
        assert c.history[:-1] == node.history
        assert not is_reverse(c.history[-1], node.history)


def test_expand_corner_after_move_yields_one_child():
    node = make_node(START, [Move.LEFT])
    children = expand(node)
    assert [c.history for c in children] == [(Move.LEFT, Move.DOWN)]


def test_expand_uses_given_hfun():
    children = expand(make_node(START), hfun=lambda b: 42)
    assert {c.heuristic for c in children} == {42}


def test_node_is_immutable():
    node = make_node(START)
    with pytest.raises(AttributeError):
        node.heuristic = 0


def test_solve_start_board():
    moves = solve(START)
    assert moves == [Move.DOWN, Move.RIGHT]
    assert replay(moves, START)[-1] == GOAL


def test_solve_goal_is_empty():
    assert solve(GOAL) == []


def test_best_first_counters_on_start():
    res = best_first(START)
    assert res["termination"] == "ok"
    assert res["moves"] == [Move.DOWN, Move.RIGHT]
    assert res["path"] == [START, (1, 2, 3, 0, 8, 4, 7, 6, 5), GOAL]
    assert res["length"] == 2
    assert res["iterations"] == 3
    assert res["expanded"] == 2
    assert res["generated"] == 4
    assert res["peak_open"] == 3
    assert res["algorithm"] == "GBFS"
    assert res["trace"] is None


def test_best_first_trace():
    res = best_first(START, trace=True)
    assert [s["heuristic"] for s in res["trace"]] == [7, 4, 0]
    assert [s["depth"] for s in res["trace"]] == [0, 1, 2]
    assert [s["frontier"] for s in res["trace"]] == [1, 2, 3]


@pytest.mark.parametrize("tie_break", ["lifo", "fifo"])
def test_tie_breaks_solve_start(tie_break):
    assert best_first(START, tie_break=tie_break)["moves"] == [Move.DOWN, Move.RIGHT]


def test_unknown_tie_break():
    with pytest.raises(ValueError):
        best_first(START, tie_break="g")


def test_lifo_prefers_newest_among_ties():
    # Flat heuristic: every node ties, so lifo behaves depth-first along Move order.
    res = best_first(GOAL, goal=START, hfun=lambda b: 0, max_iterations=4, trace=True)
    assert [s["depth"] for s in res["trace"]] == [0, 1, 2, 3]


def test_fifo_prefers_oldest_among_ties():
    res = best_first(GOAL, goal=START, hfun=lambda b: 0, tie_break="fifo", max_iterations=6, trace=True)
    assert [s["depth"] for s in res["trace"]] == [0, 1, 1, 1, 1, 2]


def test_custom_goal():
    moves = solve(GOAL, goal=START)
    assert replay(moves, GOAL)[-1] == START


def test_scrambled_board_with_visited_set():
    board = GOAL
    for m in [Move.UP, Move.LEFT, Move.DOWN, Move.DOWN, Move.RIGHT, Move.UP]:
        board = apply_move(m, board)
    moves = solve(board, use_visited=True)
    assert replay(moves, board)[-1] == GOAL


def test_max_iterations_raises_search_exhausted():
    with pytest.raises(SearchExhausted) as ei:
        solve(START, max_iterations=2)
    assert ei.value.termination == "max_iterations"
    assert ei.value.result["iterations"] == 2
    assert ei.value.result["moves"] is None


def test_timeout_terminates():
    res = best_first(UNSOLVABLE, timeout_sec=0.0, max_iterations=10000)
    assert res["termination"] in ("timeout", "max_iterations")
    assert res["path"] is None


def test_unsolvable_rejected_up_front():
    with pytest.raises(UnsolvableBoard):
        solve(UNSOLVABLE)


def test_unsolvable_allowed_hits_cap():
    with pytest.raises(SearchExhausted):
        solve(UNSOLVABLE, reject_unsolvable=False, max_iterations=200)


@pytest.mark.parametrize("bad", [(1, 2, 3), (0, 0, 3, 1, 8, 4, 7, 6, 5)])
def test_invalid_boards_rejected(bad):
    with pytest.raises(InvalidBoard):
        solve(bad)
    with pytest.raises(InvalidBoard):
        best_first(bad)
