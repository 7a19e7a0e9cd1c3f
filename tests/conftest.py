"""Shared fixtures for the 8-puzzle tests."""

import os

os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from eightpuzzle.domains.puzzle8 import GOAL, START, locate, swap


def board_with_blank_at(pos):
    """GOAL with the blank swapped into cell `pos` (still a valid board)."""
    return swap(locate(0, GOAL), pos, GOAL)


@pytest.fixture
def goal():
    return GOAL


@pytest.fixture
def start():
    return START


@pytest.fixture
def diagonal_board():
    """GOAL with 3 and 7 exchanged: both pieces sit diagonally opposite their goal cell."""
    return (1, 2, 7, 8, 0, 4, 3, 6, 5)
