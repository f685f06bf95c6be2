import os
import sys
import pytest

# Add project root to sys.path (so tests can import src.*)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.append(PROJECT_ROOT)

from src.domains.board import Board


@pytest.fixture
def goal3():
    return Board.goal(3)


@pytest.fixture
def make_board():
    """Returns a function building a Board from a flat row-major list."""
    def _make(flat):
        n = int(round(len(flat) ** 0.5))
        return Board([flat[r * n:(r + 1) * n] for r in range(n)])
    return _make
