"""
Board tests:
- construction and validation
- cached distances and goal test
- parity solvability
- neighbor generation
- equality, hashing and rendering
"""

import pytest

from src.domains.board import Board

PRINCETON = [[8, 1, 3], [4, 0, 2], [7, 6, 5]]


def _diff_cells(a: Board, b: Board) -> int:
    n = a.size()
    return sum(1 for i in range(n) for j in range(n) if a.tile_at(i, j) != b.tile_at(i, j))


# ---------- construction ----------
@pytest.mark.parametrize("tiles", [
    None,
    [],
    [[1, 2, 3], [4, 5, 6]],
    [[1, 2], [3]],
    [[0]],
])
def test_rejects_empty_or_non_square(tiles):
    with pytest.raises(ValueError):
        Board(tiles)


@pytest.mark.parametrize("tiles", [
    [[1, 1], [3, 0]],
    [[1, 2], [3, 4]],
    [[1, 2], [3, -1]],
    [[1.9, 2], [3, 0]],
    [[1.0, 2], [3, 0]],
    ["12", "30"],
    [[True, 2], [3, 0]],
])
def test_rejects_non_permutation(tiles):
    with pytest.raises(ValueError):
        Board(tiles)


def test_constructor_copies_caller_rows():
    tiles = [row[:] for row in PRINCETON]
    b = Board(tiles)
    tiles[0][0] = 99
    assert b.tile_at(0, 0) == 8
    rows = b.rows()
    rows[1][1] = 5
    assert b.tile_at(1, 1) == 0


def test_size_and_tile_at():
    b = Board(PRINCETON)
    assert b.size() == 3
    assert b.tile_at(0, 0) == 8
    assert b.tile_at(1, 1) == 0
    assert b.tile_at(2, 2) == 5


@pytest.mark.parametrize("row, col", [(3, 0), (0, 3), (-1, 0), (0, -1), (3, 3)])
def test_tile_at_out_of_range(row, col):
    with pytest.raises(IndexError):
        Board(PRINCETON).tile_at(row, col)


# ---------- distances & goal ----------
def test_princeton_distances():
    b = Board(PRINCETON)
    assert b.hamming() == 5
    assert b.manhattan() == 10
    assert not b.is_goal()


@pytest.mark.parametrize("n", [2, 3, 4, 5])
def test_goal_board(n):
    g = Board.goal(n)
    assert g.is_goal()
    assert g.hamming() == 0
    assert g.manhattan() == 0
    assert g.tile_at(n - 1, n - 1) == 0
    assert g.blank_pos() == n * n


def test_blank_position_is_one_based_row_major():
    b = Board(PRINCETON)
    assert b.blank_pos() == 5
    assert b.blank() == (1, 1)
    assert Board([[0, 1], [2, 3]]).blank_pos() == 1


def test_distances_non_negative_and_hamming_zero_means_goal(goal3):
    for b in [Board(PRINCETON), goal3] + goal3.neighbors():
        assert b.hamming() >= 0 and b.manhattan() >= 0
        assert b.hamming() <= b.manhattan()
        assert (b.hamming() == 0) == b.is_goal()


# ---------- solvability ----------
def test_goal_3x3_solvable(goal3):
    assert goal3.is_solvable()


def test_adjacent_swap_3x3_unsolvable():
    assert not Board([[1, 2, 3], [4, 5, 6], [8, 7, 0]]).is_solvable()


def test_princeton_board_solvable():
    assert Board(PRINCETON).is_solvable()


def test_odd_board_parity_follows_inversions(make_board):
    assert make_board([1, 2, 3, 4, 5, 6, 7, 0, 8]).is_solvable()
    assert not make_board([2, 1, 3, 4, 5, 6, 7, 8, 0]).is_solvable()


def test_even_board_parity_uses_blank_row_major_index(make_board):
    # no inversions; blank at index 1 -> odd sum
    assert make_board([0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15]).is_solvable()
    # no inversions; blank at index 2 -> even sum
    assert not make_board([1, 0, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15]).is_solvable()
    # one inversion; blank at index 2 -> odd sum
    assert make_board([2, 0, 1, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15]).is_solvable()


# ---------- neighbors ----------
def test_neighbors_order_down_up_right_left():
    got = Board(PRINCETON).neighbors()
    assert got == [
        Board([[8, 1, 3], [4, 6, 2], [7, 0, 5]]),
        Board([[8, 0, 3], [4, 1, 2], [7, 6, 5]]),
        Board([[8, 1, 3], [4, 2, 0], [7, 6, 5]]),
        Board([[8, 1, 3], [0, 4, 2], [7, 6, 5]]),
    ]


@pytest.mark.parametrize("flat, expected", [
    ([0, 1, 2, 3, 4, 5, 6, 7, 8], 2),
    ([1, 2, 3, 4, 5, 6, 7, 8, 0], 2),
    ([1, 0, 2, 3, 4, 5, 6, 7, 8], 3),
    ([1, 2, 3, 0, 4, 5, 6, 7, 8], 3),
    ([1, 2, 3, 4, 0, 5, 6, 7, 8], 4),
])
def test_neighbor_count_by_blank_position(make_board, flat, expected):
    assert len(make_board(flat).neighbors()) == expected


def test_neighbors_differ_in_exactly_two_cells():
    b = Board(PRINCETON)
    for nb in b.neighbors():
        assert _diff_cells(b, nb) == 2
        assert nb is not b
    assert b == Board(PRINCETON)


def test_goal_neighbors_in_2x2():
    assert Board.goal(2).neighbors() == [Board([[1, 0], [3, 2]]), Board([[1, 2], [0, 3]])]


# ---------- value semantics ----------
def test_equality_is_structural():
    a = Board(PRINCETON)
    b = Board([row[:] for row in PRINCETON])
    assert a == a
    assert a == b and b == a
    assert a != Board.goal(3)
    assert a != Board.goal(2)
    assert a != "not a board"


def test_hash_consistent_with_equality():
    a = Board(PRINCETON)
    b = Board([row[:] for row in PRINCETON])
    assert hash(a) == hash(b)
    assert len({a, b, Board.goal(3)}) == 2


def test_render_3x3(goal3):
    assert goal3.render() == " 1  2  3\n 4  5  6\n 7  8   "
    assert str(goal3) == goal3.render()


def test_render_two_digit_tiles():
    text = Board.goal(4).render()
    lines = text.split("\n")
    assert len(lines) == 4
    assert lines[0] == " 1  2  3  4"
    assert lines[3] == "13 14 15   "
    assert not text.endswith("\n")


def test_repr():
    assert repr(Board.goal(2)) == "Board(((1, 2), (3, 0)))"


def test_accepts_integral_tiles_and_stores_plain_ints():
    class Tile(int):
        pass

    b = Board([[Tile(1), Tile(2)], [Tile(3), Tile(0)]])
    assert b == Board.goal(2)
    assert type(b.tile_at(0, 0)) is int
