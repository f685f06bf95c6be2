from __future__ import annotations
import numbers
from typing import List, Sequence, Tuple

from src.domains.inversions import count_inversions

Rows = Tuple[Tuple[int, ...], ...]


class Board:
    """Immutable N×N sliding-tile board (0 is the blank).

    Hamming, Manhattan and the blank position are computed once in the
    constructor; every successor is a new Board.
    """

    def __init__(self, tiles: Sequence[Sequence[int]]):
        if tiles is None or len(tiles) == 0:
            raise ValueError("Invalid tiles: empty board")
        n = len(tiles)
        if any(row is None or len(row) != n for row in tiles):
            raise ValueError("Invalid tiles: board is not square")
        if n < 2:
            raise ValueError("Invalid tiles: dimension must be at least 2")
        for row in tiles:
            for t in row:
                if isinstance(t, bool) or not isinstance(t, numbers.Integral):
                    raise ValueError(f"Invalid tiles: {t!r} is not an integer")
        rows: Rows = tuple(tuple(int(t) for t in row) for row in tiles)
        if sorted(t for row in rows for t in row) != list(range(n * n)):
            raise ValueError(f"Invalid tiles: expected a permutation of 0..{n * n - 1}")
        self._n = n
        self._tiles = rows
        self._hamming = self._compute_hamming()
        self._manhattan = self._compute_manhattan()
        self._blank_pos = self._compute_blank_pos()

    @classmethod
    def goal(cls, n: int) -> Board:
        flat = list(range(1, n * n)) + [0]
        return cls([flat[r * n:(r + 1) * n] for r in range(n)])

    # ---------- derived values ----------
    def _compute_hamming(self) -> int:
        n = self._n
        out = 0
        for i, row in enumerate(self._tiles):
            for j, t in enumerate(row):
                if t != 0 and t != i * n + j + 1:
                    out += 1
        return out

    def _compute_manhattan(self) -> int:
        n = self._n
        dist = 0
        for i, row in enumerate(self._tiles):
            for j, t in enumerate(row):
                if t == 0:
                    continue
                gr, gc = divmod(t - 1, n)
                dist += abs(gr - i) + abs(gc - j)
        return dist

    def _compute_blank_pos(self) -> int:
        flat = [t for row in self._tiles for t in row]
        return flat.index(0) + 1

    # ---------- accessors ----------
    def size(self) -> int:
        return self._n

    def tile_at(self, row: int, col: int) -> int:
        if not (0 <= row < self._n and 0 <= col < self._n):
            raise IndexError(f"Invalid row or column: ({row}, {col})")
        return self._tiles[row][col]

    def hamming(self) -> int:
        return self._hamming

    def manhattan(self) -> int:
        return self._manhattan

    def blank_pos(self) -> int:
        """1-based row-major index of the blank."""
        return self._blank_pos

    def blank(self) -> Tuple[int, int]:
        return divmod(self._blank_pos - 1, self._n)

    def rows(self) -> List[List[int]]:
        return [list(row) for row in self._tiles]

    # ---------- goal & solvability ----------
    def is_goal(self) -> bool:
        return self._hamming == 0

    def is_solvable(self) -> bool:
        """Parity rule:
           - N odd: inversions must be even
           - N even: (inversions + blank_pos) must be ODD, blank_pos being the
             1-based row-major index of the blank
        """
        arr = [t for row in self._tiles for t in row if t != 0]
        inv = count_inversions(arr)
        if self._n % 2 == 1:
            return inv % 2 == 0
        return (inv + self._blank_pos) % 2 == 1

    # ---------- transitions ----------
    def neighbors(self) -> List[Board]:
        """Boards one blank slide away, in the order down, up, right, left."""
        r, c = self.blank()
        n = self._n
        out: List[Board] = []
        for dr, dc in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            r2, c2 = r + dr, c + dc
            if 0 <= r2 < n and 0 <= c2 < n:
                clone = self.rows()
                clone[r][c], clone[r2][c2] = clone[r2][c2], clone[r][c]
                out.append(Board(clone))
        return out

    # ---------- value semantics ----------
    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Board):
            return NotImplemented
        return self._n == other._n and self._tiles == other._tiles

    def __hash__(self) -> int:
        return hash((self._n, self._tiles))

    def render(self) -> str:
        return "\n".join(
            " ".join("%2s" % (" " if t == 0 else t) for t in row)
            for row in self._tiles
        )

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board({self._tiles!r})"
