from __future__ import annotations
from pathlib import Path
from typing import List

from src.domains.board import Board


def read_ints(text: str) -> List[int]:
    """Whitespace-separated integers, in order."""
    out: List[int] = []
    for tok in text.split():
        try:
            out.append(int(tok))
        except ValueError:
            raise ValueError(f"Expected an integer, got {tok!r}") from None
    return out


def parse_board(text: str) -> Board:
    """Board from 'n' followed by n*n tiles in row-major order."""
    vals = read_ints(text)
    if not vals:
        raise ValueError("Empty input")
    n = vals[0]
    if n < 1 or len(vals) != 1 + n * n:
        raise ValueError(f"Expected {n}x{n} = {n * n} tiles after the dimension, got {len(vals) - 1}")
    flat = vals[1:]
    return Board([flat[r * n:(r + 1) * n] for r in range(n)])


def load_board(path: str | Path) -> Board:
    return parse_board(Path(path).read_text())


def _parse_rendered_row(line: str) -> List[int]:
    # Cells are '%2s' wide (wider for 3+ digit tiles) and separated by one space;
    # the blank cell is two spaces.
    row: List[int] = []
    pos = 0
    while pos < len(line):
        if line[pos:pos + 2] == "  ":
            row.append(0)
            pos += 3
            continue
        if line[pos] == " ":
            pos += 1
        end = pos
        while end < len(line) and line[end].isdigit():
            end += 1
        if end == pos:
            raise ValueError(f"Malformed board row: {line!r}")
        row.append(int(line[pos:end]))
        pos = end + 1
    return row


def parse_rendered(text: str) -> Board:
    """Inverse of Board.render()."""
    return Board([_parse_rendered_row(line) for line in text.split("\n")])
