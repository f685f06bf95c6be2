#!/usr/bin/env python3
import argparse

from src.domains.reader import load_board

def describe(board) -> str:
    n = board.size()
    lines = [
        f"The board ({n * n - 1}-puzzle):",
        board.render(),
        f"Hamming = {board.hamming()}, Manhattan = {board.manhattan()}, "
        f"Goal? {str(board.is_goal()).lower()}, Solvable? {str(board.is_solvable()).lower()}",
        "Neighboring boards:",
    ]
    for nb in board.neighbors():
        lines.append(nb.render())
        lines.append("----------")
    return "\n".join(lines)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Print a board's distances, flags and neighbors")
    ap.add_argument("path", help="Text file: n followed by n*n tiles, row-major, 0 = blank")
    args = ap.parse_args(argv)
    print(describe(load_board(args.path)))

if __name__ == "__main__":
    main()
