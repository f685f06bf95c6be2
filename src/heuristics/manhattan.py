from src.domains.board import Board


def manhattan(b: Board) -> int:
    """Sum of Manhattan distances to goal cells (blank ignored)."""
    return b.manhattan()
