from src.domains.board import Board


def hamming(b: Board) -> int:
    return b.hamming()
