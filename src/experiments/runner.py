from __future__ import annotations
import argparse, csv
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

from src.domains.board import Board
from src.heuristics.hamming import hamming
from src.heuristics.manhattan import manhattan

HEURISTICS: Dict[str, Callable[[Board], int]] = {
    "hamming": hamming,
    "manhattan": manhattan,
}

HEADER = [
    "n", "depth", "seed", "hamming", "manhattan", "heuristic", "h",
    "neighbors", "goal", "solvable", "variant",
]

@dataclass
class Instance:
    seed: int
    depth: int
    board: Board

def scramble(n: int, depth: int, seed: int) -> Board:
    """Depth-limited random walk of blank moves from the goal, no immediate backtrack."""
    rng = random.Random(seed)
    b = Board.goal(n)
    prev: Optional[Board] = None
    for _ in range(depth):
        cand = b.neighbors()
        if prev in cand and len(cand) > 1:
            cand.remove(prev)
        prev, b = b, rng.choice(cand)
    return b

def make_unsolvable_variant(b: Board) -> Board:
    """Swap the first two non-blank tiles (flips permutation parity)."""
    n = b.size()
    flat = [t for row in b.rows() for t in row]
    i = next(k for k, v in enumerate(flat) if v != 0)
    j = next(k for k, v in enumerate(flat[i + 1:], start=i + 1) if v != 0)
    flat[i], flat[j] = flat[j], flat[i]
    return Board([flat[r * n:(r + 1) * n] for r in range(n)])

def generate(n: int, depths: List[int], per_depth: int, start_seed: int = 0) -> List[Instance]:
    out: List[Instance] = []
    seed = start_seed
    for d in depths:
        if d < 0:
            raise RuntimeError(f"Scramble depth must be non-negative, got {d}")
        for _ in range(per_depth):
            out.append(Instance(seed=seed, depth=d, board=scramble(n, d, seed)))
            seed += 1
    return out

def board_row(inst: Instance, b: Board, heuristic: str, variant: str) -> list:
    hfun = HEURISTICS[heuristic]
    return [
        b.size(), inst.depth, inst.seed, b.hamming(), b.manhattan(), heuristic, hfun(b),
        len(b.neighbors()), int(b.is_goal()), int(b.is_solvable()), variant,
    ]

def write_csv(out: Path, insts: List[Instance], heuristic: str, include_unsolvable: bool = False) -> int:
    out.parent.mkdir(parents=True, exist_ok=True)
    rows = 0
    with out.open("w", newline="") as f:
        w = csv.writer(f); w.writerow(HEADER)
        for inst in insts:
            w.writerow(board_row(inst, inst.board, heuristic, "scrambled"))
            rows += 1
            if include_unsolvable:
                u = make_unsolvable_variant(inst.board)
                w.writerow(board_row(inst, u, heuristic, "swapped"))
                rows += 1
    return rows

def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Scramble N×N boards and record their heuristics and solvability")
    ap.add_argument("--n", type=int, default=3, help="Board dimension (N×N)")
    ap.add_argument("--heuristic", choices=sorted(HEURISTICS), default="manhattan")
    ap.add_argument("--depths", type=int, nargs="+", default=[6, 10, 14, 18, 22, 26])
    ap.add_argument("--per_depth", type=int, default=30)
    ap.add_argument("--seed", type=int, default=0, help="First seed; incremented per board")
    ap.add_argument("--include_unsolvable", action="store_true",
                    help="Also record the tile-swapped variant of every board")
    ap.add_argument("--out", type=Path, default=Path("results/last_run.csv"))
    args = ap.parse_args(argv)
    if args.n < 2:
        ap.error("--n must be at least 2")

    insts = generate(args.n, args.depths, args.per_depth, args.seed)
    rows = write_csv(args.out, insts, args.heuristic, args.include_unsolvable)
    print(f"Wrote {args.out} ({rows} boards)")

if __name__ == "__main__":
    main()
