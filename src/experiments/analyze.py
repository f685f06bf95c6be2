#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import List

import numpy as np
import pandas as pd

KEYS = ["n", "variant", "depth"]

def load_many(paths: List[str | Path]) -> pd.DataFrame:
    dfs = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = Path(p).name
        dfs.append(df)
    if not dfs:
        return pd.DataFrame()
    df = pd.concat(dfs, ignore_index=True, sort=False)
    if "variant" not in df.columns:
        df["variant"] = "scrambled"
    for c in ("n", "depth", "seed", "hamming", "manhattan", "neighbors", "goal", "solvable"):
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df.dropna(subset=["n", "depth", "hamming", "manhattan"])

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Per (n, variant, depth): mean/std of both distances, solvable rate, Hamming/Manhattan ratio."""
    if df.empty:
        return pd.DataFrame(columns=KEYS + [
            "count", "hamming_mean", "hamming_std", "manhattan_mean", "manhattan_std",
            "solvable_rate", "goal_rate", "ratio_mean",
        ])
    ham = df["hamming"].to_numpy(dtype=float)
    man = df["manhattan"].to_numpy(dtype=float)
    # goal boards have both distances 0; count them as ratio 1
    ratio = np.divide(ham, man, out=np.ones_like(ham), where=man > 0)
    df = df.assign(ratio=ratio)
    g = df.groupby(KEYS)
    out = pd.DataFrame({
        "count": g.size(),
        "hamming_mean": g["hamming"].mean(),
        "hamming_std": g["hamming"].std(ddof=0),
        "manhattan_mean": g["manhattan"].mean(),
        "manhattan_std": g["manhattan"].std(ddof=0),
        "solvable_rate": g["solvable"].mean(),
        "goal_rate": g["goal"].mean(),
        "ratio_mean": g["ratio"].mean(),
    })
    return out.reset_index().sort_values(KEYS, ignore_index=True)

def main(argv=None):
    ap = argparse.ArgumentParser(description="Summarize board survey CSVs produced by runner.py")
    ap.add_argument("csv", nargs="+", help="CSV files from src.experiments.runner")
    ap.add_argument("--out", type=Path, default=None, help="Optional CSV for the summary table")
    args = ap.parse_args(argv)

    table = summarize(load_many(args.csv))
    print("=" * 80)
    print("Heuristic values by scramble depth")
    print("=" * 80)
    print(table.to_string(index=False, float_format=lambda x: f"{x:.2f}"))
    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Saved: {args.out}")

if __name__ == "__main__":
    main()
