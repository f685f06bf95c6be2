#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from src.experiments.analyze import load_many, summarize

METRICS = ("hamming", "manhattan")

def plot_metric(ax, table, metric):
    for (n, variant), grp in table.groupby(["n", "variant"]):
        ax.errorbar(grp["depth"], grp[f"{metric}_mean"], yerr=grp[f"{metric}_std"],
                    marker="o", capsize=3, label=f"{int(n)}×{int(n)} {variant}")
    ax.set_xlabel("scramble depth")
    ax.set_ylabel(f"mean {metric}")
    ax.set_title(metric.capitalize())
    ax.grid(True, alpha=0.3)

def save_plots(table, outdir: Path, name: str = "heuristics") -> Path:
    fig, axes = plt.subplots(1, len(METRICS), figsize=(6 * len(METRICS), 4))
    for ax, m in zip(axes, METRICS):
        plot_metric(ax, table, m)
    axes[0].legend(fontsize=8)
    fig.tight_layout()
    outdir.mkdir(parents=True, exist_ok=True)
    p = outdir / f"{name}.png"
    fig.savefig(p, dpi=200, bbox_inches="tight")
    plt.close(fig)
    return p

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot mean Hamming/Manhattan by scramble depth")
    ap.add_argument("csv", nargs="+", help="CSV files from src.experiments.runner")
    ap.add_argument("--save", default="results/plots")
    ap.add_argument("--name", default="heuristics")
    ap.add_argument("--show", action="store_true")
    args = ap.parse_args(argv)

    table = summarize(load_many(args.csv))
    if table.empty:
        print("No rows to plot.")
        return
    p = save_plots(table, Path(args.save), args.name)
    print(f"Saved: {p}")
    if args.show:
        img = plt.imread(p)
        plt.figure(); plt.imshow(img); plt.axis("off"); plt.show()

if __name__ == "__main__":
    main()
