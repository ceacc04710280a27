#!/usr/bin/env python3
import argparse, os
from pathlib import Path

import matplotlib
# Default to a non-interactive backend; we'll only show() if --show
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt
import pandas as pd

def plot_metric(ax, summary: pd.DataFrame, metric: str):
    for n, part in summary.groupby("n"):
        part = part.sort_values("depth")
        ax.errorbar(part["depth"], part[f"{metric}_mean"], yerr=part[f"{metric}_sem"],
                    marker="o", capsize=3, label=f"{int(n)}x{int(n)}")
    ax.set_xlabel("Scramble depth")
    ax.set_ylabel(metric)
    ax.set_title(f"{metric} vs depth (mean ± sem)")
    ax.grid(True)
    ax.legend()

def save_fig(fig, outdir: Path, name: str) -> Path:
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{name}.png"
    fig.savefig(path, dpi=200, bbox_inches="tight")
    print(f"Saved: {path}")
    return path

def plot_summary(summary: pd.DataFrame, outdir: Path, metrics=("expanded", "g", "time_sec")):
    saved = []
    for metric in metrics:
        fig, ax = plt.subplots(figsize=(8, 6))
        plot_metric(ax, summary, metric)
        plt.tight_layout()
        saved.append(save_fig(fig, outdir, f"summary_{metric}"))
        plt.close(fig)
    return saved

def main(argv=None):
    ap = argparse.ArgumentParser(description="Plot a summary CSV and save PNGs.")
    ap.add_argument("summary", type=Path, help="CSV written by npuzzle.experiments.summarize")
    ap.add_argument("--save", type=Path, default=Path("results/plots"))
    ap.add_argument("--show", action="store_true", help="Also open interactive windows (if GUI available)")
    args = ap.parse_args(argv)

    summary = pd.read_csv(args.summary)
    if summary.empty:
        print("Summary is empty, nothing to plot.")
        return
    plot_summary(summary, args.save)
    if args.show:
        plt.show()

if __name__ == "__main__":
    main()
