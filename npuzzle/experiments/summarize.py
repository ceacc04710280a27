#!/usr/bin/env python3
from __future__ import annotations
import argparse
from pathlib import Path
from typing import Iterable

import numpy as np
import pandas as pd

METRICS = ("expanded", "generated", "g", "time_sec")

def _sem(x) -> float:
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else float(np.nanstd(x, ddof=1) / np.sqrt(n))

def load_runs(paths: Iterable[Path]) -> pd.DataFrame:
    frames = []
    for p in paths:
        df = pd.read_csv(p)
        df["__src__"] = Path(p).name
        frames.append(df)
    if not frames:
        return pd.DataFrame()
    df = pd.concat(frames, ignore_index=True, sort=False)
    for c in ("n", "depth", "seed") + METRICS:
        if c in df.columns:
            df[c] = pd.to_numeric(df[c], errors="coerce")
    return df

def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Mean/std/sem per (n, depth) over solved runs only."""
    ok = df[df["termination"].fillna("ok") == "ok"]
    g = ok.groupby(["n", "depth"])
    out = g.size().rename("runs").to_frame()
    for m in METRICS:
        out[f"{m}_mean"] = g[m].mean()
        out[f"{m}_std"] = g[m].std(ddof=0)
        out[f"{m}_sem"] = g[m].apply(_sem)
    return out.reset_index()

def main(argv=None):
    ap = argparse.ArgumentParser(description="Aggregate runner CSVs per board side and scramble depth.")
    ap.add_argument("csv", nargs="+", type=Path)
    ap.add_argument("--out", type=Path, default=Path("results/summary.csv"))
    args = ap.parse_args(argv)

    df = load_runs(args.csv)
    if df.empty:
        print("No rows to summarize. Are your CSVs empty?")
        return
    summary = summarize(df)
    args.out.parent.mkdir(parents=True, exist_ok=True)
    summary.to_csv(args.out, index=False)
    print(summary[["n", "depth", "runs", "expanded_mean", "g_mean", "time_sec_mean"]].to_string(index=False))
    print(f"Wrote {args.out}")

if __name__ == "__main__":
    main()
