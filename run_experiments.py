#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(desc, cmd):
    print(f"\n=== {desc} ===\n{cmd}")
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    py = sys.executable
    run("A* 3x3", f"{py} -m npuzzle.experiments.runner --n 3 --depths 6 10 14 18 --per_depth 10 --include_unsolvable --out results/p8.csv")
    run("A* 4x4", f"{py} -m npuzzle.experiments.runner --n 4 --depths 6 10 14 18 --per_depth 10 --max_steps 200000 --out results/p15.csv")
    run("Summary", f"{py} -m npuzzle.experiments.summarize results/p8.csv results/p15.csv --out results/summary.csv")
    run("Plots", f"{py} -m npuzzle.experiments.plot results/summary.csv --save results/plots")
    run("Example path", f"{py} -m npuzzle.experiments.visualize_path --n 3 --depth 12 --seed 1")

if __name__ == "__main__":
    main()
