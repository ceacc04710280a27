#!/usr/bin/env python3
import argparse, os
from pathlib import Path
import matplotlib
if "MPLBACKEND" not in os.environ:
    matplotlib.use("Agg")
import matplotlib.pyplot as plt

from typing import List, Sequence

from npuzzle.experiments.runner import scramble
from npuzzle.search.a_star import Solver
from npuzzle.search.path import replay_steps, solution_string
from npuzzle.domains.board import Board

def draw_board(tiles: Sequence[int], n: int, out_path: Path, title: str = ""):
    plt.figure(figsize=(3,3))
    ax = plt.gca()
    ax.set_xlim(0, n); ax.set_ylim(0, n)
    ax.set_xticks([]); ax.set_yticks([]); ax.invert_yaxis()
    # grid
    for i in range(n+1):
        ax.plot([0,n],[i,i], linewidth=1)
        ax.plot([i,i],[0,n], linewidth=1)
    # tiles
    for idx, t in enumerate(tiles):
        if t == 0: continue
        r, c = divmod(idx, n)
        ax.text(c+0.5, r+0.6, str(t), ha="center", va="center", fontsize=16)
    if title:
        ax.set_title(title, fontsize=10)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()

def save_frames(start: Board, steps: List[Board], outdir: Path) -> List[Path]:
    """One PNG for the start board, then one per replay step."""
    paths = []
    frames = [start] + steps
    for i, b in enumerate(frames):
        p = outdir / f"step_{i:03d}.png"
        draw_board(b.tiles, b.side_count(), p, title=b.move or "start")
        paths.append(p)
    return paths

def main(argv=None):
    p = argparse.ArgumentParser(description="Solve one instance and save board images along the path.")
    p.add_argument("--n", type=int, default=3)
    p.add_argument("--depth", type=int, default=10)
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--max_steps", type=int, default=200000)
    p.add_argument("--outdir", default="results/figs/example_path")
    args = p.parse_args(argv)

    solver = Solver()
    solver.start(Board(scramble(args.n, args.depth, args.seed)))
    while solver.is_searching() and solver.visited_count() < args.max_steps:
        solver.step()

    if solver.goal is None:
        print("No path (step cap or exhausted). Try smaller depth.")
        return

    steps = replay_steps(solver.tree, solver.goal)
    labels = [b.move for b in steps]
    paths = save_frames(solver.root, steps, Path(args.outdir))
    print(f"Solution ({len(labels)} moves): {solution_string(labels)}")
    print(f"Saved {len(paths)} frames to {args.outdir}")

if __name__ == "__main__":
    main()
