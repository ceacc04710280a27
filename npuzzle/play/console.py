#!/usr/bin/env python3
import argparse, logging, math, random, sys
from typing import List, Optional, Sequence

from npuzzle.domains.board import Board, ConfigurationError
from npuzzle.play.controller import PuzzleController, PuzzleEvent
from npuzzle.search.a_star import SolverStatus


def format_board(tiles: Sequence[int]) -> str:
    n = math.isqrt(len(tiles))
    width = len(str(len(tiles) - 1))
    lines = []
    for r in range(n):
        row = tiles[r * n:(r + 1) * n]
        lines.append(" ".join(".".rjust(width) if t == 0 else str(t).rjust(width) for t in row))
    return "\n".join(lines)


class ConsoleView:
    """Text front end: prints what the controller reports."""

    def __init__(self, out=None, show_boards: bool = True):
        self.out = out or sys.stdout
        self.show_boards = show_boards

    def __call__(self, event: PuzzleEvent) -> None:
        if event.reason == "reset":
            return
        if event.reason == "finished":
            total = event.counter + event.frontier
            self._print(f"Solved by searching {event.counter}/{total} boards")
            self._print(event.solution or "(already solved)")
        elif event.reason == "changed":
            total = event.counter + event.frontier
            self._print(f"Searching/waiting to be searched: {event.counter}/{total}")
            self._print(f"A* search algorithm heuristic (using Manhattan distance) {event.distance:2d}")
            if self.show_boards:
                self._print(format_board(event.tiles))
        elif event.reason == "exhausted":
            self._print("No solution reachable from this board")
        elif event.reason in ("moved", "replay"):
            self._print(format_board(event.tiles))
            self._print("")

    def _print(self, text: str) -> None:
        print(text, file=self.out)


def parse_tiles(text: str) -> List[int]:
    try:
        tiles = [int(x) for x in text.replace(",", " ").split()]
    except ValueError as e:
        raise ConfigurationError(f"cannot read tiles from {text!r}") from e
    Board(tiles)
    return tiles


def main(argv: Optional[Sequence[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Shuffle or load an N-puzzle board and solve it step by step with A*.")
    p.add_argument("--side", type=int, choices=[2, 3, 4, 5], default=3, help="Board side length (3 = 8-puzzle)")
    p.add_argument("--tiles", default=None, help="Start tiles, e.g. '1 0 2 3 4 5 6 7 8' (overrides --side/--shuffle)")
    p.add_argument("--shuffle", type=int, default=PuzzleController.DEFAULT_SHUFFLE, help="Random blank moves from solved")
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--speed_ms", type=int, default=0, help="Delay between solver steps")
    p.add_argument("--max_steps", type=int, default=None, help="Give up after this many steps")
    p.add_argument("--quiet", action="store_true", help="Do not print every searched board")
    p.add_argument("--replay", action="store_true", help="Print the solution board by board")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    ctl = PuzzleController(size=args.side * args.side, speed_ms=args.speed_ms, rng=random.Random(args.seed))
    view = ConsoleView(show_boards=not args.quiet)
    ctl.subscribe(view)

    if args.tiles is not None:
        try:
            ctl.load(parse_tiles(args.tiles))
        except ConfigurationError as e:
            print(f"error: {e}", file=sys.stderr)
            return 1
    else:
        ctl.shuffle(args.shuffle)

    status = ctl.run(max_steps=args.max_steps)
    if status is not SolverStatus.FOUND:
        if status is SolverStatus.IDLE:
            print(f"Gave up after {args.max_steps} steps")
        return 1
    if args.replay:
        ctl.replay()
    return 0


if __name__ == "__main__":
    sys.exit(main())
