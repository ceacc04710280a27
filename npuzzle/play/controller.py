from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple
import logging
import random
import time

from npuzzle.domains.board import Board
from npuzzle.search.a_star import Solver, SolverStatus
from npuzzle.search.path import move_labels, replay_steps, solution_string

logger = logging.getLogger(__name__)


@dataclass
class PuzzleEvent:
    """Plain record handed to subscribers after every change."""
    reason: str
    counter: int = 0
    frontier: int = 0
    distance: int = 0
    solution: str = ""
    tiles: Tuple[int, ...] = ()


@dataclass
class Solution:
    start: Board
    labels: List[str] = field(default_factory=list)
    steps: List[Board] = field(default_factory=list)


Listener = Callable[[PuzzleEvent], None]


class PuzzleController:
    """
    Owns the current board and a Solver, and reports everything it does to
    subscribed listeners. Nothing here draws; a front end subscribes and renders.
    """
    DEFAULT_SPEED_MS = 800
    DEFAULT_SHUFFLE = 10

    def __init__(self, size: int = 9, speed_ms: int = DEFAULT_SPEED_MS, rng: Optional[random.Random] = None):
        self.size = size
        self.board = Board.solved(size)
        self.solver = Solver()
        self.speed_ms = speed_ms
        self.rng = rng or random.Random()
        self.solution: Optional[Solution] = None
        self._listeners: List[Listener] = []

    # ---------- Subscribers ----------
    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def _fire(self, reason: str, distance: int = 0, solution: str = "", board: Optional[Board] = None) -> None:
        board = board or self.board
        event = PuzzleEvent(
            reason=reason,
            counter=self.solver.visited_count(),
            frontier=self.solver.frontier_count(),
            distance=distance,
            solution=solution,
            tiles=tuple(board.tiles),
        )
        for listener in list(self._listeners):
            listener(event)

    # ---------- User actions ----------
    def reset(self) -> None:
        self.board = Board.solved(self.size)
        self.solver.stop()
        self.solution = None
        self.speed_ms = self.DEFAULT_SPEED_MS
        self._fire("reset")

    def change_size(self, size: int) -> None:
        board = Board.solved(size)
        self.solver.stop()
        self.size = size
        self.board = board
        self.solution = None
        self._fire("reset")

    def load(self, tiles) -> None:
        """Replace the current board with caller-supplied tiles (raises ConfigurationError)."""
        board = Board(tiles)
        self.solver.stop()
        self.size = len(board.tiles)
        self.board = board
        self.solution = None
        self._fire("moved", distance=board.heuristic)

    def move(self, direction: str) -> bool:
        """Manual play: move the blank one square. Ignored while a search runs."""
        if self.solver.is_searching():
            return False
        if not self.board.move_blank(direction):
            return False
        self._fire("moved", distance=self.board.heuristic)
        return True

    def shuffle(self, count: int = DEFAULT_SHUFFLE) -> None:
        self.solver.stop()
        self.solution = None
        self._fire("reset")
        self.board.shuffle(count, self.rng)
        self._fire("moved", distance=self.board.heuristic)

    def solve(self) -> None:
        self.solver.stop()
        self.solution = None
        self.solver.start(self.board)

    def faster(self) -> None:
        if not self.solver.is_searching():
            self.solve()
        self.speed_ms = 4 + int(self.speed_ms * 0.8)

    def slower(self) -> None:
        if not self.solver.is_searching():
            self.solve()
        self.speed_ms = 4 + int(self.speed_ms / 0.8)

    # ---------- Driving the search ----------
    def tick(self) -> SolverStatus:
        """One solver step plus the matching event."""
        result = self.solver.step()
        status = self.solver.status
        if status is SolverStatus.FOUND:
            goal = result.board
            self.solution = Solution(
                start=self.solver.root,
                labels=move_labels(self.solver.tree, goal),
                steps=replay_steps(self.solver.tree, goal),
            )
            self.board = Board.solved(self.size)
            self._fire("finished", solution=solution_string(self.solution.labels), board=goal)
            self.solver.stop()
        elif status is SolverStatus.EXHAUSTED:
            logger.warning("no solution reachable from %s", self.board.tiles)
            self._fire("exhausted")
            self.solver.stop()
        else:
            self._fire("changed", distance=result.board.total_cost(), board=result.board)
        return status

    def run(self, max_steps: Optional[int] = None, sleep: Callable[[float], None] = time.sleep) -> SolverStatus:
        """Start if needed and tick until the search ends.
        Returns FOUND or EXHAUSTED, or IDLE when max_steps ticks ran without an answer.
        """
        if not self.solver.is_searching():
            self.solve()
        status = SolverStatus.SEARCHING
        steps = 0
        while status is SolverStatus.SEARCHING:
            if max_steps is not None and steps >= max_steps:
                logger.info("stopped after %d steps", steps)
                self.solver.stop()
                return SolverStatus.IDLE
            status = self.tick()
            steps += 1
            if status is SolverStatus.SEARCHING and self.speed_ms > 0:
                sleep(self.speed_ms / 1000.0)
        return status

    def replay(self, sleep: Callable[[float], None] = time.sleep) -> bool:
        if self.solution is None or not self.solution.steps:
            return False
        self._fire("replay", distance=self.solution.start.heuristic, board=self.solution.start)
        for board in self.solution.steps:
            if self.speed_ms > 0:
                sleep(self.speed_ms / 1000.0)
            self._fire("replay", distance=board.heuristic, board=board)
        return True
