from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from time import perf_counter
from typing import Optional, Sequence, Union
import logging

from npuzzle.domains.board import Board, expand
from npuzzle.search.frontier import Frontier, FrontierEntry, VisitedSet
from npuzzle.search.path import move_labels
from npuzzle.search.tree import SearchTree

logger = logging.getLogger(__name__)


class InvalidStepError(RuntimeError):
    """Solver operation called in a state that does not allow it."""


class SolverStatus(Enum):
    IDLE = "idle"
    SEARCHING = "searching"
    FOUND = "found"
    EXHAUSTED = "exhausted"


@dataclass
class StepResult:
    finished: bool
    board: Optional[Board]


class Solver:
    """
    Step-wise A* over N-puzzle boards.

    Every call to `step` does one unit of work: pop the cheapest pending board,
    mark it visited, stop on the goal, otherwise push its unvisited children.
    Looping, pacing and cancellation belong to the caller.
    """

    def __init__(self):
        self.frontier = Frontier()
        self.visited = VisitedSet()
        self.tree = SearchTree()
        self.status = SolverStatus.IDLE
        self.root: Optional[Board] = None
        self.goal: Optional[Board] = None
        self.generated = 0
        self._last: Optional[Board] = None

    def start(self, root: Board) -> None:
        if self.status is not SolverStatus.IDLE:
            raise InvalidStepError(f"start() needs an idle solver, status is {self.status.value}")
        self.root = root.copy()
        self.tree.add(self.root)
        self.frontier.insert(FrontierEntry(self.root, self.root.total_cost()))
        self.status = SolverStatus.SEARCHING
        logger.info("search started: tiles=%s h=%d", self.root.tiles, self.root.heuristic)

    def step(self) -> StepResult:
        if self.status is not SolverStatus.SEARCHING:
            raise InvalidStepError(f"step() needs a running search, status is {self.status.value}; call start() first")

        entry = self.frontier.pop_min()
        if entry is None:
            self.status = SolverStatus.EXHAUSTED
            logger.info("frontier exhausted after %d visited boards", self.visited.count())
            return StepResult(False, self._last)

        board = entry.board
        self._last = board
        self.visited.mark(board)

        if board.is_goal():
            self.status = SolverStatus.FOUND
            self.goal = board
            logger.info("goal found: depth=%d visited=%d frontier=%d",
                        board.depth, self.visited.count(), self.frontier.size())
            return StepResult(True, board)

        for child in expand(board):
            self.generated += 1
            if child in self.visited:
                continue
            if self.frontier.offer(FrontierEntry(child, child.total_cost())):
                self.tree.add(child)

        logger.debug("expanded depth=%d f=%d visited=%d frontier=%d",
                     board.depth, entry.priority, self.visited.count(), self.frontier.size())
        return StepResult(False, board)

    def stop(self) -> None:
        self.frontier.clear()
        self.visited.clear()
        self.tree.clear()
        self.root = None
        self.goal = None
        self.generated = 0
        self._last = None
        self.status = SolverStatus.IDLE

    reset = stop

    def visited_count(self) -> int:
        return self.visited.count()

    def frontier_count(self) -> int:
        return self.frontier.size()

    def is_searching(self) -> bool:
        return self.status is SolverStatus.SEARCHING


def a_star(start: Union[Board, Sequence[int]], max_steps: Optional[int] = None, return_path: bool = True):
    """
    Drive a Solver to completion with instrumentation.
    max_steps caps the number of step() calls; hitting it ends with termination="capped".
    """
    root = start if isinstance(start, Board) else Board(start)
    t0 = perf_counter()
    solver = Solver()
    solver.start(root)

    steps = 0
    while solver.is_searching():
        if max_steps is not None and steps >= max_steps:
            break
        solver.step()
        steps += 1

    termination = {
        SolverStatus.FOUND: "ok",
        SolverStatus.EXHAUSTED: "exhausted",
    }.get(solver.status, "capped")
    goal = solver.goal
    res = {
        "path": move_labels(solver.tree, goal) if goal is not None and return_path else None,
        "g": goal.depth if goal is not None else None,
        "expanded": solver.visited_count(),
        "generated": solver.generated,
        "frontier": solver.frontier_count(),
        "time": perf_counter() - t0,
        "algorithm": "A*",
        "termination": termination,
    }
    solver.stop()
    return res
