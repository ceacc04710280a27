import random

import pytest

from npuzzle.domains.board import DOWN, LEFT, RIGHT, UP, ConfigurationError, apply_labels
from npuzzle.play.controller import PuzzleController
from npuzzle.search.a_star import SolverStatus


def no_sleep(_seconds):
    pass


@pytest.fixture
def ctl():
    c = PuzzleController(size=9, speed_ms=0, rng=random.Random(5))
    c.events = []
    c.subscribe(c.events.append)
    return c


def test_starts_solved(ctl):
    assert ctl.board.is_goal()
    assert ctl.speed_ms == 0
    assert ctl.solution is None


def test_manual_moves(ctl):
    assert not ctl.move(UP)
    assert ctl.move(RIGHT)
    assert ctl.move(DOWN)
    assert ctl.board.tiles == [1, 4, 2, 3, 0, 5, 6, 7, 8]
    assert [e.reason for e in ctl.events] == ["moved", "moved"]
    assert ctl.events[-1].distance == ctl.board.heuristic
    assert ctl.events[-1].tiles == tuple(ctl.board.tiles)


def test_move_ignored_while_searching(ctl):
    ctl.move(RIGHT)
    ctl.solve()
    assert not ctl.move(LEFT)
    assert ctl.board.tiles[:2] == [1, 0]


def test_shuffle_then_run_finds_solution(ctl):
    ctl.shuffle(16)
    start = list(ctl.board.tiles)
    status = ctl.run(sleep=no_sleep)
    assert status is SolverStatus.FOUND
    finished = ctl.events[-1]
    assert finished.reason == "finished"
    assert finished.tiles == tuple(range(9))
    assert finished.counter >= 1
    assert finished.solution == ", ".join(ctl.solution.labels)
    assert apply_labels(start, ctl.solution.labels).is_goal()
    # solver is released and the board goes back to solved
    assert not ctl.solver.is_searching()
    assert ctl.solver.visited_count() == 0
    assert ctl.board.is_goal()


def test_changed_events_report_progress(ctl):
    ctl.load([1, 2, 5, 3, 4, 0, 6, 7, 8])
    ctl.run(sleep=no_sleep)
    changed = [e for e in ctl.events if e.reason == "changed"]
    assert changed
    counters = [e.counter for e in changed]
    assert counters == list(range(1, len(counters) + 1))
    assert all(e.frontier >= 0 for e in changed)


def test_run_paces_with_speed():
    ctl = PuzzleController(size=9, speed_ms=50)
    ctl.load([1, 2, 5, 3, 4, 0, 6, 7, 8])
    delays = []
    assert ctl.run(sleep=delays.append) is SolverStatus.FOUND
    assert delays and all(d == 0.05 for d in delays)


def test_run_cap_stops_solver(ctl):
    ctl.load([8, 7, 6, 5, 4, 3, 2, 1, 0])
    assert ctl.run(max_steps=3, sleep=no_sleep) is SolverStatus.IDLE
    assert ctl.solution is None
    assert ctl.solver.status is SolverStatus.IDLE


def test_exhausted_board(ctl):
    ctl.change_size(4)
    ctl.load([0, 2, 1, 3])
    assert ctl.run(sleep=no_sleep) is SolverStatus.EXHAUSTED
    assert ctl.events[-1].reason == "exhausted"
    assert ctl.solution is None


def test_replay(ctl):
    assert not ctl.replay(sleep=no_sleep)
    ctl.load([1, 4, 2, 3, 0, 5, 6, 7, 8])
    ctl.run(sleep=no_sleep)
    ctl.events.clear()
    assert ctl.replay(sleep=no_sleep)
    assert [e.reason for e in ctl.events] == ["replay"] * 3
    assert ctl.events[0].tiles == (1, 4, 2, 3, 0, 5, 6, 7, 8)
    assert ctl.events[-1].tiles == tuple(range(9))
    assert ctl.solution.labels == [UP, LEFT]


def test_already_solved_has_nothing_to_replay(ctl):
    assert ctl.run(sleep=no_sleep) is SolverStatus.FOUND
    assert ctl.solution.labels == []
    assert not ctl.replay(sleep=no_sleep)


def test_faster_and_slower():
    ctl = PuzzleController()
    assert ctl.speed_ms == PuzzleController.DEFAULT_SPEED_MS
    ctl.faster()
    assert ctl.solver.is_searching()
    assert ctl.speed_ms == 4 + 640
    ctl.slower()
    assert ctl.speed_ms > 644


def test_reset(ctl):
    ctl.shuffle(8)
    ctl.speed_ms = 10
    ctl.solve()
    ctl.reset()
    assert ctl.board.is_goal()
    assert ctl.speed_ms == PuzzleController.DEFAULT_SPEED_MS
    assert not ctl.solver.is_searching()
    assert ctl.events[-1].reason == "reset"


def test_change_size(ctl):
    ctl.change_size(16)
    assert ctl.board.tiles == list(range(16))
    with pytest.raises(ConfigurationError):
        ctl.change_size(10)
    assert ctl.size == 16


def test_load_rejects_bad_tiles(ctl):
    with pytest.raises(ConfigurationError):
        ctl.load([0, 1, 1, 3])
    assert ctl.board.is_goal()


def test_unsubscribe(ctl):
    ctl.unsubscribe(ctl.events.append)
    ctl.move(RIGHT)
    assert ctl.events == []
