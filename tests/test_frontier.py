import random

from npuzzle.domains.board import Board
from npuzzle.search.frontier import Frontier, FrontierEntry, VisitedSet


def _boards(count, size=9, seed=0):
    rng = random.Random(seed)
    out, seen = [], set()
    while len(out) < count:
        b = Board.solved(size)
        b.shuffle(20, rng)
        if b.key not in seen:
            seen.add(b.key)
            out.append(b)
    return out


def test_pop_min_on_empty():
    f = Frontier()
    assert f.pop_min() is None
    assert f.size() == 0


def test_random_insert_pop_keeps_order():
    rng = random.Random(42)
    f = Frontier()
    board = Board.solved(9)
    for _ in range(2000):
        if rng.random() < 0.6 or len(f) == 0:
            f.insert(FrontierEntry(board, rng.randint(0, 30)))
        else:
            lowest = min(f.priorities())
            e = f.pop_min()
            assert e.priority == lowest
        pr = f.priorities()
        assert pr == sorted(pr)


def test_equal_priorities_are_fifo():
    f = Frontier()
    bs = _boards(4)
    f.insert(FrontierEntry(bs[0], 5))
    f.insert(FrontierEntry(bs[1], 3))
    f.insert(FrontierEntry(bs[2], 5))
    f.insert(FrontierEntry(bs[3], 5))
    order = [f.pop_min().board for _ in range(4)]
    assert order == [bs[1], bs[0], bs[2], bs[3]]


def test_offer_keeps_one_entry_per_key():
    f = Frontier()
    a = Board([1, 0, 2, 3])
    same = Board([1, 0, 2, 3])
    assert f.offer(FrontierEntry(a, 7))
    assert not f.offer(FrontierEntry(same, 7))
    assert not f.offer(FrontierEntry(same, 9))
    assert len(f) == 1
    assert f.offer(FrontierEntry(same, 4))
    assert len(f) == 1
    e = f.pop_min()
    assert e.board is same and e.priority == 4
    assert a.key not in f


def test_offer_replacement_keeps_order():
    f = Frontier()
    bs = _boards(6, seed=5)
    for i, b in enumerate(bs):
        f.offer(FrontierEntry(b, 10 + i))
    f.offer(FrontierEntry(Board(bs[4].tiles), 1))
    assert f.priorities() == [1, 10, 11, 12, 13, 15]
    assert f.pop_min().board.key == bs[4].key


def test_clear():
    f = Frontier()
    b = Board.solved(4)
    f.insert(FrontierEntry(b, 1))
    f.clear()
    assert len(f) == 0
    assert b.key not in f


def test_visited_set():
    v = VisitedSet()
    a = Board([1, 0, 2, 3])
    assert not v.contains(a)
    v.mark(a)
    v.mark(Board([1, 0, 2, 3]))
    assert Board([1, 0, 2, 3]) in v
    assert v.count() == 1
    v.clear()
    assert len(v) == 0
