from collections import deque
from time import perf_counter
from typing import Dict, List, Optional, Sequence, Set

from npuzzle.domains.board import DIRECTIONS, Board, Key


def neighbors(s: Key) -> List[Key]:
    out: List[Key] = []
    for direction in DIRECTIONS:
        b = Board(s)
        if b.move_blank(direction):
            out.append(b.key)
    return out


def bfs(start: Sequence[int], timeout_sec: Optional[float] = None):
    """Uninformed breadth-first search; used as an optimality oracle for small boards."""
    t0 = perf_counter()
    start = tuple(start)
    goal = tuple(range(len(start)))
    q = deque([start])
    parent: Dict[Key, Optional[Key]] = {start: None}
    expanded = generated = 0
    seen: Set[Key] = {start}
    while q:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return {"path": None, "g": None, "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "timeout"}
        s = q.popleft()
        if s == goal:
            path: List[Key] = []
            node: Optional[Key] = s
            while node is not None:
                path.append(node)
                node = parent[node]
            return {"path": list(reversed(path)), "g": len(path) - 1, "expanded": expanded, "generated": generated,
                    "time": perf_counter()-t0, "algorithm": "BFS", "termination": "ok"}
        expanded += 1
        for s2 in neighbors(s):
            generated += 1
            if s2 in seen:
                continue
            seen.add(s2)
            parent[s2] = s
            q.append(s2)
    return {"path": None, "g": None, "expanded": expanded, "generated": generated,
            "time": perf_counter()-t0, "algorithm": "BFS", "termination": "exhausted"}
