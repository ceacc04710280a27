from __future__ import annotations
from bisect import bisect_left, bisect_right
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

from npuzzle.domains.board import Board, Key


@dataclass
class FrontierEntry:
    board: Board
    priority: int


class Frontier:
    """
    Pending boards kept sorted ascending by priority.

    Equal priorities stay in insertion order: a new entry goes in front of the
    first strictly greater priority. Entries are also indexed by board key so
    `offer` can keep a single entry per position.
    """

    def __init__(self):
        self._entries: List[FrontierEntry] = []
        self._priorities: List[int] = []
        self._by_key: Dict[Key, FrontierEntry] = {}

    def insert(self, entry: FrontierEntry) -> None:
        i = bisect_right(self._priorities, entry.priority)
        self._entries.insert(i, entry)
        self._priorities.insert(i, entry.priority)
        self._by_key[entry.board.key] = entry

    def offer(self, entry: FrontierEntry) -> bool:
        """Insert unless the key is already pending at an equal or lower priority.

        A pending entry with a higher priority is replaced. Returns True when the
        entry was taken.
        """
        old = self._by_key.get(entry.board.key)
        if old is not None:
            if entry.priority >= old.priority:
                return False
            self._remove(old)
        self.insert(entry)
        return True

    def pop_min(self) -> Optional[FrontierEntry]:
        if not self._entries:
            return None
        entry = self._entries.pop(0)
        self._priorities.pop(0)
        self._forget(entry)
        return entry

    def _remove(self, entry: FrontierEntry) -> None:
        i = bisect_left(self._priorities, entry.priority)
        while self._entries[i] is not entry:
            i += 1
        del self._entries[i]
        del self._priorities[i]
        self._forget(entry)

    def _forget(self, entry: FrontierEntry) -> None:
        if self._by_key.get(entry.board.key) is entry:
            del self._by_key[entry.board.key]

    def __contains__(self, key: Key) -> bool:
        return key in self._by_key

    def priorities(self) -> List[int]:
        return list(self._priorities)

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries.clear()
        self._priorities.clear()
        self._by_key.clear()


class VisitedSet:
    """Keys of boards already expanded. Grows monotonically until cleared."""

    def __init__(self):
        self._keys: Set[Key] = set()

    def mark(self, board: Board) -> None:
        self._keys.add(board.key)

    def contains(self, board: Board) -> bool:
        return board.key in self._keys

    def __contains__(self, board: Board) -> bool:
        return self.contains(board)

    def count(self) -> int:
        return len(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def clear(self) -> None:
        self._keys.clear()
