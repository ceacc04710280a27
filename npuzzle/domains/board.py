from __future__ import annotations
from typing import List, Optional, Sequence, Tuple
import math
import random

from npuzzle.heuristics.manhattan import manhattan

Key = Tuple[int, ...]

UP, DOWN, LEFT, RIGHT = "Up", "Down", "Left", "Right"
DIRECTIONS: Tuple[str, ...] = (UP, DOWN, LEFT, RIGHT)


class ConfigurationError(ValueError):
    """Root tiles are not a valid square permutation of 0..size-1."""


def side_of(size: int) -> int:
    n = math.isqrt(size)
    if size < 4 or n * n != size:
        raise ConfigurationError(f"board size {size} is not a perfect square >= 4")
    return n


def check_tiles(tiles: Sequence[int]) -> None:
    side_of(len(tiles))
    if sorted(tiles) != list(range(len(tiles))):
        raise ConfigurationError(f"tiles {list(tiles)} are not a permutation of 0..{len(tiles) - 1}")


class Board:
    """
    One node of the search tree: a tile permutation (0 is the blank) plus the
    values derived from it.

    `parent` is the index of the parent board inside a SearchTree arena and
    `index` is this board's own slot once it has been added to one.
    """
    __slots__ = ("tiles", "n", "key", "heuristic", "depth", "parent", "index", "move")

    def __init__(self, tiles: Sequence[int], parent: Optional["Board"] = None, move: Optional[str] = None):
        if parent is None:
            check_tiles(tiles)
        elif parent.index is None:
            raise ValueError("parent board is not in a search tree; add it before expanding")
        self.tiles: List[int] = list(tiles)
        self.n = math.isqrt(len(self.tiles))
        self.key: Key = tuple(self.tiles)
        self.heuristic = manhattan(self.tiles, self.n)
        self.depth = 0 if parent is None else parent.depth + 1
        self.parent: Optional[int] = None if parent is None else parent.index
        self.index: Optional[int] = None
        self.move = move

    @classmethod
    def solved(cls, size: int) -> "Board":
        return cls(range(size))

    def copy(self) -> "Board":
        """Detached root copy with the same tiles."""
        return Board(self.tiles)

    def side_count(self) -> int:
        return self.n

    def blank_index(self) -> int:
        return self.tiles.index(0)

    def apply_move(self, target: int) -> None:
        # legality is checked by the caller
        z = self.blank_index()
        self.tiles[z] = self.tiles[target]
        self.tiles[target] = 0
        self.key = tuple(self.tiles)
        self.heuristic = manhattan(self.tiles, self.n)

    def is_goal(self) -> bool:
        return all(t == i for i, t in enumerate(self.tiles))

    def total_cost(self) -> int:
        return self.depth + self.heuristic

    # ---------- Blank moves ----------
    def target_index(self, direction: str) -> Optional[int]:
        """Index the blank would move to, or None when the move leaves the board."""
        n = self.n
        z = self.blank_index()
        if direction == UP:
            j = z - n
            return j if j >= 0 else None
        if direction == DOWN:
            j = z + n
            return j if j < len(self.tiles) else None
        if direction == LEFT:
            j = z - 1
            return j if j >= 0 and j // n == z // n else None
        if direction == RIGHT:
            j = z + 1
            return j if j // n == z // n else None
        raise ValueError(f"unknown direction {direction!r}")

    def move_blank(self, direction: str) -> bool:
        j = self.target_index(direction)
        if j is None:
            return False
        self.apply_move(j)
        return True

    def shuffle(self, count: int, rng: Optional[random.Random] = None) -> None:
        """Random walk of `count` blank moves that never steps straight back."""
        rng = rng or random.Random()
        previous_blank = -1
        done = 0
        while done < count:
            z = self.blank_index()
            j = self.target_index(rng.choice(DIRECTIONS))
            if j is None or j == previous_blank:
                continue
            self.apply_move(j)
            previous_blank = z
            done += 1

    def is_solvable(self) -> bool:
        """Inversion parity against the blank-first goal.
           - n odd: inversions must be even
           - n even: inversions + blank row (0-based from the top) must be even
        """
        arr = [x for x in self.tiles if x != 0]
        inv = 0
        for i in range(len(arr)):
            for j in range(i + 1, len(arr)):
                if arr[i] > arr[j]:
                    inv += 1
        if self.n % 2 == 1:
            return inv % 2 == 0
        return (inv + self.blank_index() // self.n) % 2 == 0

    def __repr__(self) -> str:
        return f"Board({self.tiles}, depth={self.depth}, h={self.heuristic}, move={self.move!r})"


def expand(board: Board) -> List[Board]:
    """Children of `board`, one per legal blank move, in Up/Down/Left/Right order."""
    out: List[Board] = []
    for direction in DIRECTIONS:
        j = board.target_index(direction)
        if j is None:
            continue
        child = Board(board.tiles, parent=board, move=direction)
        child.apply_move(j)
        out.append(child)
    return out


def apply_labels(tiles: Sequence[int], labels: Sequence[str]) -> Board:
    """Play `labels` from `tiles`; raises ValueError on an illegal move."""
    board = Board(tiles)
    for label in labels:
        if not board.move_blank(label):
            raise ValueError(f"illegal move {label!r} from {board.tiles}")
    return board
