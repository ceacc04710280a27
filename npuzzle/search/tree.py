from __future__ import annotations
from typing import Iterator, List

from npuzzle.domains.board import Board


class SearchTree:
    """Arena of every board created during one search, indexed by creation order."""

    def __init__(self):
        self._boards: List[Board] = []

    def add(self, board: Board) -> int:
        board.index = len(self._boards)
        self._boards.append(board)
        return board.index

    def __getitem__(self, index: int) -> Board:
        return self._boards[index]

    def __len__(self) -> int:
        return len(self._boards)

    def __iter__(self) -> Iterator[Board]:
        return iter(self._boards)

    def ancestry(self, board: Board) -> Iterator[Board]:
        """Yield `board` and then each parent up to and including the root."""
        node = board
        while True:
            yield node
            if node.parent is None:
                return
            node = self._boards[node.parent]

    def clear(self) -> None:
        self._boards.clear()
