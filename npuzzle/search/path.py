from __future__ import annotations
from typing import List, Sequence

from npuzzle.domains.board import Board
from npuzzle.search.tree import SearchTree


def move_labels(tree: SearchTree, goal: Board) -> List[str]:
    """Blank moves from the root to `goal`, root first. Length is goal.depth."""
    labels = [node.move for node in tree.ancestry(goal) if node.parent is not None]
    labels.reverse()
    return labels


def replay_steps(tree: SearchTree, goal: Board) -> List[Board]:
    """
    Boards to show one at a time when animating a solution, in root -> goal
    order. The root itself is excluded, the goal is the last item.
    """
    steps = [node for node in tree.ancestry(goal) if node.parent is not None]
    steps.reverse()
    return steps


def solution_string(labels: Sequence[str]) -> str:
    return ", ".join(labels)
