from typing import Sequence


def manhattan(tiles: Sequence[int], n: int) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored, goal of tile v is index v)."""
    dist = 0
    for idx, tile in enumerate(tiles):
        if tile == 0:
            continue
        r, c = divmod(idx, n)
        gr, gc = divmod(tile, n)
        dist += abs(r - gr) + abs(c - gc)
    return dist
