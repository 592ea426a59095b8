"""Collision system.

Every obstacle and the controlled entity occupy exactly one cell and moves are
one cell long, so two regions overlap exactly when their leading corners are
equal. The check therefore reduces to a set membership test on
``(row_start, col_start)`` pairs.

Performance: for a frozen ``PVector`` the corner index is cached, so one index
is built per session. Other sequences are scanned linearly.
"""

from functools import lru_cache
from typing import FrozenSet, Sequence, Tuple

from pyrsistent import PVector

from burnout.components import GridRect
from burnout.types import ObstacleSet


@lru_cache(maxsize=64)
def _corner_index(obstacles: ObstacleSet) -> FrozenSet[Tuple[int, int]]:
    return frozenset(obstacle.leading_corner for obstacle in obstacles)


def was_bumped(candidate: GridRect, obstacles: Sequence[GridRect]) -> bool:
    """Return True if ``candidate`` lands on a collidable cell.

    Args:
        candidate (GridRect): Cell the entity would occupy.
        obstacles (Sequence[GridRect]): Collidable cells. A ``PVector`` uses
            the cached corner index.

    Returns:
        bool: True when the leading corner of ``candidate`` equals the leading
            corner of any obstacle.
    """
    corner = candidate.leading_corner
    if isinstance(obstacles, PVector):
        return corner in _corner_index(obstacles)
    return any(obstacle.leading_corner == corner for obstacle in obstacles)
