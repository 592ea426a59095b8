"""Single-input transition reducer.

:func:`step` is the only place an ``EntityState`` changes. It is pure: it
either returns the input object untouched (the move was rejected) or a new
``EntityState`` with both position and camera offset updated.

Ordering:

1. ``resolve_move`` produces the candidate cell.
2. ``bounds_system`` applies the map boundary policy.
3. ``was_bumped`` checks the candidate against the obstacle set.
4. On success ``viewport_system`` scrolls the camera and the new state is built.
"""

from dataclasses import replace
from typing import Optional

from burnout.actions import Direction
from burnout.components import GridExtent
from burnout.moves import resolve_move
from burnout.state import EntityState
from burnout.systems.bounds import bounds_system
from burnout.systems.collision import was_bumped
from burnout.systems.viewport import viewport_system
from burnout.types import BoundsPolicy, ObstacleSet, Pixels


def step(
    state: EntityState,
    direction: Direction,
    obstacles: ObstacleSet,
    block_size: Pixels,
    extent: Optional[GridExtent] = None,
    policy: BoundsPolicy = BoundsPolicy.UNBOUNDED,
) -> EntityState:
    """Apply one directional move.

    Args:
        state (EntityState): Current entity snapshot.
        direction (Direction): Requested direction.
        obstacles (ObstacleSet): Frozen collidable cells.
        block_size (Pixels): Pixel size of one cell; the camera scrolls by
            this amount per accepted move.
        extent (GridExtent | None): Map size, needed only for ``REJECT``.
        policy (BoundsPolicy): Boundary handling.

    Returns:
        EntityState: ``state`` itself if the move is rejected, otherwise a new
            snapshot.
    """
    candidate = resolve_move(state.position, direction)

    if not bounds_system(candidate, extent, policy):
        return state

    if was_bumped(candidate, obstacles):
        return state

    return replace(
        state,
        position=candidate,
        camera_offset=viewport_system(state.camera_offset, direction, block_size),
    )
