"""Built-in movement transforms.

Each *move function* maps the current ``GridRect`` to the candidate
``GridRect`` one cell away. Start and end lines shift together so a unit cell
stays a unit cell. These are pure geometry: they never look at obstacles or
map extents, callers decide whether the candidate is acceptable.
"""

from typing import Dict

from burnout.actions import Direction
from burnout.components import GridRect
from burnout.types import MoveFn


def move_up(position: GridRect) -> GridRect:
    return position.shifted(-1, 0)


def move_down(position: GridRect) -> GridRect:
    return position.shifted(1, 0)


def move_left(position: GridRect) -> GridRect:
    return position.shifted(0, -1)


def move_right(position: GridRect) -> GridRect:
    return position.shifted(0, 1)


MOVE_FN_REGISTRY: Dict[Direction, MoveFn] = {
    Direction.UP: move_up,
    Direction.DOWN: move_down,
    Direction.LEFT: move_left,
    Direction.RIGHT: move_right,
}
"""Direction to transform lookup used by the reducer."""


def resolve_move(position: GridRect, direction: Direction) -> GridRect:
    """Return the candidate cell for ``direction``.

    Raises:
        KeyError: If ``direction`` is not a registered direction.
    """
    return MOVE_FN_REGISTRY[direction](position)
