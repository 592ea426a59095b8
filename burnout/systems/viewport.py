"""Viewport system.

Scrolls the world one ``block_size`` against the direction of travel after an
accepted move:

* up    -> ``y += block_size``
* down  -> ``y -= block_size``
* left  -> ``x += block_size``
* right -> ``x -= block_size``

The sign convention is fixed; nothing about the obstacle layout changes it.
"""

from typing import Dict, Tuple

from burnout.actions import Direction
from burnout.components import CameraOffset
from burnout.types import Pixels


_SCROLL: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (1, 0),
    Direction.RIGHT: (-1, 0),
}


def viewport_system(
    offset: CameraOffset, direction: Direction, block_size: Pixels
) -> CameraOffset:
    """Return the offset after one accepted move in ``direction``."""
    sx, sy = _SCROLL[direction]
    return CameraOffset(offset.x + sx * block_size, offset.y + sy * block_size)
