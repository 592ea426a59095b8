"""Direction enumeration.

``DIRECTION_ORDER`` is the canonical order in which key bindings are tested;
when two directions share a key code the earlier one wins.
"""

from enum import StrEnum, auto


class Direction(StrEnum):
    """Cardinal movement directions."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


DIRECTION_ORDER = [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT]
