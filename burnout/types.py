"""Common type aliases and enumerations.

``MoveFn`` is the extension point the dispatcher uses to turn a direction into
a candidate cell; ``ObstacleSet`` is the frozen collection of collidable cells
built once at setup.
"""

from enum import StrEnum, auto
from typing import Callable, TYPE_CHECKING

from pyrsistent.typing import PVector


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from burnout.components import GridRect

KeyCode = int
Pixels = float

MoveFn = Callable[["GridRect"], "GridRect"]
ObstacleSet = PVector["GridRect"]


class BoundsPolicy(StrEnum):
    """What happens to a candidate cell that leaves the map extents."""

    UNBOUNDED = auto()
    REJECT = auto()
