"""Camera offset component.

Accumulated pixel translation applied to the whole map so the avatar appears
to stay put while the world scrolls beneath it.
"""

from dataclasses import dataclass

from burnout.types import Pixels


@dataclass(frozen=True)
class CameraOffset:
    """World translation in pixels.

    Attributes:
        x: Horizontal translation (positive moves the map right).
        y: Vertical translation (positive moves the map down).
    """

    x: Pixels = 0
    y: Pixels = 0
