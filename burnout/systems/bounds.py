"""Map boundary system.

Decides whether a candidate cell is acceptable with respect to the map
extents under a :class:`burnout.types.BoundsPolicy`. ``UNBOUNDED`` accepts
everything, matching the engine's historical behavior of letting the avatar
walk off the declared map. ``REJECT`` treats leaving the map exactly like
bumping into an obstacle.
"""

from typing import Optional

from burnout.components import GridExtent, GridRect
from burnout.types import BoundsPolicy


def bounds_system(
    candidate: GridRect, extent: Optional[GridExtent], policy: BoundsPolicy
) -> bool:
    """Return True if ``candidate`` is allowed by ``policy``.

    Raises:
        ValueError: If ``policy`` is ``REJECT`` but no extent is known.
    """
    if policy == BoundsPolicy.UNBOUNDED:
        return True
    if extent is None:
        raise ValueError("BoundsPolicy.REJECT requires map extents")
    return extent.contains(candidate)
