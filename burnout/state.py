"""Immutable ``EntityState`` snapshot.

The controlled entity is described by where it stands and by how far the
world has scrolled around it. Both fields are value objects; every accepted
move produces a *new* ``EntityState`` through :func:`burnout.step.step` and
the owner (the :class:`burnout.dispatcher.InputDispatcher`) swaps its
reference. A rejected move hands back the very same object, so identity
comparison is enough to tell the two outcomes apart.
"""

from dataclasses import dataclass, field

from burnout.components import CameraOffset, GridRect


@dataclass(frozen=True)
class EntityState:
    """Position and camera offset of the controlled entity.

    Attributes:
        position (GridRect): Current unit cell.
        camera_offset (CameraOffset): Accumulated world translation. Starts at
            ``(0, 0)`` and is never reset during a session.
    """

    position: GridRect
    camera_offset: CameraOffset = field(default_factory=CameraOffset)
