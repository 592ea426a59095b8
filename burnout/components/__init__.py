"""burnout.components
=====================

Aggregate import surface for the value objects the engine moves around.

All components are frozen ``@dataclass`` instances; a change of position or
offset is expressed by building a new one, never by mutation::

    from burnout.components import GridRect, CameraOffset
"""

from .camera_offset import CameraOffset
from .extent import GridExtent
from .grid_rect import GridRect

__all__ = [
    "CameraOffset",
    "GridExtent",
    "GridRect",
]
