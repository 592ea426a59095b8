"""Renderer contract.

The engine never draws anything itself. After every accepted move it hands
structured values to a ``Renderer``: the new cell of the entity and the new
world offset, always as a pair within the same transition. ``mount`` is
called once during setup with the full static :class:`Layout`.
"""

from dataclasses import dataclass
from typing import Protocol, Tuple

from burnout.components import CameraOffset, GridRect
from burnout.config import AvatarConfig, BlockConfig, MapConfig
from burnout.types import Pixels


@dataclass(frozen=True)
class Layout:
    """Static scene description handed to a renderer on mount.

    Attributes:
        map: Map / view sizes and block size.
        blocks: Every registered block, collidable or decorative, in
            registration order.
        avatar: The controlled entity's appearance and start cell.
    """

    map: MapConfig
    blocks: Tuple[BlockConfig, ...]
    avatar: AvatarConfig


class Renderer(Protocol):
    def mount(self, layout: Layout) -> None: ...

    def set_entity_position(self, position: GridRect, block_size: Pixels) -> None: ...

    def set_world_offset(self, offset: CameraOffset) -> None: ...
