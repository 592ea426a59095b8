"""Input dispatcher.

Owns the controlled entity's :class:`burnout.state.EntityState` after setup
and turns key-down events into moves. It has a single steady state, *ready
for input*; each event runs one synchronous transition:

1. Look the key code up in the ``KeyMap`` (first direction in
   ``up, down, left, right`` order wins). No match: ignore the event.
2. Run :func:`burnout.step.step`. If it hands back the same state the move
   was rejected (obstacle or map edge): nothing changes, the renderer is not
   called.
3. Otherwise swap in the new state and notify the renderer with the new
   position and the new world offset.

No partial updates are ever visible: the state reference is replaced in one
assignment after the reducer has finished.
"""

import logging
from typing import Iterable, Optional

from pyrsistent import pvector

from burnout.actions import Direction
from burnout.components import GridExtent, GridRect
from burnout.input import KeyEvent
from burnout.keymap import KeyMap
from burnout.renderer import Renderer
from burnout.state import EntityState
from burnout.step import step
from burnout.types import BoundsPolicy, ObstacleSet, Pixels

logger = logging.getLogger(__name__)


class InputDispatcher:
    """Key-down handler with exclusive ownership of the entity state.

    Args:
        state (EntityState): Initial entity snapshot.
        obstacles (Iterable[GridRect]): Collidable cells, frozen into a
            ``PVector`` here.
        block_size (Pixels): Pixel size of one cell.
        key_map (KeyMap): Direction bindings.
        renderer (Renderer): Notified after every accepted move.
        extent (GridExtent | None): Map size, used by ``BoundsPolicy.REJECT``.
        policy (BoundsPolicy): Boundary handling.

    Raises:
        ValueError: If ``policy`` is ``REJECT`` and ``extent`` is None.
    """

    def __init__(
        self,
        state: EntityState,
        obstacles: Iterable[GridRect],
        block_size: Pixels,
        key_map: KeyMap,
        renderer: Renderer,
        extent: Optional[GridExtent] = None,
        policy: BoundsPolicy = BoundsPolicy.UNBOUNDED,
    ) -> None:
        if policy == BoundsPolicy.REJECT and extent is None:
            raise ValueError("BoundsPolicy.REJECT requires map extents")
        self._state = state
        self._obstacles: ObstacleSet = pvector(obstacles)
        self._block_size = block_size
        self._key_map = key_map
        self._renderer = renderer
        self._extent = extent
        self._policy = policy

    @property
    def state(self) -> EntityState:
        return self._state

    @property
    def key_map(self) -> KeyMap:
        return self._key_map

    def handle_key_down(self, event: KeyEvent) -> bool:
        """Handle one raw key-down event. Returns True if the entity moved."""
        direction = self._key_map.direction_for(event.key_code)
        if direction is None:
            logger.debug("Ignoring unmapped key code %s", event.key_code)
            return False
        return self.dispatch(direction)

    def dispatch(self, direction: Direction) -> bool:
        """Attempt a move in ``direction``. Returns True if it was accepted."""
        next_state = step(
            self._state,
            direction,
            self._obstacles,
            self._block_size,
            self._extent,
            self._policy,
        )
        if next_state is self._state:
            logger.debug(
                "Rejected %s from %s", direction, self._state.position.leading_corner
            )
            return False

        self._state = next_state
        # position and offset are always sent as a pair
        try:
            self._renderer.set_entity_position(next_state.position, self._block_size)
        finally:
            self._renderer.set_world_offset(next_state.camera_offset)
        logger.debug(
            "Moved %s to %s, offset (%s, %s)",
            direction,
            next_state.position.leading_corner,
            next_state.camera_offset.x,
            next_state.camera_offset.y,
        )
        return True
