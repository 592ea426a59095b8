"""Game setup orchestration.

:class:`GameController` collects the pieces of a level in a fixed order and
finally hands them to an :class:`burnout.dispatcher.InputDispatcher`:

1. ``define_map`` - sizes, block size and boundary policy.
2. ``define_block`` (any number) - collidable blocks join the obstacle set.
3. ``define_avatar`` - freezes the obstacle set and creates the entity state.
4. ``render_map`` - mounts the renderer with the static layout.
5. ``define_controls`` - builds the dispatcher and registers it on the input
   source.

The dispatcher captures the obstacle set and entity state at attach time, so
calling these out of order raises :class:`SetupOrderError` during setup.
:meth:`GameController.from_config` performs the sequence for you.
"""

import logging
from typing import List, Optional

from pyrsistent import pvector

from burnout.components import GridRect
from burnout.config import AvatarConfig, BlockConfig, ControlsConfig, GameConfig, MapConfig
from burnout.dispatcher import InputDispatcher
from burnout.input import InputSource
from burnout.renderer import Layout, Renderer
from burnout.state import EntityState
from burnout.types import ObstacleSet

logger = logging.getLogger(__name__)


class SetupOrderError(RuntimeError):
    """A setup step was called before the steps it depends on."""


class GameController:
    def __init__(self) -> None:
        self._map: Optional[MapConfig] = None
        self._blocks: List[BlockConfig] = []
        self._collision_positions: List[GridRect] = []
        self._obstacles: Optional[ObstacleSet] = None
        self._avatar: Optional[AvatarConfig] = None
        self._renderer: Optional[Renderer] = None
        self._dispatcher: Optional[InputDispatcher] = None

    @classmethod
    def from_config(
        cls, config: GameConfig, renderer: Renderer, input_source: InputSource
    ) -> "GameController":
        """Build a fully wired controller from a :class:`GameConfig`."""
        controller = cls()
        controller.define_map(config.map)
        for block in config.blocks:
            controller.define_block(block)
        controller.define_avatar(config.avatar)
        controller.render_map(renderer)
        controller.define_controls(config.controls, input_source)
        return controller

    @property
    def obstacles(self) -> Optional[ObstacleSet]:
        """Frozen obstacle set, available once the avatar is defined."""
        return self._obstacles

    @property
    def dispatcher(self) -> Optional[InputDispatcher]:
        return self._dispatcher

    @property
    def state(self) -> Optional[EntityState]:
        """Current entity state, once controls are attached."""
        return self._dispatcher.state if self._dispatcher is not None else None

    def define_map(self, config: MapConfig) -> None:
        if self._avatar is not None:
            raise SetupOrderError("Map must be defined before the avatar")
        self._map = config

    def define_block(self, config: BlockConfig) -> None:
        """Register a block; collidable ones become obstacles."""
        if self._map is None:
            raise SetupOrderError("Define the map before adding blocks")
        if self._obstacles is not None:
            raise SetupOrderError("Obstacle set is frozen once the avatar is defined")
        if config.collision:
            self._collision_positions.append(config.position)
        self._blocks.append(config)

    def define_avatar(self, config: AvatarConfig) -> None:
        if self._map is None:
            raise SetupOrderError("Define the map before the avatar")
        if self._avatar is not None:
            raise SetupOrderError("Avatar is already defined")
        self._obstacles = pvector(self._collision_positions)
        self._avatar = config
        logger.debug(
            "Avatar defined at %s with %d obstacle(s)",
            config.position.leading_corner,
            len(self._obstacles),
        )

    def render_map(self, renderer: Renderer) -> None:
        """Mount ``renderer`` with the static layout and the avatar's start cell."""
        if self._map is None or self._avatar is None:
            raise SetupOrderError("Define the map and the avatar before rendering")
        renderer.mount(Layout(self._map, tuple(self._blocks), self._avatar))
        self._renderer = renderer

    def define_controls(
        self, config: ControlsConfig, input_source: InputSource
    ) -> Optional[InputDispatcher]:
        """Attach keyboard controls.

        Returns:
            InputDispatcher | None: The registered dispatcher, or None when
                ``config.keyboard`` is absent (the game stays without controls).
        """
        if config.keyboard is None:
            logger.warning("No keyboard controls configured; input is disabled")
            return None
        if self._map is None or self._avatar is None or self._obstacles is None:
            raise SetupOrderError("Define the map and the avatar before the controls")
        if self._renderer is None:
            raise SetupOrderError("Render the map before attaching controls")
        if self._dispatcher is not None:
            raise SetupOrderError("Controls are already attached")

        for direction in config.keyboard.shadowed_directions():
            logger.warning(
                "Key code %s for %s is already bound to an earlier direction; "
                "%s is unreachable",
                getattr(config.keyboard, direction.value),
                direction,
                direction,
            )

        dispatcher = InputDispatcher(
            state=EntityState(position=self._avatar.position),
            obstacles=self._obstacles,
            block_size=self._map.block_size,
            key_map=config.keyboard,
            renderer=self._renderer,
            extent=self._map.map,
            policy=self._map.bounds,
        )
        input_source.on_key_down(dispatcher.handle_key_down)
        self._dispatcher = dispatcher
        logger.info("Keyboard controls attached: %s", dict(config.keyboard.bindings))
        return dispatcher
