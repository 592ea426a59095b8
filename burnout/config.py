"""Setup configuration.

Plain dataclasses describing a level before the game starts. Each has a
``from_dict`` constructor accepting the nested mapping layout used in level
documents, e.g.::

    {
        "map": {
            "block_size": 10,
            "map": {"cols": 30, "rows": 30},
            "view": {"cols": 15, "rows": 15},
        },
        "blocks": [
            {
                "class_name": "block-a",
                "collision": True,
                "position": {"row_start": 20, "column_start": 20},
            },
        ],
        "avatar": {"class_name": "ash", "position": {"row_start": 10, "column_start": 10}},
        "controls": {"keyboard": {"up": 38, "down": 40, "left": 37, "right": 39}},
    }

Validation happens here, once. Nothing downstream re-checks these values.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from burnout.components import GridExtent, GridRect
from burnout.keymap import KeyMap
from burnout.types import BoundsPolicy, Pixels


def _extent(data: Mapping[str, Any], name: str) -> GridExtent:
    try:
        return GridExtent(rows=int(data["rows"]), cols=int(data["cols"]))
    except KeyError as exc:
        raise ValueError(f"{name} needs rows and cols: {data!r}") from exc


def _unit_cell(data: Mapping[str, Any], owner: str) -> GridRect:
    position = GridRect.from_dict(data)
    if not position.is_unit:
        raise ValueError(f"{owner} must occupy exactly one cell, got {position}")
    return position


@dataclass(frozen=True)
class MapConfig:
    """Map and camera layout.

    Attributes:
        block_size: Pixel size of one cell. Must be positive.
        map: Size of the whole world.
        view: Size of the visible window.
        developer: Draw debug outlines and leave the view unclipped.
        bounds: What to do with moves that leave the map.
    """

    block_size: Pixels
    map: GridExtent
    view: GridExtent
    developer: bool = False
    bounds: BoundsPolicy = BoundsPolicy.UNBOUNDED

    def __post_init__(self) -> None:
        if isinstance(self.block_size, bool) or not isinstance(self.block_size, (int, float)):
            raise ValueError(f"block_size must be a number, got {self.block_size!r}")
        if self.block_size <= 0:
            raise ValueError(f"block_size must be positive, got {self.block_size}")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MapConfig":
        if "block_size" not in data:
            raise ValueError("Map config needs block_size")
        block_size = data["block_size"]
        if isinstance(block_size, bool):
            raise ValueError(f"block_size must be a number, got {block_size!r}")
        try:
            block_size = float(block_size)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"block_size must be a number, got {block_size!r}") from exc
        return cls(
            block_size=block_size,
            map=_extent(data.get("map", {}), "map"),
            view=_extent(data.get("view", {}), "view"),
            developer=bool(data.get("developer", False)),
            bounds=BoundsPolicy(data.get("bounds", BoundsPolicy.UNBOUNDED)),
        )


@dataclass(frozen=True)
class BlockConfig:
    """A map block. Only blocks with ``collision`` enter the obstacle set."""

    position: GridRect
    collision: bool = False
    class_name: str = "block"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BlockConfig":
        return cls(
            position=_unit_cell(data.get("position", {}), "Block"),
            collision=bool(data.get("collision", False)),
            class_name=str(data.get("class_name", "block")),
        )


@dataclass(frozen=True)
class AvatarConfig:
    """The controlled entity and where it starts."""

    position: GridRect
    class_name: str = "avatar"

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AvatarConfig":
        return cls(
            position=_unit_cell(data.get("position", {}), "Avatar"),
            class_name=str(data.get("class_name", "avatar")),
        )


@dataclass(frozen=True)
class ControlsConfig:
    """Input bindings. ``keyboard=None`` leaves the game without controls."""

    keyboard: Optional[KeyMap] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ControlsConfig":
        keyboard = data.get("keyboard")
        return cls(keyboard=KeyMap.from_dict(keyboard) if keyboard else None)


@dataclass(frozen=True)
class GameConfig:
    """Everything needed to build a :class:`burnout.controller.GameController`."""

    map: MapConfig
    avatar: AvatarConfig
    blocks: Tuple[BlockConfig, ...] = ()
    controls: ControlsConfig = field(default_factory=ControlsConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "GameConfig":
        for section in ("map", "avatar"):
            if section not in data:
                raise ValueError(f"Game config missing '{section}' section")
        return cls(
            map=MapConfig.from_dict(data["map"]),
            avatar=AvatarConfig.from_dict(data["avatar"]),
            blocks=tuple(BlockConfig.from_dict(b) for b in data.get("blocks", ())),
            controls=ControlsConfig.from_dict(data.get("controls", {})),
        )
