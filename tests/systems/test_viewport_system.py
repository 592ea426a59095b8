from typing import Tuple

import pytest

from burnout.actions import Direction
from burnout.components import CameraOffset
from burnout.systems.viewport import viewport_system


@pytest.mark.parametrize(
    "direction, expected",
    [
        (Direction.UP, (0, 10)),
        (Direction.DOWN, (0, -10)),
        (Direction.LEFT, (10, 0)),
        (Direction.RIGHT, (-10, 0)),
    ],
)
def test_offset_moves_opposite_to_entity(
    direction: Direction, expected: Tuple[int, int]
) -> None:
    assert viewport_system(CameraOffset(), direction, 10) == CameraOffset(*expected)


def test_offset_accumulates() -> None:
    offset = CameraOffset()
    for direction in [Direction.RIGHT, Direction.RIGHT, Direction.DOWN, Direction.LEFT]:
        offset = viewport_system(offset, direction, 16)
    assert offset == CameraOffset(x=-16, y=-16)


def test_fractional_block_size() -> None:
    assert viewport_system(CameraOffset(1.5, 0), Direction.LEFT, 2.5) == CameraOffset(4.0, 0)
