import pytest

from burnout.actions import Direction
from burnout.keymap import KeyMap
from tests.test_utils import ARROW_KEYS, DOWN, LEFT, RIGHT, UP


@pytest.mark.parametrize(
    "key_code, expected",
    [
        (UP, Direction.UP),
        (DOWN, Direction.DOWN),
        (LEFT, Direction.LEFT),
        (RIGHT, Direction.RIGHT),
        (65, None),
    ],
)
def test_direction_for(key_code: int, expected: Direction) -> None:
    assert ARROW_KEYS.direction_for(key_code) == expected


def test_duplicate_code_resolves_to_earliest_direction() -> None:
    key_map = KeyMap(up=1, down=2, left=2, right=1)
    assert key_map.direction_for(1) == Direction.UP
    assert key_map.direction_for(2) == Direction.DOWN
    assert key_map.shadowed_directions() == [Direction.LEFT, Direction.RIGHT]


def test_no_shadowing_for_distinct_codes() -> None:
    assert ARROW_KEYS.shadowed_directions() == []


def test_from_dict() -> None:
    key_map = KeyMap.from_dict({"up": "87", "down": 83, "left": 65, "right": 68})
    assert key_map == KeyMap(up=87, down=83, left=65, right=68)
    assert key_map.bindings[Direction.UP] == 87


def test_from_dict_missing_direction_raises() -> None:
    with pytest.raises(ValueError, match="right"):
        KeyMap.from_dict({"up": 1, "down": 2, "left": 3})
