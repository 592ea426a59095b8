# tests/unit/test_moves.py

from typing import Tuple

import pytest

from burnout.actions import DIRECTION_ORDER, Direction
from burnout.components import GridRect
from burnout.moves import (
    MOVE_FN_REGISTRY,
    move_down,
    move_left,
    move_right,
    move_up,
    resolve_move,
)
from burnout.types import MoveFn


@pytest.mark.parametrize(
    "move_fn, start, expected",
    [
        (move_up, (5, 5), (4, 5)),
        (move_down, (5, 5), (6, 5)),
        (move_left, (5, 5), (5, 4)),
        (move_right, (5, 5), (5, 6)),
        # no clamping at the origin
        (move_up, (1, 1), (0, 1)),
        (move_left, (1, 1), (1, 0)),
    ],
)
def test_simple_moves(
    move_fn: MoveFn, start: Tuple[int, int], expected: Tuple[int, int]
) -> None:
    assert move_fn(GridRect.cell(*start)) == GridRect.cell(*expected)


@pytest.mark.parametrize("direction", DIRECTION_ORDER)
def test_moves_preserve_unit_size(direction: Direction) -> None:
    candidate = resolve_move(GridRect.cell(3, 7), direction)
    assert candidate.is_unit


def test_moves_shift_start_and_end_identically() -> None:
    wide = GridRect(2, 2, 4, 5)
    assert move_down(wide) == GridRect(3, 2, 5, 5)
    assert move_left(wide) == GridRect(2, 1, 4, 4)


def test_moves_do_not_mutate_input() -> None:
    start = GridRect.cell(2, 2)
    move_right(start)
    assert start == GridRect.cell(2, 2)


@pytest.mark.parametrize(
    "forward, backward",
    [(move_up, move_down), (move_down, move_up), (move_left, move_right), (move_right, move_left)],
)
def test_inverse_moves_return_to_start(forward: MoveFn, backward: MoveFn) -> None:
    for start in [GridRect.cell(1, 1), GridRect.cell(10, 3), GridRect.cell(0, -4)]:
        assert backward(forward(start)) == start


def test_registry_covers_every_direction() -> None:
    assert set(MOVE_FN_REGISTRY) == set(DIRECTION_ORDER)
    assert resolve_move(GridRect.cell(5, 5), Direction.UP) == GridRect.cell(4, 5)
