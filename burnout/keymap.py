"""Keyboard bindings for the four directions.

Bindings are tested in :data:`burnout.actions.DIRECTION_ORDER`. If two
directions are given the same key code the earlier one always wins and the
later one can never be triggered; :meth:`KeyMap.shadowed_directions` reports
those so setup code can warn about them.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from pyrsistent import pmap
from pyrsistent.typing import PMap

from burnout.actions import DIRECTION_ORDER, Direction
from burnout.types import KeyCode


@dataclass(frozen=True)
class KeyMap:
    """Direction to key code bindings.

    Attributes:
        up: Key code moving the entity up.
        down: Key code moving the entity down.
        left: Key code moving the entity left.
        right: Key code moving the entity right.
    """

    up: KeyCode
    down: KeyCode
    left: KeyCode
    right: KeyCode

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "KeyMap":
        missing = [d.value for d in DIRECTION_ORDER if d.value not in data]
        if missing:
            raise ValueError(f"Keyboard controls missing directions: {missing}")
        return cls(**{d.value: int(data[d.value]) for d in DIRECTION_ORDER})

    @property
    def bindings(self) -> PMap[Direction, KeyCode]:
        return pmap({d: getattr(self, d.value) for d in DIRECTION_ORDER})

    def direction_for(self, key_code: KeyCode) -> Optional[Direction]:
        """Return the first direction bound to ``key_code`` or None."""
        for direction in DIRECTION_ORDER:
            if getattr(self, direction.value) == key_code:
                return direction
        return None

    def shadowed_directions(self) -> List[Direction]:
        """Directions unreachable because an earlier direction shares their code."""
        return [d for d in DIRECTION_ORDER if self.direction_for(getattr(self, d.value)) != d]
