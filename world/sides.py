"""The six axis-aligned sides of a cube cell."""
from __future__ import annotations

from enum import Enum
from typing import Iterator, Tuple

Coord = Tuple[int, int, int]


class Side(Enum):
    """Cell side, valued by the unit step toward the neighbour it faces."""

    RIGHT = (1, 0, 0)
    LEFT = (-1, 0, 0)
    UP = (0, 1, 0)
    DOWN = (0, -1, 0)
    FRONT = (0, 0, 1)
    BACK = (0, 0, -1)

    @property
    def direction(self) -> Coord:
        return self.value

    @property
    def opposite(self) -> "Side":
        dx, dy, dz = self.value
        return Side((-dx, -dy, -dz))

    def step(self, x: int, y: int, z: int) -> Coord:
        dx, dy, dz = self.value
        return x + dx, y + dy, z + dz

    def __str__(self) -> str:
        return self.name.capitalize()


SIDES: Tuple[Side, ...] = tuple(Side)

FACE_DIRECTIONS: Tuple[Coord, ...] = tuple(side.direction for side in SIDES)


def neighbors(x: int, y: int, z: int) -> Iterator[Tuple[Side, Coord]]:
    """Yield ``(side, coordinate)`` for the six face-adjacent neighbours of ``(x, y, z)``."""
    for side in SIDES:
        yield side, side.step(x, y, z)
