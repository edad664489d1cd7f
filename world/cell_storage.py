"""Slot storage backends for the cube structure.

Both backends address slots by signed ``(x, y, z)`` with
``max(|x|, |y|, |z|) < radius`` and grow or shrink one outer shell at a time.
A slot holds either a ``CubeCell`` or the ``EMPTY`` tag.
"""
from __future__ import annotations

from typing import Callable, Iterator, List, Optional, Tuple, TypeVar, Union

from engine.config import get as engine_config_get
from world.cube_cell import CubeCell
from world.sides import Coord
from world.two_way_list import TwoWayList

T = TypeVar("T")


class _EmptySlot:
    __slots__ = ()

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = _EmptySlot()

Slot = Union[CubeCell, _EmptySlot]


def _coord_list(radius: int, make_item: Callable[[], T]) -> TwoWayList[T]:
    """Build a list covering indices ``-(radius-1) .. radius-1``."""
    items: TwoWayList[T] = TwoWayList()
    if radius > 0:
        items.add_forward(make_item())
        for _ in range(1, radius):
            items.add_forward(make_item())
            items.add_backward(make_item())
    return items


class NestedCellStorage:
    """Three nested ``TwoWayList`` levels indexed ``[x][y][z]``."""

    kind = "nested"

    def __init__(self, radius: int = 0) -> None:
        self._radius = 0
        self._cells: TwoWayList[TwoWayList[TwoWayList[Slot]]] = TwoWayList()
        for _ in range(radius):
            self.grow()

    @property
    def radius(self) -> int:
        return self._radius

    # Internal utilities -------------------------------------------------
    @staticmethod
    def _line(radius: int) -> TwoWayList[Slot]:
        return _coord_list(radius, lambda: EMPTY)

    @classmethod
    def _plane(cls, radius: int) -> TwoWayList[TwoWayList[Slot]]:
        return _coord_list(radius, lambda: cls._line(radius))

    # API ----------------------------------------------------------------
    def get(self, x: int, y: int, z: int) -> Slot:
        return self._cells[x][y][z]

    def set(self, x: int, y: int, z: int, slot: Slot) -> None:
        self._cells[x][y][z] = slot

    def grow(self) -> int:
        radius = self._radius
        if radius == 0:
            self._cells = _coord_list(1, lambda: self._plane(1))
        else:
            new_radius = radius + 1
            self._cells.add_forward(self._plane(new_radius))
            self._cells.add_backward(self._plane(new_radius))
            for x in range(-radius + 1, radius):
                plane = self._cells[x]
                plane.add_forward(self._line(new_radius))
                plane.add_backward(self._line(new_radius))
                for y in range(-radius + 1, radius):
                    line = plane[y]
                    line.add_forward(EMPTY)
                    line.add_backward(EMPTY)
        self._radius = radius + 1
        return self._radius

    def shrink(self) -> int:
        if self._radius == 0:
            return 0
        radius = self._radius - 1
        if radius == 0:
            self._cells = TwoWayList()
        else:
            for x in range(-radius + 1, radius):
                plane = self._cells[x]
                for y in range(-radius + 1, radius):
                    line = plane[y]
                    line.remove_forward()
                    line.remove_backward()
                plane.remove_forward()
                plane.remove_backward()
            self._cells.remove_forward()
            self._cells.remove_backward()
        self._radius = radius
        return radius

    def items(self) -> Iterator[Tuple[Coord, Slot]]:
        for x, plane in self._cells.items():
            for y, line in plane.items():
                for z, slot in line.items():
                    yield (x, y, z), slot


class ArenaCellStorage:
    """Single flat list covering the ``(2R-1)^3`` bounding box, re-centred on resize."""

    kind = "arena"

    __slots__ = ("_radius", "_side", "_data")

    def __init__(self, radius: int = 0) -> None:
        if radius < 0:
            raise ValueError("radius must not be negative")
        self._radius = radius
        self._side = max(0, 2 * radius - 1)
        self._data: List[Slot] = [EMPTY] * (self._side ** 3)

    @property
    def radius(self) -> int:
        return self._radius

    # Internal utilities -------------------------------------------------
    def _index(self, x: int, y: int, z: int) -> int:
        r = self._radius
        if abs(x) >= r or abs(y) >= r or abs(z) >= r:
            raise IndexError("cell coordinates out of range")
        offset = r - 1
        side = self._side
        return ((z + offset) * side + (y + offset)) * side + (x + offset)

    def _resize(self, radius: int) -> None:
        old = ArenaCellStorage.__new__(ArenaCellStorage)
        old._radius, old._side, old._data = self._radius, self._side, self._data

        self._radius = radius
        self._side = max(0, 2 * radius - 1)
        self._data = [EMPTY] * (self._side ** 3)

        keep = min(old._radius, radius)
        for x in range(-keep + 1, keep):
            for y in range(-keep + 1, keep):
                for z in range(-keep + 1, keep):
                    self._data[self._index(x, y, z)] = old._data[old._index(x, y, z)]

    # API ----------------------------------------------------------------
    def get(self, x: int, y: int, z: int) -> Slot:
        return self._data[self._index(x, y, z)]

    def set(self, x: int, y: int, z: int, slot: Slot) -> None:
        self._data[self._index(x, y, z)] = slot

    def grow(self) -> int:
        self._resize(self._radius + 1)
        return self._radius

    def shrink(self) -> int:
        if self._radius > 0:
            self._resize(self._radius - 1)
        return self._radius

    def items(self) -> Iterator[Tuple[Coord, Slot]]:
        r = self._radius
        for z in range(-r + 1, r):
            for y in range(-r + 1, r):
                for x in range(-r + 1, r):
                    yield (x, y, z), self._data[self._index(x, y, z)]


CellStorage = Union[NestedCellStorage, ArenaCellStorage]

_STORAGE_KINDS = {
    NestedCellStorage.kind: NestedCellStorage,
    ArenaCellStorage.kind: ArenaCellStorage,
}


def make_storage(kind: Optional[str] = None, radius: int = 0) -> CellStorage:
    """Create an empty storage of the named kind (``cube.storage`` from config by default)."""
    if kind is None:
        kind = engine_config_get("cube.storage", NestedCellStorage.kind)
    try:
        factory = _STORAGE_KINDS[str(kind).strip().lower()]
    except KeyError:
        raise ValueError(f"unknown cell storage kind: {kind!r}") from None
    return factory(radius)
