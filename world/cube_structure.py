"""Cube of cells that grows and shrinks by whole shells and tracks visible faces."""
from __future__ import annotations

import logging
from typing import Iterator, List, Optional, Tuple, Union

from render.face_renderer import FaceRenderer
from world.cell_storage import EMPTY, CellStorage, make_storage
from world.cube_cell import CubeCell
from world.sides import SIDES, Coord, neighbors
from world.size_policy import SizeChangeBehaviour, SizeChangePolicy

LOGGER = logging.getLogger(__name__)


def layer_of(x: int, y: int, z: int) -> int:
    """Chebyshev distance of ``(x, y, z)`` from the centre cell."""
    return max(abs(x), abs(y), abs(z))


def layer_max_capacity(layer: int) -> int:
    """Number of coordinates in shell ``layer``: (2k+1)^3 - (2k-1)^3, or 1 for the centre."""
    diameter = 2 * layer + 1
    capacity = diameter ** 3
    if layer == 0:
        return capacity
    return capacity - (diameter - 2) ** 3


def iter_shell(layer: int) -> Iterator[Coord]:
    """Yield every coordinate at Chebyshev distance exactly ``layer``."""
    if layer == 0:
        yield 0, 0, 0
        return
    for x in range(-layer, layer + 1):
        for y in range(-layer, layer + 1):
            if abs(x) == layer or abs(y) == layer:
                for z in range(-layer, layer + 1):
                    yield x, y, z
            else:
                yield x, y, -layer
                yield x, y, layer


class CubeStructure:
    """Cube of cells addressed by signed coordinates ``|x|, |y|, |z| < radius``.

    Radius 0 holds no cells, radius 1 is the single centre cell, radius 2 is a
    3x3x3 cube and so on. Each occupied coordinate holds a ``CubeCell`` whose
    visible sides are exactly those facing an empty or out-of-range
    neighbour. ``set_cell`` keeps that true by touching only the mutated cell
    and its six neighbours.

    The radius changes only through ``expand`` and ``shrink``. Growing while
    the outer shell still has gaps, or shrinking while it still has cells, is
    handled by ``size_change_policy``.
    """

    def __init__(
        self,
        initial_radius: int,
        renderer: Optional[FaceRenderer] = None,
        *,
        storage: Union[str, CellStorage, None] = None,
        size_change_policy: Union[SizeChangePolicy, SizeChangeBehaviour, str, None] = None,
    ) -> None:
        if initial_radius < 0:
            raise ValueError("initial_radius must not be lower than 0")

        self.renderer = renderer if renderer is not None else FaceRenderer()
        if storage is None or isinstance(storage, str):
            storage = make_storage(storage)
        if storage.radius != 0:
            raise ValueError("storage must start empty")
        self._cells = storage

        if size_change_policy is None:
            size_change_policy = SizeChangePolicy.from_config()
        elif not isinstance(size_change_policy, SizeChangePolicy):
            size_change_policy = SizeChangePolicy(size_change_policy)
        self.size_change_policy = size_change_policy

        for _ in range(initial_radius):
            self._cells.grow()
        for (x, y, z), _slot in self._cells.items():
            self._cells.set(x, y, z, CubeCell(self.renderer, x, y, z))
        self._layer_cell_count: List[int] = [layer_max_capacity(k) for k in range(initial_radius)]

        if initial_radius > 0:
            for x, y, z in iter_shell(initial_radius - 1):
                self._update_sides(x, y, z)

    # Size ---------------------------------------------------------------
    @property
    def radius(self) -> int:
        return self._cells.radius

    @property
    def side_length(self) -> int:
        return max(0, 2 * self.radius - 1)

    @property
    def unwanted_size_change_behaviour(self) -> SizeChangeBehaviour:
        return self.size_change_policy.behaviour

    @unwanted_size_change_behaviour.setter
    def unwanted_size_change_behaviour(self, value: Union[SizeChangeBehaviour, str]) -> None:
        self.size_change_policy = SizeChangePolicy(value)

    def bounds(self) -> Tuple[Coord, Coord]:
        low = -(self.radius - 1)
        high = self.radius - 1
        return (low, low, low), (high, high, high)

    def is_out_of_radius(self, x: int, y: int, z: int) -> bool:
        return layer_of(x, y, z) >= self.radius

    # Cell access --------------------------------------------------------
    def get_cell(self, x: int, y: int, z: int) -> Optional[CubeCell]:
        """Return the cell at ``(x, y, z)`` or ``None`` when empty; raise ``IndexError`` out of range."""
        if self.is_out_of_radius(x, y, z):
            raise IndexError(f"cell ({x}, {y}, {z}) out of radius {self.radius}")
        slot = self._cells.get(x, y, z)
        return slot if slot is not EMPTY else None

    def __getitem__(self, coord: Coord) -> Optional[CubeCell]:
        x, y, z = coord
        return self.get_cell(x, y, z)

    def try_get_cell(self, x: int, y: int, z: int) -> Optional[CubeCell]:
        if self.is_out_of_radius(x, y, z):
            return None
        slot = self._cells.get(x, y, z)
        return slot if slot is not EMPTY else None

    def has_cell(self, x: int, y: int, z: int) -> bool:
        return self.try_get_cell(x, y, z) is not None

    def set_cell(self, x: int, y: int, z: int, occupied: bool) -> None:
        """Occupy or clear ``(x, y, z)`` and refresh the faces of it and its neighbours."""
        old = self.get_cell(x, y, z)
        if bool(occupied) == (old is not None):
            return

        if occupied:
            self._cells.set(x, y, z, CubeCell(self.renderer, x, y, z))
        else:
            self._cells.set(x, y, z, EMPTY)
            old.clear_sides()

        self._update_sides(x, y, z)
        self._update_neighbour_sides(x, y, z)

        self._layer_cell_count[layer_of(x, y, z)] += 1 if occupied else -1

    def try_set_cell(self, x: int, y: int, z: int, occupied: bool) -> bool:
        if self.is_out_of_radius(x, y, z):
            return False
        self.set_cell(x, y, z, occupied)
        return True

    # Layers -------------------------------------------------------------
    def layer_cell_count(self, layer: int) -> int:
        return self._layer_cell_count[layer]

    def last_layer_full(self) -> bool:
        """True when the outer shell has no gaps, i.e. growing further needs ``expand``."""
        if self.radius == 0:
            return True
        last = self.radius - 1
        return self._layer_cell_count[last] == layer_max_capacity(last)

    def should_expand(self) -> bool:
        return self.last_layer_full()

    def last_layer_empty(self) -> bool:
        """True when the outer shell holds no cells and ``shrink`` loses nothing."""
        if self.radius == 0:
            return False
        return self._layer_cell_count[self.radius - 1] == 0

    def can_shrink(self) -> bool:
        return self.last_layer_empty()

    def expand(self) -> int:
        """Add an empty outer shell and return the new radius."""
        self.size_change_policy.check(
            self.should_expand(), "Expanded CubeStructure when the most outer layer is not full."
        )
        radius = self._cells.grow()
        self._layer_cell_count.append(0)
        LOGGER.debug("cube expanded to radius %d", radius)
        return radius

    def shrink(self) -> int:
        """Drop the outer shell and return the new radius."""
        self.size_change_policy.check(
            self.can_shrink(), "Shrunk CubeStructure when the most outer layer is not empty."
        )
        if self.radius == 0:
            return 0

        last = self.radius - 1
        dropped: List[CubeCell] = []
        if self._layer_cell_count[last]:
            dropped = [cell for cell in map(self._cell_at, iter_shell(last)) if cell is not None]
            for cell in dropped:
                cell.clear_sides()

        radius = self._cells.shrink()
        self._layer_cell_count.pop()

        # Inner cells that touched a dropped cell now face out of range.
        for cell in dropped:
            for side, (nx, ny, nz) in neighbors(cell.x, cell.y, cell.z):
                neighbour = self.try_get_cell(nx, ny, nz)
                if neighbour is not None:
                    neighbour.add_side(side.opposite)

        LOGGER.debug("cube shrunk to radius %d", radius)
        return radius

    # Queries ------------------------------------------------------------
    def iter_cells(self) -> Iterator[CubeCell]:
        for _coord, slot in self._cells.items():
            if slot is not EMPTY:
                yield slot

    def cell_count(self) -> int:
        return sum(self._layer_cell_count)

    def visible_face_count(self) -> int:
        return sum(len(cell.visible_sides) for cell in self.iter_cells())

    # Face visibility ----------------------------------------------------
    def _cell_at(self, coord: Coord) -> Optional[CubeCell]:
        x, y, z = coord
        return self.try_get_cell(x, y, z)

    def _update_sides(self, x: int, y: int, z: int) -> None:
        cell = self.try_get_cell(x, y, z)
        if cell is None:
            return
        for side in SIDES:
            cell.turn_side(side, self._cell_at(side.step(x, y, z)) is None)

    def _update_neighbour_sides(self, x: int, y: int, z: int) -> None:
        exposed = self.try_get_cell(x, y, z) is None
        for side, coord in neighbors(x, y, z):
            neighbour = self._cell_at(coord)
            if neighbour is not None:
                neighbour.turn_side(side.opposite, exposed)

    def __repr__(self) -> str:
        return f"CubeStructure(radius={self.radius}, cells={self.cell_count()})"
