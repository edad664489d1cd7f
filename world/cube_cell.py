"""A single occupied cell of the cube structure."""
from __future__ import annotations

from typing import Any, Dict, FrozenSet

from render.face_renderer import FaceRenderer
from world.sides import Coord, Side


class CubeCell:
    """Occupied voxel owning one renderer handle per visible side."""

    __slots__ = ("x", "y", "z", "_renderer", "_faces")

    def __init__(self, renderer: FaceRenderer, x: int, y: int, z: int) -> None:
        self.x = x
        self.y = y
        self.z = z
        self._renderer = renderer
        self._faces: Dict[Side, Any] = {}

    @property
    def coord(self) -> Coord:
        return self.x, self.y, self.z

    @property
    def visible_sides(self) -> FrozenSet[Side]:
        return frozenset(self._faces)

    def has_side(self, side: Side) -> bool:
        return side in self._faces

    def face_handle(self, side: Side) -> Any:
        return self._faces.get(side)

    def add_side(self, side: Side) -> None:
        if side in self._faces:
            return
        self._faces[side] = self._renderer.create_face(side, self.coord)

    def remove_side(self, side: Side) -> None:
        handle = self._faces.pop(side, None)
        if handle is not None:
            self._renderer.destroy_face(handle)

    def turn_side(self, side: Side, visible: bool) -> None:
        if visible:
            self.add_side(side)
        else:
            self.remove_side(side)

    def clear_sides(self) -> None:
        """Release every face handle; the cell keeps existing with no visible sides."""
        faces = list(self._faces.values())
        self._faces.clear()
        for handle in faces:
            self._renderer.destroy_face(handle)

    def __repr__(self) -> str:
        sides = ", ".join(str(side) for side in self._faces)
        return f"CubeCell({self.x}, {self.y}, {self.z}, sides=[{sides}])"
