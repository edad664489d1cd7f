"""Renderer interface consumed by the cube structure for visible cell faces."""
from __future__ import annotations

from typing import Any, NamedTuple

from world.sides import Coord, Side


class FaceHandle(NamedTuple):
    side: Side
    coord: Coord


class FaceRenderer:
    """Creates and destroys the renderable for one visible cell face.

    The base implementation is headless: handles are plain ``FaceHandle``
    values and nothing is drawn. Subclasses return whatever their scene graph
    needs to remove the face again later; the cube structure never looks
    inside a handle.
    """

    def create_face(self, side: Side, coord: Coord) -> Any:
        return FaceHandle(side, coord)

    def destroy_face(self, handle: Any) -> None:
        pass
