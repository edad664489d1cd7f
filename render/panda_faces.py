"""Panda3D scene-graph quads for visible cube cell faces."""
from __future__ import annotations

from typing import Dict, Tuple

from panda3d.core import (
    CullFaceAttrib,
    Geom,
    GeomNode,
    GeomTriangles,
    GeomVertexData,
    GeomVertexFormat,
    GeomVertexWriter,
    NodePath,
    RenderState,
    TransparencyAttrib,
)

from engine.config import get as engine_config_get
from render.face_renderer import FaceRenderer
from world.sides import Coord, Side

Offset = Tuple[int, int, int]


class PandaFaceRenderer(FaceRenderer):
    """Attach one quad node per visible face under a per-cell group node.

    Each occupied coordinate with a visible side gets a "CubeCell [x, y, z]"
    node under ``parent``; it is created with the first side and removed with
    the last.

    Quads for the same side share a single ``Geom`` so a large cube costs one
    ``GeomNode`` per face but only six vertex buffers in total.
    """

    _uvs = ((0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0))

    _face_defs: Dict[Side, Tuple[Tuple[Offset, ...], Offset]] = {
        # side: vertex offsets in the unit cell, normal
        Side.RIGHT: (((1, 0, 0), (1, 1, 0), (1, 1, 1), (1, 0, 1)), (1, 0, 0)),
        Side.LEFT: (((0, 0, 0), (0, 0, 1), (0, 1, 1), (0, 1, 0)), (-1, 0, 0)),
        Side.UP: (((0, 1, 0), (0, 1, 1), (1, 1, 1), (1, 1, 0)), (0, 1, 0)),
        Side.DOWN: (((0, 0, 0), (1, 0, 0), (1, 0, 1), (0, 0, 1)), (0, -1, 0)),
        Side.FRONT: (((0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1)), (0, 0, 1)),
        Side.BACK: (((0, 0, 0), (0, 1, 0), (1, 1, 0), (1, 0, 0)), (0, 0, -1)),
    }

    def __init__(self, parent: NodePath, cube_size: float | None = None) -> None:
        if cube_size is None:
            cube_size = engine_config_get("render.cube_size", 1.0)
        self.parent = parent
        self._scale = float(cube_size) if cube_size else 1.0
        self._format = GeomVertexFormat.getV3n3t2()
        self._render_state = RenderState.make(
            CullFaceAttrib.make(CullFaceAttrib.MCullClockwise),
            TransparencyAttrib.make(TransparencyAttrib.M_none),
        )
        self._geoms: Dict[Side, Geom] = {}
        self._groups: Dict[Coord, NodePath] = {}
        self.live_faces = 0

    def _geom_for(self, side: Side) -> Geom:
        geom = self._geoms.get(side)
        if geom is not None:
            return geom

        offsets, normal = self._face_defs[side]
        vdata = GeomVertexData(f"face-{side.name.lower()}", self._format, Geom.UHStatic)
        vwriter = GeomVertexWriter(vdata, "vertex")
        nwriter = GeomVertexWriter(vdata, "normal")
        twriter = GeomVertexWriter(vdata, "texcoord")
        # Offsets span the unit cell; shift so the cell is centred on its coordinate.
        for (dx, dy, dz), uv in zip(offsets, self._uvs):
            vwriter.addData3((dx - 0.5) * self._scale, (dy - 0.5) * self._scale, (dz - 0.5) * self._scale)
            nwriter.addData3(*normal)
            twriter.addData2(*uv)

        prim = GeomTriangles(Geom.UHStatic)
        prim.addVertices(0, 1, 2)
        prim.closePrimitive()
        prim.addVertices(0, 2, 3)
        prim.closePrimitive()

        geom = Geom(vdata)
        geom.addPrimitive(prim)
        self._geoms[side] = geom
        return geom

    def _group_for(self, coord: Coord) -> NodePath:
        group = self._groups.get(coord)
        if group is None:
            x, y, z = coord
            group = self.parent.attachNewNode(f"CubeCell [{x}, {y}, {z}]")
            group.setPos(x * self._scale, y * self._scale, z * self._scale)
            self._groups[coord] = group
        return group

    def create_face(self, side: Side, coord: Coord) -> NodePath:
        x, y, z = coord
        geom_node = GeomNode(f"CubeCellPlane [{x}, {y}, {z}] {side}")
        geom_node.addGeom(self._geom_for(side))
        node = self._group_for(coord).attachNewNode(geom_node)
        node.setState(self._render_state)
        node.setPythonTag("coord", coord)
        self.live_faces += 1
        return node

    def destroy_face(self, handle: NodePath) -> None:
        if handle.isEmpty():
            return
        coord = handle.getPythonTag("coord")
        handle.removeNode()
        self.live_faces -= 1
        # The cell node goes with its last side.
        group = self._groups.get(coord)
        if group is not None and group.getNumChildren() == 0:
            group.removeNode()
            del self._groups[coord]
