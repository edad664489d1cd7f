#!/usr/bin/env python3
"""
Interactive viewer for a carved CubeStructure.

Usage examples:
  python tools/view_cube.py --radius 3
  python tools/view_cube.py --radius 4 --storage arena --carve 0

Keys:
  space  - clear a random visible cell
  e      - expand by one shell (policy permitting)
  s      - shrink by one shell (policy permitting)
  r      - toggle auto rotation
"""

import argparse
import logging
import random
from typing import List, Optional, Tuple

from panda3d.core import loadPrcFileData

loadPrcFileData("view-cube", "window-title Cube of Cubes")

from direct.showbase.ShowBase import ShowBase
from direct.gui.OnscreenText import OnscreenText
from panda3d.core import AmbientLight, ClockObject, DirectionalLight, LColor, TextNode

from engine.config import get as engine_config_get
from render.panda_faces import PandaFaceRenderer
from world.cube_structure import CubeStructure
from world.size_policy import PreconditionViolated

LOGGER = logging.getLogger("view_cube")

# Cells cleared from the radius-3 demo cube.
DEMO_CARVE: Tuple[Tuple[int, int, int], ...] = (
    (2, -2, 2),
    (-2, -2, 2),
    (-1, 2, -2),
    (0, 2, 2),
    (0, -1, -2),
    (2, 0, 2),
    (2, 0, 0),
    (2, -2, 1),
    (1, -2, -1),
)


class CubeViewer(ShowBase):
    def __init__(self, radius: int, storage: Optional[str], behaviour: Optional[str], carve: bool):
        super().__init__()
        self.disableMouse()
        self.set_background_color(0.05, 0.05, 0.07, 1)
        self._spin = True
        self._heading = 0.0

        d = DirectionalLight("key"); d.setColor(LColor(0.95, 0.95, 0.95, 1))
        dn = self.render.attachNewNode(d); dn.setHpr(45, -50, 0); self.render.setLight(dn)
        a = AmbientLight("amb"); a.setColor(LColor(0.25, 0.25, 0.3, 1))
        an = self.render.attachNewNode(a); self.render.setLight(an)

        self.pivot = self.render.attachNewNode("cube")
        self.faces = PandaFaceRenderer(self.pivot)
        self.cube = CubeStructure(radius, self.faces, storage=storage, size_change_policy=behaviour)
        if carve:
            for x, y, z in DEMO_CARVE:
                self.cube.try_set_cell(x, y, z, False)

        self._hud = OnscreenText(text="", pos=(-1.3, 0.9), scale=0.05, align=TextNode.ALeft, fg=(1, 1, 1, 1), mayChange=True)
        self._place_camera()
        self._refresh_hud()

        self.accept("space", self._carve_random)
        self.accept("e", self._resize, [True])
        self.accept("s", self._resize, [False])
        self.accept("r", self._toggle_spin)
        self.taskMgr.add(self._tick, "cube-spin")

    def _place_camera(self) -> None:
        distance = max(6.0, self.cube.side_length * 3.0)
        self.camera.setPos(0, -distance, distance * 0.6)
        self.camera.lookAt(0, 0, 0)

    def _refresh_hud(self) -> None:
        cube = self.cube
        self._hud.setText(
            f"radius {cube.radius}  cells {cube.cell_count()}  faces {self.faces.live_faces}\n"
            f"policy {cube.unwanted_size_change_behaviour.name}  "
            f"full={cube.last_layer_full()} empty={cube.last_layer_empty()}"
        )

    def _carve_random(self) -> None:
        exposed: List[Tuple[int, int, int]] = [cell.coord for cell in self.cube.iter_cells() if cell.visible_sides]
        if not exposed:
            return
        x, y, z = random.choice(exposed)
        self.cube.set_cell(x, y, z, False)
        self._refresh_hud()

    def _resize(self, grow: bool) -> None:
        try:
            radius = self.cube.expand() if grow else self.cube.shrink()
        except PreconditionViolated as exc:
            LOGGER.warning("%s", exc)
            return
        LOGGER.info("radius now %d", radius)
        self._place_camera()
        self._refresh_hud()

    def _toggle_spin(self) -> None:
        self._spin = not self._spin

    def _tick(self, task):
        if self._spin:
            self._heading = (self._heading + 30.0 * ClockObject.getGlobalClock().getDt()) % 360.0
            self.pivot.setH(self._heading)
        return task.cont


def main():
    ap = argparse.ArgumentParser(description="View a CubeStructure with only its visible faces")
    ap.add_argument("--radius", type=int, default=None, help="Initial radius (default: cube.initial_radius)")
    ap.add_argument("--storage", choices=("nested", "arena"), default=None)
    ap.add_argument("--policy", default=None, help="ignore, warning, error or exception")
    ap.add_argument("--carve", type=int, default=1, help="Clear the demo cells after building (1/0)")
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(message)s")
    radius = args.radius if args.radius is not None else int(engine_config_get("cube.initial_radius", 3))
    LOGGER.info("building cube radius=%d storage=%s", radius, args.storage or "config")
    CubeViewer(radius, args.storage, args.policy, bool(args.carve)).run()


if __name__ == "__main__":
    main()
