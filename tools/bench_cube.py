"""Benchmark cube construction, single-cell edits and shell resizing."""
from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from typing import List

from render.face_renderer import FaceRenderer
from world.cube_structure import CubeStructure, iter_shell
from world.size_policy import SizeChangeBehaviour

LOGGER = logging.getLogger("bench_cube")


def _parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark CubeStructure operations")
    parser.add_argument("--radius", type=int, default=12, help="Initial cube radius")
    parser.add_argument("--edits", type=int, default=20000, help="Random set_cell calls")
    parser.add_argument("--storage", choices=("nested", "arena"), default="nested")
    parser.add_argument("--seed", type=int, default=1)
    return parser.parse_args(argv)


def main(argv: List[str]) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s %(message)s")
    rng = random.Random(args.seed)

    t_start = time.perf_counter()
    cube = CubeStructure(
        args.radius,
        FaceRenderer(),
        storage=args.storage,
        size_change_policy=SizeChangeBehaviour.IGNORE,
    )
    build_time = time.perf_counter() - t_start

    limit = max(0, args.radius - 1)
    t_edit = time.perf_counter()
    for _ in range(args.edits):
        x, y, z = (rng.randint(-limit, limit) for _ in range(3))
        cube.try_set_cell(x, y, z, rng.random() < 0.5)
    edit_time = time.perf_counter() - t_edit

    t_resize = time.perf_counter()
    cube.expand()
    for x, y, z in iter_shell(cube.radius - 1):
        cube.set_cell(x, y, z, True)
    cube.shrink()
    resize_time = time.perf_counter() - t_resize

    print("Storage:", args.storage)
    print("Radius:", args.radius)
    print(f"Build time: {build_time:.3f} s")
    print(f"Edit time: {edit_time:.3f} s ({args.edits} edits)")
    print(f"Expand/fill/shrink time: {resize_time:.3f} s")
    print("Cells:", cube.cell_count())
    print("Visible faces:", cube.visible_face_count())
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
