import random

from world.cube_structure import CubeStructure, iter_shell
from world.size_policy import SizeChangeBehaviour

import pytest


@pytest.mark.parametrize("kind", ["nested", "arena"])
@pytest.mark.parametrize("seed", [1, 7, 42])
def test_random_edits_keep_faces_exact(kind, seed, renderer, check_faces):
    rng = random.Random(seed)
    cube = CubeStructure(3, renderer, storage=kind)
    for step in range(300):
        x, y, z = (rng.randint(-2, 2) for _ in range(3))
        cube.set_cell(x, y, z, rng.random() < 0.4)
        if step % 25 == 0:
            check_faces(cube, renderer)
    check_faces(cube, renderer)


@pytest.mark.parametrize("kind", ["nested", "arena"])
def test_random_edits_with_resizing(kind, renderer, check_faces):
    rng = random.Random(3)
    cube = CubeStructure(2, renderer, storage=kind, size_change_policy=SizeChangeBehaviour.IGNORE)
    for _ in range(40):
        roll = rng.random()
        if roll < 0.1:
            cube.expand()
        elif roll < 0.18 and cube.radius > 1:
            cube.shrink()
        else:
            limit = cube.radius - 1
            for _ in range(10):
                coord = tuple(rng.randint(-limit, limit) for _ in range(3))
                cube.set_cell(*coord, rng.random() < 0.6)
        check_faces(cube, renderer)


def test_each_edit_touches_at_most_seven_cells(renderer):
    cube = CubeStructure(4, renderer)
    renderer.calls.clear()
    cube.set_cell(0, 0, 3, False)
    touched = {coord for _op, coord, _side in renderer.calls}
    assert touched <= {(0, 0, 3), (1, 0, 3), (-1, 0, 3), (0, 1, 3), (0, -1, 3), (0, 0, 2)}
    # the cleared surface cell drops its one outward face, five neighbours gain one each
    assert [op for op, _c, _s in renderer.calls].count("destroy") == 1
    assert [op for op, _c, _s in renderer.calls].count("create") == 5


def test_clearing_outer_shell_then_shrinking(renderer, check_faces):
    cube = CubeStructure(3, renderer)
    for coord in iter_shell(2):
        cube.set_cell(*coord, False)
    assert cube.last_layer_empty()
    check_faces(cube, renderer)
    assert cube.shrink() == 2
    check_faces(cube, renderer)
    assert cube.visible_face_count() == 6 * 3 * 3


def test_destroy_precedes_create_for_same_face(renderer):
    cube = CubeStructure(2, renderer)
    cube.set_cell(1, 0, 0, False)
    cube.set_cell(0, 0, 0, False)
    renderer.calls.clear()
    cube.set_cell(1, 0, 0, True)
    seen = {}
    for op, coord, side in renderer.calls:
        seen.setdefault((coord, side), []).append(op)
    for ops in seen.values():
        assert ops in (["create"], ["destroy"], ["destroy", "create"])
