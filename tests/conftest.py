import pytest

from engine import config as engine_config
from render.face_renderer import FaceRenderer
from world.sides import SIDES


class RecordingRenderer(FaceRenderer):
    """Renderer that remembers which faces exist and the order of calls."""

    def __init__(self):
        self.live = {}
        self.calls = []
        self._next = 0

    def create_face(self, side, coord):
        key = (coord, side)
        assert key not in self.live, f"face {key} created twice"
        self._next += 1
        handle = ("face", self._next)
        self.live[key] = handle
        self.calls.append(("create", coord, side))
        return handle

    def destroy_face(self, handle):
        for key, live_handle in list(self.live.items()):
            if live_handle == handle:
                del self.live[key]
                self.calls.append(("destroy", key[0], key[1]))
                return
        raise AssertionError(f"unknown handle {handle!r}")


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture(autouse=True)
def default_config():
    engine_config.reset({"cube": {"storage": "nested", "size_change_behaviour": "exception"}})
    yield
    engine_config.reset()


def brute_force_check(cube, renderer=None):
    """Recompute faces and layer counts from scratch and compare with the cube."""
    r = cube.radius
    counts = [0] * r
    for x in range(-r + 1, r):
        for y in range(-r + 1, r):
            for z in range(-r + 1, r):
                cell = cube.get_cell(x, y, z)
                if cell is None:
                    continue
                counts[max(abs(x), abs(y), abs(z))] += 1
                expected = {side for side in SIDES if cube.try_get_cell(*side.step(x, y, z)) is None}
                assert set(cell.visible_sides) == expected, (x, y, z)
                if renderer is not None:
                    for side in expected:
                        assert ((x, y, z), side) in renderer.live
    assert [cube.layer_cell_count(k) for k in range(r)] == counts
    if renderer is not None:
        assert len(renderer.live) == cube.visible_face_count()


@pytest.fixture
def check_faces():
    return brute_force_check
