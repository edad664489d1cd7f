from world.sides import SIDES, Side, neighbors


def test_neighbors_are_keyed_by_side():
    by_side = dict(neighbors(3, -2, 5))
    assert by_side == {
        Side.RIGHT: (4, -2, 5),
        Side.LEFT: (2, -2, 5),
        Side.UP: (3, -1, 5),
        Side.DOWN: (3, -3, 5),
        Side.FRONT: (3, -2, 6),
        Side.BACK: (3, -2, 4),
    }
    assert [side for side, _coord in neighbors(0, 0, 0)] == list(SIDES)


def test_opposites_and_steps():
    pairs = {Side.RIGHT: Side.LEFT, Side.UP: Side.DOWN, Side.FRONT: Side.BACK}
    for side, other in pairs.items():
        assert side.opposite is other
        assert other.opposite is side
    for side in SIDES:
        assert side.opposite.step(*side.step(3, -2, 5)) == (3, -2, 5)
    assert str(Side.FRONT) == "Front"
