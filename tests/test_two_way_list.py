from world.two_way_list import TwoWayList

import pytest


def _make(backward, forward):
    items = TwoWayList()
    for value in backward:
        items.add_backward(value)
    for value in forward:
        items.add_forward(value)
    return items


def test_add_both_directions():
    items = TwoWayList()
    items.add_forward("a")
    items.add_backward("b")
    assert items[0] == "a"
    assert items[-1] == "b"
    assert len(items) == 2
    assert items.index_of("b") == -1
    assert items.index_of("a") == 0
    assert items.index_of("missing") is None


def test_counts_and_bounds():
    items = _make(["b1", "b2"], ["f0", "f1", "f2"])
    assert items.backward_count == 2
    assert items.forward_count == 3
    assert len(items) == 5
    assert items.first_index == -2
    assert items.last_index == 2
    empty = TwoWayList()
    assert (empty.first_index, empty.last_index, len(empty)) == (0, -1, 0)


def test_direct_indexing_does_not_grow():
    items = _make(["b1"], ["f0"])
    with pytest.raises(IndexError):
        items[1]
    with pytest.raises(IndexError):
        items[-2]
    with pytest.raises(IndexError):
        items[1] = "x"
    items[-1] = "B"
    items[0] = "F"
    assert list(items) == ["B", "F"]


def test_try_get_and_try_set():
    items = _make(["b1"], ["f0"])
    assert items.try_get(5) is None
    assert items.try_get(-5, "dflt") == "dflt"
    assert items.try_get(-1) == "b1"
    assert not items.try_set(2, "x")
    assert not items.try_set(-2, "x")
    assert items.try_set(0, "x")
    assert items[0] == "x"
    assert len(items) == 2


def test_index_of_prefers_backward():
    items = _make(["same"], ["same"])
    assert items.index_of("same") == -1
    items.remove_backward()
    assert items.index_of("same") == 0


def test_insert_stays_in_its_part():
    items = _make(["b1", "b2"], ["f0", "f1"])
    items.insert(0, "new0")
    assert [items[i] for i in range(3)] == ["new0", "f0", "f1"]
    items.insert(-1, "new-1")
    assert [items[i] for i in (-1, -2, -3)] == ["new-1", "b1", "b2"]
    items.insert(3, "tail")
    assert items[3] == "tail"
    assert items.forward_count == 4 and items.backward_count == 3

    with pytest.raises(IndexError):
        items.insert(5, "far")
    with pytest.raises(IndexError):
        items.insert(-5, "far")
    assert items.forward_count == 4 and items.backward_count == 3

    short = _make(["b1"], [])
    with pytest.raises(IndexError):
        short.insert(-3, "far")
    assert short.try_get(-3) is None and short.try_get(-2) is None


def test_remove_ends():
    items = _make(["b1", "b2"], ["f0", "f1"])
    assert items.remove_forward() == "f1"
    assert items.remove_backward() == "b2"
    assert items.remove_backward() == "b1"
    assert items.remove_backward() is None
    assert items.remove_forward() == "f0"
    assert items.remove_forward() is None
    assert len(items) == 0


def test_remove_value():
    items = _make(["x", "b"], ["x", "f"])
    assert items.remove("x")
    assert items.index_of("x") == 0
    assert items.remove("f")
    assert items.remove("x")
    assert not items.remove("x")
    assert list(items) == ["b"]


def test_remove_at():
    items = _make(["b1", "b2"], ["f0", "f1", "f2"])
    assert items.remove_at(1) == "f1"
    assert items[1] == "f2"
    assert items.remove_at(-1) == "b1"
    assert items[-1] == "b2"
    assert items.remove_at(7) is None
    assert items.remove_at(-7) is None
    assert len(items) == 3


def test_iteration_is_ascending_and_restartable():
    items = _make(["b1", "b2", "b3"], ["f0", "f1"])
    expected = ["b3", "b2", "b1", "f0", "f1"]
    assert list(items) == expected
    assert list(items) == expected
    assert list(items.items()) == list(zip(range(-3, 2), expected))
    assert "b2" in items and "zz" not in items
