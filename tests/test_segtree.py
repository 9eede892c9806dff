import random

import pytest

from dpkit.segtree import MaxSegmentTree


def test_fresh_tree_is_empty():
    tree = MaxSegmentTree(8)
    assert tree.query(0, 8) == MaxSegmentTree.EMPTY
    assert tree.query(2, 5) == MaxSegmentTree.EMPTY


def test_single_update():
    tree = MaxSegmentTree(5)
    tree.update(3, 42)
    assert tree.query(3, 4) == 42
    assert tree.query(0, 5) == 42
    assert tree.query(0, 3) == MaxSegmentTree.EMPTY


def test_update_assigns_rather_than_maximises():
    tree = MaxSegmentTree(4)
    tree.update(1, 100)
    tree.update(1, -5)
    assert tree.query(0, 4) == -5


def test_empty_range():
    tree = MaxSegmentTree(4)
    tree.update(0, 9)
    assert tree.query(2, 2) == MaxSegmentTree.EMPTY


@pytest.mark.parametrize("size", [1, 2, 7, 16, 33])
def test_against_plain_list(size):
    rng = random.Random(size)
    tree = MaxSegmentTree(size)
    values = [MaxSegmentTree.EMPTY] * size
    for _ in range(200):
        index = rng.randrange(size)
        value = rng.randint(-1000, 1000)
        tree.update(index, value)
        values[index] = value
        left = rng.randrange(size)
        right = rng.randint(left + 1, size)
        assert tree.query(left, right) == max(values[left:right])


def test_index_out_of_range():
    tree = MaxSegmentTree(3)
    with pytest.raises(IndexError):
        tree.update(3, 1)
    with pytest.raises(IndexError):
        tree.update(-1, 1)


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        MaxSegmentTree(0)