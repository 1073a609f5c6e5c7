import pytest
from hypothesis import given, strategies as st

from voxelfortress.quadtree import AABB2D, Quadtree, QuadtreeNode

WORLD = AABB2D(-1000000, -1000000, 1000000, 1000000)


def test_aabb_contains_is_inclusive():
    box = AABB2D(0, 0, 10, 10)
    assert box.contains(0, 0)
    assert box.contains(10, 10)
    assert not box.contains(11, 5)
    assert not box.contains(5, -1)


def test_aabb_intersects():
    a = AABB2D(0, 0, 10, 10)
    assert a.intersects(AABB2D(10, 10, 20, 20))
    assert not a.intersects(AABB2D(11, 0, 20, 10))
    assert a.intersects(AABB2D(-5, -5, 50, 50))


def test_find_after_insert_many():
    tree = Quadtree(WORLD)
    points = [(x * 32, z * 32) for x in range(-6, 6) for z in range(-6, 6)]
    for x, z in points:
        tree.insert(x, z, ("col", x, z))
    for x, z in points:
        assert tree.find(x, z) == ("col", x, z)
    assert tree.root.children is not None


def test_find_missing_returns_none():
    tree = Quadtree(WORLD)
    tree.insert(0, 0, "a")
    assert tree.find(32, 0) is None


def test_insert_outside_bounds_is_ignored():
    tree = Quadtree(AABB2D(0, 0, 100, 100))
    tree.insert(200, 0, "far")
    assert tree.find(200, 0) is None
    assert tree.query_region(AABB2D(0, 0, 1000, 1000)) == []


def test_remove():
    tree = Quadtree(WORLD)
    for i in range(30):
        tree.insert(i * 32, 0, i)
    assert tree.remove(64, 0) is True
    assert tree.find(64, 0) is None
    assert tree.remove(64, 0) is False
    assert tree.find(96, 0) == 3


def test_query_region_returns_only_inside():
    tree = Quadtree(WORLD)
    for x in range(-5, 5):
        for z in range(-5, 5):
            tree.insert(x, z, (x, z))
    found = tree.query_region(AABB2D(0, 0, 2, 2))
    assert sorted(found) == [(x, z) for x in range(3) for z in range(3)]


def test_subdivide_children_partition_parent():
    node = QuadtreeNode(AABB2D(-10, -10, 9, 9), 0)
    node.subdivide()
    for x in range(-10, 10):
        for z in range(-10, 10):
            hits = [c for c in node.children if c.bounds.contains(x, z)]
            assert len(hits) == 1
    assert all(c.level == 1 for c in node.children)


def test_subdivide_negative_midpoint_rounds_toward_zero():
    node = QuadtreeNode(AABB2D(-3, -3, 0, 0), 0)
    node.subdivide()
    assert node.children[0].bounds == AABB2D(-3, -3, -1, -1)


@given(st.sets(st.tuples(st.integers(-500, 500), st.integers(-500, 500)), max_size=80))
def test_every_inserted_point_is_found(points):
    tree = Quadtree(AABB2D(-500, -500, 500, 500))
    for p in points:
        tree.insert(p[0], p[1], p)
    for p in points:
        assert tree.find(*p) == p
    assert sorted(tree.query_region(AABB2D(-500, -500, 500, 500))) == sorted(points)