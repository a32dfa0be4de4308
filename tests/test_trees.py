import random

import pytest

from playkit.trees import Arena, BinaryTree, in_order


def test_plain_and_arena_trees_match():
    items = [10, 5, 2, 7, 1, 3, 6, 9]
    arena = Arena(100)
    t1 = BinaryTree()
    t2 = BinaryTree(new_node=arena.new_node)
    for x in items:
        t1.insert(x)
        t2.insert(x)
    assert list(t1) == [1, 2, 3, 5, 6, 7, 9, 10]
    assert list(t2) == list(t1)
    assert len(arena) == len(items)


def test_for_each_collects_sorted():
    t = BinaryTree()
    for x in [5, 7, 2, 1, 9, 6]:
        t.insert(x)
    out = []
    t.for_each(out.append)
    assert out == [1, 2, 5, 6, 7, 9]


def test_in_order_visits_nodes():
    t = BinaryTree(lambda x, y: x < y)
    for x in [10, 5, 15]:
        t.insert(x)
    values = []
    in_order(t.root, lambda n: values.append(n.value))
    assert values == [5, 10, 15]


def test_in_order_of_empty_tree():
    values = []
    in_order(None, values.append)
    assert values == []


def test_arena_exhaustion():
    arena = Arena(1)
    arena.new_node(1)
    with pytest.raises(IndexError):
        arena.new_node(2)


def test_random_arena_of_exact_size():
    rng = random.Random(1)
    items = [rng.getrandbits(63) for _ in range(1000)]
    arena = Arena(len(items))
    t = BinaryTree(new_node=arena.new_node)
    for x in items:
        t.insert(x)
    assert list(t) == sorted(items)


@pytest.mark.parametrize("n", [100, 1_000, 10_000])
def test_random_data_sorted(n):
    rng = random.Random(n)
    data = [rng.randrange(n) for _ in range(n)]
    t = BinaryTree()
    for x in data:
        t.insert(x)
    assert list(t) == sorted(data)


def test_descending_order():
    t = BinaryTree(lambda a, b: a > b)
    for x in [3, 1, 2]:
        t.insert(x)
    assert list(t) == [3, 2, 1]


def test_equal_keys_keep_insertion_order():
    t = BinaryTree(lambda a, b: a[0] < b[0])
    for item in [(1, "a"), (0, "z"), (1, "b")]:
        t.insert(item)
    assert list(t) == [(0, "z"), (1, "a"), (1, "b")]