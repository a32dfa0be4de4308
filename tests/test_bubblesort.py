import random

from playkit.bubblesort import bubble_sort


def test_example_from_source():
    x = [10, 5, 1, 2, 8, 4, 3, 7, 6, 9]
    bubble_sort(x)
    assert x == [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


def test_thousand_random_ints():
    rng = random.Random(17)
    data = [rng.getrandbits(63) for _ in range(1000)]
    copy = list(data)
    bubble_sort(copy)
    assert copy == sorted(data)


def test_custom_less_sorts_descending():
    x = [3, 1, 2]
    bubble_sort(x, lambda a, b: a > b)
    assert x == [3, 2, 1]


def test_duplicates_and_small_inputs():
    x = [2, 1, 2, 1]
    bubble_sort(x)
    assert x == [1, 1, 2, 2]
    empty = []
    bubble_sort(empty)
    assert empty == []
    single = [7]
    bubble_sort(single)
    assert single == [7]