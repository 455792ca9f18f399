from collections import Counter
from random import Random

import numpy as np
import pytest

from sort1d import ArrayView, ViewIndexError, partition_mut


def check_partition(arr: list, q: int) -> None:
    assert 0 <= q < len(arr)
    assert all(arr[k] < arr[q] for k in range(q))
    assert all(arr[k] >= arr[q] for k in range(q, len(arr)))


def test_random_partitions():
    r = Random(0)
    for _ in range(500):
        N = r.randint(1, 50)
        arr = [r.randint(0, 20) for _ in range(N)]
        before = Counter(arr)
        pivot_index = r.randrange(N)
        pivot = arr[pivot_index]
        q = partition_mut(arr, pivot_index)
        check_partition(arr, q)
        assert arr[q] == pivot
        assert Counter(arr) == before


def test_returns_sorted_position_for_distinct_values():
    r = Random(1)
    for N in range(1, 30):
        arr = list(range(N))
        r.shuffle(arr)
        pivot_index = r.randrange(N)
        pivot = arr[pivot_index]
        assert partition_mut(arr, pivot_index) == pivot


def test_singleton():
    arr = [7]
    assert partition_mut(arr, 0) == 0
    assert arr == [7]


def test_all_equal_terminates():
    arr = [4, 4, 4]
    q = partition_mut(arr, 1)
    assert 0 <= q < 3
    assert arr == [4, 4, 4]
    check_partition(arr, q)


def test_sorted_and_reversed_input():
    arr = list(range(20))
    check_partition(arr, partition_mut(arr, 0))
    arr = list(range(20, 0, -1))
    check_partition(arr, partition_mut(arr, 0))


def test_only_touches_view():
    buf = [9, 8, 3, 1, 2, 0, -1]
    q = partition_mut(ArrayView(buf)[2:5], 0)
    assert buf[:2] == [9, 8] and buf[5:] == [0, -1]
    assert q == 2
    assert sorted(buf[2:4]) == [1, 2] and buf[4] == 3


def test_numpy_array():
    np.random.seed(0)
    arr = np.random.randint(0, 255, 2048)
    before = np.sort(arr)
    q = partition_mut(arr, 128)
    assert (arr[:q] < arr[q]).all()
    assert (arr[q:] >= arr[q]).all()
    assert (np.sort(arr) == before).all()


@pytest.mark.parametrize("arr", [[], [1], [1, 2, 3]])
def test_out_of_bounds(arr):
    with pytest.raises(ViewIndexError):
        partition_mut(arr, len(arr))
