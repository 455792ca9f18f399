from collections.abc import MutableSequence, Sequence
from random import Random
from typing import Union

from ..ArrayView import ArrayView, as_view
from ..Sort1dAlgorithm import Sort1dAlgorithm


def partition_mut(arr: Union[ArrayView, MutableSequence], pivot_index: int) -> int:
    """Move `arr[pivot_index]` to the position it would have if `arr` were sorted.

    Elements smaller than the pivot end up on its left, elements greater than or
    equal to it on its right; the order inside each side is undefined. Returns the
    final index of the pivot. Hoare's scheme, O(n), about n/6 - 1/3 swaps on average.

    Raises `ViewIndexError` if `pivot_index` is not a valid index of `arr`.
    """
    view = as_view(arr)
    pivot = view[pivot_index]
    view.swap(pivot_index, 0)
    i = 1
    j = len(view) - 1
    while True:
        while i <= j and view[i] < pivot:
            i += 1
        # index 0 holds the pivot
        while j > 1 and pivot <= view[j]:
            j -= 1
        if i >= j:
            break
        view.swap(i, j)
        i += 1
        j -= 1
    view.swap(0, i - 1)
    return i - 1


def validator(arr: Sequence, _: int, ret: int) -> bool:
    if not 0 <= ret < len(arr):
        return False
    pivot = arr[ret]
    return all(arr[k] < pivot for k in range(ret)) and all(arr[k] >= pivot for k in range(ret, len(arr)))


def _partition(view: ArrayView, k: int, _: Random) -> int:
    return partition_mut(view, k)


algorithm = Sort1dAlgorithm(
    "Hoare partition",
    _partition,
    validator,
    expected_swaps=lambda N: max(0.0, N / 6 - 1 / 3),
)
