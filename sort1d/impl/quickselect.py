from collections.abc import Callable, MutableSequence, Sequence
from random import Random, randrange
from typing import Any, Union

from ..ArrayView import ArrayView, ViewIndexError, as_view
from ..Sort1dAlgorithm import Sort1dAlgorithm
from .hoare_partition import partition_mut

IndexSampler = Callable[[int], int]


def seeded_sampler(seed: int) -> IndexSampler:
    return Random(seed).randrange


def sorted_get_mut(arr: Union[ArrayView, MutableSequence], i: int, sampler: IndexSampler = randrange) -> Any:
    """Return the element that would be at index `i` if `arr` were sorted.

    `arr` is rearranged in place (quickselect): afterwards every element before
    index `i` is smaller than or equal to the result and every element from `i`
    on is greater than or equal to it. Nothing else about the order is defined.

    `sampler(n)` must return an index drawn uniformly from `[0, n)`; pass
    `seeded_sampler(seed)` for a reproducible trace.

    Average O(n), worst case O(n^2). Raises `ViewIndexError` unless `0 <= i < len(arr)`.
    """
    view = as_view(arr)
    n = len(view)
    if not 0 <= i < n:
        raise ViewIndexError(i, n)
    if n == 1:
        return view[0]
    q = partition_mut(view, sampler(n))
    if i < q:
        return sorted_get_mut(view[:q], i, sampler)
    if i == q:
        return view[i]
    return sorted_get_mut(view[q + 1 :], i - (q + 1), sampler)


def validator(arr: Sequence, i: int, ret: Any) -> bool:
    if not 0 <= i < len(arr) or arr[i] != ret:
        return False
    return sorted(arr)[i] == ret and all(arr[k] <= ret for k in range(i)) and all(arr[k] >= ret for k in range(i, len(arr)))


def _quickselect(view: ArrayView, k: int, r: Random) -> Any:
    return sorted_get_mut(view, k, r.randrange)


algorithm = Sort1dAlgorithm(
    "quickselect",
    _quickselect,
    validator,
    ret_converter=lambda ret: ret.obj,
)
