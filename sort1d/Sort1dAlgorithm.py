from collections.abc import Callable, Generator, Sequence
from random import Random
from typing import Any, NamedTuple, Optional

from .ArrayView import ArrayView


def _sampler(N: int, r: Random) -> Generator[list[int], None, None]:
    while True:
        yield [r.randrange(N) for _ in range(N)]


class Sort1dAlgorithm(NamedTuple):
    name: str
    func: Callable[[ArrayView, int, Random], Any]
    validator: Callable[[Sequence, int, Any], bool]
    sampler: Callable[[int, Random], Generator[Sequence, None, None]] = _sampler
    expected_swaps: Optional[Callable[[int], float]] = None
    ret_converter: Callable[[Any], Any] = lambda ret: ret
