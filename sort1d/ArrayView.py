from collections.abc import Callable, Iterator, MutableSequence
from typing import Any, Optional, Union


class ViewIndexError(IndexError):
    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"index {index} out of bounds for view of length {length}")


class ArrayView:
    """Exclusive, bounds-checked window `[start, stop)` into a 1-D buffer.

    Sub-views share the buffer of their parent: slicing a view only narrows the
    index range, nothing is copied. Indices are relative to the window.
    """

    def __init__(
        self,
        buffer: MutableSequence,
        start: int = 0,
        stop: Optional[int] = None,
        on_swap: Optional[Callable[[int, int], None]] = None,
    ) -> None:
        if getattr(buffer, "ndim", 1) != 1:
            raise ValueError(f"expected a one-dimensional buffer, got ndim={buffer.ndim}")
        if stop is None:
            stop = len(buffer)
        if not 0 <= start <= stop <= len(buffer):
            raise ValueError(f"invalid window [{start}, {stop}) for buffer of length {len(buffer)}")
        self.buffer = buffer
        self.start = start
        self.stop = stop
        self.on_swap = on_swap

    def __len__(self) -> int:
        return self.stop - self.start

    def _offset(self, k: int) -> int:
        if not 0 <= k < self.stop - self.start:
            raise ViewIndexError(k, self.stop - self.start)
        return self.start + k

    def __getitem__(self, k: Union[int, slice]) -> Any:
        if isinstance(k, slice):
            if k.step not in (None, 1):
                raise ValueError("views only support contiguous slices")
            lo, hi, _ = k.indices(len(self))
            return ArrayView(self.buffer, self.start + lo, self.start + max(lo, hi), self.on_swap)
        return self.buffer[self._offset(k)]

    def __setitem__(self, k: int, value: Any) -> None:
        self.buffer[self._offset(k)] = value

    def swap(self, a: int, b: int) -> None:
        x, y = self._offset(a), self._offset(b)
        if x == y:
            return
        self.buffer[x], self.buffer[y] = self.buffer[y], self.buffer[x]
        if self.on_swap is not None:
            self.on_swap(a, b)

    def __iter__(self) -> Iterator:
        for k in range(self.start, self.stop):
            yield self.buffer[k]

    def to_list(self) -> list:
        return list(self)

    def __repr__(self) -> str:
        return f"ArrayView({self.to_list()!r}, start={self.start}, stop={self.stop})"

    __slots__ = ["buffer", "start", "stop", "on_swap"]


def as_view(arr: Union[ArrayView, MutableSequence]) -> ArrayView:
    return arr if isinstance(arr, ArrayView) else ArrayView(arr)
