# src/sinkmock/fuse_last.py
"""Iterator adapter that repeats its last element forever.

Like ``itertools.cycle`` but instead of starting over, the adapter freezes on
the last value the wrapped iterator produced. This turns a short script into
an open-ended one:

    >>> it = fuse_last([1, 2])
    >>> [next(it) for _ in range(4)]
    [1, 2, 2, 2]

The only way to get ``StopIteration`` is an empty wrapped iterator:

    >>> next(fuse_last([]), None) is None
    True
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator

_UNSET = object()


class FuseLast[T]:
    """Forward the wrapped iterator, then return its last value forever.

    The wrapped iterator is never advanced again once it has raised
    ``StopIteration``, so non-fused iterators cannot resurrect it.
    A shallow copy of each value is kept, and every latched read returns a
    fresh shallow copy of it, so mutating one read never changes the next.
    """

    __slots__ = ("_exhausted", "_iter", "_last")

    def __init__(self, iterable: Iterable[T]) -> None:
        self._iter: Iterator[T] = iter(iterable)
        self._exhausted = False
        self._last: T | object = _UNSET

    def __iter__(self) -> FuseLast[T]:
        return self

    def __next__(self) -> T:
        if not self._exhausted:
            try:
                value = next(self._iter)
            except StopIteration:
                self._exhausted = True
            else:
                self._last = copy.copy(value)
                return value
        if self._last is _UNSET:
            raise StopIteration
        return copy.copy(self._last)  # type: ignore[return-value]


def fuse_last[T](iterable: Iterable[T]) -> FuseLast[T]:
    """Wrap ``iterable`` so it latches on its last element."""
    return FuseLast(iterable)
