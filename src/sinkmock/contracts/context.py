# src/sinkmock/contracts/context.py
"""Scheduling context handed to every poll operation.

A poll operation that answers ``PENDING`` must first ask the scheduler to
invoke the caller again. That request is the only capability a context has:
``wake()``. The mocks call it exactly once, synchronously, before returning
``PENDING``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


@runtime_checkable
class Context(Protocol):
    """Re-invocation handle passed to ``poll_*`` methods."""

    def wake(self) -> None:
        """Request that the current logical task is polled again."""
        ...


class CountingContext:
    """Context that only counts wake requests.

    Useful for asserting how often a sink asked to be re-polled.

    Example:
        cx = CountingContext()
        assert sink.poll_ready(cx) == PENDING
        assert cx.wake_count == 1
    """

    def __init__(self) -> None:
        self._wake_count = 0

    def wake(self) -> None:
        self._wake_count += 1

    @property
    def wake_count(self) -> int:
        """Number of times ``wake()`` has been called."""
        return self._wake_count

    def reset(self) -> None:
        self._wake_count = 0


class CallbackContext:
    """Context that forwards every wake request to a callable."""

    def __init__(self, on_wake: Callable[[], None]) -> None:
        self._on_wake = on_wake

    def wake(self) -> None:
        self._on_wake()
