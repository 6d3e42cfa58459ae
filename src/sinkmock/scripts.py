# src/sinkmock/scripts.py
"""Helpers for reading and building scripted outcome sequences.

A script is any iterator. Lists and other iterables are accepted by the
mocks and converted with ``iter()``; the mocks own the resulting iterator.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from sinkmock.contracts.errors import ScriptExhaustedError
from sinkmock.contracts.poll import OK, PENDING, PollResult


def next_scripted[T](script: Iterator[T], *, name: str, method: str) -> T:
    """Read the next script entry, treating exhaustion as fatal.

    Raises:
        ScriptExhaustedError: If the script has no more entries.
    """
    try:
        return next(script)
    except StopIteration:
        raise ScriptExhaustedError(name, method) from None


def next_override[T](script: Iterator[T | None]) -> T | None:
    """Read an optional override entry.

    ``None`` entries mean "no override for this call" and an exhausted
    script means "no override from now on". Neither is an error.
    """
    return next(script, None)


def alternate_pending() -> Iterator[PollResult[Any]]:
    """Yield ``OK, PENDING, OK, PENDING, ...`` forever."""
    current: PollResult[Any] = OK
    while True:
        yield current
        current = PENDING if current == OK else OK
