# src/sinkmock/contracts/poll.py
"""Outcome values returned by the sink poll protocol.

A poll operation either completes (``Ok`` or ``Err``) or reports that the
caller must come back later (``Pending``). ``start_send`` always completes,
so it returns the narrower ``SendResult``.

The same values are used as script entries: a flush-outcome script is an
iterator of ``PollResult`` values, where ``OK`` means "the backend drained a
batch", ``Err(e)`` means "the drain failed with e" and ``PENDING`` means
"not yet".

Example:
    script = [OK, PENDING, Err("disk full")]
    sink = SinkMock.with_flush_feedback(script)
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Ok:
    """Completed successfully."""

    @property
    def is_ready(self) -> bool:
        return True

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Completed with a scripted error value.

    The value is opaque to the mocks. It is handed back unchanged so the
    code under test sees exactly what the test author scripted.
    """

    error: E

    @property
    def is_ready(self) -> bool:
        return True

    @property
    def is_ok(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Pending:
    """Not complete yet; the caller has been asked to poll again."""

    @property
    def is_ready(self) -> bool:
        return False

    @property
    def is_ok(self) -> bool:
        return False


OK = Ok()
PENDING = Pending()

# Discriminated unions - use match/isinstance for exhaustive handling
type SendResult[E] = Ok | Err[E]
type PollResult[E] = Ok | Err[E] | Pending
