# src/sinkmock/mock.py
"""Bounded-buffer mock sink with scripted flush, readiness and send outcomes.

SinkMock behaves like a correct buffering sink implementation: it accepts
items while it has room, and only makes room again when its flush script
says the (imaginary) backend drained a batch. Everything the backend could
do - drain, fail, stall - comes from scripts supplied by the test author.

State machine:

    OPEN_UNARMED --poll_ready() -> OK--> OPEN_ARMED
    OPEN_ARMED   --any other call------> OPEN_UNARMED
    either       --poll_close() -> OK--> CLOSED (terminal)

Fatal misuse (raised, never returned):
1. start_send() without a preceding poll_ready() that returned OK
2. any call after poll_close() returned OK
3. reading past the end of the flush_feedback script

Usage:
    sink = SinkMock.with_flush_feedback(fuse_last([OK, PENDING, OK]))
    cx = CountingContext()
    if sink.poll_ready(cx) == OK:
        sink.start_send(item)
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any, Self

from sinkmock.contracts.errors import ContractRule, SinkContractViolation
from sinkmock.contracts.poll import OK, Err, Ok, Pending, PollResult, SendResult
from sinkmock.logging import get_logger
from sinkmock.scripts import next_override, next_scripted

if TYPE_CHECKING:
    from sinkmock.config import SinkMockConfig
    from sinkmock.contracts.context import Context

logger = get_logger(__name__)

DEFAULT_CAPACITY = 3
DEFAULT_DRAIN_BATCH_SIZE = 2


def _require_positive(name: str, value: int) -> int:
    # bool is an int subclass; True is not a meaningful size
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    return value


class SinkMock[E]:
    """Sink that buffers a count of items and drains it on scripted feedback.

    Only the number of buffered items is tracked; item values are dropped.

    Thread Safety:
        NOT thread-safe. A sink has exactly one writer; calls must be made
        sequentially.

    Attributes:
        buffered_count: Items currently held (read-only, for assertions).
        capacity: Items that can be held before poll_ready() forces a flush.
        drain_batch_size: Items removed per OK from the flush script.
        is_closed: True once poll_close() returned OK.
    """

    def __init__(
        self,
        flush_feedback: Iterable[PollResult[E]],
        ready_errors: Iterable[E | None] = (),
        send_errors: Iterable[E | None] = (),
        capacity: int = DEFAULT_CAPACITY,
        drain_batch_size: int = DEFAULT_DRAIN_BATCH_SIZE,
    ) -> None:
        """Create a mock sink.

        Args:
            flush_feedback: Reaction of the backend to each drain attempt.
                OK removes ``drain_batch_size`` items and the flush goes on
                until the buffer is empty, Err(e) is returned as-is, and
                PENDING wakes the context and returns PENDING. Running out
                of entries is fatal.
            ready_errors: Error values to return from poll_ready(). A None
                entry or an exhausted script means no error for that call.
            send_errors: Error values to return from start_send(), with the
                same None/exhaustion rules. A rejected item is not buffered.
            capacity: Items that can be buffered before a flush is needed.
            drain_batch_size: Items removed per successful drain event.

        Raises:
            ValueError: If capacity or drain_batch_size is not positive.
        """
        self._flush_feedback = iter(flush_feedback)
        self._ready_errors = iter(ready_errors)
        self._send_errors = iter(send_errors)

        self._capacity = _require_positive("capacity", capacity)
        self._drain_batch_size = _require_positive("drain_batch_size", drain_batch_size)
        self._buffered_count = 0
        self._closed = False
        self._can_start_send = False

    @classmethod
    def with_flush_feedback(cls, flush_feedback: Iterable[PollResult[E]]) -> SinkMock[E]:
        """Create a sink that never injects readiness or send errors."""
        return cls(flush_feedback)

    @classmethod
    def from_config(
        cls,
        config: SinkMockConfig,
        flush_feedback: Iterable[PollResult[E]],
        ready_errors: Iterable[E | None] = (),
        send_errors: Iterable[E | None] = (),
    ) -> SinkMock[E]:
        """Create a sink sized by a validated SinkMockConfig."""
        return cls(
            flush_feedback,
            ready_errors,
            send_errors,
            capacity=config.capacity,
            drain_batch_size=config.drain_batch_size,
        )

    # -- configuration ---------------------------------------------------

    def set_capacity(self, capacity: int) -> Self:
        """Change how many items can be buffered before a flush is needed."""
        self._capacity = _require_positive("capacity", capacity)
        return self

    def set_drain_batch_size(self, drain_batch_size: int) -> Self:
        """Change how many items one OK from the flush script removes."""
        self._drain_batch_size = _require_positive("drain_batch_size", drain_batch_size)
        return self

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def drain_batch_size(self) -> int:
        return self._drain_batch_size

    @property
    def buffered_count(self) -> int:
        return self._buffered_count

    @property
    def is_closed(self) -> bool:
        return self._closed

    # -- protocol --------------------------------------------------------

    def _check_open(self, method: str) -> None:
        if self._closed:
            raise SinkContractViolation(ContractRule.USE_AFTER_CLOSE, method)

    def poll_ready(self, cx: Context) -> PollResult[E]:
        """Report whether one item can be sent.

        Returns OK (and authorizes one start_send) while the buffer has
        room. A full buffer is flushed first and the flush outcome is
        returned; only OK authorizes a send.
        """
        self._check_open("poll_ready")
        self._can_start_send = False

        error = next_override(self._ready_errors)
        if error is not None:
            logger.debug("Injected poll_ready error", error=error, buffered=self._buffered_count)
            return Err(error)

        if self._buffered_count < self._capacity:
            self._can_start_send = True
            return OK

        result = self._flush(cx, "poll_ready")
        if isinstance(result, Ok):
            self._can_start_send = True
        return result

    def start_send(self, item: Any) -> SendResult[E]:
        """Buffer one item, or reject it with a scripted error."""
        self._check_open("start_send")
        if not self._can_start_send:
            raise SinkContractViolation(ContractRule.SEND_WITHOUT_READY, "start_send")
        self._can_start_send = False

        error = next_override(self._send_errors)
        if error is not None:
            logger.debug("Injected start_send error, item dropped", error=error, buffered=self._buffered_count)
            return Err(error)

        self._buffered_count += 1
        return OK

    def poll_flush(self, cx: Context) -> PollResult[E]:
        """Drain the buffer until it is empty, an error, or PENDING."""
        self._check_open("poll_flush")
        return self._flush(cx, "poll_flush")

    def poll_close(self, cx: Context) -> PollResult[E]:
        """Flush, then close.

        A failed or pending flush leaves the sink open with its buffered
        items kept, so close may be polled again.
        """
        self._check_open("poll_close")
        result = self._flush(cx, "poll_close")
        if not isinstance(result, Ok):
            return result

        self._closed = True
        logger.debug("Sink closed")
        return OK

    def _flush(self, cx: Context, method: str) -> PollResult[E]:
        self._can_start_send = False
        while True:
            feedback = next_scripted(self._flush_feedback, name="flush_feedback", method=method)
            match feedback:
                case Ok():
                    self._buffered_count = max(0, self._buffered_count - self._drain_batch_size)
                    logger.debug("Drained batch", method=method, remaining=self._buffered_count)
                    if self._buffered_count == 0:
                        return OK
                case Err():
                    logger.debug("Injected flush error", method=method, error=feedback.error)
                    return feedback
                case Pending():
                    cx.wake()
                    logger.debug("Flush pending, wake requested", method=method, buffered=self._buffered_count)
                    return feedback
                case _:
                    raise TypeError(
                        f"flush_feedback entries must be OK, PENDING or Err(...), got {type(feedback).__name__}"
                    )
