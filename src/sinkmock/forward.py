# src/sinkmock/forward.py
"""Drive a PollSink from a stream of items on an asyncio event loop.

forward() is the consumer side of the sink protocol, the way a real writer
would use it:

    for each item:
        poll_ready() until OK      (PENDING -> wait for wake, poll again)
        start_send(item)
    poll_close() until OK

The first Err from any step ends the run and is returned; items after it
are not consumed.

Example:
    sink = SinkMock.with_flush_feedback(cycle([OK, PENDING]))
    assert block_on(forward([5, 7, 9], sink)) == OK
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterable, AsyncIterator, Callable, Coroutine, Iterable
from typing import Any

from sinkmock.contracts.context import Context
from sinkmock.contracts.errors import ContractRule, SinkContractViolation
from sinkmock.contracts.poll import OK, Err, Ok, Pending, PollResult, SendResult
from sinkmock.contracts.sink import PollSink
from sinkmock.logging import get_logger

logger = get_logger(__name__)


class AsyncioContext:
    """Context whose wake requests release an awaiting asyncio task."""

    def __init__(self) -> None:
        self._woken = asyncio.Event()

    def wake(self) -> None:
        self._woken.set()

    @property
    def woken(self) -> bool:
        """True if a wake request is outstanding."""
        return self._woken.is_set()

    def clear(self) -> None:
        """Drop an outstanding wake request."""
        self._woken.clear()

    async def wait(self) -> None:
        """Wait for a wake request and consume it."""
        await self._woken.wait()
        self._woken.clear()


async def _iterate(items: Iterable[Any] | AsyncIterable[Any]) -> AsyncIterator[Any]:
    if isinstance(items, AsyncIterable):
        async for item in items:
            yield item
    else:
        for item in items:
            yield item


async def _poll_until_ready[E](
    poll: Callable[[Context], PollResult[E]],
    cx: AsyncioContext,
    *,
    method: str,
    strict_wake: bool,
) -> Ok | Err[E]:
    while True:
        # A wake left over from an earlier non-PENDING answer is stale
        cx.clear()
        result = poll(cx)
        if not isinstance(result, Pending):
            return result
        if strict_wake and not cx.woken:
            # Nothing else can wake us; waiting would hang forever
            raise SinkContractViolation(ContractRule.PENDING_WITHOUT_WAKE, method)
        await cx.wait()


async def forward[E](
    items: Iterable[Any] | AsyncIterable[Any],
    sink: PollSink,
    *,
    strict_wake: bool = True,
) -> SendResult[E]:
    """Send every item into ``sink`` and close it.

    Args:
        items: Sync or async iterable of items to send.
        sink: Any PollSink implementation.
        strict_wake: If True (default), a PENDING answer without a prior
            ``cx.wake()`` raises instead of waiting. Disable for sinks that
            wake from another task.

    Returns:
        OK if every item was sent and the sink closed, otherwise the first
        Err returned by the sink.

    Raises:
        SinkContractViolation: If the sink answers PENDING without waking
            while ``strict_wake`` is set.
    """
    cx = AsyncioContext()
    sent = 0

    async for item in _iterate(items):
        ready = await _poll_until_ready(sink.poll_ready, cx, method="poll_ready", strict_wake=strict_wake)
        if isinstance(ready, Err):
            logger.warning("Sink not ready, forward aborted", sent=sent, error=ready.error)
            return ready

        send = sink.start_send(item)
        if isinstance(send, Err):
            logger.warning("Sink rejected item, forward aborted", sent=sent, error=send.error)
            return send
        sent += 1
        logger.debug("Item sent", sent=sent)

    closed = await _poll_until_ready(sink.poll_close, cx, method="poll_close", strict_wake=strict_wake)
    if isinstance(closed, Err):
        logger.warning("Sink close failed", sent=sent, error=closed.error)
        return closed

    logger.debug("Forward complete", sent=sent)
    return OK


def block_on[T](coro: Coroutine[Any, Any, T]) -> T:
    """Run a coroutine to completion on a fresh event loop."""
    return asyncio.run(coro)
