# src/sinkmock/contracts/sink.py
"""Protocol for poll-driven, push-based sinks.

Call sequence (single writer):

    poll_ready(cx) -> OK     authorizes exactly one start_send()
    start_send(item)         buffers or rejects the item
    poll_flush(cx)           pushes buffered items to the backend
    poll_close(cx) -> OK     terminal, every later call is a misuse

Any ``poll_*`` call may answer ``PENDING``; the sink has then already called
``cx.wake()`` and the caller must poll again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sinkmock.contracts.context import Context
    from sinkmock.contracts.poll import PollResult, SendResult


@runtime_checkable
class PollSink(Protocol):
    """A sink driven through the ready/send/flush/close poll protocol."""

    def poll_ready(self, cx: Context) -> PollResult[Any]:
        """Ask whether one item can be sent now."""
        ...

    def start_send(self, item: Any) -> SendResult[Any]:
        """Send one item. Only legal right after ``poll_ready`` returned OK."""
        ...

    def poll_flush(self, cx: Context) -> PollResult[Any]:
        """Push buffered items to the backend."""
        ...

    def poll_close(self, cx: Context) -> PollResult[Any]:
        """Flush and close the sink."""
        ...
