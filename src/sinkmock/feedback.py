# src/sinkmock/feedback.py
"""Discard-everything mock sink driven by scripted feedback.

SinkFeedback has no buffer and no state machine of its own. Every
poll_ready(), poll_flush() and poll_close() call takes the next entry of one
poll script; every start_send() drops the item and takes the next entry of a
send script. Use SinkMock first - this one is for when a test needs full
control over each individual answer.

Canned sinks:
- ok(): always ready, every send accepted
- interleave_pending(): answers PENDING on every second poll
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import repeat
from typing import TYPE_CHECKING, Any

from sinkmock.contracts.poll import OK, Pending, PollResult, SendResult
from sinkmock.logging import get_logger
from sinkmock.scripts import alternate_pending, next_scripted

if TYPE_CHECKING:
    from sinkmock.contracts.context import Context

logger = get_logger(__name__)


class SinkFeedback[E]:
    """Sink that discards every item and answers from scripts.

    Both scripts are read with exhaustion being fatal; wrap them with
    ``itertools.cycle()`` or ``fuse_last()`` for open-ended tests.
    """

    def __init__(
        self,
        poll_feedback: Iterable[PollResult[E]],
        send_feedback: Iterable[SendResult[E] | None] | None = None,
    ) -> None:
        """Create a feedback sink.

        Args:
            poll_feedback: Answers for poll_ready/poll_flush/poll_close, in
                call order. PENDING also wakes the caller's context.
            send_feedback: Answers for start_send. None entries mean OK.
                Defaults to accepting every item.
        """
        self._poll_feedback = iter(poll_feedback)
        self._send_feedback = iter(send_feedback) if send_feedback is not None else repeat(OK)

    def _next_poll(self, cx: Context, method: str) -> PollResult[E]:
        result = next_scripted(self._poll_feedback, name="poll_feedback", method=method)
        if isinstance(result, Pending):
            cx.wake()
            logger.debug("Scripted PENDING, wake requested", method=method)
        return result

    def poll_ready(self, cx: Context) -> PollResult[E]:
        return self._next_poll(cx, "poll_ready")

    def start_send(self, item: Any) -> SendResult[E]:
        result = next_scripted(self._send_feedback, name="send_feedback", method="start_send")
        if result is None:
            return OK
        return result

    def poll_flush(self, cx: Context) -> PollResult[E]:
        return self._next_poll(cx, "poll_flush")

    def poll_close(self, cx: Context) -> PollResult[E]:
        return self._next_poll(cx, "poll_close")


def from_iter[E](
    poll_feedback: Iterable[PollResult[E]],
    send_feedback: Iterable[SendResult[E] | None] | None = None,
) -> SinkFeedback[E]:
    """Create a SinkFeedback from a poll script and an optional send script.

    Any time poll_ready, poll_flush or poll_close is called the next entry
    of ``poll_feedback`` is returned; PENDING additionally calls
    ``cx.wake()``. Any time start_send is called the item is discarded and
    the next entry of ``send_feedback`` is returned.

    Raises (on use, not here):
        ScriptExhaustedError: If either script runs out.
    """
    return SinkFeedback(poll_feedback, send_feedback)


def ok() -> SinkFeedback[Any]:
    """Sink that is always ready and accepts everything."""
    return SinkFeedback(repeat(OK), repeat(OK))


def interleave_pending() -> SinkFeedback[Any]:
    """Sink whose polls alternate OK and PENDING, starting with OK.

    Sends are always accepted. Useful for checking that the code under test
    honours PENDING and re-polls instead of sending.
    """
    return SinkFeedback(alternate_pending(), repeat(OK))
