# src/sinkmock/__init__.py
"""Scriptable mock sinks for testing code that writes to poll-driven sinks.

Two mocks are provided:

- SinkMock: a correct buffering sink. Items are counted into a bounded
  buffer and drained only when the flush script says so; readiness and
  send errors can be injected from their own scripts.
- SinkFeedback (from_iter, ok, interleave_pending): discards every item
  and answers each call from a script.

Scripts are plain iterators of outcome values (OK, PENDING, Err(value)).
Wrap short scripts with fuse_last() to repeat the last entry forever, or
with itertools.cycle() to repeat the whole script.

Usage:
    from sinkmock import OK, PENDING, CountingContext, SinkMock, fuse_last

    sink = SinkMock.with_flush_feedback(fuse_last([PENDING, OK]))
    cx = CountingContext()
    assert sink.poll_ready(cx) == OK
    assert sink.start_send("item") == OK

Misuse of a mock (sending without readiness, using a closed sink, running a
script dry) raises a SinkMisuseError subclass and fails the test.
"""

from sinkmock.config import SinkMockConfig, load_config
from sinkmock.contracts import (
    OK,
    PENDING,
    CallbackContext,
    Context,
    ContractRule,
    CountingContext,
    Err,
    Ok,
    Pending,
    PollResult,
    PollSink,
    ScriptExhaustedError,
    SendResult,
    SinkContractViolation,
    SinkMisuseError,
)
from sinkmock.feedback import SinkFeedback, from_iter, interleave_pending, ok
from sinkmock.forward import AsyncioContext, block_on, forward
from sinkmock.fuse_last import FuseLast, fuse_last
from sinkmock.logging import configure_logging
from sinkmock.mock import SinkMock

__all__ = [
    "OK",
    "PENDING",
    "AsyncioContext",
    "CallbackContext",
    "Context",
    "ContractRule",
    "CountingContext",
    "Err",
    "FuseLast",
    "Ok",
    "Pending",
    "PollResult",
    "PollSink",
    "ScriptExhaustedError",
    "SendResult",
    "SinkContractViolation",
    "SinkFeedback",
    "SinkMisuseError",
    "SinkMock",
    "SinkMockConfig",
    "block_on",
    "configure_logging",
    "forward",
    "from_iter",
    "fuse_last",
    "interleave_pending",
    "load_config",
    "ok",
]
