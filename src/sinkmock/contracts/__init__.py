# src/sinkmock/contracts/__init__.py
"""Shared contracts: outcome values, scheduling context, sink protocol, errors."""

from sinkmock.contracts.context import CallbackContext, Context, CountingContext
from sinkmock.contracts.errors import (
    ContractRule,
    ScriptExhaustedError,
    SinkContractViolation,
    SinkMisuseError,
)
from sinkmock.contracts.poll import OK, PENDING, Err, Ok, Pending, PollResult, SendResult
from sinkmock.contracts.sink import PollSink

__all__ = [
    "OK",
    "PENDING",
    "CallbackContext",
    "Context",
    "ContractRule",
    "CountingContext",
    "Err",
    "Ok",
    "Pending",
    "PollResult",
    "PollSink",
    "ScriptExhaustedError",
    "SendResult",
    "SinkContractViolation",
    "SinkMisuseError",
]
