# src/sinkmock/contracts/errors.py
"""Fatal misuse errors for the mock sinks.

These exceptions signal a bug in the test or in the code under test. They
are NOT scripted protocol errors: scripted errors are returned as
``Err(value)`` and never raised, and these exceptions are never converted
into ``Err`` values. Nothing in sinkmock catches them.
"""

from enum import Enum


class ContractRule(Enum):
    """Sink protocol rules whose violation is fatal."""

    SEND_WITHOUT_READY = "start_send() requires a preceding poll_ready() that returned OK"
    USE_AFTER_CLOSE = "no operation is allowed after poll_close() returned OK"
    PENDING_WITHOUT_WAKE = "a poll operation returning PENDING must call cx.wake() first"


class SinkMisuseError(Exception):
    """Base class for fatal misuse of a mock sink."""


class SinkContractViolation(SinkMisuseError):
    """Raised when the caller breaks the sink protocol.

    Attributes:
        rule: The protocol rule that was broken
        method: Name of the sink method that detected the violation
    """

    def __init__(self, rule: ContractRule, method: str) -> None:
        self.rule = rule
        self.method = method
        super().__init__(f"Sink contract violated in {method}(): {rule.value} [{rule.name}]")


class ScriptExhaustedError(SinkMisuseError):
    """Raised when a scripted sequence is read past its last element.

    This is a configuration error in the test: the script was too short for
    the scenario. Wrap the script with ``fuse_last()`` or
    ``itertools.cycle()`` to make it infinite.

    Attributes:
        script: Name of the exhausted script (e.g. "flush_feedback")
        method: Name of the sink method that tried to read it
    """

    def __init__(self, script: str, method: str) -> None:
        self.script = script
        self.method = method
        super().__init__(
            f"Unexpected end of '{script}' script in {method}(); "
            "use fuse_last() or itertools.cycle() for open-ended scenarios"
        )
