# src/sinkmock/logging.py
"""Structured logging for the sinkmock package.

Every sinkmock module takes its logger from ``get_logger(__name__)``, so all
events land under the ``sinkmock`` stdlib logger. The mocks only log at
DEBUG. Until configure_logging() is called structlog uses its own
defaults; a test suite that wants the events routed through stdlib logging
at a chosen level calls it once:

    # conftest.py
    configure_logging(level="DEBUG")

configure_logging() only touches the ``sinkmock`` logger. The root logger,
its handlers and pytest's own log capture are left alone.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.stdlib import ProcessorFormatter

LOGGER_NAME = "sinkmock"

_SHARED_PROCESSORS: list[Any] = [
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
]


def _drop_formatter_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Remove ProcessorFormatter bookkeeping from rendered events."""
    event_dict.pop("_record", None)
    event_dict.pop("_from_structlog", None)
    return event_dict


class _SinkmockHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """Handler installed by configure_logging(); replaced on each call."""


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
    stream: TextIO | None = None,
) -> logging.Handler:
    """Render sinkmock's events at ``level``.

    Calling it again replaces the previous handler instead of stacking a
    second one, so conftest files can call it freely.

    Args:
        json_output: One JSON object per event instead of console lines.
        level: Level for the ``sinkmock`` logger (DEBUG shows every scripted
            decision the mocks make).
        stream: Where to write. Defaults to the current ``sys.stdout``.

    Returns:
        The installed handler.
    """
    log_level = getattr(logging, level.upper())

    structlog.configure(
        processors=[*_SHARED_PROCESSORS, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Tests reconfigure logging; cached loggers would keep the old setup
        cache_logger_on_first_use=False,
    )

    renderer: Any = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer(colors=False)
    handler = _SinkmockHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(
        ProcessorFormatter(
            processors=[_drop_formatter_fields, renderer],
            foreign_pre_chain=_SHARED_PROCESSORS,
        )
    )

    reset_logging()
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    # Events are rendered here; the root logger must not print them again
    package_logger.propagate = False
    return handler


def reset_logging() -> None:
    """Remove the handler installed by configure_logging() and restore defaults."""
    package_logger = logging.getLogger(LOGGER_NAME)
    for handler in package_logger.handlers[:]:
        if isinstance(handler, _SinkmockHandler):
            package_logger.removeHandler(handler)
            handler.close()
    package_logger.setLevel(logging.NOTSET)
    package_logger.propagate = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a bound logger for a sinkmock module."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
