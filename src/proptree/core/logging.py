# src/proptree/core/logging.py
"""Structured logging configuration for proptree.

proptree modules log through ``structlog.get_logger(__name__)``, so every
event lands on a stdlib logger under the ``proptree`` namespace.
configure_logging() renders that namespace (JSON or console) through
structlog's ProcessorFormatter.

Only the ``proptree`` logger is touched. The root logger keeps its
handlers, so a host test session (pytest's caplog, live logging) still
sees proptree events through normal propagation.

Usage:
    from proptree.core.logging import configure_logging

    configure_logging(level="DEBUG")  # one line per case and shrink step
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.stdlib import ProcessorFormatter

PACKAGE_LOGGER = "proptree"

# Name given to the handler configure_logging() installs, so a second call
# replaces it instead of stacking another one.
_HANDLER_NAME = "proptree-structlog"


def _remove_internal_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Drop the bookkeeping keys ProcessorFormatter adds to every record."""
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def _build_handler(json_output: bool, stream: TextIO) -> logging.Handler:
    shared_processors: list[Any] = [
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    final_processors: list[Any] = [_remove_internal_fields]
    if json_output:
        final_processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        final_processors.append(structlog.dev.ConsoleRenderer(colors=False))

    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        ProcessorFormatter(
            processors=final_processors,
            foreign_pre_chain=shared_processors,
        )
    )
    return handler


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "INFO",
    stream: TextIO | None = None,
) -> None:
    """Render proptree's runner and strategy events.

    Safe to call repeatedly; the last call wins.

    Args:
        json_output: If True, one JSON object per line. If False,
            human-readable console lines.
        level: Minimum level for the ``proptree`` namespace (DEBUG shows
            every case, INFO failures and shrink results).
        stream: Output stream (defaults to sys.stdout at call time).

    Raises:
        AttributeError: If ``level`` is not a stdlib level name.
    """
    log_level = getattr(logging, level.upper())

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.PositionalArgumentsFormatter(),
            ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Loggers are created at import time; caching would pin them to the
        # configuration in force then.
        cache_logger_on_first_use=False,
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in [h for h in package_logger.handlers if h.get_name() == _HANDLER_NAME]:
        package_logger.removeHandler(existing)
    package_logger.addHandler(_build_handler(json_output, stream if stream is not None else sys.stdout))
    package_logger.setLevel(log_level)
