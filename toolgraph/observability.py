"""Structured logging setup.

Nodes and the router emit ``structlog`` events (``router.decision``,
``tool.invoked`` ...). Call :func:`configure_logging` once at process start;
until then structlog's defaults apply.
"""

import logging
import sys

import structlog

from toolgraph import config


def configure_logging(level: str = config.LOG_LEVEL, fmt: str = config.LOG_FORMAT) -> None:
    """Route structlog through stdlib logging on stderr.

    Args:
        level: Standard logging level name, e.g. ``"INFO"``.
        fmt: ``"console"`` for human-readable lines, ``"json"`` for one
             JSON object per event.
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if fmt == "json":
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
