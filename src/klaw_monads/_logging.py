"""Structured logging for klaw-monads.

The library only ever emits debug events (captured exceptions in
``attempt``/``@safe`` and short-circuits through ``@early_return``), and
only once logging has been enabled through ``klaw_monads.init`` or
``KLAW_MONADS_LOG_LEVEL``. Records go through structlog's
ProcessorFormatter to a handler on the ``klaw_monads`` logger, so a host
application's root logging is left alone.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

__all__ = [
    'configure_logging',
    'get_logger',
    'log_debug',
]

PACKAGE_LOGGER = 'klaw_monads'


def _get_shared_processors() -> list[Any]:
    """Get processors shared between structlog and stdlib foreign logs."""
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _get_renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = 'DEBUG', *, json_output: bool = True) -> None:
    """Route klaw_monads events to stderr at the given level.

    Args:
        level: One of "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL".
        json_output: If True, emit JSON lines. If False, use console output.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_get_shared_processors(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=_get_shared_processors(),
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _get_renderer(json_output),
            ],
        )
    )

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)
    package_logger.propagate = False


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger; names should live under ``klaw_monads``."""
    return structlog.get_logger(name)


def log_debug(name: str, event: str, **fields: Any) -> None:
    """Emit a debug event from library code, if logging is enabled.

    Nothing is emitted (and structlog is not touched) while the configured
    log level is None, so an application that never opts in sees no output.
    """
    from klaw_monads._config import get_config

    if get_config().log_level is None:
        return
    get_logger(name).debug(event, **fields)
