"""Logging setup: stdlib logging routed through structlog."""
import logging
import sys
from typing import Optional, TextIO

import structlog

from app.config import Settings


def configure_logging(settings: Settings, stream: Optional[TextIO] = None) -> None:
    """Configure stdlib logging and structlog from settings.

    Call once at startup (app factory or script entry point). Scripts that
    print results to stdout pass ``sys.stderr`` as the log stream.
    """
    level = getattr(logging, settings.log_level)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        stream=stream or sys.stdout,
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if settings.log_format == "json":
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
        cache_logger_on_first_use=False,
    )
