"""Optional structlog setup for programs embedding argon2phc.

The library only emits events through structlog.get_logger(); it never
configures output itself. A host program that wants those events routed
through stdlib logging calls configure_logging() once. ARGON2PHC_LOG_FORMAT
selects "console" (readable, the default) or "json" (one object per line).
"""

import logging
import sys

import structlog

from argon2phc.core.config import get_settings


def configure_logging(log_format: str | None = None, log_level: str | None = None) -> None:
    """Configure structlog and stdlib logging integration.

    Args:
        log_format: "console" for dev-friendly output, "json" for production.
            Defaults to the configured ARGON2PHC_LOG_FORMAT.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
            Defaults to the configured ARGON2PHC_LOG_LEVEL.
    """
    settings = get_settings()
    log_format = log_format or settings.log_format
    log_level = log_level or settings.log_level

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
