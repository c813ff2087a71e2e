import logging
import sys

import structlog

from groupmeta.config import Config

log = structlog.get_logger()


def configure_logging(config: Config) -> None:
    level = logging.getLevelName(config.LOG_LEVEL.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unsupported log level: {config.LOG_LEVEL}")

    if config.LOG_FORMAT == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # logs go to stderr so decoded records on stdout stay parseable
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
