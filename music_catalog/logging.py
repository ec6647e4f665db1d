from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(log_level: str, *, json_logs: bool = True) -> None:
    level = logging.getLevelName(log_level.upper())
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.dict_tracebacks,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # Loggers are resolved per call so output follows the current sys.stdout.
        cache_logger_on_first_use=False,
    )


logger = structlog.get_logger(component="music_catalog")
