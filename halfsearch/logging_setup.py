"""Logging setup based on structlog + standard logging."""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

import structlog

from .config import LoggingConfig

_is_configured = False


def setup_logging(config: Union[LoggingConfig, dict, None] = None) -> LoggingConfig:
    """Configure stdlib logging + structlog and return the resolved config."""

    global _is_configured
    if config is None:
        resolved = LoggingConfig()
    elif isinstance(config, dict):
        resolved = LoggingConfig(**config)
    else:
        resolved = config

    root_logger = logging.getLogger()
    # Avoid duplicate handlers when re-initialising.
    root_logger.handlers.clear()
    root_logger.setLevel(resolved.level.upper())

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if resolved.json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Every structlog event from the CLI carries the configured app name.
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(app=resolved.app_name)

    _is_configured = True
    return resolved


def get_logger(name: Optional[str] = None):
    """Return a structlog logger routed through the stdlib handlers."""

    return structlog.get_logger(name)


def is_configured() -> bool:
    return _is_configured
