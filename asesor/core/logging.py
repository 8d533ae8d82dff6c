"""Logging configuration for asesor.

structlog on top of stdlib logging. Console output by default, JSON when
ASESOR_JSON_LOGS is set, plus a rotating file only when ASESOR_LOG_DIR
names a directory.
"""

from __future__ import annotations

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any

import structlog

from .settings import get_settings

LOG_FILE_NAME = "asesor.log"

_configured: bool = False


def _file_handler(log_dir: str) -> logging.Handler | None:
    path = Path(log_dir)
    try:
        path.mkdir(parents=True, exist_ok=True)
        return logging.handlers.RotatingFileHandler(
            str(path / LOG_FILE_NAME), maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
    except OSError:
        return None


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
    log_dir: str | None = None,
) -> structlog.BoundLogger:
    """Configure structured logging for the application.

    Arguments left as None fall back to AsesorSettings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        json_output: Render JSON instead of console lines
        log_dir: Directory for the rotating log file

    Returns:
        Configured logger instance.
    """
    global _configured

    if _configured:
        return structlog.get_logger()

    settings = get_settings()
    numeric_level = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    if json_output is None:
        json_output = settings.json_logs
    log_dir = log_dir or settings.log_dir

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_dir:
        handler = _file_handler(log_dir)
        if handler is not None:
            handlers.append(handler)

    logging.basicConfig(
        format="%(message)s",
        level=numeric_level,
        handlers=handlers,
        force=True,
    )

    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False),
    ]

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _configured = True
    return structlog.get_logger()


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Logger bound to name; configures logging on first use."""
    if not _configured:
        configure_logging()

    logger = structlog.get_logger()
    return logger.bind(logger_name=name) if name else logger
