"""Core configuration, logging and scoring constants."""

from .exceptions import (
    AsesorError,
    InvalidParameterError,
)
from .logging import configure_logging, get_logger
from .settings import AsesorSettings, get_settings

__all__ = [
    "AsesorSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Exceptions
    "AsesorError",
    "InvalidParameterError",
]
