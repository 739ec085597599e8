"""Utility helpers shared across the :mod:`syllable_counter` package."""

from __future__ import annotations

from .logging_config import configure_logging
from .observability import StructuredLoggerAdapter, create_counter, get_logger

__all__ = [
    "configure_logging",
    "StructuredLoggerAdapter",
    "create_counter",
    "get_logger",
]
