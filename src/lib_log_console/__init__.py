"""Public package surface of the leveled console logger.

Exports the factory and value types host code needs so ``import
lib_log_console`` is the only import most callers write. Subscribing on any
logger observes events from every logger sharing its registry.
"""

from __future__ import annotations

from .adapters import RichConsoleAdapter
from .domain import (
    EVENT_NAMES,
    EventRegistry,
    GenericErrorShape,
    HttpErrorShape,
    LogEntry,
    LogLevel,
    OpaqueShape,
    SubscriberError,
    build_error_context,
    classify_error,
    default_registry,
)
from .logger import Formatter, Logger, create_logger, default_logger, logger_factory

__all__ = [
    "EVENT_NAMES",
    "EventRegistry",
    "Formatter",
    "GenericErrorShape",
    "HttpErrorShape",
    "LogEntry",
    "LogLevel",
    "Logger",
    "OpaqueShape",
    "RichConsoleAdapter",
    "SubscriberError",
    "build_error_context",
    "classify_error",
    "create_logger",
    "default_logger",
    "default_registry",
    "logger_factory",
]
