"""Domain entities and value objects used by the console logger."""

from __future__ import annotations

from .entry import LogEntry
from .error_context import (
    GenericErrorShape,
    HttpErrorShape,
    OpaqueShape,
    build_error_context,
    classify_error,
    error_message,
)
from .levels import EVENT_NAMES, LABEL_WIDTH, LogLevel
from .registry import EventRegistry, SubscriberError, default_registry

__all__ = [
    "EVENT_NAMES",
    "EventRegistry",
    "GenericErrorShape",
    "HttpErrorShape",
    "LABEL_WIDTH",
    "LogEntry",
    "LogLevel",
    "OpaqueShape",
    "SubscriberError",
    "build_error_context",
    "classify_error",
    "default_registry",
    "error_message",
]
