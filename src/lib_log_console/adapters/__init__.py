"""Concrete adapters for the console logger's ports."""

from __future__ import annotations

from .clock import SystemClock
from .console import RichConsoleAdapter

__all__ = ["RichConsoleAdapter", "SystemClock"]
