"""Protocols the logger depends on at its I/O boundaries."""

from __future__ import annotations

from .console import ConsolePort
from .time import ClockPort

__all__ = ["ClockPort", "ConsolePort"]
