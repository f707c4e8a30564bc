"""Log level abstraction shared by the logger and its renderers.

Purpose
-------
Offer a domain-specific representation of log severities that carries the
event name subscribers listen on, the padded console label, and the colour
used when colours are enabled.

Contents
--------
* :class:`LogLevel` enum with conversion helpers and presentation metadata.
* ``_STYLE_TABLE`` constant mapping levels to Rich style names.

System Role
-----------
Used by :class:`lib_log_console.logger.Logger` to tag entries and pick the
registry event, and by the formatting adapter to paint level labels.
"""

from __future__ import annotations

import logging
from enum import Enum


LABEL_WIDTH = 7
"""Visible width of the level label column in the default renderer."""


class LogLevel(Enum):
    """Enumerated logging levels used throughout the system."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    @property
    def event(self) -> str:
        """Return the registry event name fired for this level.

        Examples
        --------
        >>> LogLevel.WARNING.event
        'warning'
        """

        return self.name.lower()

    @property
    def label(self) -> str:
        """Return the level name padded to the console label width.

        Examples
        --------
        >>> LogLevel.INFO.label
        'INFO   '
        """

        return self.name.ljust(LABEL_WIDTH)

    @property
    def style(self) -> str:
        """Return the Rich style name used to colour the label."""

        return _STYLE_TABLE[self]

    def to_python_level(self) -> int:
        """Return the :mod:`logging` constant matching this level."""

        return getattr(logging, self.name)

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        normalized = name.strip().upper()
        try:
            return cls[normalized]
        except KeyError as exc:
            raise ValueError(f"Unknown log level: {name!r}") from exc


_STYLE_TABLE = {
    LogLevel.DEBUG: "cyan",
    LogLevel.INFO: "green",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
}
# Label colours applied by the default renderer.


EVENT_NAMES: tuple[str, ...] = tuple(level.event for level in LogLevel)
"""Event names fired by the logger, in severity order."""


__all__ = ["EVENT_NAMES", "LABEL_WIDTH", "LogLevel"]
