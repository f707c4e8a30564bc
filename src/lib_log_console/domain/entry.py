"""Domain value describing a single log call.

Purpose
-------
Provide an immutable, serialisable representation of the entry a logger
produces, renders, and hands to subscribers.

Contents
--------
* :class:`LogEntry` dataclass with serialisation helpers.

System Role
-----------
Sits in the domain layer; formatters receive it, the registry carries it to
subscribers, and level operations return it to the caller.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from typing import Any

from .levels import LogLevel


@dataclass(slots=True, frozen=True)
class LogEntry:
    """Immutable record produced by every log call.

    Attributes
    ----------
    timestamp:
        ISO-8601 creation time, assigned by the logger.
    level:
        :class:`LogLevel` severity, assigned by the logger.
    message:
        Human-readable text passed by the caller.
    context:
        Optional diagnostic payload (any value).
    id:
        Identity of the logger that produced the entry.
    """

    timestamp: str
    level: LogLevel
    message: str
    context: Any = None
    id: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize the entry with the level as its upper-case name.

        Examples
        --------
        >>> LogEntry('2025-01-01T00:00:00.000+00:00', LogLevel.INFO, 'hi', id='svc').to_dict()['level']
        'INFO'
        """

        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "level": self.level.name,
            "message": self.message,
            "context": self.context,
        }

    def to_json(self) -> str:
        """Serialize the entry to JSON with sorted keys; unknown values use ``str``."""

        return json.dumps(self.to_dict(), sort_keys=True, default=str)

    def replace(self, **changes: Any) -> "LogEntry":
        """Return a copied entry with ``changes`` applied."""

        return replace(self, **changes)


__all__ = ["LogEntry"]
