"""Text rendering shared by the logger's default formatter and inspection.

Why
---
The default line layout, the level colours, and the key/value dump printed for
inspected context all need the same painting rules. Producing them in one
place keeps label padding and colour codes consistent.

Contents
--------
* :func:`paint` – wrap text in ANSI codes for a Rich style name.
* :func:`format_timestamp` – local ``YYYY-MM-DD HH:MM:SS.mmm`` rendering.
* :func:`render_default` – built-in formatter for :class:`LogEntry`.
* :func:`render_inspection` – lines describing an arbitrary context value.

System Role
-----------
Bridges domain values to the plain strings written through
:class:`lib_log_console.application.ports.ConsolePort`.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from rich.color import ColorSystem
from rich.pretty import pretty_repr
from rich.style import Style

from lib_log_console.domain.entry import LogEntry


KEY_STYLE = "cyan"
TYPE_STYLE = "red"


def paint(text: str, style: str, *, enabled: bool = True) -> str:
    """Return ``text`` wrapped in the ANSI codes of ``style`` when ``enabled``.

    Examples
    --------
    >>> paint('INFO', 'green')
    '\\x1b[32mINFO\\x1b[0m'
    >>> paint('INFO', 'green', enabled=False)
    'INFO'
    """

    if not enabled or not style:
        return text
    return Style.parse(style).render(text, color_system=ColorSystem.STANDARD)


def format_timestamp(timestamp: str) -> str:
    """Render an ISO-8601 timestamp in local time with millisecond precision.

    Values that are not ISO-8601 are returned unchanged.

    Examples
    --------
    >>> format_timestamp('2025-09-30T12:00:00.250')
    '2025-09-30 12:00:00.250'
    >>> format_timestamp('yesterday')
    'yesterday'
    """

    try:
        moment = datetime.fromisoformat(timestamp)
    except (TypeError, ValueError):
        return str(timestamp)
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return f"{moment:%Y-%m-%d %H:%M:%S}.{moment.microsecond // 1000:03d}"


def render_default(entry: LogEntry, *, colours: bool) -> str:
    """Return ``<timestamp> <label> <id> | <message>`` for ``entry``.

    The label is padded to its visible width before colour codes wrap it, so
    the id column lines up with colours on or off.
    """

    label = paint(entry.level.label, entry.level.style, enabled=colours)
    return f"{format_timestamp(entry.timestamp)} {label} {entry.id} | {entry.message}"


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def _show(value: Any) -> str:
    if isinstance(value, str):
        return value
    try:
        return pretty_repr(value)
    except Exception:
        return _safe_str(value)


def _pairs(value: Any) -> list[tuple[Any, Any]] | None:
    try:
        if isinstance(value, Mapping):
            return list(value.items())
        if isinstance(value, (list, tuple)):
            return list(enumerate(value))
        if dataclasses.is_dataclass(value) and not isinstance(value, type):
            return [(item.name, getattr(value, item.name)) for item in dataclasses.fields(value)]
        if isinstance(value, type):
            return None
        attributes = vars(value)
    except Exception:
        return None
    return list(attributes.items()) or None


def render_inspection(value: Any, *, colours: bool) -> list[str]:
    """Return the lines printed when inspecting ``value``.

    ``None`` yields nothing. Otherwise the first line names the value's type;
    records (mappings, lists, tuples, dataclasses, objects with instance
    attributes) follow with one ``key: value`` line per item, anything else
    with its string form.

    Examples
    --------
    >>> render_inspection({'a': 1, 'b': 'two'}, colours=False)
    ['dict', 'a: 1', 'b: two']
    >>> render_inspection(42, colours=False)
    ['int', '42']
    >>> render_inspection(None, colours=False)
    []
    """

    if value is None:
        return []
    lines = [paint(type(value).__name__, TYPE_STYLE, enabled=colours)]
    pairs = _pairs(value)
    if pairs is None:
        lines.append(_safe_str(value))
        return lines
    for key, item in pairs:
        lines.append(f"{paint(_safe_str(key), KEY_STYLE, enabled=colours)}: {_show(item)}")
    return lines


__all__ = ["format_timestamp", "paint", "render_default", "render_inspection"]
