"""Immutable console logger publishing every entry to an event registry.

Purpose
-------
Expose the ergonomic logging API host code uses: a :class:`Logger` value
carrying its identity, debug toggle, formatter and colour policy, plus the
:func:`create_logger` factory that resolves those options from arguments and
the environment.

Contents
--------
* :class:`Logger` – frozen configuration plus ``debug``/``info``/``warning``/
  ``error`` (and their ``a``-prefixed coroutine twins), ``inspect``, and the
  derivations ``with_id``/``with_formatter``.
* :func:`create_logger` / :data:`logger_factory` – validated construction.
* :func:`default_logger` – lazily created process-wide instance.

System Role
-----------
Composition point between the domain (entries, levels, error context,
registry) and the adapters (Rich console, system clock). Derived loggers copy
every collaborator, so all of them share one registry: subscribing once
observes events from every logger derived from the same root.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from threading import Lock
from typing import Any, Callable

from .adapters import RichConsoleAdapter, SystemClock
from .adapters._formatting import render_default, render_inspection
from .application.ports import ClockPort, ConsolePort
from .config import default_id, resolve_settings
from .domain import (
    EventRegistry,
    LogEntry,
    LogLevel,
    build_error_context,
    default_registry,
    error_message,
)
from .domain.registry import Subscriber


Formatter = Callable[[LogEntry], str]
"""Callable rendering a :class:`LogEntry` into the line written to the console."""


_SHARED_CONSOLE = RichConsoleAdapter()


def _shared_console() -> ConsolePort:
    return _SHARED_CONSOLE


@dataclass(slots=True, frozen=True)
class Logger:
    """Leveled console logger whose configuration never changes.

    Attributes
    ----------
    debug_enabled:
        Gates :meth:`debug`; when ``False`` debug calls neither print nor
        publish.
    id:
        Identity stamped on every entry and shown by the default renderer.
    formatter:
        Custom renderer; ``None`` selects the built-in layout.
    colours:
        Whether the built-in renderer and inspection paint ANSI colours.
    registry:
        :class:`EventRegistry` notified after each entry is written.
    console:
        :class:`ConsolePort` receiving rendered lines.
    clock:
        :class:`ClockPort` stamping entries.
    """

    debug_enabled: bool = True
    id: str = field(default_factory=default_id)
    formatter: Formatter | None = None
    colours: bool = True
    registry: EventRegistry = field(default_factory=default_registry, repr=False, compare=False)
    console: ConsolePort = field(default_factory=_shared_console, repr=False, compare=False)
    clock: ClockPort = field(default_factory=SystemClock, repr=False, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.debug_enabled, bool):
            raise ValueError(f"debug_enabled must be a bool, got {self.debug_enabled!r}")
        if not isinstance(self.id, str) or not self.id.strip():
            raise ValueError(f"id must be a non-empty string, got {self.id!r}")
        if self.formatter is not None and not callable(self.formatter):
            raise ValueError(f"formatter must be callable or None, got {type(self.formatter).__name__}")
        if not isinstance(self.colours, bool):
            raise ValueError(f"colours must be a bool, got {self.colours!r}")
        if not isinstance(self.registry, EventRegistry):
            raise ValueError(f"registry must be an EventRegistry, got {type(self.registry).__name__}")
        if not isinstance(self.console, ConsolePort):
            raise ValueError(f"console must implement ConsolePort, got {type(self.console).__name__}")
        if not isinstance(self.clock, ClockPort):
            raise ValueError(f"clock must implement ClockPort, got {type(self.clock).__name__}")

    def with_id(self, new_id: str) -> "Logger":
        """Return a copy identified by ``new_id``; ``self`` is untouched."""

        return replace(self, id=new_id)

    def with_formatter(self, new_formatter: Formatter | None) -> "Logger":
        """Return a copy rendering through ``new_formatter`` (``None`` restores the default)."""

        return replace(self, formatter=new_formatter)

    def subscribe(self, event: str, callback: Subscriber) -> None:
        """Register ``callback`` for ``event`` on the shared registry."""

        self.registry.subscribe(event, callback)

    on = subscribe

    def unsubscribe(self, event: str, callback: Subscriber) -> bool:
        """Remove ``callback`` from ``event``; return whether it was registered."""

        return self.registry.unsubscribe(event, callback)

    def render(self, entry: LogEntry) -> str:
        """Return the console line for ``entry``."""

        if self.formatter is None:
            return render_default(entry, colours=self.colours)
        line = self.formatter(entry)
        return line if isinstance(line, str) else str(line)

    def inspect(self, value: Any = None) -> None:
        """Print a type tag and the key/value breakdown of ``value``; ``None`` prints nothing."""

        for line in render_inspection(value, colours=self.colours):
            self.console.write(line)

    def debug(self, message: str, context: Any = None) -> LogEntry | None:
        """Log at ``DEBUG`` and inspect ``context``; skipped entirely when debug is disabled."""

        if not self.debug_enabled:
            return None
        entry = self._write(LogLevel.DEBUG, message, context, inspect_context=True)
        self.registry.publish(LogLevel.DEBUG.event, entry)
        return entry

    def info(self, message: str, context: Any = None) -> LogEntry:
        """Log at ``INFO``; ``context`` travels in the entry but is not inspected."""

        entry = self._write(LogLevel.INFO, message, context, inspect_context=False)
        self.registry.publish(LogLevel.INFO.event, entry)
        return entry

    def warning(self, message: str, context: Any = None) -> LogEntry:
        """Log at ``WARNING`` and inspect ``context``."""

        entry = self._write(LogLevel.WARNING, message, context, inspect_context=True)
        self.registry.publish(LogLevel.WARNING.event, entry)
        return entry

    def error(self, error: Any, message: str | None = None) -> LogEntry:
        """Log ``error`` at ``ERROR`` with context derived from it.

        ``message`` defaults to the error's own message. HTTP client errors
        contribute request/response details, exceptions their fields and
        stack trace, and any other value is inspected as-is.
        """

        entry = self._write_error(error, message)
        self.registry.publish(LogLevel.ERROR.event, entry)
        return entry

    async def adebug(self, message: str, context: Any = None) -> LogEntry | None:
        """Coroutine form of :meth:`debug` awaiting asynchronous subscribers."""

        if not self.debug_enabled:
            return None
        entry = self._write(LogLevel.DEBUG, message, context, inspect_context=True)
        await self.registry.publish_async(LogLevel.DEBUG.event, entry)
        return entry

    async def ainfo(self, message: str, context: Any = None) -> LogEntry:
        """Coroutine form of :meth:`info`."""

        entry = self._write(LogLevel.INFO, message, context, inspect_context=False)
        await self.registry.publish_async(LogLevel.INFO.event, entry)
        return entry

    async def awarning(self, message: str, context: Any = None) -> LogEntry:
        """Coroutine form of :meth:`warning`."""

        entry = self._write(LogLevel.WARNING, message, context, inspect_context=True)
        await self.registry.publish_async(LogLevel.WARNING.event, entry)
        return entry

    async def aerror(self, error: Any, message: str | None = None) -> LogEntry:
        """Coroutine form of :meth:`error`."""

        entry = self._write_error(error, message)
        await self.registry.publish_async(LogLevel.ERROR.event, entry)
        return entry

    def _write(self, level: LogLevel, message: str, context: Any, *, inspect_context: bool) -> LogEntry:
        entry = LogEntry(
            timestamp=self.clock.now().isoformat(timespec="milliseconds"),
            level=level,
            message=message,
            context=context,
            id=self.id,
        )
        if self.formatter is None:
            self.console.write(self.render(entry))
        else:
            self.console.write(self.render(entry), verbatim=True)
        if inspect_context:
            self.inspect(context)
        return entry

    def _write_error(self, error: Any, message: str | None) -> LogEntry:
        resolved = error_message(error) if message is None else message
        return self._write(LogLevel.ERROR, resolved, build_error_context(error), inspect_context=True)


def create_logger(
    *,
    debug_enabled: bool | None = None,
    id: str | None = None,
    formatter: Formatter | None = None,
    colours: bool | None = None,
    registry: EventRegistry | None = None,
    console: ConsolePort | None = None,
    clock: ClockPort | None = None,
) -> Logger:
    """Build a validated :class:`Logger`.

    Why
    ---
    Hosts create one root logger and derive per-component loggers from it via
    :meth:`Logger.with_id`. Validation happens here so a bad option fails at
    startup rather than on the first log call.

    Inputs
    ------
    debug_enabled, id, colours:
        ``None`` falls back to ``LOG_DEBUG``/``LOG_ID``/``LOG_COLOURS`` (and
        ``NO_COLOR``), then to ``True``, the bracketed process id, and ``True``.
    formatter:
        Custom renderer; ``None`` keeps the built-in layout.
    registry, console, clock:
        Collaborators; default to the process-wide registry, the shared Rich
        console on stdout, and the system clock.

    Raises
    ------
    ValueError
        When an option (or its environment source) is invalid.

    Examples
    --------
    >>> log = create_logger(debug_enabled=False, id='svc1', colours=False)
    >>> log.with_id('svc2').id, log.id
    ('svc2', 'svc1')
    """

    settings = resolve_settings(debug_enabled=debug_enabled, id=id, colours=colours)
    return Logger(
        debug_enabled=settings.debug_enabled,
        id=settings.id,
        formatter=formatter,
        colours=settings.colours,
        registry=registry if registry is not None else default_registry(),
        console=console if console is not None else _shared_console(),
        clock=clock if clock is not None else SystemClock(),
    )


logger_factory = create_logger


_default_logger: Logger | None = None
_default_logger_lock = Lock()


def default_logger() -> Logger:
    """Return the process-wide logger, creating it from the environment on first use."""

    global _default_logger
    with _default_logger_lock:
        if _default_logger is None:
            _default_logger = create_logger()
        return _default_logger


__all__ = ["Formatter", "Logger", "create_logger", "default_logger", "logger_factory"]
