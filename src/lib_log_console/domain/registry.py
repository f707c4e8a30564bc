"""Event registry fanning log entries out to subscriber callbacks.

Purpose
-------
Map event names (``"debug"``, ``"info"``, ``"warning"``, ``"error"``) to an
ordered, duplicate-free list of callbacks and notify them whenever a logger
publishes an entry.

Contents
--------
* :class:`EventRegistry` - thread-safe subscribe/unsubscribe/publish.
* :class:`SubscriberError` - aggregate raised after subscribers failed.
* :func:`default_registry` - process-wide instance shared by loggers.

System Role
-----------
Every logger derived from another shares the same registry instance, so one
subscription observes events from all of them. Tests build isolated
registries and inject them through :func:`lib_log_console.create_logger`.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable, Iterable
from threading import RLock
from typing import Any


LOGGER = logging.getLogger(__name__)

Subscriber = Callable[[Any], Any]
"""Callback receiving the published payload; may return an awaitable."""


class SubscriberError(RuntimeError):
    """Raised after a publish in which one or more subscribers failed.

    Attributes
    ----------
    event:
        Event name that was being published.
    failures:
        Exceptions raised by subscribers, in the order they were observed.
    """

    def __init__(self, event: str, failures: Iterable[Exception]) -> None:
        self.event = event
        self.failures: tuple[Exception, ...] = tuple(failures)
        first = self.failures[0] if self.failures else None
        super().__init__(f"{len(self.failures)} subscriber(s) failed while publishing {event!r}: {first!r}")


class EventRegistry:
    """Ordered, duplicate-free subscriber lists keyed by event name.

    Examples
    --------
    >>> registry = EventRegistry()
    >>> seen = []
    >>> registry.subscribe('info', seen.append)
    >>> registry.subscribe('info', seen.append)
    >>> registry.publish('info', 'payload')
    >>> seen
    ['payload']
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Subscriber]] = {}
        self._lock = RLock()

    def subscribe(self, event: str, callback: Subscriber) -> None:
        """Register ``callback`` for ``event``; registering the same callback again is a no-op."""

        if not callable(callback):
            raise ValueError(f"subscriber for {event!r} must be callable, got {type(callback).__name__}")
        with self._lock:
            callbacks = self._subscribers.setdefault(event, [])
            if any(_same_callback(known, callback) for known in callbacks):
                return
            callbacks.append(callback)

    def unsubscribe(self, event: str, callback: Subscriber) -> bool:
        """Remove ``callback`` from ``event``; return ``True`` when it was registered."""

        with self._lock:
            callbacks = self._subscribers.get(event)
            index = next((i for i, known in enumerate(callbacks or ()) if _same_callback(known, callback)), None)
            if index is None:
                return False
            del callbacks[index]
            if not callbacks:
                del self._subscribers[event]
            return True

    def subscribers(self, event: str) -> tuple[Subscriber, ...]:
        """Return a snapshot of the callbacks for ``event`` in subscription order."""

        with self._lock:
            return tuple(self._subscribers.get(event, ()))

    def clear(self, event: str | None = None) -> None:
        """Drop the subscribers of ``event``, or of every event when ``None``."""

        with self._lock:
            if event is None:
                self._subscribers.clear()
            else:
                self._subscribers.pop(event, None)

    def publish(self, event: str, payload: Any) -> None:
        """Invoke every subscriber of ``event`` with ``payload`` and wait for them.

        Awaitables returned by subscribers are awaited concurrently on a fresh
        event loop. Inside a running loop use :meth:`publish_async` instead.

        Raises
        ------
        SubscriberError
            After all subscribers ran, when at least one of them failed.
        RuntimeError
            When a subscriber returned an awaitable while an event loop is
            already running in this thread. Failures of the synchronous
            subscribers are chained as its ``__cause__``.
        """

        failures, pending = self._invoke_all(event, payload)
        if pending:
            failures.extend(self._drain_blocking(event, pending, failures))
        _raise_if_failed(event, failures)

    async def publish_async(self, event: str, payload: Any) -> None:
        """Coroutine variant of :meth:`publish` for use inside an event loop."""

        failures, pending = self._invoke_all(event, payload)
        if pending:
            results = await asyncio.gather(*pending, return_exceptions=True)
            failures.extend(_collect_failures(event, results))
        _raise_if_failed(event, failures)

    def _invoke_all(self, event: str, payload: Any) -> tuple[list[Exception], list[Awaitable[Any]]]:
        failures: list[Exception] = []
        pending: list[Awaitable[Any]] = []
        for callback in self.subscribers(event):
            try:
                result = callback(payload)
            except Exception as exc:
                _report_failure(event, exc)
                failures.append(exc)
                continue
            if inspect.isawaitable(result):
                pending.append(result)
        return failures, pending

    def _drain_blocking(self, event: str, pending: list[Awaitable[Any]], failures: list[Exception]) -> list[Exception]:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            results = asyncio.run(_gather(pending))
            return _collect_failures(event, results)
        for awaitable in pending:
            close = getattr(awaitable, "close", None)
            if inspect.iscoroutine(awaitable) and close is not None:
                close()
        error = RuntimeError(
            f"subscribers of {event!r} returned awaitables inside a running event loop; "
            "use the async logging methods (ainfo, awarning, ...) instead",
        )
        if failures:
            raise error from SubscriberError(event, failures)
        raise error


def _same_callback(known: Subscriber, candidate: Subscriber) -> bool:
    """Return whether two callbacks are the same subscriber.

    Callbacks match by identity. Bound methods are recreated on every
    attribute access, so they match when they bind the same function to the
    same object.

    Examples
    --------
    >>> seen = []
    >>> _same_callback(seen.append, seen.append)
    True
    >>> _same_callback(seen.append, [].append)
    False
    """

    if known is candidate:
        return True
    owner = getattr(known, "__self__", None)
    if owner is None or owner is not getattr(candidate, "__self__", None):
        return False
    return (
        getattr(known, "__func__", None) is getattr(candidate, "__func__", None)
        and getattr(known, "__name__", None) == getattr(candidate, "__name__", None)
    )


async def _gather(pending: list[Awaitable[Any]]) -> list[Any]:
    return await asyncio.gather(*pending, return_exceptions=True)


def _collect_failures(event: str, results: Iterable[Any]) -> list[Exception]:
    failures: list[Exception] = []
    for result in results:
        if isinstance(result, Exception):
            _report_failure(event, result)
            failures.append(result)
        elif isinstance(result, BaseException):
            raise result
    return failures


def _report_failure(event: str, exc: Exception) -> None:
    LOGGER.error("subscriber failed while publishing %r: %s", event, exc, exc_info=exc)


def _raise_if_failed(event: str, failures: list[Exception]) -> None:
    if failures:
        raise SubscriberError(event, failures) from failures[0]


_DEFAULT_REGISTRY = EventRegistry()


def default_registry() -> EventRegistry:
    """Return the registry shared by loggers created without an explicit one."""

    return _DEFAULT_REGISTRY


__all__ = ["EventRegistry", "Subscriber", "SubscriberError", "default_registry"]
