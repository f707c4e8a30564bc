"""Diagnostic context extraction for error values passed to ``Logger.error``.

Purpose
-------
Turn whatever a caller hands to ``error()`` - an exception, an HTTP client
error, a plain mapping - into a structured payload worth printing.

Contents
--------
* :class:`HttpErrorShape`, :class:`GenericErrorShape`, :class:`OpaqueShape` -
  the tagged result of :func:`classify_error`.
* :func:`classify_error` - structural capability check.
* :func:`build_error_context` - payload derived from the classified shape.
* :func:`error_message` - default message for an error value.

System Role
-----------
Pure domain logic. HTTP client errors are recognised by the fields they carry
(an ``isAxiosError`` marker with ``config``/``response``, or the
``request``/``response`` pair used by ``requests`` and ``httpx`` exceptions),
so neither client library is imported. Nothing here raises for odd input.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union


@dataclass(slots=True, frozen=True)
class HttpErrorShape:
    """Request/response details of an HTTP client error; absent parts are ``None``."""

    url: Any = None
    method: Any = None
    headers: Any = None
    data: Any = None
    status: Any = None
    response_data: Any = None


@dataclass(slots=True, frozen=True)
class GenericErrorShape:
    """Exception-like value: its own fields plus message and stack trace."""

    fields: dict[str, Any] = field(default_factory=dict)
    message: str | None = None
    stack: str | None = None


@dataclass(slots=True, frozen=True)
class OpaqueShape:
    """Anything not recognised as an error; passed through unchanged."""

    value: Any = None


ErrorShape = Union[HttpErrorShape, GenericErrorShape, OpaqueShape]


def _field(source: Any, name: str) -> Any:
    """Return ``source[name]`` or ``source.name``; ``None`` when absent.

    Examples
    --------
    >>> _field({'url': 'http://x'}, 'url')
    'http://x'
    >>> _field(None, 'url') is None
    True
    """

    if source is None:
        return None
    try:
        if isinstance(source, Mapping):
            return source.get(name)
        return getattr(source, name, None)
    except Exception:
        # third-party properties may raise (e.g. unread response bodies)
        return None


def _first(source: Any, *names: str) -> Any:
    for name in names:
        value = _field(source, name)
        if value is not None:
            return value
    return None


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping) and not isinstance(value, dict):
        try:
            return dict(value)
        except Exception:
            return value
    if value is not None and not isinstance(value, (str, bytes, int, float, bool, dict, list, tuple)):
        return str(value)
    return value


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def _own_fields(value: Any) -> dict[str, Any]:
    if isinstance(value, Mapping):
        return dict(value)
    try:
        return dict(vars(value))
    except TypeError:
        return {}


def _has_http_marker(value: Any) -> bool:
    try:
        return bool(_first(value, "isAxiosError", "is_axios_error"))
    except Exception:
        return False


def _is_http_client_exception(value: Any) -> bool:
    if not isinstance(value, BaseException):
        return False
    response = _field(value, "response")
    return _field(value, "request") is not None and _first(response, "status_code", "status") is not None


def _http_shape(value: Any) -> HttpErrorShape:
    request = _first(value, "config", "request")
    response = _field(value, "response")
    return HttpErrorShape(
        url=_plain(_field(request, "url")),
        method=_plain(_field(request, "method")),
        headers=_plain(_field(request, "headers")),
        data=_plain(_first(request, "data", "body", "content")),
        status=_first(response, "status", "status_code"),
        response_data=_plain(_first(response, "data", "text")),
    )


def _generic_shape(value: Any) -> GenericErrorShape:
    if isinstance(value, BaseException):
        stack = "".join(traceback.format_exception(type(value), value, value.__traceback__))
        return GenericErrorShape(fields=_own_fields(value), message=_safe_str(value), stack=stack)
    message = _field(value, "message")
    stack = _field(value, "stack")
    return GenericErrorShape(
        fields=_own_fields(value),
        message=None if message is None else _safe_str(message),
        stack=None if stack is None else _safe_str(stack),
    )


def classify_error(value: Any) -> ErrorShape:
    """Classify ``value`` as an HTTP client error, a generic error, or opaque.

    Examples
    --------
    >>> classify_error({'isAxiosError': True, 'response': {'status': 404}}).status
    404
    >>> type(classify_error(ValueError('boom'))).__name__
    'GenericErrorShape'
    >>> classify_error('plain text')
    OpaqueShape(value='plain text')
    """

    if _has_http_marker(value) or _is_http_client_exception(value):
        return _http_shape(value)
    if isinstance(value, BaseException):
        return _generic_shape(value)
    if _field(value, "message") is not None and _field(value, "stack") is not None:
        return _generic_shape(value)
    return OpaqueShape(value=value)


def build_error_context(value: Any) -> Any:
    """Return the diagnostic payload printed and attached for ``error(value)``.

    HTTP client errors yield ``req_config``/``res_status``/``res_data``
    without the stack; generic errors yield their own fields plus
    ``message`` and ``stack``; anything else is returned unchanged.

    Examples
    --------
    >>> ctx = build_error_context({'isAxiosError': True, 'config': {'url': 'http://x', 'method': 'GET'}})
    >>> ctx['req_config']['url'], ctx['res_status']
    ('http://x', None)
    >>> build_error_context({'already': 'structured'})
    {'already': 'structured'}
    """

    shape = classify_error(value)
    if isinstance(shape, HttpErrorShape):
        return {
            "req_config": {
                "url": shape.url,
                "method": shape.method,
                "headers": shape.headers,
                "data": shape.data,
            },
            "res_status": shape.status,
            "res_data": shape.response_data,
        }
    if isinstance(shape, GenericErrorShape):
        context = dict(shape.fields)
        context["message"] = shape.message
        context["stack"] = shape.stack
        return context
    return shape.value


def error_message(value: Any) -> str:
    """Return the message ``error(value)`` logs when the caller gives none.

    Examples
    --------
    >>> error_message(RuntimeError('boom'))
    'boom'
    >>> error_message(KeyError())
    'KeyError'
    >>> error_message({'isAxiosError': True})
    ''
    """

    if isinstance(value, BaseException):
        return _safe_str(value) or type(value).__name__
    if isinstance(value, str):
        return value
    message = _field(value, "message")
    return "" if message is None else _safe_str(message)


__all__ = [
    "ErrorShape",
    "GenericErrorShape",
    "HttpErrorShape",
    "OpaqueShape",
    "build_error_context",
    "classify_error",
    "error_message",
]
