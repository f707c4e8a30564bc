"""Configuration resolution for logger options and optional ``.env`` loading.

Purpose
-------
Let deployments tune logger defaults through environment variables and a
nearby ``.env`` file, while explicit arguments to
:func:`lib_log_console.create_logger` always win.

Contents
--------
* :class:`LoggerSettings` – resolved debug/id/colour options.
* :func:`resolve_settings` – explicit value → environment → default.
* :func:`enable_dotenv` / :func:`should_use_dotenv` – python-dotenv glue used
  by the CLI.

System Role
-----------
Sits between the public factory and the process environment. Invalid
environment values raise :class:`ValueError` at logger construction instead
of surfacing on the first log call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from threading import Lock

from dotenv import find_dotenv, load_dotenv


DOTENV_ENV_VAR = "LOG_USE_DOTENV"
ENV_DEBUG = "LOG_DEBUG"
ENV_ID = "LOG_ID"
ENV_COLOURS = "LOG_COLOURS"
ENV_NO_COLOR = "NO_COLOR"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(slots=True, frozen=True)
class LoggerSettings:
    """Options resolved for a new logger."""

    debug_enabled: bool
    id: str
    colours: bool


def parse_flag(name: str, raw: str) -> bool:
    """Interpret ``raw`` as a boolean flag named ``name``.

    Examples
    --------
    >>> parse_flag('LOG_DEBUG', ' On ')
    True
    >>> parse_flag('LOG_DEBUG', '0')
    False
    >>> parse_flag('LOG_DEBUG', 'maybe')
    Traceback (most recent call last):
    ...
    ValueError: LOG_DEBUG must be a boolean flag (1/0, true/false, yes/no, on/off), got 'maybe'
    """

    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean flag (1/0, true/false, yes/no, on/off), got {raw!r}")


def env_flag(name: str, default: bool | None = None) -> bool | None:
    """Return the flag stored in environment variable ``name`` or ``default`` when unset."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return parse_flag(name, value)


def default_id() -> str:
    """Return the bracketed process id, right-aligned to seven characters."""

    return f"[{os.getpid()}]".rjust(7)


def resolve_settings(
    *,
    debug_enabled: bool | None = None,
    id: str | None = None,
    colours: bool | None = None,
) -> LoggerSettings:
    """Fill options left as ``None`` from the environment, then from defaults.

    ``LOG_DEBUG`` and ``LOG_COLOURS`` hold boolean flags, ``LOG_ID`` the
    logger identity. ``NO_COLOR`` disables colours when ``LOG_COLOURS`` is
    unset.
    """

    if debug_enabled is None:
        debug_enabled = env_flag(ENV_DEBUG, True)
    if id is None:
        id = os.getenv(ENV_ID) or default_id()
    if colours is None:
        colours = env_flag(ENV_COLOURS)
        if colours is None:
            colours = not os.getenv(ENV_NO_COLOR)
    return LoggerSettings(debug_enabled=debug_enabled, id=id, colours=colours)


_dotenv_lock = Lock()
_dotenv_attempted = False
_dotenv_path: Path | None = None


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Decide whether to load ``.env``; an explicit CLI flag beats the environment toggle.

    Examples
    --------
    >>> should_use_dotenv(explicit=None, env_value='1')
    True
    >>> should_use_dotenv(explicit=False, env_value='1')
    False
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None or not env_value.strip():
        return False
    return env_value.strip().lower() in _TRUE_VALUES


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` above the working directory once per process.

    Existing environment variables keep precedence. Returns the resolved path
    of the loaded file, or ``None`` when no file was found.
    """

    global _dotenv_attempted, _dotenv_path
    with _dotenv_lock:
        if _dotenv_attempted:
            return _dotenv_path
        _dotenv_attempted = True
        found = find_dotenv(usecwd=True)
        if not found:
            return None
        load_dotenv(found, override=False)
        _dotenv_path = Path(found).resolve()
        return _dotenv_path


def _reset_dotenv_state_for_testing() -> None:
    global _dotenv_attempted, _dotenv_path
    with _dotenv_lock:
        _dotenv_attempted = False
        _dotenv_path = None


__all__ = [
    "DOTENV_ENV_VAR",
    "ENV_COLOURS",
    "ENV_DEBUG",
    "ENV_ID",
    "ENV_NO_COLOR",
    "LoggerSettings",
    "default_id",
    "enable_dotenv",
    "env_flag",
    "parse_flag",
    "resolve_settings",
    "should_use_dotenv",
]
