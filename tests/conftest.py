from __future__ import annotations

import re
from datetime import datetime, timezone
from io import StringIO
from typing import Any, Callable

import pytest
from rich.console import Console

from lib_log_console import EventRegistry, Logger, create_logger
from lib_log_console import config as log_config

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


class RecordingConsole:
    """Console port double keeping every written line."""

    def __init__(self) -> None:
        self.lines: list[str] = []
        self.verbatim: list[bool] = []

    def write(self, line: str, *, verbatim: bool = False) -> None:
        self.lines.append(line)
        self.verbatim.append(verbatim)

    @property
    def plain(self) -> list[str]:
        return [strip_ansi(line) for line in self.lines]


class FixedClock:
    def __init__(self, moment: datetime | None = None) -> None:
        self.moment = moment or datetime(2025, 9, 30, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.moment


@pytest.fixture(autouse=True)
def _clean_logging_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        log_config.ENV_DEBUG,
        log_config.ENV_ID,
        log_config.ENV_COLOURS,
        log_config.ENV_NO_COLOR,
        log_config.DOTENV_ENV_VAR,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def record_console() -> Console:
    return Console(file=StringIO(), record=True, width=200)


@pytest.fixture
def registry() -> EventRegistry:
    return EventRegistry()


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def make_logger(registry: EventRegistry, console: RecordingConsole, clock: FixedClock) -> Callable[..., Logger]:
    def _make(**options: Any) -> Logger:
        options.setdefault("registry", registry)
        options.setdefault("console", console)
        options.setdefault("clock", clock)
        return create_logger(**options)

    return _make
