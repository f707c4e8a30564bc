"""Console port describing the line-oriented output contract.

Purpose
-------
Define the abstraction the logger writes rendered lines through, letting the
logger depend on a narrow protocol instead of a concrete terminal library.

Contents
--------
* :class:`ConsolePort` – runtime-checkable protocol with a single ``write``
  method.

System Role
-----------
Clarifies the output boundary so adapters (e.g. Rich) or test doubles can plug
in without the logger knowing about streams or colour systems.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ConsolePort(Protocol):
    """Write one rendered line (which may carry ANSI colour codes)."""

    def write(self, line: str, *, verbatim: bool = False) -> None:
        """Emit ``line`` followed by a newline; failures propagate.

        ``verbatim`` lines (produced by custom formatters) must reach the
        stream byte for byte, without styling or tab expansion.
        """


__all__ = ["ConsolePort"]
