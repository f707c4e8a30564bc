"""Rich-powered console adapter implementing :class:`ConsolePort`.

Purpose
-------
Write rendered log lines to standard output through Rich so colour support is
detected per terminal and ANSI codes embedded by formatters are honoured or
stripped accordingly.

Contents
--------
* :class:`RichConsoleAdapter` - default console used by
  :func:`lib_log_console.create_logger`.

System Role
-----------
Primary human-facing sink. Writes are serialised so concurrent log calls from
different threads never interleave within a line.
"""

from __future__ import annotations

from threading import Lock

from rich.console import Console
from rich.text import Text

from lib_log_console.application.ports.console import ConsolePort


class RichConsoleAdapter(ConsolePort):
    """Print pre-rendered lines with Rich, decoding embedded ANSI styling."""

    def __init__(
        self,
        *,
        console: Console | None = None,
        force_color: bool = False,
        no_color: bool = False,
    ) -> None:
        """Configure the adapter with an explicit console or colour overrides.

        Without ``console`` Rich resolves ``sys.stdout`` on every write, so
        redirected or captured streams are respected.
        """
        if console is not None:
            self._console = console
        else:
            self._console = Console(
                force_terminal=True if force_color else None,
                no_color=no_color,
                highlight=False,
            )
        self._lock = Lock()

    @property
    def console(self) -> Console:
        """Return the underlying Rich console."""

        return self._console

    def write(self, line: str, *, verbatim: bool = False) -> None:
        """Print ``line`` without wrapping or highlighting.

        ``verbatim`` lines bypass Rich rendering and go straight to the
        console's file, so tabs, spacing and escape sequences survive.

        Examples
        --------
        >>> from io import StringIO
        >>> console = Console(file=StringIO(), record=True, width=120)
        >>> adapter = RichConsoleAdapter(console=console)
        >>> adapter.write('\\x1b[32mINFO   \\x1b[0m svc | hello')
        >>> console.export_text()
        'INFO    svc | hello\\n'
        """
        if verbatim:
            with self._lock:
                stream = self._console.file
                stream.write(line + "\n")
                stream.flush()
            return
        text = Text.from_ansi(line)
        with self._lock:
            self._console.print(text, soft_wrap=True, highlight=False)


__all__ = ["RichConsoleAdapter"]
