"""Distribution metadata shown by the CLI banner."""

from __future__ import annotations

import sys
from typing import Callable

name = "lib_log_console"
title = "Leveled console logger with immutable configuration and event subscribers"
version = "1.0.0"
homepage = "https://pypi.org/project/lib_log_console/"
author = "lib_log_console maintainers"
shell_command = "lib_log_console"


def print_info(writer: Callable[[str], None] | None = None) -> None:
    """Emit the metadata banner line by line through ``writer``.

    Examples
    --------
    >>> lines = []
    >>> print_info(writer=lines.append)
    >>> lines[0]
    'Info for lib_log_console:\\n'
    """

    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("shell_command", shell_command),
    ]
    emit = writer if writer is not None else sys.stdout.write
    width = max(len(label) for label, _ in fields)
    emit(f"Info for {name}:\n")
    emit("\n")
    for label, value in fields:
        emit(f"    {label:<{width}} = {value}\n")
