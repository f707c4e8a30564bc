from __future__ import annotations

import threading
from io import StringIO

from rich.console import Console

from lib_log_console.adapters.console.rich_console import RichConsoleAdapter
from lib_log_console.application.ports.console import ConsolePort


def test_rich_console_adapter_satisfies_console_port() -> None:
    assert isinstance(RichConsoleAdapter(), ConsolePort)


def test_rich_console_adapter_writes_plain_text(record_console: Console) -> None:
    adapter = RichConsoleAdapter(console=record_console)
    adapter.write("2025-09-30 12:00:00.000 \x1b[32mINFO   \x1b[0m svc | hello [not markup]")
    assert record_console.export_text() == "2025-09-30 12:00:00.000 INFO    svc | hello [not markup]\n"


def test_rich_console_adapter_keeps_colours_on_terminals() -> None:
    buffer = StringIO()
    console = Console(file=buffer, force_terminal=True, color_system="standard", width=200)
    RichConsoleAdapter(console=console).write("\x1b[31mERROR  \x1b[0m svc | boom")
    assert "\x1b[31m" in buffer.getvalue()
    assert "ERROR" in buffer.getvalue()


def test_rich_console_adapter_respects_no_color() -> None:
    buffer = StringIO()
    console = Console(file=buffer, force_terminal=True, no_color=True, width=200)
    RichConsoleAdapter(console=console).write("\x1b[31mERROR  \x1b[0m svc | boom")
    assert "\x1b[31m" not in buffer.getvalue()


def test_rich_console_adapter_does_not_wrap_long_lines() -> None:
    buffer = StringIO()
    console = Console(file=buffer, width=20)
    RichConsoleAdapter(console=console).write("x" * 50)
    assert buffer.getvalue() == "x" * 50 + "\n"


def test_concurrent_writes_stay_line_atomic(record_console: Console) -> None:
    adapter = RichConsoleAdapter(console=record_console)

    def produce(tag: str) -> None:
        for index in range(50):
            adapter.write(f"{tag}-{index:02d}-" + tag * 20)

    threads = [threading.Thread(target=produce, args=(tag,)) for tag in "abcd"]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    lines = record_console.export_text().splitlines()
    assert len(lines) == 200
    for line in lines:
        tag = line[0]
        assert line.endswith(tag * 20)


def test_default_adapter_writes_to_current_stdout(capsys) -> None:
    RichConsoleAdapter().write("captured line")
    assert capsys.readouterr().out == "captured line\n"


def test_verbatim_lines_skip_rich_rendering() -> None:
    buffer = StringIO()
    console = Console(file=buffer, width=10, no_color=True)
    RichConsoleAdapter(console=console).write("a\tb  [bold]\x1b[31mc\x1b[0m" + "x" * 20, verbatim=True)
    assert buffer.getvalue() == "a\tb  [bold]\x1b[31mc\x1b[0m" + "x" * 20 + "\n"
