"""Render a handle's call log as a rich panel for quick review."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from spystub.interceptor import Interceptor


def _format_kwargs(kwargs: Mapping[str, Any]) -> str:
    return ", ".join(f"{key}={value!r}" for key, value in kwargs.items())


def render_call_log(handle: Interceptor) -> Panel:
    """Return a panel listing every recorded call of ``handle`` in order."""

    records = handle.calls
    noun = "call" if len(records) == 1 else "calls"
    title = f"{handle.name}: {len(records)} {noun}"

    if not records:
        return Panel(Text("No calls recorded", style="dim"), title=title, expand=False)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right")
    table.add_column("Args", overflow="fold")
    table.add_column("Kwargs", overflow="fold")

    for index, record in enumerate(records, start=1):
        args = ", ".join(repr(value) for value in record.args)
        table.add_row(str(index), args, _format_kwargs(record.kwargs))

    return Panel(table, title=title, expand=False)


def print_call_log(handle: Interceptor, console: Console | None = None) -> None:
    """Render and print the call log of ``handle`` to the provided console."""

    output_console = console or Console(force_terminal=False)
    output_console.print(render_call_log(handle))
