"""Helpers for formatting CLI output safely across terminals."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Sequence, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .text import Messages, Styles


def _encoding_supports(text: str, encoding: str | None) -> bool:
    if not encoding:
        return False
    try:
        text.encode(encoding)
    except (LookupError, UnicodeEncodeError):
        return False
    return True


def format_status_icon(passed: bool, console: Console | None = None) -> str:
    sample = "✓✗"
    encoding = console.encoding if console is not None else sys.stdout.encoding
    if _encoding_supports(sample, encoding):
        return "[green]✓[/green]" if passed else "[red]✗[/red]"
    return "[green]OK[/green]" if passed else "[red]X[/red]"


def format_timestamp(value: datetime) -> str:
    return value.isoformat(sep=" ", timespec="seconds")


def print_paths(console: Console, paths: Sequence[str]) -> None:
    for path in paths:
        console.print(escape(path), highlight=False, soft_wrap=True)


def build_sizes_table(entries: Sequence[Tuple[int, str]]) -> Table:
    table = Table(show_header=True, header_style=Styles.TABLE_HEADER, box=None)
    table.add_column(Messages.TABLE_HEADER_SIZE, justify="right")
    table.add_column(Messages.TABLE_HEADER_PATH, overflow="fold")
    for size, path in entries:
        table.add_row(str(size), escape(path))
    return table
