"""Parsers for the line-oriented output of the Everything client."""

from __future__ import annotations

import re
from datetime import datetime
from typing import List, Tuple

from ..errors import ParseError
from ..text import Messages

# 100ns ticks between 1601-01-01 and 1970-01-01.
EPOCH_DIFF = 116444736000000000
TICKS_PER_SECOND = 10_000_000

# Only CR and LF end a record; other Unicode line breaks are legal in file names.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _lines(output: str) -> list[str]:
    return [line for line in _LINE_BREAK.split(output) if line]


def parse_names(output: str) -> List[str]:
    """Return one absolute path per non-empty line."""
    return _lines(output)


def filetime_to_datetime(value: int) -> datetime:
    """Convert a Windows FILETIME to a naive local datetime."""
    return datetime.fromtimestamp((value - EPOCH_DIFF) / TICKS_PER_SECOND)


def _split_int_prefixed(line: str) -> tuple[int, str]:
    head, sep, rest = line.partition(" ")
    if not sep:
        raise ParseError(Messages.ERROR_PARSE_NO_SEPARATOR.format(line=line), line=line)
    if not (head.isascii() and head.isdigit()):
        raise ParseError(Messages.ERROR_PARSE_FIELD.format(line=line), line=line)
    return int(head), rest


def parse_dates(output: str) -> List[Tuple[datetime, str]]:
    results: list[tuple[datetime, str]] = []
    for line in _lines(output):
        ticks, path = _split_int_prefixed(line)
        try:
            stamp = filetime_to_datetime(ticks)
        except (OverflowError, OSError, ValueError) as exc:
            raise ParseError(
                Messages.ERROR_PARSE_FILETIME.format(line=line), line=line
            ) from exc
        results.append((stamp, path))
    return results


def parse_sizes(output: str) -> List[Tuple[int, str]]:
    return [_split_int_prefixed(line) for line in _lines(output)]
