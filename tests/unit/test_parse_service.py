from __future__ import annotations

from datetime import datetime

import pytest

from fastfile.errors import ParseError
from fastfile.services import parse_service


def test_parse_names_drops_empty_lines_and_keeps_order():
    output = "C:\\b\r\n\r\nC:\\a\nC:\\c\n\n"
    assert parse_service.parse_names(output) == ["C:\\b", "C:\\a", "C:\\c"]


def test_parse_names_empty_output():
    assert parse_service.parse_names("") == []


def test_parse_dates_splits_on_first_space():
    parsed = parse_service.parse_dates("132000000000000000 C:\\data\\a.txt\n")

    assert parsed == [(datetime.fromtimestamp(1555526400), "C:\\data\\a.txt")]


def test_parse_dates_keeps_spaces_in_path():
    parsed = parse_service.parse_dates("132000000000000000 C:\\My Files\\a b.txt")
    assert parsed[0][1] == "C:\\My Files\\a b.txt"


def test_filetime_epoch_maps_to_unix_epoch():
    assert parse_service.filetime_to_datetime(parse_service.EPOCH_DIFF) == datetime.fromtimestamp(0)


@pytest.mark.parametrize(
    "line",
    [
        "C:\\data\\a.txt",
        "abc C:\\data\\a.txt",
        "12.5 C:\\x",
        "1_000 C:\\x",
        "+5 C:\\x",
        "\u0661\u0662 C:\\x",
    ],
)
def test_parse_dates_rejects_malformed_lines(line):
    with pytest.raises(ParseError) as excinfo:
        parse_service.parse_dates(line)
    assert excinfo.value.line == line


def test_parse_sizes_reads_zero_padded_counts():
    output = "0000000012 C:\\a.txt\n0000001024 C:\\dir\\b.bin\n"
    assert parse_service.parse_sizes(output) == [(12, "C:\\a.txt"), (1024, "C:\\dir\\b.bin")]


def test_parse_sizes_rejects_missing_separator():
    with pytest.raises(ParseError):
        parse_service.parse_sizes("0000000012")


@pytest.mark.parametrize("name", ["C:\\data\\a\u2028b.txt", "C:\\data\\a\x85b.txt", "C:\\data\\a\x0cb.txt"])
def test_parse_names_only_breaks_on_cr_and_lf(name):
    assert parse_service.parse_names(f"{name}\r\nC:\\data\\c.txt\r\n") == [name, "C:\\data\\c.txt"]


def test_parse_sizes_keeps_unicode_line_breaks_in_paths():
    output = "0000000003 C:\\data\\a\u2029b.txt\n"
    assert parse_service.parse_sizes(output) == [(3, "C:\\data\\a\u2029b.txt")]
