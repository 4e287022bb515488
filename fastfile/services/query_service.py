"""Builders for Everything command-line query strings."""

from __future__ import annotations

from ..errors import ArgumentError
from ..text import Messages

DATE_FORMAT_FILETIME = 2
SIZE_FORMAT_BYTES = 1


def file_dir_flag(*, dir_only: bool, file_only: bool) -> str:
    if dir_only:
        return "-ad"
    if file_only:
        return "-a-d"
    return ""


def scope(path: str, *, parent: bool) -> str:
    """Return a `parent:` (children of) or `path:` (anywhere under) search term."""
    if '"' in path:
        raise ArgumentError(Messages.ERROR_PATH_QUOTE.format(path=path))
    keyword = "parent" if parent else "path"
    return f'{keyword}:"{path}"'


def _join(*parts: str) -> str:
    return " ".join(part for part in parts if part)


def names_query(
    path: str,
    *,
    parent: bool,
    dir_only: bool = False,
    file_only: bool = False,
    limit: int | None = None,
) -> str:
    return _join(
        file_dir_flag(dir_only=dir_only, file_only=file_only),
        scope(path, parent=parent),
        f"-n {limit}" if limit else "",
    )


def dates_query(
    path: str,
    *,
    parent: bool,
    dir_only: bool = False,
    file_only: bool = False,
) -> str:
    """Every output line is `<FILETIME> <path>` with the creation date."""
    return _join(
        file_dir_flag(dir_only=dir_only, file_only=file_only),
        f"-dc -date-format {DATE_FORMAT_FILETIME}",
        scope(path, parent=parent),
    )


def sizes_query(path: str, *, parent: bool) -> str:
    """Files only; sizes are printed as plain zero-padded byte counts."""
    return _join(
        f"-size -a-d -size-leading-zero -no-digit-grouping -size-format {SIZE_FORMAT_BYTES}",
        scope(path, parent=parent),
    )


def probe_query(root: str) -> str:
    """Minimal query telling whether anything is indexed under drive *root*."""
    return names_query(f"{root}:\\", parent=True, limit=1)
