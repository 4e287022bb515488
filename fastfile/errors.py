"""Exception hierarchy shared by the fastfile facade and its services."""

from __future__ import annotations

import errno
import os
from typing import Any

from .text import Messages


class FastFileError(Exception):
    """Base class for every error raised by fastfile."""


class ArgumentError(FastFileError, ValueError):
    """Raised for a malformed path or an unsupported enumeration mode."""


class TransportError(FastFileError):
    """Raised when the Everything client cannot be started or exits non-zero."""

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class ParseError(FastFileError, ValueError):
    """Raised when a line of index output does not have the expected shape."""

    def __init__(self, message: str, *, line: str | None = None) -> None:
        super().__init__(message)
        self.line = line


class NotFoundError(FastFileError, FileNotFoundError):
    """Raised when a single-result lookup finds nothing for *path*."""

    def __init__(self, path: str) -> None:
        super().__init__(errno.ENOENT, os.strerror(errno.ENOENT), path)


class DiscrepancyError(FastFileError, AssertionError):
    """Raised in verification mode when the index disagrees with the filesystem."""

    def __init__(self, operation: str, path: str, indexed: Any, direct: Any) -> None:
        super().__init__(
            Messages.ERROR_DISCREPANCY.format(
                operation=operation,
                path=path,
                indexed=indexed,
                direct=direct,
            )
        )
        self.operation = operation
        self.path = path
        self.indexed = indexed
        self.direct = direct
