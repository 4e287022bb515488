"""fastfile package initialization."""

from __future__ import annotations

from .api import (
    FastFile,
    SearchOption,
    default_client,
    directory_exists,
    directory_has_system_attribute,
    file_exists,
    get_directories,
    get_directory_creation_time,
    get_file_creation_time,
    get_file_sizes,
    get_files,
    reset_default_context,
    set_config_dir,
)
from .errors import (
    ArgumentError,
    DiscrepancyError,
    FastFileError,
    NotFoundError,
    ParseError,
    TransportError,
)
from .services.context_service import IndexContext

__all__ = [
    "__version__",
    "ArgumentError",
    "DiscrepancyError",
    "FastFile",
    "FastFileError",
    "IndexContext",
    "NotFoundError",
    "ParseError",
    "SearchOption",
    "TransportError",
    "default_client",
    "directory_exists",
    "directory_has_system_attribute",
    "file_exists",
    "get_directories",
    "get_directory_creation_time",
    "get_file_creation_time",
    "get_file_sizes",
    "get_files",
    "get_version",
    "reset_default_context",
    "set_config_dir",
]

__version__ = "0.1.0"


def get_version() -> str:
    """Return the current package version."""
    return __version__
