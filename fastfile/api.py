"""Public Python API for fastfile."""

from __future__ import annotations

import os
from datetime import datetime, timedelta
from enum import Enum
from pathlib import Path
from threading import Lock
from typing import Any, Callable, List, Mapping, Sequence, Tuple, TypeVar

from . import config as config_module
from .config import Config, config_from_json, load_config, resolve_verify
from .errors import (
    ArgumentError,
    DiscrepancyError,
    NotFoundError,
    ParseError,
    TransportError,
)
from .services.context_service import IndexContext
from .services.filesystem_service import LocalFileSystem
from .services.parse_service import parse_dates, parse_names, parse_sizes
from .services.query_service import dates_query, names_query, probe_query, sizes_query
from .services.readiness_service import volume_root
from .services.transport_service import EverythingTransport, QueryTransport
from .text import Messages

T = TypeVar("T")

INDEX_SEPARATOR = "\\"
VERIFY_TIME_TOLERANCE = timedelta(seconds=2)
# Direct-side errors that mean "nothing there" rather than a failure.
_MISSING = (FileNotFoundError, NotADirectoryError)


class SearchOption(str, Enum):
    TOP_DIRECTORY_ONLY = "top"
    ALL_DIRECTORIES = "all"


def _coerce_recursive(value: object) -> bool:
    if isinstance(value, SearchOption):
        return value is SearchOption.ALL_DIRECTORIES
    if isinstance(value, bool):
        return value
    raise ArgumentError(Messages.ERROR_SEARCH_OPTION.format(value=value))


def _trim(path: str) -> str:
    return path.rstrip("\\/") or path


def _same_path(left: str, right: str) -> bool:
    return _trim(left).casefold() == _trim(right).casefold()


def _same_listing(left: Sequence[str], right: Sequence[str]) -> bool:
    return sorted(p.casefold() for p in left) == sorted(p.casefold() for p in right)


def _same_sizes(left: Sequence[Tuple[int, str]], right: Sequence[Tuple[int, str]]) -> bool:
    return sorted((s, p.casefold()) for s, p in left) == sorted(
        (s, p.casefold()) for s, p in right
    )


def _same_time(left: datetime, right: datetime) -> bool:
    return abs(left - right) <= VERIFY_TIME_TOLERANCE


def _same_value(left: Any, right: Any) -> bool:
    return left == right


class FastFile:
    """Answer filesystem metadata queries from the Everything index when it can.

    Every operation canonicalizes its path, decides once whether the path's
    drive is served by the index, and otherwise asks the filesystem directly.
    A transport or parse failure while using the index disables the index for
    the whole :class:`IndexContext` and the same call is answered directly.
    ``NotFoundError`` and ``ArgumentError`` are never swallowed.

    With ``verify`` enabled every indexed answer is compared with the direct
    answer and a :class:`DiscrepancyError` is raised when they differ.
    """

    def __init__(
        self,
        *,
        context: IndexContext | None = None,
        transport: QueryTransport | None = None,
        filesystem: LocalFileSystem | None = None,
        verify: bool | None = None,
    ) -> None:
        self.context = context if context is not None else IndexContext()
        self.transport = transport if transport is not None else EverythingTransport()
        self.filesystem = filesystem if filesystem is not None else LocalFileSystem()
        self.verify = resolve_verify(False) if verify is None else bool(verify)

    @classmethod
    def from_config(
        cls,
        config: Config | Mapping[str, object] | str | None = None,
        *,
        context: IndexContext | None = None,
    ) -> "FastFile":
        """Build a facade from persisted (or supplied) configuration.

        A JSON string or mapping is applied on top of the persisted config
        without saving it.
        """
        if config is None:
            effective = load_config()
        elif isinstance(config, Config):
            effective = config
        else:
            try:
                effective = config_from_json(config, base=load_config())
            except ValueError as exc:
                raise ArgumentError(str(exc)) from exc
        if context is None:
            context = IndexContext(enabled=effective.enabled)
        return cls(
            context=context,
            transport=EverythingTransport(effective.es_path),
            verify=resolve_verify(effective.verify),
        )

    # -- routing ---------------------------------------------------------

    def _full_path(self, path: object) -> str:
        if path is None:
            raise ArgumentError(Messages.ERROR_PATH_NONE)
        try:
            raw = os.fspath(path)  # type: ignore[arg-type]
        except TypeError as exc:
            raise ArgumentError(
                Messages.ERROR_PATH_TYPE.format(type=type(path).__name__)
            ) from exc
        if not isinstance(raw, str):
            raise ArgumentError(Messages.ERROR_PATH_TYPE.format(type=type(raw).__name__))
        if not raw.strip():
            raise ArgumentError(Messages.ERROR_PATH_EMPTY)
        if "\0" in raw:
            raise ArgumentError(Messages.ERROR_PATH_NUL.format(path=raw))
        return self.filesystem.pathmod.abspath(raw)

    def _probe(self, root: str) -> bool:
        return bool(parse_names(self.transport.run(probe_query(root))))

    def is_ready(self, root: str | None) -> bool:
        """Return whether drive *root* (``"C"`` or any path on it) is indexed."""
        key = volume_root(root)
        if key is None and root:
            letter = root.strip()
            if len(letter) == 1 and letter.isalpha():
                key = letter.lower()
        try:
            return self.context.is_ready(key, self._probe)
        except (TransportError, ParseError) as exc:
            self.context.disable(exc)
            return False

    def _dispatch(
        self,
        operation: str,
        full_path: str,
        indexed: Callable[[], T],
        direct: Callable[[], T],
        same: Callable[[Any, Any], bool],
    ) -> T:
        if self.is_ready(full_path):
            try:
                result = indexed()
            except NotFoundError as exc:
                if self.verify:
                    self._verify(operation, full_path, exc, direct, same)
                raise
            except (TransportError, ParseError) as exc:
                self.context.disable(exc)
            else:
                if self.verify:
                    self._verify(operation, full_path, result, direct, same)
                return result
        return direct()

    def _verify(
        self,
        operation: str,
        full_path: str,
        indexed: Any,
        direct: Callable[[], Any],
        same: Callable[[Any, Any], bool],
    ) -> None:
        try:
            truth: Any = direct()
        except _MISSING as exc:
            truth = exc
        indexed_missing = isinstance(indexed, _MISSING)
        direct_missing = isinstance(truth, _MISSING)
        if indexed_missing or direct_missing:
            matches = indexed_missing and direct_missing
        else:
            matches = same(indexed, truth)
        if not matches:
            raise DiscrepancyError(operation, full_path, indexed, truth)

    # -- index queries -----------------------------------------------------

    def _names(self, path: str, **kwargs: Any) -> List[str]:
        return parse_names(self.transport.run(names_query(path, **kwargs)))

    def _exists(self, path: str, *, dir_only: bool) -> bool:
        names = self._names(path, parent=False, dir_only=dir_only, file_only=not dir_only)
        return any(_same_path(name, path) for name in names)

    def _creation_time(self, path: str, *, dir_only: bool) -> datetime:
        dates = parse_dates(
            self.transport.run(
                dates_query(path, parent=False, dir_only=dir_only, file_only=not dir_only)
            )
        )
        for stamp, name in dates:
            if _same_path(name, path):
                return stamp
        raise NotFoundError(path)

    def _anchor(self, full_path: str, recursive: bool) -> Tuple[str, bool]:
        if recursive:
            # Trailing separator keeps the anchor itself out of `path:` matches.
            return _trim(full_path) + INDEX_SEPARATOR, False
        return full_path, True

    def _listing(self, full_path: str, recursive: bool, *, dir_only: bool) -> List[str]:
        anchor, parent = self._anchor(full_path, recursive)
        names = self._names(anchor, parent=parent, dir_only=dir_only, file_only=not dir_only)
        if recursive:
            names = [name for name in names if not _same_path(name, full_path)]
        return names

    # -- public operations -------------------------------------------------

    def directory_exists(self, path: str | os.PathLike[str]) -> bool:
        full = _trim(self._full_path(path))
        return self._dispatch(
            "directory_exists",
            full,
            lambda: self._exists(full, dir_only=True),
            lambda: self.filesystem.directory_exists(full),
            _same_value,
        )

    def file_exists(self, path: str | os.PathLike[str]) -> bool:
        full = self._full_path(path)
        return self._dispatch(
            "file_exists",
            full,
            lambda: self._exists(full, dir_only=False),
            lambda: self.filesystem.file_exists(full),
            _same_value,
        )

    def get_directories(
        self,
        path: str | os.PathLike[str],
        recursive: bool | SearchOption = False,
    ) -> List[str]:
        full = self._full_path(path)
        deep = _coerce_recursive(recursive)
        return self._dispatch(
            "get_directories",
            full,
            lambda: self._listing(full, deep, dir_only=True),
            lambda: self.filesystem.get_directories(full, recursive=deep),
            _same_listing,
        )

    def get_files(
        self,
        path: str | os.PathLike[str],
        recursive: bool | SearchOption = False,
    ) -> List[str]:
        full = self._full_path(path)
        deep = _coerce_recursive(recursive)
        return self._dispatch(
            "get_files",
            full,
            lambda: self._listing(full, deep, dir_only=False),
            lambda: self.filesystem.get_files(full, recursive=deep),
            _same_listing,
        )

    def get_directory_creation_time(self, path: str | os.PathLike[str]) -> datetime:
        full = _trim(self._full_path(path))
        return self._dispatch(
            "get_directory_creation_time",
            full,
            lambda: self._creation_time(full, dir_only=True),
            lambda: self.filesystem.get_directory_creation_time(full),
            _same_time,
        )

    def get_file_creation_time(self, path: str | os.PathLike[str]) -> datetime:
        full = self._full_path(path)
        return self._dispatch(
            "get_file_creation_time",
            full,
            lambda: self._creation_time(full, dir_only=False),
            lambda: self.filesystem.get_file_creation_time(full),
            _same_time,
        )

    def get_file_sizes(
        self,
        path: str | os.PathLike[str],
        recursive: bool | SearchOption = False,
    ) -> List[Tuple[int, str]]:
        """Return ``(size_in_bytes, path)`` for the files below directory *path*."""
        full = self._full_path(path)
        deep = _coerce_recursive(recursive)

        def indexed() -> List[Tuple[int, str]]:
            anchor, parent = self._anchor(full, deep)
            return parse_sizes(self.transport.run(sizes_query(anchor, parent=parent)))

        return self._dispatch(
            "get_file_sizes",
            full,
            indexed,
            lambda: self.filesystem.get_file_sizes(full, recursive=deep),
            _same_sizes,
        )

    def directory_has_system_attribute(self, path: str | os.PathLike[str]) -> bool:
        # The index does not report attributes; always answered directly.
        return self.filesystem.has_system_attribute(self._full_path(path))


_DEFAULT_CLIENT: FastFile | None = None
_DEFAULT_LOCK = Lock()


def default_client() -> FastFile:
    """Return the process-wide facade, creating it from config on first use."""
    global _DEFAULT_CLIENT
    with _DEFAULT_LOCK:
        if _DEFAULT_CLIENT is None:
            _DEFAULT_CLIENT = FastFile.from_config()
        return _DEFAULT_CLIENT


def reset_default_context(client: FastFile | None = None) -> None:
    """Drop (or replace) the process-wide facade and its availability state."""
    global _DEFAULT_CLIENT
    with _DEFAULT_LOCK:
        _DEFAULT_CLIENT = client


def set_config_dir(path: Path | str | None) -> None:
    """Point fastfile at another config directory (``None`` restores the default).

    The process-wide facade is dropped so the next call reads the new config.
    """
    config_module.set_config_dir(path)
    reset_default_context()


def directory_exists(path: str | os.PathLike[str]) -> bool:
    return default_client().directory_exists(path)


def file_exists(path: str | os.PathLike[str]) -> bool:
    return default_client().file_exists(path)


def get_directories(
    path: str | os.PathLike[str], recursive: bool | SearchOption = False
) -> List[str]:
    return default_client().get_directories(path, recursive)


def get_files(
    path: str | os.PathLike[str], recursive: bool | SearchOption = False
) -> List[str]:
    return default_client().get_files(path, recursive)


def get_directory_creation_time(path: str | os.PathLike[str]) -> datetime:
    return default_client().get_directory_creation_time(path)


def get_file_creation_time(path: str | os.PathLike[str]) -> datetime:
    return default_client().get_file_creation_time(path)


def get_file_sizes(
    path: str | os.PathLike[str], recursive: bool | SearchOption = False
) -> List[Tuple[int, str]]:
    return default_client().get_file_sizes(path, recursive)


def directory_has_system_attribute(path: str | os.PathLike[str]) -> bool:
    return default_client().directory_has_system_attribute(path)
