"""Direct filesystem access used for fallback and verification."""

from __future__ import annotations

import os
import stat
from datetime import datetime
from typing import List, Tuple

from ..errors import NotFoundError


def _creation_timestamp(path: str) -> datetime:
    st = os.stat(path)
    created = getattr(st, "st_birthtime", None)
    if created is None:
        created = st.st_ctime
    return datetime.fromtimestamp(created)


def _scan(path: str, *, want_dirs: bool, recursive: bool) -> list[str]:
    results: list[str] = []
    pending = [path]
    while pending:
        current = pending.pop(0)
        with os.scandir(current) as entries:
            for entry in entries:
                matched = entry.is_dir() if want_dirs else entry.is_file()
                if matched:
                    results.append(entry.path)
                if recursive and entry.is_dir(follow_symlinks=False):
                    pending.append(entry.path)
    return results


class LocalFileSystem:
    """Thin wrapper over `os` answering the same questions as the index."""

    pathmod = os.path

    def directory_exists(self, path: str) -> bool:
        return os.path.isdir(path)

    def file_exists(self, path: str) -> bool:
        return os.path.isfile(path)

    def get_directories(self, path: str, recursive: bool = False) -> List[str]:
        return _scan(path, want_dirs=True, recursive=recursive)

    def get_files(self, path: str, recursive: bool = False) -> List[str]:
        return _scan(path, want_dirs=False, recursive=recursive)

    def get_directory_creation_time(self, path: str) -> datetime:
        if not os.path.isdir(path):
            raise NotFoundError(path)
        return _creation_timestamp(path)

    def get_file_creation_time(self, path: str) -> datetime:
        if not os.path.isfile(path):
            raise NotFoundError(path)
        return _creation_timestamp(path)

    def get_file_sizes(self, path: str, recursive: bool = False) -> List[Tuple[int, str]]:
        return [
            (os.stat(file_path).st_size, file_path)
            for file_path in self.get_files(path, recursive=recursive)
        ]

    def has_system_attribute(self, path: str) -> bool:
        attributes = getattr(os.stat(path), "st_file_attributes", 0)
        return bool(attributes & stat.FILE_ATTRIBUTE_SYSTEM)
