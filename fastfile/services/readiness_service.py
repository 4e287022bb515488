"""Per-volume readiness cache for the Everything index."""

from __future__ import annotations

from threading import Lock
from typing import Callable, Dict


def volume_root(path: str | None) -> str | None:
    """Return the lower-cased drive identifier of *path*, or None when absent."""

    if not path:
        return None
    index = path.find(":")
    if index <= 0:
        return None
    root = path[:index].lstrip('" ').lower()
    return root or None


class ReadinessCache:
    """Write-once mapping of volume root to "index ready" flag.

    A root is probed the first time it is looked up and its answer is kept
    for the lifetime of the cache. The probe runs outside the lock so a slow
    Everything client does not stall lookups for other roots; two threads
    racing on the same new root may both probe, and the first answer stored
    wins.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, bool] = {}
        self._lock = Lock()

    def lookup(self, root: str, probe: Callable[[str], bool]) -> bool:
        key = root.lower()
        with self._lock:
            cached = self._entries.get(key)
        if cached is not None:
            return cached
        ready = bool(probe(key))
        with self._lock:
            return self._entries.setdefault(key, ready)

    def get(self, root: str) -> bool | None:
        with self._lock:
            return self._entries.get(root.lower())

    def snapshot(self) -> dict[str, bool]:
        with self._lock:
            return dict(self._entries)

    def __contains__(self, root: object) -> bool:
        if not isinstance(root, str):
            return False
        with self._lock:
            return root.lower() in self._entries
