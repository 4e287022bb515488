"""Index availability state shared by facade instances."""

from __future__ import annotations

import logging
from typing import Callable

from ..text import Messages
from .readiness_service import ReadinessCache

logger = logging.getLogger(__name__)


class IndexContext:
    """Owns the availability switch and the readiness cache.

    ``available`` starts as *enabled* and only ever moves from True to False.
    It is read without locking; a thread that misses a concurrent downgrade
    makes at most one more transport attempt before falling back as well.
    """

    def __init__(self, *, enabled: bool = True) -> None:
        self.available = bool(enabled)
        self.readiness = ReadinessCache()
        self.last_error: BaseException | None = None

    def is_ready(self, root: str | None, probe: Callable[[str], bool]) -> bool:
        if not self.available or not root:
            return False
        return self.readiness.lookup(root, probe)

    def disable(self, exc: BaseException) -> None:
        logger.warning(Messages.LOG_FALLBACK, exc)
        self.last_error = exc
        self.available = False
