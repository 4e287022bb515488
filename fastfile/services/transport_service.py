"""Process transport for the Everything command-line client."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from typing import Protocol

from dotenv import load_dotenv

from ..config import resolve_es_path
from ..errors import TransportError
from ..text import Messages

logger = logging.getLogger(__name__)


class QueryTransport(Protocol):
    def run(self, query: str) -> str:
        ...


class EverythingTransport:
    """Run `es.exe` queries synchronously and return their standard output."""

    def __init__(self, executable: str | None = None) -> None:
        load_dotenv()
        self.executable = resolve_es_path(executable)

    def build_command(self, query: str) -> str | list[str]:
        if os.name == "nt":
            # es.exe parses its own command line; quoted scopes must reach it verbatim.
            return f'"{self.executable}" {query}'
        # Backslashes are path separators here, never escapes (`parent:"c:\"`).
        return [self.executable, *shlex.split(query.replace("\\", "\\\\"))]

    def run(self, query: str) -> str:
        logger.debug(Messages.LOG_QUERY, query)
        try:
            completed = subprocess.run(
                self.build_command(query),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.DEVNULL,
                check=False,
                text=True,
                encoding="utf-8",
                errors="replace",
                creationflags=getattr(subprocess, "CREATE_NO_WINDOW", 0),
            )
        except OSError as exc:
            raise TransportError(
                Messages.ERROR_TRANSPORT_START.format(
                    executable=self.executable,
                    reason=str(exc),
                )
            ) from exc
        if completed.returncode != 0:
            raise TransportError(
                Messages.ERROR_TRANSPORT_EXIT.format(code=completed.returncode),
                exit_code=int(completed.returncode),
            )
        return completed.stdout or ""
