"""Diagnostics for the Everything client and index readiness."""

from __future__ import annotations

import os
import shutil
from dataclasses import dataclass
from typing import Optional

from ..config import Config, config_file_path, resolve_es_path
from ..text import Messages


@dataclass
class DoctorCheckResult:
    """Result of a single doctor check."""

    name: str
    passed: bool
    message: str
    detail: str | None = None


def find_command_on_path(command: str) -> Optional[str]:
    """Return the resolved path for *command* if it is a file or on PATH."""

    if os.path.isfile(command):
        return os.path.abspath(command)
    return shutil.which(command)


def check_client_on_path(es_path: str | None) -> DoctorCheckResult:
    """Check that the Everything command-line client can be located."""
    executable = resolve_es_path(es_path)
    path = find_command_on_path(executable)
    if path:
        return DoctorCheckResult(
            name="Client",
            passed=True,
            message=Messages.DOCTOR_CLIENT_FOUND.format(path=path),
        )
    return DoctorCheckResult(
        name="Client",
        passed=False,
        message=Messages.DOCTOR_CLIENT_MISSING.format(name=executable),
        detail=Messages.DOCTOR_CLIENT_MISSING_DETAIL,
    )


def check_config_exists() -> DoctorCheckResult:
    """Check if config file exists."""
    config_file = config_file_path()
    if config_file.exists():
        return DoctorCheckResult(
            name="Config",
            passed=True,
            message=Messages.DOCTOR_CONFIG_EXISTS.format(path=config_file),
        )
    return DoctorCheckResult(
        name="Config",
        passed=True,
        message=Messages.DOCTOR_CONFIG_DEFAULT,
        detail=str(config_file),
    )


def check_drive_ready(config: Config, drive: str | None) -> DoctorCheckResult:
    """Probe the index for *drive* with a fresh, isolated context."""
    from ..api import FastFile

    if not config.enabled:
        return DoctorCheckResult(
            name="Index",
            passed=False,
            message=Messages.DOCTOR_INDEX_DISABLED,
        )
    if not drive:
        return DoctorCheckResult(
            name="Index",
            passed=True,
            message=Messages.DOCTOR_DRIVE_SKIPPED,
        )
    label = drive.strip().rstrip(":\\/").upper()
    client = FastFile.from_config(config)
    ready = client.is_ready(drive)
    error = client.context.last_error
    if error is not None:
        return DoctorCheckResult(
            name="Index",
            passed=False,
            message=Messages.DOCTOR_DRIVE_FAILED.format(drive=label),
            detail=str(error),
        )
    return DoctorCheckResult(
        name="Index",
        passed=ready,
        message=(
            Messages.DOCTOR_DRIVE_READY if ready else Messages.DOCTOR_DRIVE_NOT_READY
        ).format(drive=label),
    )


def run_all_doctor_checks(config: Config, *, drive: str | None = None) -> list[DoctorCheckResult]:
    """Run every diagnostic check in display order."""
    return [
        check_client_on_path(config.es_path),
        check_config_exists(),
        check_drive_ready(config, drive),
    ]
