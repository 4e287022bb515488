"""Global configuration management for fastfile."""

from __future__ import annotations

import json
import os
from contextlib import contextmanager
from contextvars import ContextVar
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from .text import Messages

DEFAULT_CONFIG_DIR = Path(os.path.expanduser("~")) / ".fastfile"
CONFIG_DIR = DEFAULT_CONFIG_DIR
CONFIG_FILE = CONFIG_DIR / "config.json"
_CONFIG_DIR_OVERRIDE: ContextVar[Path | None] = ContextVar(
    "fastfile_config_dir_override",
    default=None,
)
DEFAULT_ES_EXECUTABLE = "es.exe" if os.name == "nt" else "es"
ENV_ES_PATH = "FASTFILE_ES_PATH"
ENV_VERIFY = "FASTFILE_VERIFY"

_TRUE_TOKENS = {"true", "1", "yes", "on"}
_FALSE_TOKENS = {"false", "0", "no", "off"}


@dataclass
class Config:
    es_path: str | None = None
    verify: bool = False
    enabled: bool = True


def _resolve_config_dir() -> Path:
    override = _CONFIG_DIR_OVERRIDE.get()
    return override if override is not None else CONFIG_DIR


def _resolve_config_file() -> Path:
    override = _CONFIG_DIR_OVERRIDE.get()
    if override is not None:
        return override / "config.json"
    return CONFIG_FILE


def config_file_path() -> Path:
    """Return the config file in effect for the current context."""
    return _resolve_config_file()


@contextmanager
def config_dir_context(path: Path | str | None):
    """Temporarily override the config directory for the current context."""

    if path is None:
        yield
        return
    dir_path = Path(path).expanduser().resolve()
    if dir_path.exists() and not dir_path.is_dir():
        raise NotADirectoryError(f"Path is not a directory: {dir_path}")
    token = _CONFIG_DIR_OVERRIDE.set(dir_path)
    try:
        yield
    finally:
        _CONFIG_DIR_OVERRIDE.reset(token)


def set_config_dir(path: Path | str | None) -> None:
    global CONFIG_DIR, CONFIG_FILE
    if path is None:
        CONFIG_DIR = DEFAULT_CONFIG_DIR
    else:
        dir_path = Path(path).expanduser().resolve()
        if dir_path.exists() and not dir_path.is_dir():
            raise NotADirectoryError(f"Path is not a directory: {dir_path}")
        CONFIG_DIR = dir_path
    CONFIG_FILE = CONFIG_DIR / "config.json"


def load_config() -> Config:
    config_file = _resolve_config_file()
    if not config_file.exists():
        return Config()
    raw = json.loads(config_file.read_text(encoding="utf-8"))
    return config_from_json(raw)


def save_config(config: Config) -> None:
    config_dir = _resolve_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    data: Dict[str, Any] = {}
    if config.es_path:
        data["es_path"] = config.es_path
    data["verify"] = bool(config.verify)
    data["enabled"] = bool(config.enabled)
    config_file = _resolve_config_file()
    config_file.write_text(
        json.dumps(data, ensure_ascii=False, indent=2),
        encoding="utf-8",
    )


def config_from_json(
    payload: str | Mapping[str, object], *, base: Config | None = None
) -> Config:
    """Return a Config from a JSON string or mapping without saving it."""
    data = _coerce_config_payload(payload)
    config = Config() if base is None else Config(
        es_path=base.es_path,
        verify=base.verify,
        enabled=base.enabled,
    )
    if "es_path" in data:
        config.es_path = _coerce_optional_str(data["es_path"], "es_path")
    if "verify" in data:
        config.verify = coerce_bool(data["verify"], "verify")
    if "enabled" in data:
        config.enabled = coerce_bool(data["enabled"], "enabled")
    return config


def set_es_path(value: str | None) -> None:
    config = load_config()
    config.es_path = (value or "").strip() or None
    save_config(config)


def set_verify(value: bool) -> None:
    config = load_config()
    config.verify = bool(value)
    save_config(config)


def set_enabled(value: bool) -> None:
    config = load_config()
    config.enabled = bool(value)
    save_config(config)


def resolve_es_path(configured: str | None) -> str:
    """Return the Everything client executable from config, environment or default."""

    if configured and configured.strip():
        return configured.strip()
    env_value = (os.getenv(ENV_ES_PATH) or "").strip()
    if env_value:
        return env_value
    return DEFAULT_ES_EXECUTABLE


def resolve_verify(configured: bool) -> bool:
    """Return True when verification is enabled in config or the environment."""

    if configured:
        return True
    raw = (os.getenv(ENV_VERIFY) or "").strip().lower()
    return raw in _TRUE_TOKENS


def coerce_bool(value: object, field: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        cleaned = value.strip().lower()
        if cleaned in _TRUE_TOKENS:
            return True
        if cleaned in _FALSE_TOKENS:
            return False
    raise ValueError(Messages.ERROR_CONFIG_VALUE_INVALID.format(field=field))


def _coerce_config_payload(payload: str | Mapping[str, object]) -> Mapping[str, object]:
    if isinstance(payload, str):
        try:
            data = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise ValueError(Messages.ERROR_CONFIG_JSON_INVALID) from exc
    elif isinstance(payload, Mapping):
        data = dict(payload)
    else:
        raise ValueError(Messages.ERROR_CONFIG_JSON_INVALID)
    if not isinstance(data, Mapping):
        raise ValueError(Messages.ERROR_CONFIG_JSON_INVALID)
    return data


def _coerce_optional_str(value: object, field: str) -> str | None:
    if value is None:
        return None
    if isinstance(value, str):
        cleaned = value.strip()
        return cleaned or None
    raise ValueError(Messages.ERROR_CONFIG_VALUE_INVALID.format(field=field))
