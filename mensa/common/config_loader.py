"""Client configuration loading and validation."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mensa.common.constants import API_BASE_URL, USER_AGENT
from mensa.common.errors import ConfigError
from mensa.common.fs import read_yaml
from mensa.common.schema import validate_client_config


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = API_BASE_URL
    user_agent: str = USER_AGENT
    connect_timeout: float | None = None
    read_timeout: float | None = None
    log_level: str = "INFO"


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def _load_yaml_with_overlay(path: Path, overlay_path: Path | None) -> dict:
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    base = read_yaml(path)
    if overlay_path is None or not overlay_path.exists():
        return base
    overlay = read_yaml(overlay_path)
    return _deep_merge(base, overlay)


def load_client_config(
    path: Path,
    *,
    overlay_path: Path | None = None,
    allow_unknown: bool = False,
) -> ClientConfig:
    cfg = validate_client_config(_load_yaml_with_overlay(path, overlay_path), allow_unknown=allow_unknown)
    http = cfg.get("http") or {}
    logging_cfg = cfg.get("logging") or {}
    return ClientConfig(
        base_url=cfg["api"]["base_url"].rstrip("/"),
        user_agent=cfg["api"].get("user_agent", USER_AGENT),
        connect_timeout=http.get("connect_timeout"),
        read_timeout=http.get("read_timeout"),
        log_level=str(logging_cfg.get("level", "INFO")).upper(),
    )
