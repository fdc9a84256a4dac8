"""Minimal strict schemas for API payloads and YAML config."""

from __future__ import annotations

from typing import Any

from mensa.common.constants import PRICE_CLASSES
from mensa.common.errors import ConfigError, DecodeError, MensaError
from mensa.common.models import Canteen, Meal, Prices


def _assert_required_keys(
    obj: dict,
    required: set[str],
    ctx: str,
    error_cls: type[MensaError] = DecodeError,
) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise error_cls(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _require_mapping(value: Any, ctx: str, error_cls: type[MensaError] = DecodeError) -> dict:
    if not isinstance(value, dict):
        raise error_cls(f"{ctx} must be an object, got {type(value).__name__}")
    return value


def _require_int(value: Any, ctx: str) -> int:
    # bool is an int subclass but never a valid identifier
    if isinstance(value, bool) or not isinstance(value, int):
        raise DecodeError(f"{ctx} must be an integer, got {value!r}")
    if value < 0:
        raise DecodeError(f"{ctx} must not be negative, got {value}")
    return value


def _require_str(value: Any, ctx: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(f"{ctx} must be a string, got {value!r}")
    return value


def _optional_float(value: Any, ctx: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(f"{ctx} must be a number or null, got {value!r}")
    return float(value)


def _require_list(value: Any, ctx: str) -> list:
    if not isinstance(value, list):
        raise DecodeError(f"{ctx} must be an array, got {type(value).__name__}")
    return value


def _coordinates(value: Any, ctx: str) -> tuple[float, float] | None:
    if value is None:
        return None
    items = _require_list(value, ctx)
    if len(items) != 2:
        raise DecodeError(f"{ctx} must hold exactly two numbers, got {len(items)}")
    lat = _optional_float(items[0], f"{ctx}[0]")
    lon = _optional_float(items[1], f"{ctx}[1]")
    if lat is None or lon is None:
        raise DecodeError(f"{ctx} must not contain null")
    return (lat, lon)


def decode_canteen(obj: Any, ctx: str = "canteen") -> Canteen:
    data = _require_mapping(obj, ctx)
    _assert_required_keys(data, {"id", "name", "city", "address"}, ctx)
    return Canteen(
        id=_require_int(data["id"], f"{ctx}.id"),
        name=_require_str(data["name"], f"{ctx}.name"),
        city=_require_str(data["city"], f"{ctx}.city"),
        address=_require_str(data["address"], f"{ctx}.address"),
        coordinates=_coordinates(data.get("coordinates"), f"{ctx}.coordinates"),
    )


def decode_prices(obj: Any, ctx: str = "prices") -> Prices:
    data = _require_mapping(obj, ctx)
    values = {name: _optional_float(data.get(name), f"{ctx}.{name}") for name in PRICE_CLASSES}
    return Prices(**values)


def decode_meal(obj: Any, ctx: str = "meal") -> Meal:
    data = _require_mapping(obj, ctx)
    _assert_required_keys(data, {"id", "name", "category", "prices", "notes"}, ctx)
    notes = _require_list(data["notes"], f"{ctx}.notes")
    return Meal(
        id=_require_int(data["id"], f"{ctx}.id"),
        name=_require_str(data["name"], f"{ctx}.name"),
        category=_require_str(data["category"], f"{ctx}.category"),
        prices=decode_prices(data["prices"], f"{ctx}.prices"),
        notes=tuple(_require_str(note, f"{ctx}.notes[{idx}]") for idx, note in enumerate(notes)),
    )


def decode_canteens(payload: Any) -> list[Canteen]:
    items = _require_list(payload, "canteens payload")
    return [decode_canteen(item, f"canteens[{idx}]") for idx, item in enumerate(items)]


def decode_meals(payload: Any) -> list[Meal]:
    items = _require_list(payload, "meals payload")
    return [decode_meal(item, f"meals[{idx}]") for idx, item in enumerate(items)]


def _optional_timeout(value: Any, ctx: str) -> float | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ConfigError(f"{ctx} must be a positive number or null")
    return float(value)


def validate_client_config(cfg: Any, *, allow_unknown: bool = False) -> dict:
    cfg = _require_mapping(cfg, "client config", ConfigError)
    top_known = {"api", "http", "logging"}
    _assert_required_keys(cfg, {"api"}, "client config", ConfigError)
    _assert_no_unknown_keys(cfg, top_known, "client config", allow_unknown)

    api = _require_mapping(cfg["api"], "api", ConfigError)
    _assert_required_keys(api, {"base_url"}, "api", ConfigError)
    _assert_no_unknown_keys(api, {"base_url", "user_agent"}, "api", allow_unknown)
    if not isinstance(api["base_url"], str) or not api["base_url"].startswith(("http://", "https://")):
        raise ConfigError("api.base_url must be an http(s) URL")
    if "user_agent" in api and not isinstance(api["user_agent"], str):
        raise ConfigError("api.user_agent must be a string")

    http = _require_mapping(cfg.get("http") or {}, "http", ConfigError)
    _assert_no_unknown_keys(http, {"connect_timeout", "read_timeout"}, "http", allow_unknown)
    _optional_timeout(http.get("connect_timeout"), "http.connect_timeout")
    _optional_timeout(http.get("read_timeout"), "http.read_timeout")

    logging_cfg = _require_mapping(cfg.get("logging") or {}, "logging", ConfigError)
    _assert_no_unknown_keys(logging_cfg, {"level"}, "logging", allow_unknown)
    level = logging_cfg.get("level", "INFO")
    if str(level).upper() not in {"DEBUG", "INFO", "WARN", "WARNING", "ERROR"}:
        raise ConfigError(f"logging.level is not a known level: {level}")

    return cfg
