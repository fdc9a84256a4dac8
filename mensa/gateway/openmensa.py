"""Fetch gateway for the OpenMensa v2 canteen and meal endpoints."""

from __future__ import annotations

import logging
import time
from datetime import date
from typing import Any, Callable, TypeVar

from mensa.common.constants import API_BASE_URL, CANTEENS_PATH, MEALS_PATH_TEMPLATE
from mensa.common.errors import FetchError
from mensa.common.http import HttpClient
from mensa.common.logging import log_event
from mensa.common.models import Canteen, Meal
from mensa.common.schema import decode_canteens, decode_meals
from mensa.common.time_utils import format_day

logger = logging.getLogger(__name__)

T = TypeVar("T")


def canteens_url(base_url: str = API_BASE_URL) -> str:
    return f"{base_url.rstrip('/')}{CANTEENS_PATH}"


def meals_url(canteen_id: int, day: date | str, base_url: str = API_BASE_URL) -> str:
    path = MEALS_PATH_TEMPLATE.format(canteen_id=int(canteen_id), date=format_day(day))
    return f"{base_url.rstrip('/')}{path}"


def _fetch_list(
    url: str,
    decode: Callable[[Any], list[T]],
    http_client: HttpClient | None,
    **log_fields: Any,
) -> list[T]:
    started = time.monotonic()
    owns_client = http_client is None
    client = http_client or HttpClient()
    try:
        records = decode(client.get_json(url))
    except FetchError as exc:
        log_event(
            logger,
            f"fetch failed: {exc}",
            level=logging.WARNING,
            event="FETCH_FAIL",
            status="error",
            url=url,
            duration_ms=int((time.monotonic() - started) * 1000),
            error_code=exc.error_code,
            **log_fields,
        )
        raise
    finally:
        if owns_client:
            client.close()

    log_event(
        logger,
        "fetch complete",
        event="FETCH_END",
        status="ok",
        url=url,
        duration_ms=int((time.monotonic() - started) * 1000),
        rows_out=len(records),
        **log_fields,
    )
    return records


def _base_url(http_client: HttpClient | None) -> str:
    if http_client is None:
        return API_BASE_URL
    return getattr(http_client, "base_url", API_BASE_URL)


def fetch_all_canteens(http_client: HttpClient | None = None) -> list[Canteen]:
    return _fetch_list(canteens_url(_base_url(http_client)), decode_canteens, http_client)


def fetch_meals(canteen_id: int, day: date | str, http_client: HttpClient | None = None) -> list[Meal]:
    """Fetch the meals served by ``canteen_id`` on ``day``.

    An empty list means the canteen serves nothing that day. A malformed
    ``day`` raises ``ValueError`` before any request is made.
    """
    url = meals_url(canteen_id, day, _base_url(http_client))
    return _fetch_list(
        url,
        decode_meals,
        http_client,
        canteen_id=int(canteen_id),
        date=format_day(day),
    )
