"""Meal queries for a canteen and calendar day."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from mensa.common.http import HttpClient
from mensa.common.models import Canteen, Meal
from mensa.gateway.openmensa import fetch_meals


def get_meals(canteen: Canteen, day: date | str, http_client: HttpClient | None = None) -> list[Meal]:
    return fetch_meals(canteen.id, day, http_client)


def get_meals_for_canteens(
    canteens: Iterable[Canteen],
    day: date | str,
    http_client: HttpClient | None = None,
) -> dict[int, list[Meal]]:
    owns_client = http_client is None
    client = http_client or HttpClient()
    try:
        return {canteen.id: get_meals(canteen, day, client) for canteen in canteens}
    finally:
        if owns_client:
            client.close()
