"""In-memory canteen queries over the full upstream canteen list.

The API offers no server side filtering, so every query fetches the whole
list once and scans it. Results keep the upstream order.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable

from mensa.common.constants import DISPLAY_NAME_SEPARATOR
from mensa.common.http import HttpClient
from mensa.common.models import Canteen
from mensa.gateway.openmensa import fetch_all_canteens


def display_name(raw_name: str) -> str:
    """Return the part after the first comma of ``"location, display-name"``.

    Names with no comma yield an empty string.
    """
    segments = raw_name.split(DISPLAY_NAME_SEPARATOR)
    if len(segments) < 2:
        return ""
    return segments[1].strip()


def with_display_name(canteen: Canteen) -> Canteen:
    return replace(canteen, name=display_name(canteen.name))


def _wanted(values: Iterable, ctx: str) -> set:
    if isinstance(values, (str, bytes)):
        raise TypeError(f"{ctx} must be a collection, not a single string: {values!r}")
    return set(values)


def filter_by_ids(canteens: Iterable[Canteen], ids: Iterable[int]) -> list[Canteen]:
    wanted = _wanted(ids, "ids")
    return [c for c in canteens if c.id in wanted]


def filter_by_names(canteens: Iterable[Canteen], names: Iterable[str]) -> list[Canteen]:
    wanted = _wanted(names, "names")
    return [c for c in canteens if c.name in wanted]


def filter_by_cities(
    canteens: Iterable[Canteen],
    cities: Iterable[str],
    *,
    display_names: bool = False,
) -> list[Canteen]:
    wanted = _wanted(cities, "cities")
    matched = [c for c in canteens if c.city in wanted]
    if display_names:
        return [with_display_name(c) for c in matched]
    return matched


def get_all_canteens(http_client: HttpClient | None = None) -> list[Canteen]:
    return fetch_all_canteens(http_client)


def get_canteen_by_id(canteen_id: int, http_client: HttpClient | None = None) -> Canteen | None:
    return next((c for c in fetch_all_canteens(http_client) if c.id == canteen_id), None)


def get_canteens_by_ids(ids: Iterable[int], http_client: HttpClient | None = None) -> list[Canteen]:
    wanted = _wanted(ids, "ids")
    return filter_by_ids(fetch_all_canteens(http_client), wanted)


def get_canteen_by_name(name: str, http_client: HttpClient | None = None) -> Canteen | None:
    return next((c for c in fetch_all_canteens(http_client) if c.name == name), None)


def get_canteens_by_names(names: Iterable[str], http_client: HttpClient | None = None) -> list[Canteen]:
    wanted = _wanted(names, "names")
    return filter_by_names(fetch_all_canteens(http_client), wanted)


def get_canteens_by_city(
    city: str,
    http_client: HttpClient | None = None,
    *,
    display_names: bool = True,
) -> list[Canteen]:
    return get_canteens_by_cities([city], http_client, display_names=display_names)


def get_canteens_by_cities(
    cities: Iterable[str],
    http_client: HttpClient | None = None,
    *,
    display_names: bool = True,
) -> list[Canteen]:
    """Canteens located in any of ``cities``.

    With ``display_names`` (the default) each result carries the derived
    display name instead of the raw name; pass ``False`` to keep raw names.
    """
    wanted = _wanted(cities, "cities")
    return filter_by_cities(fetch_all_canteens(http_client), wanted, display_names=display_names)
