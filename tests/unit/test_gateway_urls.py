from datetime import date, datetime

import pytest

from mensa.gateway.openmensa import canteens_url, meals_url


def test_canteens_url_default_endpoint():
    assert canteens_url() == "https://openmensa.org/api/v2/canteens"
    assert canteens_url("https://mensa.example/api/") == "https://mensa.example/api/canteens"


def test_meals_url_interpolates_id_and_date():
    expected = "https://openmensa.org/api/v2/canteens/79/days/2026-10-19/meals"
    assert meals_url(79, date(2026, 10, 19)) == expected
    assert meals_url(79, "2026-10-19") == expected
    assert meals_url(79, datetime(2026, 10, 19, 12, 30)) == expected


def test_meals_url_rejects_malformed_date():
    with pytest.raises(ValueError):
        meals_url(79, "19.10.2026")
