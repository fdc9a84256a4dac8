"""Data models returned by the OpenMensa API."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Canteen:
    id: int
    name: str
    city: str
    address: str
    coordinates: tuple[float, float] | None = None

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        if self.coordinates is not None:
            payload["coordinates"] = list(self.coordinates)
        return payload


@dataclass(frozen=True)
class Prices:
    """Per consumer class prices. ``None`` means the class is not offered."""

    students: float | None = None
    employees: float | None = None
    pupils: float | None = None
    others: float | None = None

    def to_dict(self) -> dict[str, float | None]:
        return asdict(self)


@dataclass(frozen=True)
class Meal:
    id: int
    name: str
    category: str
    prices: Prices
    notes: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "prices": self.prices.to_dict(),
            "notes": list(self.notes),
        }
