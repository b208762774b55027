from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from geo_engine.distance import haversine_distance_km
from geo_engine.models import GeoPoint

T = TypeVar("T")


def rank_by_distance(
    origin: GeoPoint,
    items: Iterable[T],
    locate: Callable[[T], GeoPoint],
) -> list[tuple[T, float]]:
    """Pair each item with its distance from ``origin`` in km, nearest first.

    The sort is stable: items at the same distance keep their input order.
    """
    ranked = [(item, haversine_distance_km(origin, locate(item))) for item in items]
    ranked.sort(key=lambda pair: pair[1])
    return ranked
