"""Geo engine core package."""

from geo_engine.distance import (
    EARTH_RADIUS_KM,
    EARTH_RADIUS_METERS,
    calculate_distance,
    haversine_distance_km,
    haversine_distance_meters,
)
from geo_engine.models import GeoPoint
from geo_engine.ranking import rank_by_distance

__all__ = [
    "EARTH_RADIUS_KM",
    "EARTH_RADIUS_METERS",
    "GeoPoint",
    "calculate_distance",
    "haversine_distance_km",
    "haversine_distance_meters",
    "rank_by_distance",
]
