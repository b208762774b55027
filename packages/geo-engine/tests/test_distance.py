import math

import pytest

from geo_engine.distance import (
    EARTH_RADIUS_KM,
    calculate_distance,
    haversine_distance_km,
    haversine_distance_meters,
)
from geo_engine.models import GeoPoint


def test_haversine_distance_is_zero_for_same_point() -> None:
    point = GeoPoint(lat=18.790894, lng=78.911850)
    assert haversine_distance_km(point, point) == 0.0
    assert calculate_distance(point.lat, point.lng, point.lat, point.lng) == 0.0


def test_quarter_great_circle_along_equator() -> None:
    assert calculate_distance(0, 0, 0, 90) == pytest.approx(10007.543, abs=0.01)


def test_antipodal_points_give_half_circumference() -> None:
    assert calculate_distance(0, 0, 0, 180) == pytest.approx(math.pi * EARTH_RADIUS_KM)
    assert calculate_distance(90, 0, -90, 0) == pytest.approx(math.pi * EARTH_RADIUS_KM)


def test_distance_is_symmetric() -> None:
    hyderabad = GeoPoint(lat=17.385, lng=78.4867)
    nizamabad = GeoPoint(lat=18.6725, lng=78.094)
    assert haversine_distance_km(hyderabad, nizamabad) == pytest.approx(
        haversine_distance_km(nizamabad, hyderabad)
    )


def test_meters_and_kilometers_agree() -> None:
    city_hall = GeoPoint(lat=37.5665, lng=126.9780)
    gangnam = GeoPoint(lat=37.4979, lng=127.0276)
    km = haversine_distance_km(city_hall, gangnam)
    assert 0 < km < 20
    assert haversine_distance_meters(city_hall, gangnam) == pytest.approx(km * 1000)
