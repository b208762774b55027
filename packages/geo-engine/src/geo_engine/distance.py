import math

from geo_engine.models import GeoPoint

EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_METERS = 6_371_000


def _central_angle(start: GeoPoint, end: GeoPoint) -> float:
    start_lat = math.radians(start.lat)
    end_lat = math.radians(end.lat)
    delta_lat = math.radians(end.lat - start.lat)
    delta_lng = math.radians(end.lng - start.lng)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(start_lat) * math.cos(end_lat) * math.sin(delta_lng / 2) ** 2
    )
    # rounding can leave a a hair outside [0, 1] near antipodes
    a = min(1.0, max(0.0, a))
    return 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def haversine_distance_km(start: GeoPoint, end: GeoPoint) -> float:
    return EARTH_RADIUS_KM * _central_angle(start, end)


def haversine_distance_meters(start: GeoPoint, end: GeoPoint) -> float:
    return EARTH_RADIUS_METERS * _central_angle(start, end)


def calculate_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance in kilometres between two points given in degrees."""
    return haversine_distance_km(GeoPoint(lat=lat1, lng=lng1), GeoPoint(lat=lat2, lng=lng2))
