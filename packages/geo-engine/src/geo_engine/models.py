from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    """Latitude/longitude pair in decimal degrees (WGS84)."""

    lat: float
    lng: float
