import math

from geo_route.domain.entities.geography import Coordinate, Node

EARTH_RADIUS_M = 6_371_000.0


def haversine_m(a: Coordinate | Node, b: Coordinate | Node) -> float:
    """Great-circle distance in meters between two lat/lng points.

    Inputs are not range checked; NaN or infinite coordinates propagate.
    """
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)
    lat1, lat2 = math.radians(a.lat), math.radians(b.lat)

    s = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    c = 2 * math.atan2(math.sqrt(s), math.sqrt(1 - s))
    return EARTH_RADIUS_M * c
