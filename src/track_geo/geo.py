"""Great-circle distance and bearing between GPS fixes — pure Python, no external deps."""

from __future__ import annotations

import math

from track_geo.models import GeoPoint

EARTH_RADIUS_M = 6371000.0


def _to_rad(deg: float) -> float:
    """Degrees to radians as deg * pi / 180 (math.radians rounds differently)."""
    return deg * math.pi / 180


def calculate_distance(p1: GeoPoint, p2: GeoPoint) -> float:
    """Great-circle distance between two points on Earth in meters.

    Uses the Haversine formula. Inputs are decimal degrees; nothing is
    range-checked, so out-of-range coordinates still yield a number.
    """
    dlat = _to_rad(p2.latitude - p1.latitude)
    dlon = _to_rad(p2.longitude - p1.longitude)
    rlat1 = _to_rad(p1.latitude)
    rlat2 = _to_rad(p2.latitude)

    a = (
        math.sin(dlat / 2) * math.sin(dlat / 2)
        + math.cos(rlat1) * math.cos(rlat2) * math.sin(dlon / 2) * math.sin(dlon / 2)
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def calculate_bearing(p1: GeoPoint, p2: GeoPoint) -> float:
    """Initial compass bearing from p1 towards p2, in degrees [0, 360).

    Clockwise from true north. Identical points give atan2(0, 0) == 0.
    """
    dlon = _to_rad(p2.longitude - p1.longitude)
    rlat1 = _to_rad(p1.latitude)
    rlat2 = _to_rad(p2.latitude)

    y = math.sin(dlon) * math.cos(rlat2)
    x = math.cos(rlat1) * math.sin(rlat2) - math.sin(rlat1) * math.cos(rlat2) * math.cos(dlon)

    bearing = math.atan2(y, x) * 180 / math.pi
    if bearing < 0:
        bearing += 360
    # A tiny negative angle plus 360 rounds up to exactly 360
    return 0.0 if bearing == 360 else bearing
