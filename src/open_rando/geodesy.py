"""Great-circle distance and travel-time estimation."""

import math

EARTH_RADIUS_METERS = 6_371_000.0
WALKING_SPEED_MPS = 1.25  # ~4.5 km/h


def distance_meters(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Haversine distance between two (latitude, longitude) points.

    Args:
        a: First point in decimal degrees.
        b: Second point in decimal degrees.

    Returns:
        Distance along the Earth's surface in meters.
    """
    lat1, lon1 = a
    lat2, lon2 = b
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    return EARTH_RADIUS_METERS * 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def estimate_duration(distance: float, speed_mps: float = WALKING_SPEED_MPS) -> float:
    """Seconds needed to cover ``distance`` meters at ``speed_mps``."""
    if speed_mps <= 0:
        raise ValueError(f"Speed must be positive, got {speed_mps}")
    return distance / speed_mps
