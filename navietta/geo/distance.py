"""Great-circle distance using the haversine formula."""

import math

from ..domain.models import ResolvedLocation

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute the great-circle distance between two points.

    Parameters
    ----------
    lat1, lon1:
        Coordinates of the first point, in degrees.
    lat2, lon2:
        Coordinates of the second point, in degrees.

    Returns
    -------
    float
        Distance in kilometres on a sphere of radius 6371 km.
    """
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance_between(origin: ResolvedLocation, destination: ResolvedLocation) -> float:
    """Distance in kilometres between two resolved locations."""
    return haversine_km(
        origin.latitude,
        origin.longitude,
        destination.latitude,
        destination.longitude,
    )
