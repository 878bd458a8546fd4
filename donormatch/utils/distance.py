"""
Great-circle distance between two latitude/longitude points.

Distances are "as the crow flies"; road distance is usually longer.
"""
import math

EARTH_RADIUS_KM = 6371.0
UNRESOLVED = math.inf  # Distance sentinel when either point is unknown


def _missing(value):
    return value is None or (isinstance(value, float) and math.isnan(value))


def distance_km(lat1, lon1, lat2, lon2):
    """Return the haversine distance in km, or UNRESOLVED if any coordinate is missing"""
    if any(_missing(v) for v in (lat1, lon1, lat2, lon2)):
        return UNRESOLVED

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)
    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # Rounding can push a slightly past 1 for antipodal points
    a = min(1.0, max(0.0, a))
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def is_resolved(distance):
    return math.isfinite(distance)
