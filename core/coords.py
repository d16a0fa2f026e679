
from __future__ import annotations
import math

import numpy as np

from .types import GeoPoint

EARTH_RADIUS_KM = 6371.0

def clamp(x: float, lo: float, hi: float) -> float:
    return lo if x < lo else hi if x > hi else x

def clamp_magnitude(v: int, limit: int) -> int:
    """Snap v into [-limit, limit]; a non-positive limit forces 0."""
    if limit <= 0:
        return 0
    if v > limit:
        return limit
    if v < -limit:
        return -limit
    return v

def lerp_map(v: float, a0: float, a1: float, b0: float, b1: float) -> float:
    """Linearly map v from [a0, a1] onto [b0, b1]."""
    return b0 + (v - a0) / (a1 - a0) * (b1 - b0)

def haversine_km(a: GeoPoint, b: GeoPoint) -> float:
    """
    Great-circle distance between two points in kilometres.

    a = sin^2(dlat/2) + cos(lat1) cos(lat2) sin^2(dlon/2)
    d = 2 R atan2(sqrt(a), sqrt(1-a))
    """
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)
    dlat = lat2 - lat1
    dlon = math.radians(b.lon - a.lon)

    h = math.sin(dlat / 2.0)**2 + math.cos(lat1)*math.cos(lat2)*math.sin(dlon / 2.0)**2
    h = min(1.0, h)
    return 2.0 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1.0 - h))

def haversine_km_array(lat_deg: float, lon_deg: float,
                       lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
    """Vectorised haversine from one point to arrays of points (km)."""
    lat1 = np.radians(lat_deg)
    lat2 = np.radians(lats)
    dlat = lat2 - lat1
    dlon = np.radians(lons - lon_deg)

    h = np.sin(dlat / 2.0)**2 + np.cos(lat1)*np.cos(lat2)*np.sin(dlon / 2.0)**2
    h = np.minimum(h, 1.0)
    return 2.0 * EARTH_RADIUS_KM * np.arctan2(np.sqrt(h), np.sqrt(1.0 - h))
