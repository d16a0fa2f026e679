"""
Core module - map geometry, city catalog and forecast windowing.

Usage:
    from core import Viewport, CityCatalog, UK_BOUNDS
    viewport = Viewport(UK_BOUNDS, width=471, height=788)
    px = viewport.geo_to_pixel(GeoPoint(51.5074, -0.1278))
    city = catalog.nearest(viewport.pixel_to_geo(px))
"""

from .types import GeoPoint, PixelPoint, MapBounds, City, SelectionState
from .coords import haversine_km, clamp
from .viewport import Viewport
from .cities import CityCatalog, find_nearest_city, parse_cities
from .forecast_window import ForecastWindow, WindowStats, METRICS, format_summary
from .settings import Settings, UK_BOUNDS

__all__ = [
    "GeoPoint",
    "PixelPoint",
    "MapBounds",
    "City",
    "SelectionState",
    "haversine_km",
    "clamp",
    "Viewport",
    "CityCatalog",
    "find_nearest_city",
    "parse_cities",
    "ForecastWindow",
    "WindowStats",
    "METRICS",
    "format_summary",
    "Settings",
    "UK_BOUNDS",
]
