"""
City Catalog

Loads the static list of map cities from a ``name,lat,lon`` text file and
resolves a geographic point to the nearest city by great-circle distance.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, List, Optional

import numpy as np

from .coords import haversine_km_array
from .types import City, GeoPoint


def parse_city_line(line: str) -> Optional[City]:
    """Parse one ``name,lat,lon`` line. Returns None for malformed input."""
    parts = line.split(",")
    if len(parts) != 3:
        return None
    name = parts[0].strip()
    try:
        lat = float(parts[1].strip())
        lon = float(parts[2].strip())
    except ValueError:
        return None
    if not name:
        return None
    return City(name, GeoPoint(lat, lon))


def parse_cities(lines: Iterable[str]) -> List[City]:
    cities = []
    for lineno, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line:
            continue
        city = parse_city_line(line)
        if city is None:
            print(f"  Warning: skipping malformed city line {lineno}: {line!r}")
            continue
        cities.append(city)
    return cities


class CityCatalog:
    """
    Read-only list of cities in file order.

    Coordinates are also kept as numpy arrays for the nearest-city scan.
    """

    def __init__(self, cities: Iterable[City] = ()):
        self._cities: List[City] = list(cities)
        self._lats = np.array([c.lat for c in self._cities], dtype=np.float64)
        self._lons = np.array([c.lon for c in self._cities], dtype=np.float64)

    @classmethod
    def from_file(cls, filepath) -> "CityCatalog":
        path = Path(filepath)
        try:
            with open(path, "r", encoding="utf-8") as f:
                cities = parse_cities(f)
        except OSError as e:
            print(f"Error reading cities file: {e}")
            return cls()
        print(f"Loaded {len(cities)} cities from {path.name}")
        return cls(cities)

    @property
    def cities(self) -> List[City]:
        return list(self._cities)

    def __len__(self) -> int:
        return len(self._cities)

    def __iter__(self):
        return iter(self._cities)

    def get(self, name: str) -> Optional[City]:
        for city in self._cities:
            if city.name == name:
                return city
        return None

    def distances_from(self, point: GeoPoint) -> np.ndarray:
        """Haversine distance (km) from point to every city, catalog order."""
        return haversine_km_array(point.lat, point.lon, self._lats, self._lons)

    def nearest(self, point: GeoPoint) -> Optional[City]:
        """
        Closest city to point. Ties go to the earliest city in the catalog.

        Returns None only for an empty catalog; callers guard against that.
        """
        if not self._cities:
            return None
        # argmin returns the first index among equal minima
        return self._cities[int(np.argmin(self.distances_from(point)))]


def find_nearest_city(point: GeoPoint, cities) -> Optional[City]:
    """Nearest city in any sequence of City (or a CityCatalog)."""
    catalog = cities if isinstance(cities, CityCatalog) else CityCatalog(cities)
    return catalog.nearest(point)
