
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lon: float

@dataclass(frozen=True, slots=True)
class PixelPoint:
    # sub-pixel screen coordinates, origin top-left
    x: float
    y: float

    def rounded(self) -> tuple[int, int]:
        return int(round(self.x)), int(round(self.y))

@dataclass(frozen=True, slots=True)
class MapBounds:
    """Geographic rectangle covered by the base map image."""
    top_lat: float
    bottom_lat: float
    left_lon: float
    right_lon: float

    def contains(self, point: GeoPoint) -> bool:
        return (self.bottom_lat <= point.lat <= self.top_lat and
                self.left_lon <= point.lon <= self.right_lon)

@dataclass(frozen=True, slots=True)
class City:
    name: str
    location: GeoPoint

    @property
    def lat(self) -> float:
        return self.location.lat

    @property
    def lon(self) -> float:
        return self.location.lon

@dataclass(slots=True)
class SelectionState:
    # last pointer click, kept in geo space so it stays anchored under zoom/pan
    last_click_geo: Optional[GeoPoint] = None
    selected_city: Optional[City] = None
    request_token: int = 0     # latest current-weather request; FetchChannel.poll drops older ones
