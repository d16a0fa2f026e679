"""
Map Viewport

Zoom / pan state of the map screen and the projection between geographic
coordinates and screen pixels.

Coordinate system
-----------------
- The base map image spans MapBounds: left_lon..right_lon across its width,
  top_lat..bottom_lat down its height (north is up).
- The map artwork carries a header inset: geographic rows start
  ``header_inset`` pixels below the top of the image. The inset is part of
  the image, so it scales with zoom.
- Zoom scales about the viewport centre, then the pan offset is added.

    x = (bx - base_w/2) * zoom + view_w/2 + pan_x
    y = (by + inset - base_h/2) * zoom + view_h/2 + pan_y
"""

from __future__ import annotations
from typing import Tuple

from .coords import clamp, clamp_magnitude, lerp_map
from .types import GeoPoint, MapBounds, PixelPoint


class Viewport:
    """
    Owns zoom and pan and converts GeoPoint <-> PixelPoint.

    Zoom and pan are always clamped, never rejected.
    """

    def __init__(self, bounds: MapBounds,
                 width: int, height: int,
                 base_width: int | None = None, base_height: int | None = None,
                 zoom_min: float = 1.0, zoom_max: float = 5.0,
                 header_inset: float = 20.0):
        self.bounds = bounds
        self.width = width
        self.height = height
        self.base_width = base_width if base_width is not None else width
        self.base_height = base_height if base_height is not None else height
        self.zoom_min = zoom_min
        self.zoom_max = zoom_max
        self.header_inset = header_inset

        self.zoom = zoom_min
        self.pan_x = 0
        self.pan_y = 0
        self._update_scaled_size()

    # -----------------------------------------------------------------------
    # State
    # -----------------------------------------------------------------------

    def _update_scaled_size(self):
        self.scaled_width = int(self.base_width * self.zoom)
        self.scaled_height = int(self.base_height * self.zoom)

    def set_zoom(self, zoom: float):
        # rounding keeps repeated 0.1 steps from drifting off the bounds
        self.zoom = round(clamp(float(zoom), self.zoom_min, self.zoom_max), 6)
        self._update_scaled_size()

    def zoom_in(self, step: float = 0.1):
        self.set_zoom(self.zoom + step)

    def zoom_out(self, step: float = 0.1):
        self.set_zoom(self.zoom - step)
        # a smaller map may no longer justify the current pan
        self.clamp_pan()

    def pan_by(self, dx: int, dy: int):
        self.pan_x += int(dx)
        self.pan_y += int(dy)
        self.clamp_pan()

    def clamp_pan(self):
        """Keep the map covering the viewport. X and Y are clamped independently."""
        limit_x = (self.scaled_width - self.width) // 2
        limit_y = (self.scaled_height - self.height) // 2
        self.pan_x = clamp_magnitude(self.pan_x, limit_x)
        self.pan_y = clamp_magnitude(self.pan_y, limit_y)

    def reset(self):
        self.pan_x = 0
        self.pan_y = 0
        self.set_zoom(self.zoom_min)

    def can_zoom_in(self) -> bool:
        return self.zoom < self.zoom_max

    def can_zoom_out(self) -> bool:
        return self.zoom > self.zoom_min

    def is_fully_zoomed(self) -> bool:
        return self.zoom == self.zoom_max

    @property
    def state(self) -> Tuple[float, int, int]:
        return self.zoom, self.pan_x, self.pan_y

    # -----------------------------------------------------------------------
    # Projection
    # -----------------------------------------------------------------------

    def geo_to_base(self, point: GeoPoint) -> Tuple[float, float]:
        """GeoPoint -> unzoomed base-image pixel (without header inset)."""
        b = self.bounds
        bx = lerp_map(point.lon, b.left_lon, b.right_lon, 0.0, self.base_width)
        by = lerp_map(point.lat, b.top_lat, b.bottom_lat, 0.0, self.base_height)
        return bx, by

    def geo_to_pixel(self, point: GeoPoint) -> PixelPoint:
        bx, by = self.geo_to_base(point)
        x = (bx - self.base_width / 2.0) * self.zoom + self.width / 2.0 + self.pan_x
        y = ((by + self.header_inset - self.base_height / 2.0) * self.zoom
             + self.height / 2.0 + self.pan_y)
        return PixelPoint(x, y)

    def pixel_to_geo(self, point: PixelPoint) -> GeoPoint:
        """Exact inverse of geo_to_pixel."""
        bx = (point.x - self.pan_x - self.width / 2.0) / self.zoom + self.base_width / 2.0
        by = ((point.y - self.pan_y - self.height / 2.0) / self.zoom
              + self.base_height / 2.0 - self.header_inset)
        b = self.bounds
        lon = lerp_map(bx, 0.0, self.base_width, b.left_lon, b.right_lon)
        lat = lerp_map(by, 0.0, self.base_height, b.top_lat, b.bottom_lat)
        return GeoPoint(lat, lon)

    def is_on_screen(self, px: float, py: float) -> bool:
        return 0 <= px <= self.width and 0 <= py <= self.height

    def is_visible(self, point: GeoPoint) -> bool:
        p = self.geo_to_pixel(point)
        return self.is_on_screen(p.x, p.y)

    # -----------------------------------------------------------------------
    # Rendering helpers
    # -----------------------------------------------------------------------

    def map_origin(self) -> Tuple[int, int]:
        """Top-left pixel where the scaled map image is blitted."""
        return ((self.width - self.scaled_width) // 2 + self.pan_x,
                (self.height - self.scaled_height) // 2 + self.pan_y)

    def marker_size(self) -> int:
        return int(5 * self.zoom)

    def __repr__(self) -> str:
        return (f"Viewport(zoom={self.zoom:.1f}, pan=({self.pan_x}, {self.pan_y}), "
                f"view={self.width}x{self.height})")
