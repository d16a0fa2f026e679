"""Tests for map projection, zoom and pan clamping."""

import numpy as np
import pytest

from core.settings import UK_BOUNDS
from core.types import GeoPoint, PixelPoint
from core.viewport import Viewport

LONDON = GeoPoint(51.5074, -0.1278)
GLASGOW = GeoPoint(55.8642, -4.2518)


@pytest.fixture
def viewport():
    return Viewport(UK_BOUNDS, 471, 788)


class TestProjection:
    """geo_to_pixel / pixel_to_geo."""

    def test_london_at_default_view(self, viewport):
        p = viewport.geo_to_pixel(LONDON)
        assert abs(p.x - 398) <= 1
        assert abs(p.y - 645) <= 1
        assert p.rounded() == (398, 645)
        assert viewport.is_visible(LONDON)

    def test_corners_map_to_base_edges(self, viewport):
        top_left = viewport.geo_to_pixel(GeoPoint(UK_BOUNDS.top_lat, UK_BOUNDS.left_lon))
        assert top_left.x == pytest.approx(0.0)
        assert top_left.y == pytest.approx(viewport.header_inset)

    def test_round_trip_random_points(self, viewport):
        rng = np.random.default_rng(1234)
        for _ in range(1000):
            viewport.reset()
            viewport.set_zoom(rng.uniform(1.0, 5.0))
            viewport.pan_by(int(rng.integers(-2000, 2000)), int(rng.integers(-2000, 2000)))

            point = GeoPoint(rng.uniform(UK_BOUNDS.bottom_lat, UK_BOUNDS.top_lat),
                             rng.uniform(UK_BOUNDS.left_lon, UK_BOUNDS.right_lon))
            back = viewport.pixel_to_geo(viewport.geo_to_pixel(point))
            assert back.lat == pytest.approx(point.lat, abs=1e-6)
            assert back.lon == pytest.approx(point.lon, abs=1e-6)

    def test_inverse_of_centre_pixel(self, viewport):
        viewport.set_zoom(3.0)
        centre = viewport.pixel_to_geo(PixelPoint(471 / 2, 788 / 2))
        p = viewport.geo_to_pixel(centre)
        assert p.x == pytest.approx(471 / 2)
        assert p.y == pytest.approx(788 / 2)

    def test_visible_at_max_zoom_is_visible_at_every_zoom(self, viewport):
        viewport.set_zoom(5.0)
        assert viewport.is_visible(GLASGOW)
        for zoom in np.linspace(1.0, 5.0, 41):
            viewport.set_zoom(zoom)
            assert viewport.is_visible(GLASGOW), zoom

    def test_london_leaves_screen_at_max_zoom_without_pan(self, viewport):
        viewport.set_zoom(5.0)
        assert not viewport.is_visible(LONDON)


class TestZoom:
    def test_zoom_clamped_to_range(self, viewport):
        viewport.set_zoom(9.0)
        assert viewport.zoom == 5.0
        viewport.set_zoom(0.2)
        assert viewport.zoom == 1.0

    def test_forty_steps_reach_max_exactly(self, viewport):
        for _ in range(40):
            viewport.zoom_in()
        assert viewport.zoom == 5.0
        assert viewport.is_fully_zoomed()
        assert not viewport.can_zoom_in()
        viewport.zoom_in()
        assert viewport.zoom == 5.0

    def test_zoom_out_stops_at_min(self, viewport):
        assert not viewport.can_zoom_out()
        viewport.zoom_out()
        assert viewport.zoom == 1.0

    def test_scaled_size_follows_zoom(self, viewport):
        viewport.set_zoom(2.0)
        assert (viewport.scaled_width, viewport.scaled_height) == (942, 1576)
        assert viewport.map_origin() == (-236, -394)
        assert viewport.marker_size() == 10

    def test_zoom_out_reclamps_pan(self, viewport):
        viewport.set_zoom(3.0)
        viewport.pan_by(400, -600)
        assert viewport.pan_x == 400
        viewport.zoom_out()                     # 2.9
        limit_x = (viewport.scaled_width - viewport.width) // 2
        assert abs(viewport.pan_x) <= limit_x
        for _ in range(20):
            viewport.zoom_out()
        assert viewport.state == (1.0, 0, 0)


class TestPan:
    def test_no_pan_at_min_zoom(self, viewport):
        viewport.pan_by(50, -50)
        assert (viewport.pan_x, viewport.pan_y) == (0, 0)

    def test_pan_limit(self, viewport):
        viewport.set_zoom(2.0)
        viewport.pan_by(10_000, -10_000)
        assert viewport.pan_x == (942 - 471) // 2
        assert viewport.pan_y == -((1576 - 788) // 2)

    def test_axes_clamped_independently(self, viewport):
        viewport.set_zoom(2.0)
        viewport.pan_x = 10_000
        viewport.pan_y = 10_000
        viewport.clamp_pan()
        assert viewport.pan_x == 235
        assert viewport.pan_y == 394

    def test_clamp_is_idempotent(self, viewport):
        rng = np.random.default_rng(7)
        for _ in range(200):
            viewport.set_zoom(rng.uniform(1.0, 5.0))
            viewport.pan_x = int(rng.integers(-5000, 5000))
            viewport.pan_y = int(rng.integers(-5000, 5000))
            viewport.clamp_pan()
            once = viewport.state
            viewport.clamp_pan()
            assert viewport.state == once

    def test_map_always_covers_viewport(self, viewport):
        viewport.set_zoom(4.3)
        viewport.pan_by(-10_000, 10_000)
        ox, oy = viewport.map_origin()
        assert ox <= 0 and oy <= 0
        assert ox + viewport.scaled_width >= viewport.width
        assert oy + viewport.scaled_height >= viewport.height
