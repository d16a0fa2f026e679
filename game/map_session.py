"""
Map Session

Everything the map screen does that is not drawing: the viewport, the
selection state, the named input actions and the weather requests for the
selected city. Kept free of pygame so it can be driven directly.

Input actions
-------------
  zoom_in / zoom_out              one zoom step
  pan_up / pan_down / ...         one pan step (moves the view, the map
                                  content moves the other way)
  pointer_click(x, y)             select the nearest city
  toggle(key)                     show/hide a weather panel row
  can_switch_forward()            selected AND fully zoomed AND visible
"""

from __future__ import annotations
from typing import List, Optional, Tuple

from core.types import City, GeoPoint, PixelPoint, SelectionState
from core.viewport import Viewport
from weather.formatting import format_weather_value, NO_DATA
from weather.models import CurrentWeather, ForecastWeather, FetchError
from .state_manager import AppContext, ForecastHandoff

PROMPT_TEXT = "Click on the map to display data."
LOADING_TEXT = "Loading..."

# action -> (dx, dy) in pan steps
_PAN_DIRECTIONS = {
    'pan_up':    (0, 1),
    'pan_down':  (0, -1),
    'pan_left':  (1, 0),
    'pan_right': (-1, 0),
}


class MapSession:
    """Viewport + selection + weather for one map screen."""

    def __init__(self, context: AppContext):
        self.context = context
        s = context.settings
        self.viewport = Viewport(
            s.bounds, s.map_width, s.map_height,
            zoom_min=s.zoom_min, zoom_max=s.zoom_max,
            header_inset=s.header_inset,
        )
        self.selection = SelectionState()

        self.current_weather: Optional[CurrentWeather] = None
        self.current_error: Optional[FetchError] = None
        self.forecast: Optional[ForecastWeather] = None

        self._current_channel = context.new_channel("current-weather")
        self._forecast_channel = context.new_channel("forecast")

    # -----------------------------------------------------------------------
    # Zoom / pan
    # -----------------------------------------------------------------------

    def zoom_in(self):
        self.viewport.zoom_in(self.context.settings.zoom_step)

    def zoom_out(self):
        self.viewport.zoom_out(self.context.settings.zoom_step)

    def pan(self, action: str):
        dx, dy = _PAN_DIRECTIONS[action]
        step = self.context.settings.pan_step
        self.viewport.pan_by(dx * step, dy * step)

    def pan_up(self):
        self.pan('pan_up')

    def pan_down(self):
        self.pan('pan_down')

    def pan_left(self):
        self.pan('pan_left')

    def pan_right(self):
        self.pan('pan_right')

    def apply_action(self, action: str):
        """Dispatch a named zoom/pan action."""
        if action == 'zoom_in':
            self.zoom_in()
        elif action == 'zoom_out':
            self.zoom_out()
        elif action in _PAN_DIRECTIONS:
            self.pan(action)
        else:
            print(f"Warning: unknown map action '{action}'")

    # -----------------------------------------------------------------------
    # Selection
    # -----------------------------------------------------------------------

    def pointer_click(self, x: float, y: float) -> Optional[City]:
        """Select the city nearest to a screen click and request its weather."""
        geo = self.viewport.pixel_to_geo(PixelPoint(x, y))
        self.selection.last_click_geo = geo

        nearest = self.context.catalog.nearest(geo)
        if nearest is None:
            return None

        if nearest != self.selection.selected_city:
            self.forecast = None
        self.selection.selected_city = nearest
        self.current_weather = None
        self.current_error = None

        weather = self.context.weather
        self.selection.request_token = self._current_channel.request(
            weather.fetch_current, nearest.name)
        self._forecast_channel.request(weather.fetch_forecast, nearest.name)
        return nearest

    @property
    def selected_city(self) -> Optional[City]:
        return self.selection.selected_city

    def toggle(self, key: str) -> bool:
        return self.context.toggles.toggle(key)

    def poll(self):
        """
        Apply finished weather requests. Call from the UI thread.

        FetchChannel.poll only ever returns the latest request, so anything
        it hands back belongs to the current selection.
        """
        done = self._current_channel.poll()
        if done is not None:
            _, result = done
            if isinstance(result, CurrentWeather):
                self.current_weather = result
                self.current_error = None
            else:
                self.current_weather = None
                self.current_error = result if isinstance(result, FetchError) else None

        done = self._forecast_channel.poll()
        if done is not None:
            _, result = done
            self.forecast = result if isinstance(result, ForecastWeather) else None

    def is_loading(self) -> bool:
        return self._current_channel.is_pending()

    # -----------------------------------------------------------------------
    # Screen switching
    # -----------------------------------------------------------------------

    def is_selected_visible(self) -> bool:
        city = self.selection.selected_city
        return city is not None and self.viewport.is_visible(city.location)

    def can_switch_forward(self) -> bool:
        return (self.selection.selected_city is not None
                and self.viewport.is_fully_zoomed()
                and self.is_selected_visible())

    def forecast_handoff(self) -> Optional[ForecastHandoff]:
        if not self.can_switch_forward():
            return None
        return ForecastHandoff(self.selection.selected_city.name, self.forecast)

    # -----------------------------------------------------------------------
    # Renderer inputs
    # -----------------------------------------------------------------------

    def markers(self) -> List[Tuple[PixelPoint, bool]]:
        selected = self.selection.selected_city
        return [(self.viewport.geo_to_pixel(c.location), c == selected)
                for c in self.context.catalog]

    def click_marker(self) -> Optional[PixelPoint]:
        geo = self.selection.last_click_geo
        return self.viewport.geo_to_pixel(geo) if geo is not None else None

    def connecting_line(self) -> Optional[Tuple[PixelPoint, PixelPoint]]:
        click = self.click_marker()
        city = self.selection.selected_city
        if click is None or city is None:
            return None
        return click, self.viewport.geo_to_pixel(city.location)

    def panel_rows(self) -> List[Tuple[str, str]]:
        """(label, value) rows for the weather panel; empty before any click."""
        city = self.selection.selected_city
        if city is None:
            return []
        rows = [("Nearest City", city.name)]
        for key in self.context.toggles.active_toggles:
            if self.current_weather is None and self.is_loading():
                value = LOADING_TEXT
            else:
                value = format_weather_value(key, self.current_weather)
            rows.append((key, value))
        return rows

    def panel_status(self) -> str:
        if self.selection.selected_city is None:
            return PROMPT_TEXT
        if self.current_error is not None:
            return NO_DATA
        return ""

    def click_geo(self) -> Optional[GeoPoint]:
        return self.selection.last_click_geo
