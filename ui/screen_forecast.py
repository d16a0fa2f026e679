"""
Forecast Screen

Five-day forecast for the city selected on the map, drawn one day at a time
as a line graph.

Controls
--------
  Prev / Next     Step between days (clamped to days 1-5)
  Metric menu     Temperature / Feels Like
  Summary         Print min / max / average for the day to the console
  Left            Back to the map
"""

import pygame
from typing import Optional

from .base_screen import BaseScreen
from .components import Button, Dropdown, KeyIcon
from .line_graph import LineGraph
from core.forecast_window import ForecastWindow, METRICS, MAX_DAY_INDEX, format_summary
from game.state_manager import AppContext, ForecastHandoff
from weather.formatting import NO_DATA
from weather.models import ForecastWeather

LOADING_TEXT = "Loading forecast..."


class ForecastScreen(BaseScreen):
    """Line graph of the selected city's forecast."""

    def __init__(self, context: AppContext):
        super().__init__("FORECAST")
        self.context = context
        self.window = ForecastWindow()
        self.city_name: Optional[str] = None

        self._channel = context.new_channel("forecast-screen")
        self._next_screen: Optional[str] = None

        self._create_controls()

    # -----------------------------------------------------------------------
    # Setup
    # -----------------------------------------------------------------------

    def _create_controls(self):
        w = self.context.settings.map_width
        self.graph = LineGraph(pygame.Rect(10, 60, w - 20, 320))

        self.buttons = {
            'prev':    Button(10, 395, 100, 26, "< Prev Day", callback=self.window.prev_day),
            'next':    Button(w - 110, 395, 100, 26, "Next Day >", callback=self.window.next_day),
            'summary': Button(w // 2 - 50, 430, 100, 26, "Summary", callback=self.print_summary),
        }
        self.dropdown = Dropdown(w - 140, 15, 130, 24, list(METRICS), self.window.metric,
                                 on_select=self.window.set_metric)
        self.back_icon = KeyIcon(5, 5, 30, 'left')

    def on_enter(self, payload=None):
        super().on_enter(payload)
        self._next_screen = None
        if isinstance(payload, ForecastHandoff):
            self.show(payload)

    def on_exit(self):
        super().on_exit()

    # -----------------------------------------------------------------------
    # Data
    # -----------------------------------------------------------------------

    def show(self, handoff: ForecastHandoff):
        """Take over a snapshot from the map; same city keeps the day shown."""
        same_city = handoff.city_name == self.city_name
        self.city_name = handoff.city_name

        if handoff.forecast is not None or not same_city:
            # nothing still in flight may overwrite this snapshot or city
            self._channel.cancel()

        if handoff.forecast is not None:
            self._apply(handoff.forecast, keep_day=same_city)
        elif same_city and self.window.forecasts:
            return
        else:
            self.window.set_forecasts(())
            self._channel.request(self.context.weather.fetch_forecast, handoff.city_name)

    def _apply(self, forecast: ForecastWeather, keep_day: bool):
        day = self.window.day_index
        self.window.set_forecasts(forecast.forecasts)
        if keep_day:
            self.window.day_index = min(day, MAX_DAY_INDEX)

    def is_loading(self) -> bool:
        return self._channel.is_pending()

    def status_text(self) -> str:
        if self.window.forecasts:
            return ""
        return LOADING_TEXT if self.is_loading() else NO_DATA

    def title(self) -> str:
        return f"{self.window.metric} in {self.city_name} - Day {self.window.day_index + 1}"

    def print_summary(self):
        stats = self.window.stats()
        if stats is None:
            print(f"No forecast data to summarise for {self.city_name}")
            return
        print(format_summary(self.city_name, self.window.day_index, stats))

    # -----------------------------------------------------------------------
    # Input
    # -----------------------------------------------------------------------

    def handle_input(self, events) -> Optional[str]:
        mp = pygame.mouse.get_pos()
        for btn in self.buttons.values():
            btn.update(mp)
        self.dropdown.update(mp)

        for event in events:
            if event.type == pygame.KEYDOWN and event.key == pygame.K_LEFT:
                self._next_screen = 'BACK'

            elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP) and event.button == 1:
                # Open dropdown list sits above the buttons
                if self.dropdown.handle_event(event):
                    continue
                for b in self.buttons.values():
                    b.handle_event(event)

        result, self._next_screen = self._next_screen, None
        return result

    # -----------------------------------------------------------------------
    # Update / Render
    # -----------------------------------------------------------------------

    def update(self, dt: float):
        done = self._channel.poll()
        if done is None:
            return
        _, result = done
        if isinstance(result, ForecastWeather):
            self._apply(result, keep_day=False)

    def render(self, surface: pygame.Surface):
        colors = self.theme.colors
        surface.fill(colors.BG_SCREEN)

        header = pygame.Rect(40, 10, surface.get_width() - 190, 34)
        self.draw_header(surface, header, "Forecast", self.city_name or "")
        self.back_icon.draw(surface)

        status = self.status_text()
        if status:
            self.graph.draw(surface, self.window, "")
            self.theme.draw_text(surface, self.theme.fonts.large(),
                                 self.graph.rect.centerx, self.graph.rect.centery,
                                 status, colors.FG_DIM, align='center')
        else:
            self.graph.draw(surface, self.window, self.title())

        for btn in self.buttons.values():
            btn.draw(surface)
        self.dropdown.draw(surface)
