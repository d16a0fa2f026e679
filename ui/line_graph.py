"""
Line graph of one forecast day.

Eight points (one per three-hour entry) against a y axis shared by every
day of the forecast, so stepping between days keeps the scale.
"""

import pygame
from typing import List, Tuple

from core.forecast_window import ForecastWindow
from .theme import get_theme

# Plot margins inside the graph rect
_LEFT = 50
_TOP = 20
_BOTTOM = 50      # x labels and axis title live below the plot
_RIGHT = 15


class LineGraph:
    def __init__(self, rect: pygame.Rect):
        self.rect = rect
        self.theme = get_theme()

    def spacing(self, value_min: float, value_max: float) -> Tuple[float, float]:
        """(x spacing between entries, pixels per unit on the y axis)."""
        w, h = self.rect.width, self.rect.height
        x_spacing = (w - 80) / 7.0
        span = value_max - value_min
        y_spacing = (h - 85) / span if span > 0 else 0.0
        return x_spacing, y_spacing

    def point_positions(self, window: ForecastWindow) -> List[Tuple[int, int]]:
        """Screen positions of the current day's points."""
        value_range = window.value_range()
        if value_range is None:
            return []
        value_min, value_max = value_range
        x_spacing, y_spacing = self.spacing(value_min, value_max)
        base_y = self.rect.y + self.rect.height - _BOTTOM
        return [
            (int(self.rect.x + _LEFT + i * x_spacing),
             int(base_y - (value - value_min) * y_spacing))
            for i, value in enumerate(window.window_values())
        ]

    def draw(self, surface: pygame.Surface, window: ForecastWindow, title: str):
        theme = self.theme
        colors = theme.colors
        theme.draw_panel(surface, self.rect)

        value_range = window.value_range()
        if value_range is None:
            return
        value_min, value_max = value_range
        x_spacing, y_spacing = self.spacing(value_min, value_max)
        x0, y0 = self.rect.x, self.rect.y
        base_y = y0 + self.rect.height - _BOTTOM
        font = theme.fonts.tiny()

        # Horizontal grid, one line per whole unit
        for value in range(int(value_min), int(value_max) + 1):
            y = int(base_y - (value - value_min) * y_spacing)
            pygame.draw.line(surface, colors.GRAPH_GRID,
                             (x0 + _LEFT, y), (x0 + self.rect.width - _RIGHT, y))
            theme.draw_text(surface, font, x0 + _LEFT - 8, y - 6, str(value),
                            colors.GRAPH_Y_AXIS, align='right')
        theme.draw_text(surface, font, x0 + 5, y0 + 4, f"{window.metric} (°C)", colors.FG_TEXT)

        # Vertical grid with HH:MM labels
        for i, forecast in enumerate(window.window()):
            x = int(x0 + _LEFT + i * x_spacing)
            pygame.draw.line(surface, colors.GRAPH_GRID, (x, y0 + _TOP), (x, base_y))
            theme.draw_text(surface, font, x, base_y + 8, forecast.time_of_day,
                            colors.GRAPH_X_AXIS, align='center')
        theme.draw_text(surface, font, x0 + self.rect.width // 2, base_y + 28,
                        "Time (HH:mm)", colors.FG_TEXT, align='center')

        points = self.point_positions(window)
        if len(points) > 1:
            pygame.draw.lines(surface, colors.GRAPH_LINE, False, points, 2)
        for p in points:
            pygame.draw.circle(surface, colors.GRAPH_LINE, p, 3)

        theme.draw_text(surface, theme.fonts.bold(), x0 + self.rect.width // 2, y0 + 4,
                        title, colors.FG_TEXT, align='center')
