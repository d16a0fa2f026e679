"""
Forecast day window.

The 5 day forecast is a flat list of 3-hour entries, 8 per day. The graph
shows one day at a time; this class owns the day index, the plotted metric
and the per-day statistics.
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np

ENTRIES_PER_DAY = 8
MAX_DAY_INDEX = 4

# metric name -> value getter
METRICS: Dict[str, Callable] = {
    "Temperature": lambda f: f.temperature,
    "Feels Like":  lambda f: f.feels_like,
}
DEFAULT_METRIC = "Temperature"


@dataclass(frozen=True)
class WindowStats:
    """Statistics of one day window for the current metric."""
    metric: str
    minimum: float
    maximum: float
    average: float
    min_time: str
    max_time: str
    start_time: str
    end_time: str


class ForecastWindow:
    """
    Selects ``forecasts[day*8 : day*8 + 8]``.

    next_day / prev_day clamp to [0, 4] without wrapping.
    """

    def __init__(self, forecasts: Sequence = (), metric: str = DEFAULT_METRIC):
        self._forecasts: List = list(forecasts)
        self.day_index = 0
        self.metric = metric if metric in METRICS else DEFAULT_METRIC

    @property
    def forecasts(self) -> List:
        return self._forecasts

    def set_forecasts(self, forecasts: Sequence):
        """Replace the data and go back to day 1."""
        self._forecasts = list(forecasts)
        self.day_index = 0

    def set_metric(self, metric: str):
        if metric not in METRICS:
            print(f"Warning: unknown graph metric '{metric}'")
            return
        self.metric = metric

    # -----------------------------------------------------------------------
    # Navigation
    # -----------------------------------------------------------------------

    def next_day(self):
        if self.day_index < MAX_DAY_INDEX:
            self.day_index += 1

    def prev_day(self):
        if self.day_index > 0:
            self.day_index -= 1

    def window_slice(self) -> Tuple[int, int]:
        start = self.day_index * ENTRIES_PER_DAY
        return start, start + ENTRIES_PER_DAY

    def window(self) -> List:
        start, end = self.window_slice()
        return self._forecasts[start:end]

    # -----------------------------------------------------------------------
    # Values
    # -----------------------------------------------------------------------

    def value(self, forecast) -> float:
        return float(METRICS[self.metric](forecast))

    def window_values(self) -> np.ndarray:
        return np.array([self.value(f) for f in self.window()], dtype=np.float64)

    def value_range(self) -> Optional[Tuple[float, float]]:
        """
        (floor(min), ceil(max)) of the metric over the whole forecast, so
        every day is drawn against the same y axis.
        """
        if not self._forecasts:
            return None
        values = [self.value(f) for f in self._forecasts]
        return float(math.floor(min(values))), float(math.ceil(max(values)))

    def time_range(self) -> Optional[Tuple[str, str]]:
        window = self.window()
        if not window:
            return None
        return window[0].timestamp_text, window[-1].timestamp_text

    def stats(self) -> Optional[WindowStats]:
        """
        Min / max / average over the current window. Ties for min or max
        resolve to the earliest entry.
        """
        window = self.window()
        if not window:
            return None
        values = self.window_values()
        i_min = int(np.argmin(values))     # first occurrence
        i_max = int(np.argmax(values))
        return WindowStats(
            metric=self.metric,
            minimum=float(values[i_min]),
            maximum=float(values[i_max]),
            average=float(values.sum() / len(values)),
            min_time=window[i_min].timestamp_text,
            max_time=window[i_max].timestamp_text,
            start_time=window[0].timestamp_text,
            end_time=window[-1].timestamp_text,
        )


def format_summary(city_name: str, day_index: int, stats: WindowStats) -> str:
    """Text block printed by the Summary button."""
    return (
        "\n===== Forecast Time Range =====\n"
        f"City: {city_name}\n"
        f"Day: {day_index + 1}\n"
        f"Time Range: {stats.start_time} - {stats.end_time}\n"
        "======= Weather Summary =======\n"
        f"Weather Metric: {stats.metric}\n"
        f"Min {stats.metric}: {stats.minimum:.2f}°C at {stats.min_time}\n"
        f"Max {stats.metric}: {stats.maximum:.2f}°C at {stats.max_time}\n"
        f"Average {stats.metric}: {stats.average:.2f}°C\n"
        "==============================="
    )
