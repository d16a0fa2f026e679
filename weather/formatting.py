"""
Text formatting for the current-weather panel.
"""

from __future__ import annotations
from datetime import datetime, timezone
from typing import Optional

from .models import CurrentWeather

NO_DATA = "No data"


def format_unix_time(ts: int, with_date: bool = True, with_time: bool = True) -> str:
    """UTC unix seconds -> 'dd/mm/YYYY HH:MM:SS' (either half optional)."""
    dt = datetime.fromtimestamp(ts, tz=timezone.utc)
    layout = " ".join(p for p in (
        "%d/%m/%Y" if with_date else "",
        "%H:%M:%S" if with_time else "",
    ) if p)
    return dt.strftime(layout)


def format_weather_value(key: str, weather: Optional[CurrentWeather]) -> str:
    """Value shown next to a toggle key in the weather panel."""
    if weather is None:
        return NO_DATA

    if key == "Timestamp":
        return format_unix_time(weather.timestamp, True, True)
    if key == "Description":
        return weather.description
    if key == "Temperature":
        return f"{weather.temperature} °C"
    if key == "Feels Like":
        return f"{weather.feels_like} °C"
    if key == "Humidity":
        return f"{weather.humidity}%"
    if key == "Wind Speed":
        return f"{weather.wind_speed} m/s"
    if key == "Rain Volume":
        return NO_DATA if weather.rain_volume == 0.0 else f"{weather.rain_volume}mm/h"
    if key == "Sunrise":
        return format_unix_time(weather.sunrise, False, True)
    if key == "Sunset":
        return format_unix_time(weather.sunset, False, True)
    return NO_DATA
