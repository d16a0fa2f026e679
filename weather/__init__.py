"""
Weather package - OpenWeatherMap data layer.

Main exports:
    WeatherSource        - blocking HTTP client (current + 5 day forecast)
    CurrentWeather       - current conditions record
    ForecastWeather      - forecast record (list of ThreeHourForecast)
    FetchError           - typed failure value returned instead of raising
    FetchChannel         - background request stream, latest result wins
"""
from .models import (
    CurrentWeather,
    ThreeHourForecast,
    ForecastWeather,
    FetchError,
)
from .source import WeatherSource, parse_current, parse_forecast
from .worker import FetchChannel, make_executor
from .formatting import format_weather_value, format_unix_time, NO_DATA

__all__ = [
    "CurrentWeather",
    "ThreeHourForecast",
    "ForecastWeather",
    "FetchError",
    "WeatherSource",
    "parse_current",
    "parse_forecast",
    "FetchChannel",
    "make_executor",
    "format_weather_value",
    "format_unix_time",
    "NO_DATA",
]
