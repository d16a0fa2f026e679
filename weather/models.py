"""
Weather records returned by the OpenWeatherMap API.

Fields mirror the API response; optional fields use -1 (integers and gusts)
or 0.0 (rain/snow volume) when the API omits them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Union


@dataclass(frozen=True, slots=True)
class CurrentWeather:
    # City
    city_id: int
    city_name: str
    latitude: float
    longitude: float

    # Conditions
    weather_id: int
    weather_main: str
    description: str
    icon: str

    # Main
    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    humidity: int
    sea_level_pressure: int = -1
    ground_level_pressure: int = -1

    visibility: int = -1

    # Wind
    wind_speed: float = 0.0
    wind_direction: int = 0
    wind_gust: float = -1.0

    cloudiness: int = 0
    rain_volume: float = 0.0    # mm, last hour
    snow_volume: float = 0.0    # mm, last hour

    # Time (unix seconds, UTC)
    timestamp: int = 0
    country: str = ""
    sunrise: int = 0
    sunset: int = 0
    timezone_shift: int = 0

    # Internal
    base: str = ""
    system_type: int = -1
    system_id: int = -1
    message: str = "No message found"
    status_code: int = 200


@dataclass(frozen=True, slots=True)
class ThreeHourForecast:
    timestamp: int
    timestamp_text: str         # "YYYY-MM-DD HH:MM:SS"

    temperature: float
    feels_like: float
    temp_min: float
    temp_max: float
    pressure: int
    sea_level_pressure: int
    ground_level_pressure: int
    humidity: int
    temp_kf: float

    weather_id: int
    weather_main: str
    description: str
    icon: str

    cloudiness: int
    wind_speed: float
    wind_direction: int
    wind_gust: float
    visibility: int
    precipitation_prob: float
    rain_volume: float          # mm, last 3 hours
    snow_volume: float
    part_of_day: str            # "d" / "n"

    @property
    def time_of_day(self) -> str:
        """HH:MM part of the timestamp text."""
        return self.timestamp_text[11:16]


@dataclass(frozen=True, slots=True)
class ForecastWeather:
    city_id: int
    city_name: str
    latitude: float
    longitude: float
    country: str
    population: int
    timezone_shift: int
    sunrise: int
    sunset: int
    forecasts: List[ThreeHourForecast] = field(default_factory=list)
    count: int = 0
    status_code: int = 200
    message: int = 0


@dataclass(frozen=True, slots=True)
class FetchError:
    """A failed fetch. kind is 'network', 'http' or 'parse'."""
    city_name: str
    kind: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind} error for {self.city_name}: {self.message}"


CurrentResult = Union[CurrentWeather, FetchError]
ForecastResult = Union[ForecastWeather, FetchError]
