"""
Weather Source

Blocking fetch of current conditions and the 5-day / 3-hour forecast from
OpenWeatherMap. Every failure (network, HTTP status, malformed JSON) comes
back as a FetchError value; nothing is raised to the caller.
"""

from __future__ import annotations
from typing import Any, Dict

import requests

from .models import (
    CurrentWeather, ThreeHourForecast, ForecastWeather, FetchError,
    CurrentResult, ForecastResult,
)

API_BASE_URL = "https://api.openweathermap.org/data/2.5"


# ---------------------------------------------------------------------------
# JSON -> records
# ---------------------------------------------------------------------------

def parse_current(data: Dict[str, Any]) -> CurrentWeather:
    """Map a /weather response to CurrentWeather. Raises KeyError/TypeError/ValueError."""
    coord = data["coord"]
    weather = data["weather"][0]
    main = data["main"]
    wind = data["wind"]
    sys_ = data["sys"]

    return CurrentWeather(
        city_id=int(data["id"]),
        city_name=str(data["name"]),
        latitude=float(coord["lat"]),
        longitude=float(coord["lon"]),
        weather_id=int(weather["id"]),
        weather_main=str(weather["main"]),
        description=str(weather["description"]),
        icon=str(weather["icon"]),
        temperature=float(main["temp"]),
        feels_like=float(main["feels_like"]),
        temp_min=float(main["temp_min"]),
        temp_max=float(main["temp_max"]),
        pressure=int(main["pressure"]),
        humidity=int(main["humidity"]),
        sea_level_pressure=int(main.get("sea_level", -1)),
        ground_level_pressure=int(main.get("grnd_level", -1)),
        visibility=int(data.get("visibility", -1)),
        wind_speed=float(wind["speed"]),
        wind_direction=int(wind.get("deg", 0)),
        wind_gust=float(wind.get("gust", -1.0)),
        cloudiness=int(data["clouds"]["all"]),
        rain_volume=float(data.get("rain", {}).get("1h", 0.0)),
        snow_volume=float(data.get("snow", {}).get("1h", 0.0)),
        timestamp=int(data["dt"]),
        country=str(sys_.get("country", "")),
        sunrise=int(sys_["sunrise"]),
        sunset=int(sys_["sunset"]),
        timezone_shift=int(data.get("timezone", 0)),
        base=str(data.get("base", "")),
        system_type=int(sys_.get("type", -1)),
        system_id=int(sys_.get("id", -1)),
        message=str(sys_.get("message", "No message found")),
        status_code=int(data.get("cod", 200)),
    )


def parse_forecast_entry(entry: Dict[str, Any]) -> ThreeHourForecast:
    main = entry["main"]
    weather = entry["weather"][0]
    wind = entry["wind"]

    return ThreeHourForecast(
        timestamp=int(entry["dt"]),
        timestamp_text=str(entry["dt_txt"]),
        temperature=float(main["temp"]),
        feels_like=float(main["feels_like"]),
        temp_min=float(main["temp_min"]),
        temp_max=float(main["temp_max"]),
        pressure=int(main["pressure"]),
        sea_level_pressure=int(main.get("sea_level", -1)),
        ground_level_pressure=int(main.get("grnd_level", -1)),
        humidity=int(main["humidity"]),
        temp_kf=float(main.get("temp_kf", 0.0)),
        weather_id=int(weather["id"]),
        weather_main=str(weather["main"]),
        description=str(weather["description"]),
        icon=str(weather["icon"]),
        cloudiness=int(entry["clouds"]["all"]),
        wind_speed=float(wind["speed"]),
        wind_direction=int(wind.get("deg", 0)),
        wind_gust=float(wind.get("gust", -1.0)),
        visibility=int(entry.get("visibility", -1)),
        precipitation_prob=float(entry.get("pop", 0.0)),
        rain_volume=float(entry.get("rain", {}).get("3h", 0.0)),
        snow_volume=float(entry.get("snow", {}).get("3h", 0.0)),
        part_of_day=str(entry.get("sys", {}).get("pod", "")),
    )


def parse_forecast(data: Dict[str, Any]) -> ForecastWeather:
    """Map a /forecast response to ForecastWeather."""
    city = data["city"]
    forecasts = [parse_forecast_entry(e) for e in data["list"]]

    return ForecastWeather(
        city_id=int(city["id"]),
        city_name=str(city["name"]),
        latitude=float(city["coord"]["lat"]),
        longitude=float(city["coord"]["lon"]),
        country=str(city.get("country", "")),
        population=int(city.get("population", 0)),
        timezone_shift=int(city.get("timezone", 0)),
        sunrise=int(city.get("sunrise", 0)),
        sunset=int(city.get("sunset", 0)),
        forecasts=forecasts,
        count=int(data.get("cnt", len(forecasts))),
        status_code=int(data.get("cod", 200)),
        message=int(data.get("message", 0)),
    )


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------

class WeatherSource:
    """
    OpenWeatherMap client.

    Usage:
        source = WeatherSource(api_key="...")
        result = source.fetch_current("London")
        if isinstance(result, FetchError):
            ...
    """

    def __init__(self, api_key: str, country: str = "GB", units: str = "metric",
                 timeout: float = 10.0, base_url: str = API_BASE_URL):
        self.api_key = api_key
        self.country = country
        self.units = units
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")

    def _params(self, city_name: str) -> Dict[str, str]:
        query = f"{city_name},{self.country}" if self.country else city_name
        return {"q": query, "appid": self.api_key, "units": self.units}

    def _get_json(self, endpoint: str, city_name: str):
        """GET endpoint; returns parsed JSON or a FetchError."""
        url = f"{self.base_url}/{endpoint}"
        try:
            r = requests.get(url, params=self._params(city_name), timeout=self.timeout)
            r.raise_for_status()
        except requests.exceptions.HTTPError as e:
            print(f"Error fetching weather data: {e}")
            return FetchError(city_name, "http", str(e))
        except requests.exceptions.RequestException as e:
            print(f"Error fetching weather data: {e}")
            return FetchError(city_name, "network", str(e))

        try:
            return r.json()
        except ValueError as e:
            print(f"Error decoding weather data for {city_name}: {e}")
            return FetchError(city_name, "parse", f"invalid JSON: {e}")

    def fetch_current(self, city_name: str) -> CurrentResult:
        data = self._get_json("weather", city_name)
        if isinstance(data, FetchError):
            return data
        try:
            return parse_current(data)
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            print(f"Error parsing current weather for {city_name}: {e!r}")
            return FetchError(city_name, "parse", repr(e))

    def fetch_forecast(self, city_name: str) -> ForecastResult:
        data = self._get_json("forecast", city_name)
        if isinstance(data, FetchError):
            return data
        try:
            return parse_forecast(data)
        except (KeyError, IndexError, TypeError, ValueError, AttributeError) as e:
            print(f"Error parsing forecast for {city_name}: {e!r}")
            return FetchError(city_name, "parse", repr(e))
