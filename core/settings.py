"""
Application settings.

Defaults describe the UK base map (471 x 788 px). Environment variables
override the API and data-path settings:

    OPENWEATHER_API_KEY      API key (required for live data)
    OPENWEATHER_COUNTRY      country code appended to city queries (GB)
    OPENWEATHER_UNITS        metric / imperial / standard (metric)
    WEATHERMAP_DATA_DIR      directory holding cities.txt and the map image
    WEATHERMAP_HTTP_TIMEOUT  request timeout in seconds (10)
"""

from __future__ import annotations
import os
from dataclasses import dataclass, field
from pathlib import Path

from .types import MapBounds

UK_BOUNDS = MapBounds(top_lat=61.10, bottom_lat=49.00, left_lon=-10.48, right_lon=1.77)

DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"


@dataclass
class Settings:
    # Map
    bounds: MapBounds = UK_BOUNDS
    map_width: int = 471
    map_height: int = 788
    header_inset: float = 20.0

    # Zoom / pan
    zoom_min: float = 1.0
    zoom_max: float = 5.0
    zoom_step: float = 0.1
    pan_step: int = 20
    input_tick_s: float = 1.0 / 20.0    # held-key repeat interval

    # Files
    data_dir: Path = DEFAULT_DATA_DIR
    cities_file: str = "cities.txt"
    map_image_file: str = "united-kingdom.png"

    # OpenWeatherMap
    api_key: str = ""
    country: str = "GB"
    units: str = "metric"
    http_timeout: float = 10.0

    # Panel toggles
    toggle_names: tuple = field(default_factory=lambda: (
        "Timestamp", "Description", "Temperature",
        "Feels Like", "Humidity", "Wind Speed",
        "Rain Volume", "Sunrise", "Sunset",
    ))
    default_toggles: tuple = ("Description", "Temperature")

    @property
    def cities_path(self) -> Path:
        return Path(self.data_dir) / self.cities_file

    @property
    def map_image_path(self) -> Path:
        return Path(self.data_dir) / self.map_image_file

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ
        s = cls()
        s.api_key = env.get("OPENWEATHER_API_KEY", s.api_key)
        s.country = env.get("OPENWEATHER_COUNTRY", s.country)
        s.units = env.get("OPENWEATHER_UNITS", s.units)
        if env.get("WEATHERMAP_DATA_DIR"):
            s.data_dir = Path(env["WEATHERMAP_DATA_DIR"])
        timeout = env.get("WEATHERMAP_HTTP_TIMEOUT")
        if timeout:
            try:
                s.http_timeout = float(timeout)
            except ValueError:
                print(f"Warning: invalid WEATHERMAP_HTTP_TIMEOUT '{timeout}', using {s.http_timeout}")
        return s
