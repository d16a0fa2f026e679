"""Shared fixtures for the weather map tests."""

import os

# Headless pygame: must be set before pygame opens a display
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from concurrent.futures import Executor, Future
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pygame
import pytest

from core.settings import Settings
from game.state_manager import AppContext
from game.toggle_manager import ToggleManager
from core.cities import CityCatalog
from weather.source import parse_current, parse_forecast
from weather.models import FetchError

CITIES_TEXT = """\
London,51.5074,-0.1278
Glasgow,55.8642,-4.2518
Cardiff,51.4816,-3.1791
Belfast,54.5973,-5.9301
"""


class ImmediateExecutor(Executor):
    """Runs submitted work inline so results are ready on the next poll."""

    def submit(self, fn, /, *args, **kwargs):
        fut = Future()
        try:
            fut.set_result(fn(*args, **kwargs))
        except Exception as e:
            fut.set_exception(e)
        return fut


class ManualExecutor(Executor):
    """Holds submitted work until the test runs it, in any order."""

    def __init__(self):
        self.jobs = []

    def submit(self, fn, /, *args, **kwargs):
        fut = Future()
        self.jobs.append((fut, fn, args, kwargs))
        return fut

    def run(self, index):
        fut, fn, args, kwargs = self.jobs[index]
        if fut.set_running_or_notify_cancel():
            fut.set_result(fn(*args, **kwargs))


def current_payload(name="London", temp=12.5, rain=None):
    data = {
        "coord": {"lon": -0.1278, "lat": 51.5074},
        "weather": [{"id": 500, "main": "Rain", "description": "light rain", "icon": "10d"}],
        "base": "stations",
        "main": {"temp": temp, "feels_like": temp - 1.5, "temp_min": temp - 2,
                 "temp_max": temp + 2, "pressure": 1012, "humidity": 81},
        "visibility": 10000,
        "wind": {"speed": 4.1, "deg": 240},
        "clouds": {"all": 75},
        "dt": 1700000000,
        "sys": {"type": 2, "id": 2075535, "country": "GB",
                "sunrise": 1699946400, "sunset": 1699979400},
        "timezone": 0,
        "id": 2643743,
        "name": name,
        "cod": 200,
    }
    if rain is not None:
        data["rain"] = {"1h": rain}
    return data


def forecast_payload(name="London", temps=None):
    if temps is None:
        temps = [5.0 + (i % 8) for i in range(40)]
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    entries = []
    for i, t in enumerate(temps):
        when = start + timedelta(hours=3 * i)
        entries.append({
            "dt": int(when.timestamp()),
            "dt_txt": when.strftime("%Y-%m-%d %H:%M:%S"),
            "main": {"temp": t, "feels_like": t - 2, "temp_min": t, "temp_max": t,
                     "pressure": 1010, "sea_level": 1010, "grnd_level": 1005,
                     "humidity": 70, "temp_kf": 0},
            "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
            "clouds": {"all": 0},
            "wind": {"speed": 3.0, "deg": 180, "gust": 5.0},
            "visibility": 10000,
            "pop": 0,
            "sys": {"pod": "d"},
        })
    return {
        "cod": "200",
        "message": 0,
        "cnt": len(entries),
        "list": entries,
        "city": {"id": 2643743, "name": name, "coord": {"lat": 51.5074, "lon": -0.1278},
                 "country": "GB", "population": 1000000, "timezone": 0,
                 "sunrise": 1704096000, "sunset": 1704124800},
    }


class FakeWeatherSource:
    """Stands in for WeatherSource; records which cities were requested."""

    def __init__(self):
        self.current_calls = []
        self.forecast_calls = []
        self.fail = set()

    def fetch_current(self, city_name):
        self.current_calls.append(city_name)
        if city_name in self.fail:
            return FetchError(city_name, "http", "404 Client Error")
        return parse_current(current_payload(city_name))

    def fetch_forecast(self, city_name):
        self.forecast_calls.append(city_name)
        if city_name in self.fail:
            return FetchError(city_name, "http", "404 Client Error")
        return parse_forecast(forecast_payload(city_name))


@pytest.fixture
def cities_file(tmp_path) -> Path:
    path = tmp_path / "cities.txt"
    path.write_text(CITIES_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def settings(tmp_path, cities_file) -> Settings:
    return Settings(data_dir=tmp_path)


@pytest.fixture
def fake_source() -> FakeWeatherSource:
    return FakeWeatherSource()


@pytest.fixture
def context(settings, fake_source) -> AppContext:
    ctx = AppContext(
        settings=settings,
        catalog=CityCatalog.from_file(settings.cities_path),
        weather=fake_source,
        toggles=ToggleManager(settings.default_toggles),
        executor=ImmediateExecutor(),
    )
    yield ctx
    ctx.shutdown()


@pytest.fixture
def make_current():
    return lambda **kw: parse_current(current_payload(**kw))


@pytest.fixture
def make_forecast():
    return lambda **kw: parse_forecast(forecast_payload(**kw))


@pytest.fixture
def display():
    """Headless display surface at map size."""
    pygame.init()
    surface = pygame.display.set_mode((471, 788))
    yield surface
    pygame.display.quit()


@pytest.fixture
def current_json():
    return current_payload


@pytest.fixture
def forecast_json():
    return forecast_payload


@pytest.fixture
def manual_executor(context):
    """Swap the context's executor for one the test drives by hand."""
    executor = ManualExecutor()
    context.executor = executor
    return executor
