"""Tests for the OpenWeatherMap client with the HTTP layer mocked out."""

from unittest.mock import MagicMock, patch

import pytest
import requests

from weather.formatting import format_weather_value, format_unix_time
from weather.models import CurrentWeather, FetchError, ForecastWeather
from weather.source import WeatherSource


def _response(payload=None, status_error=None, json_error=None):
    response = MagicMock()
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def source():
    return WeatherSource("test-key", country="GB", units="metric", timeout=5.0)


class TestFetchCurrent:
    def test_success(self, source, current_json):
        with patch("weather.source.requests.get",
                   return_value=_response(current_json("London", temp=11.0))) as get:
            result = source.fetch_current("London")

        assert isinstance(result, CurrentWeather)
        assert result.city_name == "London"
        assert result.temperature == 11.0
        assert result.rain_volume == 0.0
        get.assert_called_once_with(
            "https://api.openweathermap.org/data/2.5/weather",
            params={"q": "London,GB", "appid": "test-key", "units": "metric"},
            timeout=5.0,
        )

    def test_http_error(self, source, capsys):
        error = requests.exceptions.HTTPError("401 Client Error: Unauthorized")
        with patch("weather.source.requests.get", return_value=_response(status_error=error)):
            result = source.fetch_current("London")

        assert isinstance(result, FetchError)
        assert result.kind == "http"
        assert result.city_name == "London"
        assert "Error fetching weather data" in capsys.readouterr().out

    def test_network_error(self, source):
        with patch("weather.source.requests.get",
                   side_effect=requests.exceptions.ConnectionError("no route")):
            result = source.fetch_current("Leeds")
        assert isinstance(result, FetchError)
        assert result.kind == "network"

    def test_invalid_json(self, source):
        with patch("weather.source.requests.get",
                   return_value=_response(json_error=ValueError("Expecting value"))):
            result = source.fetch_current("Leeds")
        assert result.kind == "parse"

    def test_missing_fields(self, source, current_json):
        payload = current_json()
        del payload["main"]
        with patch("weather.source.requests.get", return_value=_response(payload)):
            result = source.fetch_current("London")
        assert isinstance(result, FetchError)
        assert result.kind == "parse"


class TestFetchForecast:
    def test_success(self, source, forecast_json):
        with patch("weather.source.requests.get",
                   return_value=_response(forecast_json("Cardiff"))) as get:
            result = source.fetch_forecast("Cardiff")

        assert isinstance(result, ForecastWeather)
        assert result.city_name == "Cardiff"
        assert len(result.forecasts) == 40
        assert result.forecasts[1].time_of_day == "03:00"
        assert get.call_args.args[0].endswith("/forecast")

    def test_no_country(self, forecast_json):
        source = WeatherSource("k", country="")
        with patch("weather.source.requests.get",
                   return_value=_response(forecast_json())) as get:
            source.fetch_forecast("London")
        assert get.call_args.kwargs["params"]["q"] == "London"


class TestFormatting:
    def test_panel_values(self, make_current):
        weather = make_current(temp=12.5, rain=0.4)
        assert format_weather_value("Temperature", weather) == "12.5 °C"
        assert format_weather_value("Feels Like", weather) == "11.0 °C"
        assert format_weather_value("Humidity", weather) == "81%"
        assert format_weather_value("Wind Speed", weather) == "4.1 m/s"
        assert format_weather_value("Rain Volume", weather) == "0.4mm/h"
        assert format_weather_value("Description", weather) == "light rain"

    def test_zero_rain_is_no_data(self, make_current):
        assert format_weather_value("Rain Volume", make_current()) == "No data"

    def test_missing_record(self):
        assert format_weather_value("Temperature", None) == "No data"

    def test_times_are_utc(self):
        assert format_unix_time(0) == "01/01/1970 00:00:00"
        assert format_unix_time(3661, with_date=False) == "01:01:01"
