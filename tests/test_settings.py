"""Tests for environment-driven settings."""

from pathlib import Path

from core.settings import Settings, UK_BOUNDS


def test_defaults():
    s = Settings()
    assert s.bounds == UK_BOUNDS
    assert (s.map_width, s.map_height) == (471, 788)
    assert s.default_toggles == ("Description", "Temperature")
    assert s.cities_path.name == "cities.txt"


def test_from_env():
    s = Settings.from_env({
        "OPENWEATHER_API_KEY": "abc",
        "OPENWEATHER_COUNTRY": "IE",
        "OPENWEATHER_UNITS": "imperial",
        "WEATHERMAP_DATA_DIR": "/tmp/wm",
        "WEATHERMAP_HTTP_TIMEOUT": "3.5",
    })
    assert s.api_key == "abc"
    assert s.country == "IE"
    assert s.units == "imperial"
    assert s.cities_path == Path("/tmp/wm") / "cities.txt"
    assert s.http_timeout == 3.5


def test_bad_timeout_keeps_default(capsys):
    s = Settings.from_env({"WEATHERMAP_HTTP_TIMEOUT": "soon"})
    assert s.http_timeout == 10.0
    assert "invalid WEATHERMAP_HTTP_TIMEOUT" in capsys.readouterr().out


def test_bundled_city_list_loads():
    from core.cities import CityCatalog
    catalog = CityCatalog.from_file(Settings().cities_path)
    assert catalog.get("London") is not None
    for city in catalog:
        assert UK_BOUNDS.contains(city.location), city.name


def test_default_data_dir_ships_with_core_package():
    import core
    s = Settings()
    assert s.data_dir == Path(core.__file__).resolve().parent / "data"
    assert s.cities_path.is_file()
