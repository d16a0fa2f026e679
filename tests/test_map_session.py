"""Tests for map selection, toggles and the forecast gate."""

import pytest

from core.types import GeoPoint
from game.map_session import MapSession, PROMPT_TEXT
from game.state_manager import ForecastHandoff

LONDON = GeoPoint(51.5074, -0.1278)
GLASGOW = GeoPoint(55.8642, -4.2518)


@pytest.fixture
def session(context):
    return MapSession(context)


def click_on(session, point):
    p = session.viewport.geo_to_pixel(point)
    return session.pointer_click(p.x, p.y)


class TestSelection:
    def test_prompt_before_click(self, session):
        assert session.panel_rows() == []
        assert session.panel_status() == PROMPT_TEXT
        assert session.connecting_line() is None

    def test_click_selects_nearest_city(self, session, fake_source):
        city = click_on(session, LONDON)
        assert city.name == "London"
        assert session.selected_city.name == "London"
        assert fake_source.current_calls == ["London"]
        assert fake_source.forecast_calls == ["London"]

    def test_click_records_geo_point(self, session):
        session.pointer_click(200, 300)
        geo = session.click_geo()
        back = session.viewport.geo_to_pixel(geo)
        assert back.x == pytest.approx(200)
        assert back.y == pytest.approx(300)

    def test_weather_rows_after_poll(self, session):
        click_on(session, LONDON)
        session.poll()
        rows = dict(session.panel_rows())
        assert rows["Nearest City"] == "London"
        assert rows["Description"] == "light rain"
        assert rows["Temperature"] == "12.5 °C"
        assert session.panel_status() == ""

    def test_failed_fetch_shows_no_data(self, session, fake_source):
        fake_source.fail.add("Cardiff")
        click_on(session, GeoPoint(51.48, -3.18))
        session.poll()
        rows = dict(session.panel_rows())
        assert rows["Temperature"] == "No data"
        assert session.panel_status() == "No data"

    def test_markers_flag_selected_city(self, session):
        click_on(session, GLASGOW)
        selected = [p for p, is_selected in session.markers() if is_selected]
        assert len(selected) == 1
        assert selected[0] == session.viewport.geo_to_pixel(GLASGOW)

    def test_only_latest_click_result_applied(self, context, manual_executor):
        session = MapSession(context)
        click_on(session, LONDON)           # jobs 0 (current), 1 (forecast)
        click_on(session, GLASGOW)          # jobs 2, 3
        assert session.selection.request_token == 2

        manual_executor.run(0)
        session.poll()
        assert session.current_weather is None
        assert dict(session.panel_rows())["Temperature"] == "Loading..."

        manual_executor.run(2)
        session.poll()
        assert session.current_weather.city_name == "Glasgow"

    def test_empty_catalog(self, context):
        context.catalog = type(context.catalog)()
        session = MapSession(context)
        assert session.pointer_click(100, 100) is None
        assert session.selected_city is None


class TestToggles:
    def test_toggle_adds_row_in_activation_order(self, session):
        click_on(session, LONDON)
        session.poll()
        assert session.toggle("Humidity") is True
        labels = [label for label, _ in session.panel_rows()]
        assert labels == ["Nearest City", "Description", "Temperature", "Humidity"]

    def test_toggle_off(self, session):
        assert session.toggle("Description") is False
        assert not session.context.toggles.is_active("Description")


class TestForwardGate:
    def test_closed_without_selection(self, session):
        for _ in range(40):
            session.zoom_in()
        assert not session.can_switch_forward()
        assert session.forecast_handoff() is None

    def test_closed_until_fully_zoomed(self, session):
        click_on(session, GLASGOW)
        assert not session.can_switch_forward()
        for _ in range(40):
            session.zoom_in()
        assert session.can_switch_forward()

    def test_closed_when_city_off_screen(self, session):
        click_on(session, LONDON)
        for _ in range(40):
            session.zoom_in()
        assert not session.is_selected_visible()
        assert not session.can_switch_forward()

        # pan the map until London comes into view
        for _ in range(60):
            session.pan_right()
        for _ in range(100):
            session.pan_down()
        assert session.can_switch_forward()

    def test_handoff_carries_forecast(self, session):
        click_on(session, GLASGOW)
        session.poll()
        for _ in range(40):
            session.zoom_in()
        handoff = session.forecast_handoff()
        assert isinstance(handoff, ForecastHandoff)
        assert handoff.city_name == "Glasgow"
        assert len(handoff.forecast.forecasts) == 40

    def test_forecast_dropped_when_city_changes(self, session):
        click_on(session, GLASGOW)
        session.poll()
        assert session.forecast is not None
        click_on(session, LONDON)
        assert session.forecast is None


class TestZoomPan:
    def test_unknown_action(self, session, capsys):
        session.apply_action("spin")
        assert "unknown map action" in capsys.readouterr().out

    def test_actions(self, session):
        session.apply_action("zoom_in")
        assert session.viewport.zoom == pytest.approx(1.1)
        session.apply_action("zoom_in")
        session.apply_action("pan_left")
        assert session.viewport.pan_x == 20
        session.apply_action("zoom_out")
        assert session.viewport.zoom == pytest.approx(1.1)
