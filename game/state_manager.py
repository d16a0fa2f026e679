"""
Application State Manager

Owns the shared application context and the registered screens.
Handles screen lifecycle and transitions.
"""

import pygame
from typing import Any, Optional, Dict
from dataclasses import dataclass, field

from core.cities import CityCatalog
from core.settings import Settings
from weather.models import ForecastWeather
from weather.source import WeatherSource
from weather.worker import FetchChannel, make_executor
from .toggle_manager import ToggleManager


@dataclass
class AppContext:
    """
    Shared, explicitly passed state

    Read-only catalog and settings plus the toggles the panel shows.
    """
    settings: Settings
    catalog: CityCatalog
    weather: WeatherSource
    toggles: ToggleManager
    executor: Any = field(default=None, repr=False)

    def __post_init__(self):
        if self.executor is None:
            self.executor = make_executor()

    def new_channel(self, name: str) -> FetchChannel:
        return FetchChannel(self.executor, name)

    def shutdown(self):
        self.executor.shutdown(wait=False, cancel_futures=True)

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        if not settings.api_key:
            print("Warning: OPENWEATHER_API_KEY is not set - weather requests will fail")
        catalog = CityCatalog.from_file(settings.cities_path)
        source = WeatherSource(settings.api_key, country=settings.country,
                               units=settings.units, timeout=settings.http_timeout)
        return cls(settings=settings, catalog=catalog, weather=source,
                   toggles=ToggleManager(settings.default_toggles))


@dataclass(frozen=True)
class ForecastHandoff:
    """Snapshot carried from the map screen to the forecast screen."""
    city_name: str
    forecast: Optional[ForecastWeather] = None


class StateManager:
    """
    Manages screen navigation

    Responsibilities:
    - Screen registration and lifecycle
    - Navigation between screens (with an optional handoff payload)
    - Screen stack for back navigation
    """

    def __init__(self, context: AppContext):
        """Initialize state manager"""
        self.context = context
        self.screens: Dict[str, 'BaseScreen'] = {}
        self.current_screen: Optional[str] = None
        self.screen_stack: list[str] = []  # For back navigation

    def register_screen(self, name: str, screen: 'BaseScreen'):
        """
        Register a screen

        Args:
            name: Screen identifier
            screen: Screen instance
        """
        self.screens[name] = screen
        print(f"Registered screen: {name}")

    def switch_to(self, screen_name: str, push_stack: bool = True, payload: Any = None):
        """
        Switch to a screen

        Args:
            screen_name: Name of screen to switch to
            push_stack: If True, push current screen to stack (for back nav)
            payload: Passed to the new screen's on_enter
        """
        if screen_name not in self.screens:
            print(f"Warning: Screen '{screen_name}' not registered!")
            return

        # Exit current screen
        if self.current_screen:
            if push_stack:
                self.screen_stack.append(self.current_screen)
            self.screens[self.current_screen].on_exit()

        # Enter new screen
        self.current_screen = screen_name
        self.screens[screen_name].on_enter(payload)

        print(f"Switched to screen: {screen_name}")

    def go_back(self) -> bool:
        """
        Go back to previous screen

        Returns:
            True if went back, False if no previous screen
        """
        if not self.screen_stack:
            return False

        previous = self.screen_stack.pop()
        self.switch_to(previous, push_stack=False)
        return True

    def update(self, dt: float):
        if self.current_screen:
            self.screens[self.current_screen].update(dt)

    def render(self, surface: pygame.Surface):
        if self.current_screen:
            self.screens[self.current_screen].render(surface)

    def handle_input(self, events: list[pygame.event.Event]):
        """
        Handle input for current screen

        Args:
            events: List of pygame events
        """
        if not self.current_screen:
            return

        # Let current screen handle input
        next_screen = self.screens[self.current_screen].handle_input(events)

        # Check if screen requested navigation
        if next_screen == 'BACK':
            self.go_back()
        elif next_screen:
            payload = self.screens[self.current_screen].pop_handoff()
            self.switch_to(next_screen, payload=payload)
