"""
UI package - pygame screens and controls for the weather map.
"""

from .theme import get_theme, Colors, Fonts
from .base_screen import BaseScreen
from .components import Button, ToggleButton, Dropdown, KeyIcon, Panel, Clickable
from .screen_map import MapScreen
from .screen_forecast import ForecastScreen

__all__ = [
    "get_theme",
    "Colors",
    "Fonts",
    "BaseScreen",
    "Button",
    "ToggleButton",
    "Dropdown",
    "KeyIcon",
    "Panel",
    "Clickable",
    "MapScreen",
    "ForecastScreen",
]
