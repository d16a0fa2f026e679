"""
Base Screen Class

Abstract base class for all screens.
Provides common functionality and enforces screen interface.
"""

import pygame
from abc import ABC, abstractmethod
from typing import Any, Optional
from .theme import get_theme


class BaseScreen(ABC):
    """
    Abstract base class for all screens

    The map and forecast screens inherit from this class and implement the
    required methods.
    """

    def __init__(self, screen_name: str):
        """
        Initialize base screen

        Args:
            screen_name: Unique identifier for this screen
        """
        self.screen_name = screen_name
        self.active = False
        self.theme = get_theme()
        self._handoff: Any = None

    @abstractmethod
    def on_enter(self, payload: Any = None):
        """
        Called when screen becomes active

        Args:
            payload: Optional data handed over by the previous screen
        """
        self.active = True

    @abstractmethod
    def on_exit(self):
        """Called when screen becomes inactive"""
        self.active = False

    @abstractmethod
    def handle_input(self, events: list[pygame.event.Event]) -> Optional[str]:
        """
        Handle input events

        Args:
            events: List of pygame events for this frame

        Returns:
            Name of screen to switch to, 'BACK', or None to stay
        """
        pass

    @abstractmethod
    def update(self, dt: float):
        """
        Update screen logic

        Args:
            dt: Delta time in seconds since last update
        """
        pass

    @abstractmethod
    def render(self, surface: pygame.Surface):
        """
        Render screen

        Args:
            surface: Main display surface to render to
        """
        pass

    # Utility methods (available to all screens)

    def pop_handoff(self) -> Any:
        """Return and clear the payload prepared for the next screen."""
        handoff, self._handoff = self._handoff, None
        return handoff

    def draw_header(self, surface: pygame.Surface, rect: pygame.Rect,
                   title: str, subtitle: str = ""):
        """
        Draw standard header

        Args:
            surface: Target surface
            rect: Header rectangle
            title: Main title
            subtitle: Optional subtitle
        """
        self.theme.draw_panel(surface, rect)

        self.theme.draw_text(surface, self.theme.fonts.title(),
                           rect.x + 10, rect.y + 6,
                           title, self.theme.colors.FG_TEXT)

        if subtitle:
            self.theme.draw_text(surface, self.theme.fonts.small(),
                               rect.right - 10, rect.y + 10,
                               subtitle, self.theme.colors.FG_DIM, align='right')

    def is_active(self) -> bool:
        """Check if screen is currently active"""
        return self.active
