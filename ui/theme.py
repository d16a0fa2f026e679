"""
UI Theme - Map Classroom Style

Defines colors, fonts, and drawing helpers for the weather map UI:
white panels with black text over a sea-blue background.
"""

import pygame
from typing import Tuple
from dataclasses import dataclass


class Colors:
    """
    Color palette

    Map colors first, then widget states.
    """

    # Map
    SEA = (22, 187, 255)
    LAND = (214, 222, 190)          # fallback when the map image is missing
    CITY = (255, 255, 255)
    CITY_SELECTED = (255, 175, 175)
    CLICK_MARKER = (255, 255, 0)
    CONNECTING_LINE = (255, 255, 0)

    # Panels
    BG_PANEL = (255, 255, 255)
    BG_SCREEN = (238, 238, 238)
    FG_TEXT = (0, 0, 0)
    FG_DIM = (90, 90, 90)
    BORDER = (0, 0, 0)

    # Buttons
    BUTTON_INACTIVE = (192, 192, 192)
    BUTTON_HOVER = (255, 255, 0)
    BUTTON_PRESSED = (255, 200, 0)
    TOGGLE_ACTIVE = (0, 255, 0)
    TOGGLE_ACTIVE_HOVER = (50, 205, 50)

    # Key icons
    KEY_DEFAULT = (128, 128, 128)
    KEY_PRESSED = (255, 255, 0)
    KEY_BLOCKED = (0, 0, 0)

    # Graph
    GRAPH_GRID = (192, 192, 192)
    GRAPH_LINE = (255, 0, 0)
    GRAPH_X_AXIS = (0, 0, 255)
    GRAPH_Y_AXIS = (255, 0, 0)

    ERROR = (200, 30, 30)


@dataclass
class FontConfig:
    """Font configuration"""
    family: str = "Arial"
    size_title: int = 18
    size_large: int = 16
    size_normal: int = 14
    size_small: int = 12
    size_tiny: int = 10
    bold_title: bool = True


class Fonts:
    """
    Font manager

    Loads and caches fonts on first use.
    """

    _initialized = False
    _fonts: dict = {}
    _config = FontConfig()

    @classmethod
    def initialize(cls, config: FontConfig = None):
        """
        Initialize fonts

        Args:
            config: Font configuration (optional)
        """
        if config is not None:
            cls._config = config

        pygame.font.init()

        # Try the configured family, fall back to common sans/mono faces
        families = [cls._config.family, "DejaVu Sans", "Liberation Sans", "monospace"]

        for family in families:
            try:
                cls._fonts['title'] = pygame.font.SysFont(
                    family, cls._config.size_title, bold=cls._config.bold_title
                )
                cls._fonts['large'] = pygame.font.SysFont(family, cls._config.size_large)
                cls._fonts['normal'] = pygame.font.SysFont(family, cls._config.size_normal)
                cls._fonts['small'] = pygame.font.SysFont(family, cls._config.size_small)
                cls._fonts['tiny'] = pygame.font.SysFont(family, cls._config.size_tiny)
                cls._fonts['bold'] = pygame.font.SysFont(family, cls._config.size_normal, bold=True)

                cls._initialized = True
                break
            except (OSError, pygame.error):
                continue

        if not cls._initialized:
            # Ultimate fallback: pygame default font
            cls._fonts['title'] = pygame.font.Font(None, cls._config.size_title + 6)
            cls._fonts['large'] = pygame.font.Font(None, cls._config.size_large + 6)
            cls._fonts['normal'] = pygame.font.Font(None, cls._config.size_normal + 6)
            cls._fonts['small'] = pygame.font.Font(None, cls._config.size_small + 6)
            cls._fonts['tiny'] = pygame.font.Font(None, cls._config.size_tiny + 6)
            cls._fonts['bold'] = pygame.font.Font(None, cls._config.size_normal + 6)
            cls._fonts['bold'].set_bold(True)
            cls._initialized = True

    @classmethod
    def get(cls, size: str = 'normal') -> pygame.font.Font:
        """
        Get font by size name

        Args:
            size: 'title', 'large', 'normal', 'bold', 'small', or 'tiny'

        Returns:
            Pygame font object
        """
        if not cls._initialized:
            cls.initialize()

        return cls._fonts.get(size, cls._fonts['normal'])

    @classmethod
    def title(cls) -> pygame.font.Font:
        return cls.get('title')

    @classmethod
    def large(cls) -> pygame.font.Font:
        return cls.get('large')

    @classmethod
    def normal(cls) -> pygame.font.Font:
        return cls.get('normal')

    @classmethod
    def bold(cls) -> pygame.font.Font:
        return cls.get('bold')

    @classmethod
    def small(cls) -> pygame.font.Font:
        return cls.get('small')

    @classmethod
    def tiny(cls) -> pygame.font.Font:
        return cls.get('tiny')


class Theme:
    """
    Complete theme configuration

    Bundles colors, fonts, and spacing into single object.
    """

    def __init__(self):
        """Initialize theme"""
        self.colors = Colors()
        self.fonts = Fonts()

        # Spacing and sizing
        self.padding = 8
        self.border_width = 1
        self.row_height = 20

    def draw_border(self, surface: pygame.Surface, rect: pygame.Rect,
                   color: Tuple[int, int, int] = None, width: int = None):
        if color is None:
            color = self.colors.BORDER
        if width is None:
            width = self.border_width

        pygame.draw.rect(surface, color, rect, width)

    def draw_panel(self, surface: pygame.Surface, rect: pygame.Rect,
                  title: str = "",
                  fg_color: Tuple[int, int, int] = None,
                  bg_color: Tuple[int, int, int] = None):
        """
        Draw panel with border (standard UI element)

        Args:
            surface: Target surface
            rect: Panel rectangle
            title: Optional title text
            fg_color: Border color (None = use default)
            bg_color: Fill color (None = use default)
        """
        if fg_color is None:
            fg_color = self.colors.BORDER
        if bg_color is None:
            bg_color = self.colors.BG_PANEL

        pygame.draw.rect(surface, bg_color, rect)
        self.draw_border(surface, rect, fg_color)

        if title:
            self.draw_text(surface, self.fonts.bold(),
                         rect.x + 10, rect.y + 6,
                         title, fg_color)

    def draw_text(self, surface: pygame.Surface, font: pygame.font.Font,
                 x: int, y: int, text: str, color: Tuple[int, int, int],
                 align: str = 'left'):
        """
        Draw antialiased text

        Args:
            surface: Target surface
            font: Font to use
            x, y: Position
            text: Text to render
            color: Text color
            align: 'left', 'center', or 'right'
        """
        rendered = font.render(text, True, color)

        if align == 'center':
            x -= rendered.get_width() // 2
        elif align == 'right':
            x -= rendered.get_width()

        surface.blit(rendered, (x, y))


# Global theme instance
_theme = None

def get_theme() -> Theme:
    """Get global theme instance"""
    global _theme
    if _theme is None:
        _theme = Theme()
        _theme.fonts.initialize()
    return _theme
