"""
UI Components - Reusable UI Elements

Controls for the weather map screens:
- Clickable: Press/release tracking with a callback
- Button: Labelled push button
- ToggleButton: Button with an ON/OFF state
- Dropdown: Button that opens a list of options
- KeyIcon: Arrow key indicator (active / pressed / blocked)
- Panel: Container with border and rows of text
"""

import pygame
from typing import Optional, Callable, List, Tuple
from dataclasses import dataclass
from .theme import get_theme


@dataclass
class ButtonState:
    """Button state"""
    hovered: bool = False
    pressed: bool = False


class Clickable:
    """
    Click tracking for a rectangle

    The callback fires on mouse release inside the rect, only when the
    press also started inside it.
    """

    def __init__(self, rect: pygame.Rect, callback: Optional[Callable] = None):
        self.rect = rect
        self.callback = callback
        self.state = ButtonState()
        self.enabled = True

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle input event

        Args:
            event: Pygame event

        Returns:
            True if event was handled
        """
        if not self.enabled:
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.state.pressed = True
                return True

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            if self.state.pressed and self.rect.collidepoint(event.pos):
                self.state.pressed = False
                if self.callback:
                    self.callback()
                return True
            self.state.pressed = False

        return False

    def update(self, mouse_pos: Tuple[int, int]):
        """Update hover state based on mouse position"""
        self.state.hovered = self.enabled and self.rect.collidepoint(mouse_pos)


class Button:
    """
    Interactive button component

    White button with black text; yellow on hover, orange while pressed.
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 text: str, callback: Optional[Callable] = None):
        """
        Initialize button

        Args:
            x, y: Position
            width, height: Size
            text: Button text
            callback: Function to call when clicked
        """
        self.click = Clickable(pygame.Rect(x, y, width, height), callback)
        self.text = text
        self.theme = get_theme()

    @property
    def rect(self) -> pygame.Rect:
        return self.click.rect

    @property
    def state(self) -> ButtonState:
        return self.click.state

    def handle_event(self, event: pygame.event.Event) -> bool:
        return self.click.handle_event(event)

    def update(self, mouse_pos: Tuple[int, int]):
        self.click.update(mouse_pos)

    def fill_color(self) -> Tuple[int, int, int]:
        colors = self.theme.colors
        if self.state.pressed:
            return colors.BUTTON_PRESSED
        if self.state.hovered:
            return colors.BUTTON_HOVER
        return colors.BG_PANEL

    def draw(self, surface: pygame.Surface):
        pygame.draw.rect(surface, self.fill_color(), self.rect)
        pygame.draw.rect(surface, self.theme.colors.BORDER, self.rect, 1)

        font = self.theme.fonts.small()
        self.theme.draw_text(surface, font,
                           self.rect.centerx,
                           self.rect.centery - font.get_height() // 2,
                           self.text, self.theme.colors.FG_TEXT, align='center')


class ToggleButton(Button):
    """
    Button with an ON/OFF state

    The state is read from is_on() so it always reflects the shared toggles.
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 key: str, is_on: Callable[[], bool],
                 callback: Optional[Callable] = None):
        super().__init__(x, y, width, height, key, callback)
        self.key = key
        self.is_on = is_on

    def fill_color(self) -> Tuple[int, int, int]:
        colors = self.theme.colors
        if self.state.pressed:
            return colors.BUTTON_PRESSED
        if self.is_on():
            return colors.TOGGLE_ACTIVE_HOVER if self.state.hovered else colors.TOGGLE_ACTIVE
        if self.state.hovered:
            return colors.BUTTON_HOVER
        return colors.BUTTON_INACTIVE

    def draw(self, surface: pygame.Surface):
        self.text = f"{self.key} [{'ON' if self.is_on() else 'OFF'}]"
        super().draw(surface)


class Dropdown:
    """
    Drop-down selector

    A header button showing the current option; clicking it opens the
    option list below. Picking an option closes the list and calls
    on_select(option).
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 options: List[str], selected: str,
                 on_select: Optional[Callable[[str], None]] = None):
        self.options = list(options)
        self.selected = selected
        self.on_select = on_select
        self.open = False
        self.header = Button(x, y, width, height, selected, self._toggle_open)
        self.items = [
            Button(x, y + height * (i + 1), width, height, option,
                   lambda o=option: self._pick(o))
            for i, option in enumerate(self.options)
        ]

    def _toggle_open(self):
        self.open = not self.open

    def _pick(self, option: str):
        self.selected = option
        self.header.text = option
        self.open = False
        if self.on_select:
            self.on_select(option)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if self.open:
            for item in self.items:
                if item.handle_event(event):
                    return True
        return self.header.handle_event(event)

    def update(self, mouse_pos: Tuple[int, int]):
        self.header.update(mouse_pos)
        for item in self.items:
            item.update(mouse_pos)

    def draw(self, surface: pygame.Surface):
        self.header.text = f"{self.selected} {'^' if self.open else 'v'}"
        self.header.draw(surface)
        if self.open:
            for item in self.items:
                item.draw(surface)


# Arrow polygons inside a unit square, pointing in each direction
_ARROWS = {
    'up':    [(0.5, 0.2), (0.8, 0.75), (0.2, 0.75)],
    'down':  [(0.2, 0.25), (0.8, 0.25), (0.5, 0.8)],
    'left':  [(0.2, 0.5), (0.75, 0.2), (0.75, 0.8)],
    'right': [(0.8, 0.5), (0.25, 0.8), (0.25, 0.2)],
}


class KeyIcon:
    """
    Arrow key indicator

    Grey when available, yellow while held, black when the action is
    blocked (e.g. zoom already at its limit).
    """

    def __init__(self, x: int, y: int, size: int, direction: str):
        self.rect = pygame.Rect(x, y, size, size)
        self.direction = direction
        self.active = True
        self.pressed = False
        self.theme = get_theme()

    def set_state(self, active: bool, pressed: bool):
        self.active = active
        self.pressed = pressed

    def color(self) -> Tuple[int, int, int]:
        colors = self.theme.colors
        if not self.active:
            return colors.KEY_BLOCKED
        if self.pressed:
            return colors.KEY_PRESSED
        return colors.KEY_DEFAULT

    def draw(self, surface: pygame.Surface):
        pygame.draw.rect(surface, self.theme.colors.BG_PANEL, self.rect)
        pygame.draw.rect(surface, self.theme.colors.BORDER, self.rect, 1)
        points = [(self.rect.x + fx * self.rect.width, self.rect.y + fy * self.rect.height)
                  for fx, fy in _ARROWS[self.direction]]
        pygame.draw.polygon(surface, self.color(), points)


class Panel:
    """
    Container panel with border

    Draws a title followed by (label, value) rows, one per line.
    """

    def __init__(self, x: int, y: int, width: int, height: int,
                 title: str = ""):
        """
        Initialize panel

        Args:
            x, y: Position
            width, height: Size
            title: Optional title text
        """
        self.rect = pygame.Rect(x, y, width, height)
        self.title = title
        self.theme = get_theme()
        self.value_column = 125

    def height_for(self, n_rows: int) -> int:
        """Panel height for n rows (grows with the number of rows)."""
        return 30 + n_rows * self.theme.row_height

    def contains(self, pos: Tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)

    def move_to(self, x: int, y: int):
        self.rect.topleft = (x, y)

    def draw(self, surface: pygame.Surface,
             rows: List[Tuple[str, str]] = (), status: str = ""):
        """
        Draw panel

        Args:
            surface: Target surface
            rows: (label, value) pairs, label in bold on the left
            status: Bold message line (shown instead of rows when there are none)
        """
        theme = self.theme
        extra = 1 if rows and status else 0
        self.rect.height = self.height_for(max(0, len(rows) - 1) + extra)
        theme.draw_panel(surface, self.rect, self.title)

        y = self.rect.y + (28 if self.title else theme.padding)
        if not rows and status:
            theme.draw_text(surface, theme.fonts.bold(), self.rect.x + 25, y,
                            status, theme.colors.FG_TEXT)
            return

        for label, value in rows:
            theme.draw_text(surface, theme.fonts.bold(), self.rect.x + 10, y,
                            f"{label}:", theme.colors.FG_TEXT)
            theme.draw_text(surface, theme.fonts.normal(), self.rect.x + self.value_column, y,
                            value, theme.colors.FG_TEXT)
            y += theme.row_height
        if status:
            theme.draw_text(surface, theme.fonts.small(), self.rect.x + 10, y,
                            status, theme.colors.ERROR)
