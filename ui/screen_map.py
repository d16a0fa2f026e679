"""
Map Screen - UK Weather Map

Draws the UK map over the sea with a marker for every city, the last click
and a line to the nearest city. A panel shows the current weather for that
city; toggle buttons choose which fields it lists.

Controls
--------
  Click map       Select the nearest city
  W / A / S / D   Pan (held keys repeat)
  Up / Down       Zoom in / out (held keys repeat)
  Right           Open the forecast graph (selected city, fully zoomed in,
                  city on screen)
  Drag panel      Move the weather panel
"""

import pygame
from pathlib import Path
from typing import Dict, Optional, Tuple

from .base_screen import BaseScreen
from .components import KeyIcon, Panel, ToggleButton
from game.map_session import MapSession
from game.state_manager import AppContext


# Held keys -> session action
_HOLD_KEYS = {
    pygame.K_w:    'pan_up',
    pygame.K_a:    'pan_left',
    pygame.K_s:    'pan_down',
    pygame.K_d:    'pan_right',
    pygame.K_UP:   'zoom_in',
    pygame.K_DOWN: 'zoom_out',
}

# Key icon layout (centre x, centre y)
_ICON_KEYS = {
    'w':     (pygame.K_w,     (60, 730)),
    'a':     (pygame.K_a,     (20, 770)),
    's':     (pygame.K_s,     (60, 770)),
    'd':     (pygame.K_d,     (100, 770)),
    'up':    (pygame.K_UP,    (420, 730)),
    'down':  (pygame.K_DOWN,  (420, 770)),
    'right': (pygame.K_RIGHT, (450, 750)),
}
_ICON_SIZE = 30

# Letter keys draw as an arrow in the direction they pan
_ICON_ARROW = {'w': 'up', 'a': 'left', 's': 'down', 'd': 'right',
               'up': 'up', 'down': 'down', 'right': 'right'}


def load_map_image(path: Path) -> Optional[pygame.Surface]:
    """Load the base map; None (with a warning) if it cannot be read."""
    try:
        image = pygame.image.load(str(path))
    except (FileNotFoundError, pygame.error) as e:
        print(f"Warning: map image not available ({path}): {e}")
        return None
    if pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


class MapScreen(BaseScreen):
    """Zoomable, pannable UK map with the current-weather panel."""

    def __init__(self, context: AppContext):
        super().__init__("MAP")
        self.context = context
        self.session = MapSession(context)

        self._map_image = load_map_image(context.settings.map_image_path)
        self._scaled_map: Optional[pygame.Surface] = None
        self._scaled_size: Tuple[int, int] = (0, 0)

        # Held-key repeat
        self._held: set = set()
        self._input_accum = 0.0
        self._next_screen: Optional[str] = None

        # Weather panel (draggable)
        self.panel = Panel(10, 10, 300, 50)
        self._drag_offset: Optional[Tuple[int, int]] = None

        self._create_controls()

    # -----------------------------------------------------------------------
    # Setup
    # -----------------------------------------------------------------------

    def _create_controls(self):
        s = self.context.settings
        toggles = self.context.toggles
        x = s.map_width - 125
        self.toggle_buttons = []
        y = 10
        for key in s.toggle_names:
            self.toggle_buttons.append(ToggleButton(
                x, y, 120, 22, key,
                is_on=lambda k=key: toggles.is_active(k),
                callback=lambda k=key: self.session.toggle(k),
            ))
            y += 30

        self.key_icons: Dict[str, KeyIcon] = {}
        for name, (_, (cx, cy)) in _ICON_KEYS.items():
            self.key_icons[name] = KeyIcon(cx - _ICON_SIZE // 2, cy - _ICON_SIZE // 2,
                                           _ICON_SIZE, _ICON_ARROW[name])

    def on_enter(self, payload=None):
        super().on_enter(payload)
        self._held.clear()
        self._input_accum = 0.0
        self._next_screen = None

    def on_exit(self):
        super().on_exit()
        self._held.clear()

    # -----------------------------------------------------------------------
    # Input
    # -----------------------------------------------------------------------

    def handle_input(self, events) -> Optional[str]:
        mp = pygame.mouse.get_pos()
        for btn in self.toggle_buttons:
            btn.update(mp)

        for event in events:
            if event.type == pygame.KEYDOWN:
                if event.key in _HOLD_KEYS:
                    self._held.add(event.key)
                    self.session.apply_action(_HOLD_KEYS[event.key])
                elif event.key == pygame.K_RIGHT:
                    self._go_forecast()

            elif event.type == pygame.KEYUP:
                self._held.discard(event.key)

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                consumed = any(b.handle_event(event) for b in self.toggle_buttons)
                if consumed:
                    continue
                if self.panel.contains(event.pos):
                    self._drag_offset = (event.pos[0] - self.panel.rect.x,
                                         event.pos[1] - self.panel.rect.y)
                else:
                    self.session.pointer_click(*event.pos)

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                for b in self.toggle_buttons:
                    b.handle_event(event)
                self._drag_offset = None

            elif event.type == pygame.MOUSEMOTION:
                if self._drag_offset is not None:
                    self.panel.move_to(event.pos[0] - self._drag_offset[0],
                                       event.pos[1] - self._drag_offset[1])

        result, self._next_screen = self._next_screen, None
        return result

    def _go_forecast(self):
        handoff = self.session.forecast_handoff()
        if handoff is None:
            return
        self._handoff = handoff
        self._next_screen = 'FORECAST'

    # -----------------------------------------------------------------------
    # Update
    # -----------------------------------------------------------------------

    def update(self, dt: float):
        self.session.poll()

        if not self._held:
            self._input_accum = 0.0
            return
        self._input_accum += dt
        tick = self.context.settings.input_tick_s
        while self._input_accum >= tick:
            self._input_accum -= tick
            for key in list(self._held):
                self.session.apply_action(_HOLD_KEYS[key])

    # -----------------------------------------------------------------------
    # Render
    # -----------------------------------------------------------------------

    def render(self, surface: pygame.Surface):
        surface.fill(self.theme.colors.SEA)

        self._draw_map(surface)
        self._draw_cities(surface)
        self._draw_click(surface)

        self.panel.draw(surface, self.session.panel_rows(), self.session.panel_status())
        for btn in self.toggle_buttons:
            btn.draw(surface)
        self._draw_key_icons(surface)

    def _draw_map(self, surface: pygame.Surface):
        vp = self.session.viewport
        size = (vp.scaled_width, vp.scaled_height)
        origin = vp.map_origin()

        if self._map_image is None:
            pygame.draw.rect(surface, self.theme.colors.LAND, pygame.Rect(origin, size))
            return

        if self._scaled_map is None or self._scaled_size != size:
            self._scaled_map = pygame.transform.scale(self._map_image, size)
            self._scaled_size = size
        surface.blit(self._scaled_map, origin)

    def _draw_cities(self, surface: pygame.Surface):
        vp = self.session.viewport
        size = vp.marker_size()
        colors = self.theme.colors
        for point, selected in self.session.markers():
            if not vp.is_on_screen(point.x, point.y):
                continue
            x, y = point.rounded()
            color = colors.CITY_SELECTED if selected else colors.CITY
            pygame.draw.ellipse(surface, color,
                                pygame.Rect(x - size // 2, y - size // 2, size, size))

    def _draw_click(self, surface: pygame.Surface):
        colors = self.theme.colors
        line = self.session.connecting_line()
        if line is not None:
            pygame.draw.line(surface, colors.CONNECTING_LINE,
                             line[0].rounded(), line[1].rounded(), 2)

        click = self.session.click_marker()
        if click is not None:
            size = self.session.viewport.marker_size()
            x, y = click.rounded()
            pygame.draw.ellipse(surface, colors.CLICK_MARKER,
                                pygame.Rect(x - size // 2, y - size // 2, size, size))

    def _draw_key_icons(self, surface: pygame.Surface):
        vp = self.session.viewport
        gates = {
            'up': vp.can_zoom_in(),
            'down': vp.can_zoom_out(),
            'right': self.session.can_switch_forward(),
        }
        for name, icon in self.key_icons.items():
            key = _ICON_KEYS[name][0]
            icon.set_state(active=gates.get(name, True), pressed=key in self._held)
            icon.draw(surface)
