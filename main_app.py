"""
UK Weather Map - Main Application

- Map screen (zoom / pan, nearest-city current weather)
- Forecast screen (five-day line graph)
- Screen navigation with a handoff from map to forecast
"""

import pygame
import sys

from core.settings import Settings
from game.state_manager import AppContext, StateManager
from ui.theme import get_theme
from ui.screen_map import MapScreen
from ui.screen_forecast import ForecastScreen

# Window settings
FPS = 60
TITLE = "UK Weather Map"


class WeatherMapApp:
    """
    Main application

    Manages the main loop, shared context, and screen coordination.
    """

    def __init__(self, settings: Settings = None):
        """Initialize application"""
        pygame.init()

        self.settings = settings or Settings.from_env()
        self.screen = pygame.display.set_mode((self.settings.map_width, self.settings.map_height))
        pygame.display.set_caption(TITLE)
        self.clock = pygame.time.Clock()

        self.theme = get_theme()

        # Shared context + state manager
        self.context = AppContext.from_settings(self.settings)
        self.state_manager = StateManager(self.context)

        self._register_screens()
        self.state_manager.switch_to('MAP', push_stack=False)

        self.running = True
        print(f"\n{TITLE}")
        print("=" * 60)
        print(f"Cities loaded: {len(self.context.catalog)}")
        print("Initialized successfully!")
        print("=" * 60)

    def _register_screens(self):
        """Register all screens"""
        self.state_manager.register_screen('MAP', MapScreen(self.context))
        self.state_manager.register_screen('FORECAST', ForecastScreen(self.context))

    def step(self, events: list, dt: float):
        """One frame: input, update, render."""
        for event in events:
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

        self.state_manager.handle_input(events)
        self.state_manager.update(dt)

        self.screen.fill(self.theme.colors.SEA)
        self.state_manager.render(self.screen)

    def run(self):
        """Main loop"""
        print("\nStarting main loop...")
        print("Click the map to pick a city, ESC to quit\n")

        while self.running:
            dt = self.clock.tick(FPS) / 1000.0
            self.step(pygame.event.get(), dt)
            pygame.display.flip()

        self.quit()

    def quit(self):
        """Cleanup and quit"""
        print("\nShutting down...")
        self.context.shutdown()
        pygame.quit()


def main():
    """Entry point"""
    app = None
    try:
        app = WeatherMapApp()
        app.run()
    except KeyboardInterrupt:
        print("\n\nInterrupted by user")
        if app is not None:
            app.context.shutdown()
        pygame.quit()
        sys.exit(0)
    except Exception as e:
        print(f"\n\nFATAL ERROR: {e}")
        import traceback
        traceback.print_exc()
        pygame.quit()
        sys.exit(1)


if __name__ == "__main__":
    main()
