"""
main_loop.py
------------
Windowed loop orchestrating timing, events, updates and rendering.

Responsibilities:
- Initialize pygame and the window
- Build and wire the room from layout config
- Maintain fixed timestep update loop
- Coordinate event handling, updates and rendering
"""

import pygame

from atelier.core.debug.debug_logger import DebugLogger
from atelier.core.runtime.game_loop import FixedTimestep
from atelier.core.runtime.game_settings import Display, Room
from atelier.scenes.room_scene import RoomScene
from atelier.systems.room_system_initializer import RoomSystemInitializer


class MainLoop:
    """
    Core runtime controller managing the room's main loop.

    Implements a fixed timestep for logic with variable rendering.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self, config_file: str = Room.CONFIG_FILE):
        """
        Args:
            config_file: Room layout file resolved through load_config

        Raises:
            ConfigurationError: if the layout is incomplete
        """
        DebugLogger.section("Initializing MainLoop")

        self._init_pygame()
        self._init_room(config_file)

        self.clock = pygame.time.Clock()
        self.timestep = FixedTimestep()
        self.running = True

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub("Game Clock Initialized", level=1)

    def _init_pygame(self):
        """Initialize pygame subsystems and window."""
        pygame.init()
        pygame.display.set_caption(Display.CAPTION)
        self.screen = pygame.display.set_mode((Display.WIDTH, Display.HEIGHT))

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {Display.WIDTH}x{Display.HEIGHT}")

    def _init_room(self, config_file: str):
        """Build, wire and enter the room scene."""
        context = RoomSystemInitializer(config_file=config_file).initialize()
        context.wire()

        self.scene = RoomScene(context)
        self.scene.enter()

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """
        Execute main loop until quit.

        Uses fixed timestep for updates with accumulator pattern.
        Rendering happens once per frame after all updates.
        """
        DebugLogger.section("Game Loop")

        while self.running:
            frame_time = self.clock.tick(Display.FPS) / 1000.0

            self._handle_events()
            self.timestep.run(frame_time, self.scene.update)
            self._draw()

        self._shutdown()

    def _handle_events(self):
        """Forward pygame events to the scene."""
        for event in pygame.event.get():
            self.scene.handle_event(event)

        if self.scene.quit_requested:
            self.running = False

    def _draw(self):
        self.scene.draw(self.screen)
        pygame.display.flip()

    def _shutdown(self):
        DebugLogger.section("Shutting Down")
        self.scene.exit()
        pygame.quit()
