"""
base_scene.py
-------------
Abstract base class for all scenes.

Provides:
- Lifecycle hooks (enter, exit)
- GameContext access
- Abstract methods for update, draw, handle_event
"""

from abc import ABC, abstractmethod

from atelier.core.debug.debug_logger import DebugLogger
from atelier.scenes.scene_state import SceneState


class BaseScene(ABC):
    """
    Base class for all scenes.

    Attributes:
        state: Current lifecycle state
        context: GameContext with the room's coordinators
    """

    def __init__(self, context):
        """
        Args:
            context: Wired GameContext for this scene
        """
        self.context = context
        self.state = SceneState.INACTIVE

    # ===========================================================
    # Lifecycle Hooks (Override in subclasses)
    # ===========================================================

    def on_enter(self):
        """Called when scene becomes active."""
        pass

    def on_exit(self):
        """Called before the loop shuts down."""
        pass

    def enter(self):
        self.state = SceneState.ACTIVE
        DebugLogger.state(f"{self.__class__.__name__} entered", category="scene")
        self.on_enter()

    def exit(self):
        self.state = SceneState.EXITING
        self.on_exit()
        DebugLogger.state(f"{self.__class__.__name__} exited", category="scene")

    # ===========================================================
    # Abstract Methods
    # ===========================================================

    @abstractmethod
    def handle_event(self, event):
        """Process one pygame event."""
        pass

    @abstractmethod
    def update(self, dt: float):
        """Advance one fixed tick."""
        pass

    @abstractmethod
    def draw(self, surface):
        """Render the scene."""
        pass
