"""
base_activity.py
----------------
Capability every mini-activity module exposes to the ActivityController.

The controller only drives start/stop/update and listens for the
completion result; input mechanics stay inside each module.
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from atelier.core.debug.debug_logger import DebugLogger


class MiniActivity(ABC):
    """Base class for mini-activity modules."""

    activity_type = None

    def __init__(self):
        self.running = False
        self._completion_handler: Optional[Callable] = None

    # ===========================================================
    # Wiring
    # ===========================================================

    def set_completion_handler(self, handler: Optional[Callable]):
        """Register the single callback receiving this module's result."""
        self._completion_handler = handler

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def start(self):
        """Begin a session. Calling it again while running is ignored."""
        if self.running:
            DebugLogger.warn(f"{self.__class__.__name__} already running", category="activity")
            return
        self.running = True
        self.on_start()

    def stop(self):
        """Abort and clean up. Safe to call when not started."""
        was_running = self.running
        self.running = False
        self.on_stop(was_running)

    def update(self, dt: float):
        """Tick the module while running."""
        if self.running:
            self.on_update(dt)

    # ===========================================================
    # Hooks
    # ===========================================================

    @abstractmethod
    def on_start(self):
        pass

    def on_stop(self, was_running: bool):
        pass

    def on_update(self, dt: float):
        pass

    # ===========================================================
    # Completion
    # ===========================================================

    def complete(self, result):
        """
        Finish the session and hand the result to the controller.

        The module stays visible (running=False, not stopped) so success
        visuals remain until the controller calls stop().
        """
        if not self.running:
            DebugLogger.warn(
                f"{self.__class__.__name__} completed while not running - ignored",
                category="activity"
            )
            return
        self.running = False

        if self._completion_handler is None:
            DebugLogger.warn(f"{self.__class__.__name__} has no completion handler", category="activity")
            return
        self._completion_handler(result)
