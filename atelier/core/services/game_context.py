"""
game_context.py
---------------
Container for one room's orchestration components.

Owns the event bus and the coordinators, wires their subscriptions once,
and drives them in a fixed order each tick:

    activity modules -> camera -> activity controller

Lifecycle: create -> wire() -> update()/input... -> teardown()
"""

from typing import Any

from atelier.core.debug.debug_logger import DebugLogger


class GameContext:
    """Explicitly injected replacement for scene-global coordinator lookups."""

    __slots__ = (
        "events",
        "camera",
        "registry",
        "activity_controller",
        "game_manager",
        "room_controller",
        "room_name",
        "_wired",
    )

    def __init__(self, events, camera, registry, activity_controller,
                 game_manager, room_controller, room_name: str = ""):
        """
        Args:
            events: EventManager shared by every component
            camera: CameraController
            registry: ActivityRegistry
            activity_controller: ActivityController
            game_manager: GameManager
            room_controller: RoomController
            room_name: Display name of the room
        """
        self.events = events
        self.camera = camera
        self.registry = registry
        self.activity_controller = activity_controller
        self.game_manager = game_manager
        self.room_controller = room_controller
        self.room_name = room_name
        self._wired = False

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def wire(self):
        """Resolve every cross-component subscription. Idempotent."""
        if self._wired:
            DebugLogger.warn("GameContext already wired", category="system")
            return

        self.activity_controller.wire(self.game_manager)
        self.room_controller.wire()
        self._wired = True
        DebugLogger.init_entry(f"Room '{self.room_name}' wired")

    @property
    def is_wired(self) -> bool:
        return self._wired

    def teardown(self):
        """Stop any session and release every subscription."""
        if not self._wired:
            return
        self.room_controller.teardown()
        self.activity_controller.teardown()
        self.events.clear_all()
        self._wired = False
        DebugLogger.system(f"Room '{self.room_name}' torn down", category="system")

    # ===========================================================
    # Per-Tick
    # ===========================================================

    def update(self, dt: float):
        """Advance modules, camera, then the session phase machine."""
        for module in self.registry.modules():
            module.update(dt)
        self.camera.update(dt)
        self.activity_controller.update(dt)

    # ===========================================================
    # Player Intents
    # ===========================================================

    def click_spot(self, spot_id: str) -> bool:
        return self.room_controller.handle_spot_clicked_by_id(spot_id)

    def target_spot(self, spot_id: Any):
        """Hover a spot by id; None clears every hover."""
        for spot in self.room_controller.spots:
            self.room_controller.set_spot_targeted(spot, spot.spot_id == spot_id)

    def request_skip(self) -> bool:
        return self.activity_controller.request_skip()

    def orbit(self, delta_yaw: float, delta_pitch: float) -> bool:
        # Free-look only between sessions
        if not self.activity_controller.is_idle:
            return False
        return self.camera.orbit(delta_yaw, delta_pitch)

    def reset_room(self) -> bool:
        return self.room_controller.reset_room()
