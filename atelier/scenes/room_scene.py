"""
room_scene.py
-------------
Interactive view of a single decorated room.

Responsibilities
----------------
- Map player intents onto the GameContext (click, hover, skip, orbit, reset)
- Tick the context once per fixed step
- Draw a top-down sketch of the room: spots, placed items, harmony meter
"""

import pygame

from atelier.core.debug.debug_logger import DebugLogger
from atelier.core.runtime.game_settings import Colors, Display
from atelier.core.services.input_manager import InputManager
from atelier.scenes.base_scene import BaseScene


# Top-down projection of room space (x, z) onto the window
PIXELS_PER_UNIT = 120
SPOT_RADIUS = 28

HARMONY_BAR_RECT = pygame.Rect(40, 30, 400, 18)
TEXT_COLOR = (230, 225, 210)


class RoomScene(BaseScene):
    """Single-room scene driving one GameContext."""

    def __init__(self, context, input_manager: InputManager = None):
        super().__init__(context)
        self.input_manager = input_manager or InputManager()
        self.quit_requested = False
        self._font = None

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def on_enter(self):
        pygame.font.init()
        self._font = pygame.font.Font(None, 24)
        DebugLogger.system(
            f"Room '{self.context.room_name}' ready - "
            f"{len(self.context.room_controller.spots)} spot(s)",
            category="scene"
        )

    def on_exit(self):
        self.context.teardown()

    # ===========================================================
    # Geometry
    # ===========================================================

    @staticmethod
    def spot_screen_pos(spot) -> tuple:
        pos = spot.pose.position
        return (
            int(Display.WIDTH / 2 + pos.x * PIXELS_PER_UNIT),
            int(Display.HEIGHT / 2 - pos.z * PIXELS_PER_UNIT),
        )

    def spot_at(self, screen_pos):
        """Spot under a screen position, or None."""
        px, py = screen_pos
        for spot in self.context.room_controller.spots:
            sx, sy = self.spot_screen_pos(spot)
            if (px - sx) ** 2 + (py - sy) ** 2 <= SPOT_RADIUS ** 2:
                return spot
        return None

    # ===========================================================
    # Input
    # ===========================================================

    def handle_event(self, event):
        for intent in self.input_manager.translate(event):
            self._apply_intent(intent)

    def _apply_intent(self, intent):
        context = self.context
        action = intent.action

        if action == "quit":
            self.quit_requested = True
        elif action == "skip":
            context.request_skip()
        elif action == "select_spot":
            spots = context.room_controller.spots
            if 0 <= intent.value < len(spots):
                context.click_spot(spots[intent.value].spot_id)
        elif action == "click":
            spot = self.spot_at(intent.value)
            if spot is not None:
                context.click_spot(spot.spot_id)
        elif action == "hover":
            spot = self.spot_at(intent.value)
            context.target_spot(spot.spot_id if spot else None)
        elif action == "orbit":
            context.orbit(*intent.value)
        elif action == "reset_room":
            context.reset_room()

    # ===========================================================
    # Update & Draw
    # ===========================================================

    def update(self, dt: float):
        self.context.update(dt)

    def draw(self, surface):
        surface.fill(Colors.BACKGROUND)
        for spot in self.context.room_controller.spots:
            self._draw_spot(surface, spot)
        self._draw_harmony_meter(surface)
        self._draw_status(surface)

    def _draw_spot(self, surface, spot):
        center = self.spot_screen_pos(spot)
        if spot.is_occupied:
            color = Colors.SPOT_OCCUPIED
        elif spot.is_targeted:
            color = Colors.SPOT_TARGETED
        else:
            color = Colors.SPOT_FREE
        pygame.draw.circle(surface, color, center, SPOT_RADIUS, width=3)

        item = spot.placed_item
        if item is not None:
            # Lanterns glow by brightness; others draw a plain marker
            brightness = getattr(item, "brightness", 1.0)
            glow = tuple(int(c * brightness) for c in Colors.HARMONY_START)
            pygame.draw.circle(surface, glow, center, SPOT_RADIUS - 8)

        if self._font:
            label = self._font.render(spot.spot_id, True, TEXT_COLOR)
            surface.blit(label, (center[0] - label.get_width() // 2, center[1] + SPOT_RADIUS + 4))

    def _draw_harmony_meter(self, surface):
        room = self.context.room_controller
        pygame.draw.rect(surface, TEXT_COLOR, HARMONY_BAR_RECT, width=1)
        fill = HARMONY_BAR_RECT.copy()
        fill.width = int(HARMONY_BAR_RECT.width * room.harmony_progress)
        if fill.width > 0:
            pygame.draw.rect(surface, room.harmony_color, fill)

    def _draw_status(self, surface):
        if not self._font:
            return
        context = self.context
        lines = [
            f"{context.room_name}  {context.room_controller.placed_count}/"
            f"{context.game_manager.required_items}",
            f"State: {context.game_manager.state.value}",
            f"Session: {context.activity_controller.phase.value}",
            f"Camera: {context.camera.pose}",
        ]
        if context.game_manager.is_room_complete:
            lines.append("The room is in harmony.")

        y = HARMONY_BAR_RECT.bottom + 12
        for line in lines:
            text = self._font.render(line, True, TEXT_COLOR)
            surface.blit(text, (HARMONY_BAR_RECT.x, y))
            y += text.get_height() + 4
