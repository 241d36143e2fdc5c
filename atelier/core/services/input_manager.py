"""
input_manager.py
----------------
Translates raw pygame events into room intents.

Provides:
- Key binding lookup tables (spot selection, reset, quit)
- "Any press" skip detection for the success hold
- Mouse click, hover and right-drag orbit intents
"""

from dataclasses import dataclass
from typing import Any

import pygame

from atelier.core.debug.debug_logger import DebugLogger
from atelier.core.runtime.game_settings import Orbit


# ===========================================================
# Default Key Bindings
# ===========================================================

DEFAULT_KEY_BINDINGS = {
    "room": {
        "select_spot": [
            pygame.K_1, pygame.K_2, pygame.K_3,
            pygame.K_4, pygame.K_5, pygame.K_6,
            pygame.K_7, pygame.K_8, pygame.K_9,
        ],
        "reset_room": [pygame.K_r],
    },
    "system": {
        "quit": [pygame.K_ESCAPE],
    },
}


@dataclass(frozen=True)
class InputIntent:
    """One player intent derived from a pygame event."""
    action: str
    value: Any = None


class InputManager:
    """
    Stateless-per-event translator with right-drag tracking.

    Usage:
        for intent in input_manager.translate(event):
            if intent.action == "skip":
                context.request_skip()
    """

    def __init__(self, key_bindings=None, orbit_sensitivity: float = Orbit.SENSITIVITY):
        """
        Args:
            key_bindings: Custom bindings dict (uses DEFAULT_KEY_BINDINGS if None)
            orbit_sensitivity: Degrees of orbit per pixel of right-drag
        """
        DebugLogger.init_entry("InputManager")

        self.key_bindings = key_bindings or DEFAULT_KEY_BINDINGS
        self.orbit_sensitivity = orbit_sensitivity
        self._dragging = False

        self._init_lookup_tables()
        self._validate_bindings()

    def _init_lookup_tables(self):
        """Build key -> (action, index) lookup for O(1) event translation."""
        self._key_to_action = {}
        for context_name, actions in self.key_bindings.items():
            for action_name, keys in actions.items():
                for index, key in enumerate(keys):
                    self._key_to_action[key] = (action_name, index)

    def _validate_bindings(self):
        """Warn if system keys overlap with room keys."""
        system_keys = set()
        for keys in self.key_bindings.get("system", {}).values():
            system_keys.update(keys)

        room_keys = set()
        for keys in self.key_bindings.get("room", {}).values():
            room_keys.update(keys)

        overlap = system_keys & room_keys
        if overlap:
            DebugLogger.warn(f"Overlapping system keys: {overlap}", category="input")

    # ===========================================================
    # Translation
    # ===========================================================

    def translate(self, event) -> list:
        """
        Map a pygame event to zero or more intents.

        Any key or mouse button press also yields a "skip" intent; the
        activity controller ignores it outside the success hold.
        """
        intents = []

        if event.type == pygame.QUIT:
            intents.append(InputIntent("quit"))

        elif event.type == pygame.KEYDOWN:
            intents.append(InputIntent("skip"))
            action = self._key_to_action.get(event.key)
            if action is not None:
                name, index = action
                intents.append(InputIntent(name, index if name == "select_spot" else None))

        elif event.type == pygame.MOUSEBUTTONDOWN:
            intents.append(InputIntent("skip"))
            if event.button == 1:
                intents.append(InputIntent("click", tuple(event.pos)))
            elif event.button == 3:
                self._dragging = True

        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == 3:
                self._dragging = False

        elif event.type == pygame.MOUSEMOTION:
            if self._dragging:
                dx, dy = event.rel
                intents.append(InputIntent(
                    "orbit",
                    (dx * self.orbit_sensitivity, -dy * self.orbit_sensitivity),
                ))
            else:
                intents.append(InputIntent("hover", tuple(event.pos)))

        for intent in intents:
            DebugLogger.trace(f"{intent.action}: {intent.value}", category="input")
        return intents

    @property
    def is_dragging(self) -> bool:
        return self._dragging
