"""
lantern_item.py
---------------
Lantern decoration whose light follows the brightness the player achieved.
"""

from atelier.core.debug.debug_logger import DebugLogger
from atelier.data.activity_result import LanternResult
from atelier.entities.items.base_item import DecorationItem


class LanternItem(DecorationItem):
    """Placed lantern with customizable brightness."""

    __registry_kind__ = "lantern"

    MAX_INTENSITY = 2.0

    def __init__(self, prefab_id: str, pose, max_intensity: float = MAX_INTENSITY):
        super().__init__(prefab_id, pose)
        self.max_intensity = max_intensity
        self.brightness = 0.5
        self.intensity = self.brightness * self.max_intensity

    def apply_customization(self, result):
        """Take brightness from a lantern result; other results are ignored."""
        if not isinstance(result, LanternResult):
            DebugLogger.warn("Received non-lantern result, ignoring customization", category="item")
            return

        self.set_brightness(result.final_brightness)
        DebugLogger.action(
            f"Applied customization: brightness={self.brightness:.2f}, intensity={self.intensity:.2f}",
            category="item"
        )

    def set_brightness(self, value: float):
        """Clamp brightness to [0, 1] and update the light intensity."""
        self.brightness = min(max(float(value), 0.0), 1.0)
        self.intensity = self.brightness * self.max_intensity
