"""
origami_item.py
---------------
Folded paper decoration labelled with the design the player completed.
"""

from atelier.core.debug.debug_logger import DebugLogger
from atelier.data.activity_result import OrigamiResult
from atelier.entities.items.base_item import DecorationItem


class OrigamiItem(DecorationItem):
    __registry_kind__ = "origami"

    def __init__(self, prefab_id: str, pose):
        super().__init__(prefab_id, pose)
        self.design_name = ""

    def apply_customization(self, result):
        if not isinstance(result, OrigamiResult):
            DebugLogger.warn("Received non-origami result, ignoring customization", category="item")
            return
        self.design_name = result.design_name
        DebugLogger.action(f"Applied customization: design={self.design_name or '?'}", category="item")
