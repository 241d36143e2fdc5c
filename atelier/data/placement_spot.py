"""
placement_spot.py
-----------------
A fixed location in the room bound to exactly one activity type.

Only the RoomController mutates occupancy.
"""

from typing import Optional

from atelier.core.debug.debug_logger import DebugLogger
from atelier.data.pose import Pose


class PlacementSpot:
    """Placement location with occupancy and an optional precise anchor."""

    __slots__ = ("spot_id", "_activity_type", "pose", "anchor",
                 "is_occupied", "placed_item", "is_targeted")

    def __init__(self, spot_id: str, activity_type, pose: Pose, anchor: Optional[Pose] = None):
        """
        Args:
            spot_id: Stable identifier
            activity_type: ActivityType this spot triggers (immutable)
            pose: The spot's own pose
            anchor: Precise placement pose; falls back to pose when None
        """
        self.spot_id = spot_id
        self._activity_type = activity_type
        self.pose = pose
        self.anchor = anchor
        self.is_occupied = False
        self.placed_item = None
        self.is_targeted = False

    @property
    def activity_type(self):
        return self._activity_type

    @property
    def placement_pose(self) -> Pose:
        """Anchor pose if configured, otherwise the spot pose."""
        return self.anchor if self.anchor is not None else self.pose

    # ===========================================================
    # Occupancy
    # ===========================================================

    def mark_occupied(self, item) -> bool:
        """Occupy with item. Refused if already occupied."""
        if self.is_occupied:
            DebugLogger.warn(f"{self.spot_id} already occupied", category="placement")
            return False
        self.is_occupied = True
        self.placed_item = item
        DebugLogger.trace(f"{self.spot_id} is now occupied by {item}", category="placement")
        return True

    def clear(self):
        """Destroy the placed item and free the spot."""
        if self.placed_item is not None:
            destroy = getattr(self.placed_item, "destroy", None)
            if callable(destroy):
                destroy()
            self.placed_item = None
        self.is_occupied = False
        DebugLogger.trace(f"{self.spot_id} cleared", category="placement")

    # ===========================================================
    # Targeting
    # ===========================================================

    def set_targeted(self, targeted: bool) -> bool:
        """
        Update hover state.

        Returns:
            True only when the state actually changed
        """
        targeted = bool(targeted)
        if self.is_targeted == targeted:
            return False
        self.is_targeted = targeted
        return True

    def __repr__(self):
        state = "occupied" if self.is_occupied else "free"
        return f"PlacementSpot({self.spot_id}, {self._activity_type.value}, {state})"
