"""
room_controller.py
------------------
Placement coordinator for the room's decoration spots.

Responsibilities
----------------
- Own the ordered placement spots and the placed-item tally
- Forward unoccupied spot clicks to the GameManager
- On "result ready", instantiate the decoration at the triggered spot,
  apply its customization, mark the spot occupied
- Report placements and room completion back to the GameManager
- Expose harmony meter progress for observers
- Frame the finished room with the optional completion camera view
"""

from typing import Optional

from atelier.core.debug.debug_logger import DebugLogger
from atelier.core.runtime.game_settings import Colors
from atelier.core.services.event_manager import (
    ActivityResultReadyEvent,
    ActivitySessionAbortedEvent,
    ItemPlacedEvent,
    RoomCompleteEvent,
    SpotTargetedEvent,
)
from atelier.data.placement_spot import PlacementSpot
from atelier.entities.items import ItemRegistry


class RoomController:
    """Owns placement spots and turns activity results into placed items."""

    def __init__(self, events, game_manager, spots, camera=None,
                 room_pose=None, completion_pose=None):
        """
        Args:
            events: EventManager for result/abort input and placement output
            game_manager: GameManager gating activity starts
            spots: Ordered PlacementSpot list
            camera: CameraController framing the completed room (optional)
            room_pose: Overview pose restored when a completed room is reset
            completion_pose: Camera pose shown once the room is complete
        """
        self.events = events
        self.game_manager = game_manager
        self.spots: list[PlacementSpot] = list(spots)
        self._spots_by_id = {spot.spot_id: spot for spot in self.spots}

        self.placed_count = 0
        self._triggered_spot: Optional[PlacementSpot] = None
        self._room_complete_sent = False
        self.camera = camera
        self.room_pose = room_pose
        self.completion_pose = completion_pose
        self._completion_shown = False

        if len(self._spots_by_id) != len(self.spots):
            DebugLogger.warn("Duplicate spot ids - lookups by id return the last one", category="placement")

        if game_manager.required_items > len(self.spots):
            DebugLogger.warn(
                f"Room needs {game_manager.required_items} items but has only "
                f"{len(self.spots)} spot(s) - it can never complete",
                category="placement"
            )

        DebugLogger.init_entry("RoomController")
        DebugLogger.init_sub(f"Spots: {[s.spot_id for s in self.spots]}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def wire(self):
        """Subscribe to GameManager notifications. Call once after construction."""
        self.events.subscribe(ActivityResultReadyEvent, self._on_result_ready)
        self.events.subscribe(ActivitySessionAbortedEvent, self._on_session_aborted)

    def teardown(self):
        self.events.unsubscribe(ActivityResultReadyEvent, self._on_result_ready)
        self.events.unsubscribe(ActivitySessionAbortedEvent, self._on_session_aborted)
        self._triggered_spot = None

    # ===========================================================
    # Queries
    # ===========================================================

    def get_spot(self, spot_id: str) -> Optional[PlacementSpot]:
        return self._spots_by_id.get(spot_id)

    def available_spots(self) -> list:
        return [spot for spot in self.spots if not spot.is_occupied]

    @property
    def triggered_spot(self) -> Optional[PlacementSpot]:
        return self._triggered_spot

    @property
    def harmony_progress(self) -> float:
        """Placed fraction of the required items, capped at 1.0."""
        required = self.game_manager.required_items
        return min(self.placed_count / required, 1.0)

    @property
    def harmony_color(self) -> tuple:
        """Meter color blended from start to complete by progress."""
        t = self.harmony_progress
        start, end = Colors.HARMONY_START, Colors.HARMONY_COMPLETE
        return tuple(round(a + (b - a) * t) for a, b in zip(start, end))

    # ===========================================================
    # Input
    # ===========================================================

    def handle_spot_clicked(self, spot: PlacementSpot) -> bool:
        """
        Forward a click on an unoccupied spot as an activity start request.

        Returns:
            True if the GameManager started a session
        """
        if spot is None:
            DebugLogger.fail("Click on missing spot reference", category="placement")
            return False

        if spot.is_occupied:
            DebugLogger.warn(f"{spot.spot_id} is occupied, cannot click", category="placement")
            return False

        previous = self._triggered_spot
        self._triggered_spot = spot
        DebugLogger.action(
            f"{spot.spot_id} clicked - requesting {spot.activity_type.value}",
            category="placement"
        )

        if not self.game_manager.request_start_activity(spot.activity_type):
            # Rejected: keep whatever session was already in flight
            self._triggered_spot = previous
            return False
        return True

    def handle_spot_clicked_by_id(self, spot_id: str) -> bool:
        spot = self.get_spot(spot_id)
        if spot is None:
            DebugLogger.fail(f"Unknown spot id '{spot_id}'", category="placement")
            return False
        return self.handle_spot_clicked(spot)

    def set_spot_targeted(self, spot: PlacementSpot, targeted: bool):
        """Hover feedback; publishes only on change."""
        if spot is not None and spot.set_targeted(targeted):
            self.events.dispatch(SpotTargetedEvent(spot_id=spot.spot_id, targeted=spot.is_targeted))

    # ===========================================================
    # Placement
    # ===========================================================

    def _on_result_ready(self, event: ActivityResultReadyEvent):
        """Place the result's decoration at the spot that triggered the session."""
        spot = self._triggered_spot
        result = event.result

        if spot is None:
            DebugLogger.fail("Result ready but no triggered spot - placement aborted", category="placement")
            return

        # Session is over either way
        self._triggered_spot = None

        if spot.is_occupied:
            DebugLogger.warn(f"{spot.spot_id} became occupied mid-session - placement aborted", category="placement")
            return

        if result.activity_type != spot.activity_type:
            DebugLogger.warn(
                f"{result.activity_type.value} result placed on {spot.activity_type.value} spot {spot.spot_id}",
                category="placement"
            )

        item = ItemRegistry.create(result.prefab, spot.placement_pose)
        if item is None:
            return

        # Optional capability
        apply_customization = getattr(item, "apply_customization", None)
        if callable(apply_customization):
            apply_customization(result)

        spot.mark_occupied(item)
        self.placed_count += 1

        DebugLogger.action(
            f"Placed {item} at {spot.spot_id} ({self.placed_count}/{self.game_manager.required_items})",
            category="placement"
        )

        self.game_manager.on_item_placed()
        self.events.dispatch(ItemPlacedEvent(spot_id=spot.spot_id, item=item, placed_count=self.placed_count))

        if self.placed_count >= self.game_manager.required_items and not self._room_complete_sent:
            if self.game_manager.on_room_complete():
                self._room_complete_sent = True
                self.events.dispatch(RoomCompleteEvent(placed_count=self.placed_count))
                self._show_completion()

    def _show_completion(self):
        if self.camera is None or self.completion_pose is None:
            return
        DebugLogger.action("Room in harmony, framing completion view", category="placement")
        self._completion_shown = self.camera.move_to(self.completion_pose)

    def _on_session_aborted(self, event: ActivitySessionAbortedEvent):
        if self._triggered_spot is not None:
            DebugLogger.system(f"Session aborted - releasing {self._triggered_spot.spot_id}", category="placement")
        self._triggered_spot = None

    # ===========================================================
    # Reset
    # ===========================================================

    def clear_spot(self, spot: PlacementSpot):
        """
        Free a spot and destroy its item.

        Does not touch the placed tally; callers resetting a room must
        reset the tally as well (see reset_room).
        """
        if spot is None:
            DebugLogger.fail("Clear requested for missing spot reference", category="placement")
            return
        spot.clear()

    def reset_room(self) -> bool:
        """Clear every spot and restart progress. Refused mid-session."""
        if not self.game_manager.reset_progress():
            return False

        for spot in self.spots:
            spot.clear()
        self.placed_count = 0
        self._triggered_spot = None
        self._room_complete_sent = False

        if self._completion_shown and self.room_pose is not None:
            self.camera.move_to(self.room_pose)
        self._completion_shown = False
        DebugLogger.system("Room reset", category="placement")
        return True
