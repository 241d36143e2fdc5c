"""
game_manager.py
---------------
Room progress state machine.

States: AWAITING_PLACEMENT <-> ACTIVITY_IN_PROGRESS -> ... -> ROOM_COMPLETE

Responsibilities
----------------
- Own the single live ProgressState and mutate it only through guarded transitions
- Gate start requests between the RoomController and the ActivityController
- Re-broadcast state changes and "result ready" notifications
- Keep observational placed-count bookkeeping and the completion threshold
"""

from atelier.core.debug.debug_logger import DebugLogger
from atelier.core.runtime.game_settings import Room
from atelier.core.runtime.progress_state import ProgressState
from atelier.core.services.event_manager import (
    ActivityResultReadyEvent,
    ActivitySessionAbortedEvent,
    ProgressStateChangedEvent,
)


class GameManager:
    """Guarded owner of the room's progress state."""

    def __init__(self, events, activity_controller, required_items: int = Room.REQUIRED_ITEMS):
        """
        Args:
            events: EventManager for state and result notifications
            activity_controller: ActivityController receiving accepted start requests
            required_items: Placed items needed to complete the room (> 0)
        """
        self.events = events
        self.activity_controller = activity_controller

        if not isinstance(required_items, int) or isinstance(required_items, bool) or required_items < 1:
            DebugLogger.warn(
                f"Invalid required_items {required_items!r} - using {Room.REQUIRED_ITEMS}",
                category="game_state"
            )
            required_items = Room.REQUIRED_ITEMS

        self.required_items = required_items
        self.placed_count = 0
        self._state = ProgressState.AWAITING_PLACEMENT

        DebugLogger.init_entry("GameManager")
        DebugLogger.init_sub(f"Required items: {self.required_items}")

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def state(self) -> ProgressState:
        return self._state

    @property
    def is_room_complete(self) -> bool:
        return self._state == ProgressState.ROOM_COMPLETE

    # ===========================================================
    # Requests
    # ===========================================================

    def request_start_activity(self, activity_type) -> bool:
        """
        Ask for a mini-activity session. Rejections are logged no-ops.

        Returns:
            True if the session was started
        """
        if self._state != ProgressState.AWAITING_PLACEMENT:
            DebugLogger.warn(
                f"Cannot start activity - wrong state: {self._state.value} "
                f"(expected {ProgressState.AWAITING_PLACEMENT.value})",
                category="game_state"
            )
            return False

        # Session guard lives in the ActivityController
        if not self.activity_controller.can_start(activity_type):
            return False

        DebugLogger.action(f"Starting activity: {activity_type.value}", category="game_state")
        self._change_state(ProgressState.ACTIVITY_IN_PROGRESS)

        if not self.activity_controller.start_activity(activity_type):
            DebugLogger.fail("ActivityController refused an admitted start - reverting", category="game_state")
            self._change_state(ProgressState.AWAITING_PLACEMENT)
            return False

        return True

    # ===========================================================
    # Notifications from coordinators
    # ===========================================================

    def on_activity_result_ready(self, result) -> bool:
        """Session finished with a result: back to placement and publish it."""
        if self._state != ProgressState.ACTIVITY_IN_PROGRESS:
            DebugLogger.warn(
                f"Ignoring result - wrong state: {self._state.value} "
                f"(expected {ProgressState.ACTIVITY_IN_PROGRESS.value})",
                category="game_state"
            )
            return False

        if result is None:
            DebugLogger.warn("Result ready without a result - treating as aborted", category="game_state")
            return self.on_activity_aborted(None)

        DebugLogger.system(
            f"Result ready: {result.activity_type.value}, time: {result.completion_time:.2f}s",
            category="game_state"
        )
        self._change_state(ProgressState.AWAITING_PLACEMENT)
        self.events.dispatch(ActivityResultReadyEvent(result=result))
        return True

    def on_activity_aborted(self, activity_type) -> bool:
        """Session ended with nothing to place: back to placement without a result."""
        if self._state != ProgressState.ACTIVITY_IN_PROGRESS:
            DebugLogger.warn(
                f"Ignoring abort - wrong state: {self._state.value}",
                category="game_state"
            )
            return False

        self._change_state(ProgressState.AWAITING_PLACEMENT)
        self.events.dispatch(ActivitySessionAbortedEvent(activity_type=activity_type))
        return True

    def on_item_placed(self):
        """Bookkeeping only; does not change progress state."""
        self.placed_count += 1
        DebugLogger.system(
            f"Item placed: {self.placed_count}/{self.required_items}",
            category="game_state"
        )

    def on_room_complete(self) -> bool:
        """Enter the terminal state once enough items are placed."""
        if self._state == ProgressState.ROOM_COMPLETE:
            DebugLogger.warn("Room already complete", category="game_state")
            return False

        if self.placed_count < self.required_items:
            DebugLogger.warn(
                f"Room completion triggered early - only {self.placed_count}/"
                f"{self.required_items} items placed",
                category="game_state"
            )
            return False

        if self._state != ProgressState.AWAITING_PLACEMENT:
            DebugLogger.warn(
                f"Room completion ignored while {self._state.value}",
                category="game_state"
            )
            return False

        DebugLogger.action("Room complete! All items placed.", category="game_state")
        self._change_state(ProgressState.ROOM_COMPLETE)
        return True

    def reset_progress(self) -> bool:
        """Zero the tally and reopen the room. Refused mid-session."""
        if self._state == ProgressState.ACTIVITY_IN_PROGRESS:
            DebugLogger.warn("Cannot reset progress while an activity is running", category="game_state")
            return False

        self.placed_count = 0
        if self._state != ProgressState.AWAITING_PLACEMENT:
            self._change_state(ProgressState.AWAITING_PLACEMENT)
        DebugLogger.system("Room progress reset", category="game_state")
        return True

    # ===========================================================
    # Internal
    # ===========================================================

    def _change_state(self, new_state: ProgressState):
        old_state = self._state
        self._state = new_state
        DebugLogger.state(f"State changed: {old_state.value} -> {new_state.value}", category="game_state")
        self.events.dispatch(ProgressStateChangedEvent(old_state=old_state, new_state=new_state))
