"""
progress_state.py
-----------------
Defines the room progress states owned by the GameManager.
"""

from enum import Enum


class ProgressState(Enum):
    """Global progress of the current room."""
    ACTIVITY_IN_PROGRESS = "activity_in_progress"   # A mini-activity session is in flight
    AWAITING_PLACEMENT = "awaiting_placement"       # Idle in the room, spots may be clicked
    ROOM_COMPLETE = "room_complete"                 # Terminal for the session
