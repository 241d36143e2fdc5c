"""
session_phase.py
----------------
Phases of a single mini-activity session inside the ActivityController.
"""

from enum import Enum


class SessionPhase(Enum):
    """Lifecycle phases of one mini-activity session."""
    IDLE = "idle"                           # No session in flight
    AWAITING_ARRIVAL = "awaiting_arrival"   # Camera moving to the activity pose
    ACTIVE = "active"                       # Module running, waiting for its result
    SUCCESS_HOLD = "success_hold"           # Timed (skippable) pause after completion
    RETURNING_CAMERA = "returning_camera"   # Camera moving back to the room overview
