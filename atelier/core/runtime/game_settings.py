"""
game_settings.py
----------------
Centralized constants for all orchestration systems.
"""


# ===========================================================
# Display & Performance
# ===========================================================

class Display:
    """Screen and window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Zen Atelier"


# ===========================================================
# Physics & Timing
# ===========================================================

class Physics:
    """Fixed-tick update timing."""
    UPDATE_RATE: int = 60
    FIXED_DT: float = 1 / UPDATE_RATE
    MAX_FRAME_TIME: float = 0.1


# ===========================================================
# Camera
# ===========================================================

class Camera:
    """Camera transition defaults."""
    TRANSITION_DURATION: float = 1.5
    EASING: str = "ease_in_out"
    ROOM_POSE: str = "room"


class Orbit:
    """Free-look limits while the camera is at rest (degrees)."""
    SENSITIVITY: float = 0.2
    MIN_YAW: float = -90.0
    MAX_YAW: float = 90.0
    MIN_PITCH: float = -30.0
    MAX_PITCH: float = 30.0


# ===========================================================
# Mini-Activities
# ===========================================================

class Activity:
    """Mini-activity session defaults."""
    SUCCESS_HOLD: float = 2.0
    ALLOW_SKIP: bool = True


# ===========================================================
# Room
# ===========================================================

class Room:
    """Room progress defaults."""
    CONFIG_FILE: str = "room.yaml"
    REQUIRED_ITEMS: int = 3


class Colors:
    """Harmony meter and background colors (RGB)."""
    HARMONY_START = (255, 255, 0)
    HARMONY_COMPLETE = (0, 255, 0)
    BACKGROUND = (24, 20, 18)
    SPOT_FREE = (90, 160, 90)
    SPOT_TARGETED = (220, 220, 140)
    SPOT_OCCUPIED = (170, 70, 70)
