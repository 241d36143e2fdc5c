"""
Runtime configuration exports.

Provides room-wide constants, the progress state enum and the fixed
timestep. All exports are lightweight with no initialization overhead.
"""

from atelier.core.runtime.game_settings import (
    Display,
    Physics,
    Camera,
    Orbit,
    Activity,
    Room,
    Colors,
)
from atelier.core.runtime.progress_state import ProgressState
from atelier.core.runtime.game_loop import FixedTimestep

__all__ = [
    # Display & Timing
    'Display',
    'Physics',
    'FixedTimestep',
    # Configuration
    'Camera',
    'Orbit',
    'Activity',
    'Room',
    'Colors',
    # State
    'ProgressState',
]
