"""
Data module exports.

Plain value types shared by every coordinator: activity kinds, poses,
placement spots and activity results.
"""

from atelier.data.activity_types import ActivityType
from atelier.data.pose import Pose
from atelier.data.placement_spot import PlacementSpot
from atelier.data.activity_result import (
    ItemPrefab,
    LanternResult,
    OrigamiResult,
    CalligraphyResult,
    build_result,
)

__all__ = [
    'ActivityType',
    'Pose',
    'PlacementSpot',
    'ItemPrefab',
    'LanternResult',
    'OrigamiResult',
    'CalligraphyResult',
    'build_result',
]
