"""
Core services exports.

Provides the event system, configuration loading, input translation and
the per-room GameContext.
"""

from atelier.core.services.config_manager import load_config, merge_config
from atelier.core.services.event_manager import (
    EventManager,
    BaseEvent,
    ProgressStateChangedEvent,
    ActivityResultReadyEvent,
    ActivitySessionAbortedEvent,
    ActivityPhaseChangedEvent,
    ItemPlacedEvent,
    RoomCompleteEvent,
    CameraMovementStartedEvent,
    CameraMovementCompleteEvent,
    SpotTargetedEvent,
)
from atelier.core.services.game_context import GameContext
from atelier.core.services.input_manager import InputManager, InputIntent

__all__ = [
    # Config
    'load_config',
    'merge_config',
    # Events
    'EventManager',
    'BaseEvent',
    'ProgressStateChangedEvent',
    'ActivityResultReadyEvent',
    'ActivitySessionAbortedEvent',
    'ActivityPhaseChangedEvent',
    'ItemPlacedEvent',
    'RoomCompleteEvent',
    'CameraMovementStartedEvent',
    'CameraMovementCompleteEvent',
    'SpotTargetedEvent',
    # Services
    'GameContext',
    'InputManager',
    'InputIntent',
]
