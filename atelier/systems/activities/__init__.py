"""
Mini-activity exports.

Module base class, the scripted stand-in module, the type registry and the
session lifecycle coordinator.
"""

from atelier.systems.activities.session_phase import SessionPhase
from atelier.systems.activities.base_activity import MiniActivity
from atelier.systems.activities.timed_activity import TimedActivity
from atelier.systems.activities.activity_registry import ActivityRegistry, ActivityBinding
from atelier.systems.activities.activity_controller import ActivityController

__all__ = [
    'SessionPhase',
    'MiniActivity',
    'TimedActivity',
    'ActivityRegistry',
    'ActivityBinding',
    'ActivityController',
]
