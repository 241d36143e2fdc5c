"""
timed_activity.py
-----------------
Scripted stand-in module that finishes after a fixed duration.

Used by the demo room and integration tests in place of real
input-driven mini-games.
"""

from atelier.core.debug.debug_logger import DebugLogger
from atelier.data.activity_result import ItemPrefab, build_result
from atelier.systems.activities.base_activity import MiniActivity


class TimedActivity(MiniActivity):
    """Completes `duration` seconds after start with a configured payload."""

    def __init__(self, activity_type, prefab: ItemPrefab,
                 duration: float = 2.0, payload: dict = None):
        """
        Args:
            activity_type: ActivityType this module serves
            prefab: Decoration descriptor placed after success
            duration: Seconds of play before auto-completion
            payload: Result fields (e.g. {"final_brightness": 0.75})
        """
        super().__init__()
        self.activity_type = activity_type
        self.prefab = prefab
        self.duration = max(0.0, float(duration))
        self.payload = dict(payload or {})
        self.elapsed = 0.0
        self.sessions_started = 0

    def on_start(self):
        self.elapsed = 0.0
        self.sessions_started += 1
        DebugLogger.action(
            f"{self.activity_type.value} started ({self.duration:.1f}s scripted)",
            category="activity"
        )

    def on_stop(self, was_running: bool):
        self.elapsed = 0.0
        DebugLogger.trace(f"{self.activity_type.value} stopped", category="activity")

    def on_update(self, dt: float):
        self.elapsed += dt
        if self.elapsed >= self.duration:
            result = build_result(
                self.activity_type,
                self.prefab,
                self.payload,
                completion_time=self.elapsed,
            )
            self.complete(result)
