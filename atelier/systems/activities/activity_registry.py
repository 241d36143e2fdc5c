"""
activity_registry.py
--------------------
Tagged registry mapping each ActivityType to its module and camera pose.

Responsibilities
----------------
- Hold one binding (module handle + camera pose) per activity type
- Validate at configuration time that every required type is bound
- Provide safe lookups for the ActivityController at runtime
"""

from dataclasses import dataclass
from typing import Dict, Iterable, Optional

from atelier.core.debug.debug_logger import DebugLogger
from atelier.core.errors import ConfigurationError
from atelier.data.activity_types import ActivityType
from atelier.data.pose import Pose


@dataclass
class ActivityBinding:
    """Module handle and camera pose for one activity type."""
    module: object
    pose: Pose


class ActivityRegistry:
    """Per-room registry of activity bindings."""

    def __init__(self):
        self._bindings: Dict[ActivityType, ActivityBinding] = {}

    # ===========================================================
    # Registration
    # ===========================================================

    def register(self, activity_type: ActivityType, module, pose: Pose):
        """Bind a module and camera pose to an activity type."""
        if activity_type in self._bindings:
            DebugLogger.warn(
                f"[Registry] Overwriting binding for '{activity_type.value}'",
                category="loading"
            )
        self._bindings[activity_type] = ActivityBinding(module=module, pose=pose)
        DebugLogger.state(
            f"Registered activity [{activity_type.value}] -> {module.__class__.__name__}",
            category="loading"
        )

    def validate(self, required_types: Iterable[ActivityType]):
        """
        Fail fast if any required type lacks a module or pose.

        Raises:
            ConfigurationError: listing every incomplete type
        """
        missing = []
        for activity_type in required_types:
            binding = self._bindings.get(activity_type)
            if binding is None or binding.module is None:
                missing.append(f"{activity_type.value}: no module")
            elif binding.pose is None:
                missing.append(f"{activity_type.value}: no camera pose")

        if missing:
            raise ConfigurationError("Incomplete activity bindings: " + ", ".join(missing))

    # ===========================================================
    # Lookup
    # ===========================================================

    def get(self, activity_type) -> Optional[ActivityBinding]:
        return self._bindings.get(activity_type)

    def has(self, activity_type) -> bool:
        binding = self._bindings.get(activity_type)
        return binding is not None and binding.module is not None and binding.pose is not None

    @property
    def types(self) -> list:
        return list(self._bindings.keys())

    def modules(self) -> list:
        return [b.module for b in self._bindings.values() if b.module is not None]

    def __len__(self):
        return len(self._bindings)
