"""
activity_result.py
------------------
Typed results produced by mini-activity modules.

Each variant is a frozen dataclass tagged with its ActivityType. Consumers
match on `result.activity_type` (or the concrete class) instead of
downcasting from a shared base.
"""

from dataclasses import dataclass, fields
from typing import ClassVar, Union

from atelier.data.activity_types import ActivityType


@dataclass(frozen=True)
class ItemPrefab:
    """Descriptor of the decoration to instantiate in the room."""
    prefab_id: str
    kind: str = "decoration"


@dataclass(frozen=True)
class LanternResult:
    """Lantern brightness-hold result."""
    activity_type: ClassVar[ActivityType] = ActivityType.LANTERN

    prefab: ItemPrefab
    final_brightness: float = 0.5
    completion_time: float = 0.0


@dataclass(frozen=True)
class OrigamiResult:
    """Origami fold-sequence result."""
    activity_type: ClassVar[ActivityType] = ActivityType.ORIGAMI

    prefab: ItemPrefab
    design_name: str = ""
    completion_time: float = 0.0


@dataclass(frozen=True)
class CalligraphyResult:
    """Calligraphy brush-stroke result."""
    activity_type: ClassVar[ActivityType] = ActivityType.CALLIGRAPHY

    prefab: ItemPrefab
    stroke_consistency: float = 1.0
    completion_time: float = 0.0


ActivityResult = Union[LanternResult, OrigamiResult, CalligraphyResult]

RESULT_TYPES = {
    ActivityType.LANTERN: LanternResult,
    ActivityType.ORIGAMI: OrigamiResult,
    ActivityType.CALLIGRAPHY: CalligraphyResult,
}


def build_result(activity_type: ActivityType, prefab: ItemPrefab,
                 payload: dict = None, completion_time: float = 0.0):
    """
    Build the result variant for an activity type from a payload dict.

    Unknown payload keys are ignored so config files can carry notes.

    Returns:
        The matching result instance, or None for an unknown type
    """
    result_cls = RESULT_TYPES.get(activity_type)
    if result_cls is None:
        return None

    payload = payload or {}
    values = {
        f.name: payload[f.name]
        for f in fields(result_cls)
        if f.name in payload and f.name not in ("prefab", "completion_time")
    }
    return result_cls(prefab=prefab, completion_time=completion_time, **values)
