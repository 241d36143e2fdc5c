"""
activity_types.py
-----------------
Defines an enumeration for all mini-activity kinds, preventing typos and
enabling static analysis for activity-related logic.
"""
from enum import Enum


class ActivityType(str, Enum):
    """
    Closed set of mini-activity kinds a placement spot can trigger.
    Inherits from `str` so that members can be used directly as config keys.
    This should be kept in sync with `config/room.yaml`.
    """
    LANTERN = "lantern"
    ORIGAMI = "origami"
    CALLIGRAPHY = "calligraphy"

    @classmethod
    def get_all(cls) -> list[str]:
        """
        Returns a list of all defined activity type strings.
        """
        return [member.value for member in cls]

    @classmethod
    def parse(cls, value):
        """
        Resolve a config value to an ActivityType.

        Returns:
            ActivityType or None if the value is not a known type
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None
