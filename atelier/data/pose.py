"""
pose.py
-------
Position + orientation pair used for camera targets, spot locations and
item anchors.

Orientation is stored as euler angles in degrees (pitch, yaw, roll) and is
treated as an opaque coordinate triple: it is interpolated component-wise,
independently of position.
"""

import pygame


def _triple(value) -> tuple:
    """Copy any 3-sequence (or Vector3) into a float tuple."""
    if value is None:
        return (0.0, 0.0, 0.0)
    return (float(value[0]), float(value[1]), float(value[2]))


def lerp_vec3(start: pygame.Vector3, end: pygame.Vector3, t: float) -> pygame.Vector3:
    """
    Unclamped linear interpolation between two vectors.

    Vector3.lerp rejects t outside [0, 1]; easing curves may overshoot,
    so the blend is computed directly.
    """
    return start + (end - start) * t


class Pose:
    """
    Immutable position/orientation pair.

    Coordinates are stored as tuples; position and orientation hand out a
    new Vector3 on every access, so editing one never reaches the pose.
    """

    __slots__ = ("_position", "_orientation", "_name")

    def __init__(self, position=None, orientation=None, name: str = ""):
        object.__setattr__(self, "_position", _triple(position))
        object.__setattr__(self, "_orientation", _triple(orientation))
        object.__setattr__(self, "_name", name)

    def __setattr__(self, key, value):
        raise AttributeError(f"Pose is immutable (tried to set {key!r})")

    def __delattr__(self, key):
        raise AttributeError(f"Pose is immutable (tried to delete {key!r})")

    @property
    def position(self) -> pygame.Vector3:
        return pygame.Vector3(self._position)

    @property
    def orientation(self) -> pygame.Vector3:
        return pygame.Vector3(self._orientation)

    @property
    def name(self) -> str:
        return self._name

    # ===========================================================
    # Construction
    # ===========================================================

    @classmethod
    def from_config(cls, data, name: str = ""):
        """
        Build a pose from a config mapping.

        Args:
            data: {"position": [x, y, z], "orientation": [pitch, yaw, roll]}
            name: Optional label used in logs

        Returns:
            Pose, or None if data is missing or malformed
        """
        if not isinstance(data, dict) or "position" not in data:
            return None
        try:
            return cls(
                position=data["position"],
                orientation=data.get("orientation", (0, 0, 0)),
                name=data.get("name", name),
            )
        except (TypeError, ValueError, IndexError):
            return None

    # ===========================================================
    # Helpers
    # ===========================================================

    def lerp(self, other: "Pose", t: float, name: str = "") -> "Pose":
        """Interpolate position and orientation independently by t."""
        return Pose(
            position=lerp_vec3(self.position, other.position, t),
            orientation=lerp_vec3(self.orientation, other.orientation, t),
            name=name,
        )

    def with_name(self, name: str) -> "Pose":
        return Pose(self.position, self.orientation, name)

    def as_tuple(self) -> tuple:
        """Exact numeric representation, used for equality checks in tests/logs."""
        return (self._position, self._orientation)

    def __eq__(self, other):
        if not isinstance(other, Pose):
            return NotImplemented
        return self.as_tuple() == other.as_tuple()

    def __hash__(self):
        return hash(self.as_tuple())

    def __repr__(self):
        label = f"{self.name}: " if self.name else ""
        px, py, pz = self._position
        ox, oy, oz = self._orientation
        return (f"Pose({label}pos=({px:.2f}, {py:.2f}, {pz:.2f}), "
                f"rot=({ox:.1f}, {oy:.1f}, {oz:.1f}))")
