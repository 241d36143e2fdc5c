"""
camera_controller.py
--------------------
Interruptible camera transition engine.

Responsibilities
----------------
- Own the live camera pose
- Interpolate toward a target over a fixed duration, one step per tick
- Cancel-and-replace any in-flight transition on a new move request
- Snap exactly to the target before announcing completion
- Allow clamped free-look orbit while at rest

Knows nothing about activities or rooms; coordinators listen for
CameraMovementCompleteEvent.
"""

from typing import Optional

from atelier.core.debug.debug_logger import DebugLogger
from atelier.core.runtime.game_settings import Camera, Orbit
from atelier.core.services.event_manager import (
    CameraMovementCompleteEvent,
    CameraMovementStartedEvent,
)
from atelier.data.pose import Pose
from atelier.systems.camera.easing import resolve_easing


def _normalize_angle(angle: float) -> float:
    """Wrap an angle in degrees to the (-180, 180] range."""
    angle = angle % 360.0
    if angle > 180.0:
        angle -= 360.0
    return angle


class CameraController:
    """Moves the camera between named poses with eased interpolation."""

    def __init__(self, events, initial_pose: Pose = None,
                 duration: float = Camera.TRANSITION_DURATION,
                 easing=Camera.EASING):
        """
        Args:
            events: EventManager used for movement notifications
            initial_pose: Starting live pose (origin if omitted)
            duration: Transition length in seconds
            easing: Curve name or callable t -> eased t
        """
        self.events = events
        self.duration = max(0.0, float(duration))
        self.easing = resolve_easing(easing)

        self._pose = initial_pose or Pose()
        self._start_pose: Optional[Pose] = None
        self._target: Optional[Pose] = None
        self._elapsed = 0.0
        self._moving = False

        # Free-look tracking, synced on arrival
        self._yaw = _normalize_angle(self._pose.orientation.y)
        self._pitch = _normalize_angle(self._pose.orientation.x)

        DebugLogger.init_entry("CameraController")
        DebugLogger.init_sub(f"Duration: {self.duration:.2f}s | Start: {self._pose}")

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def pose(self) -> Pose:
        """Current live pose."""
        return self._pose

    @property
    def target(self) -> Optional[Pose]:
        """Pending target, None when at rest."""
        return self._target

    @property
    def is_moving(self) -> bool:
        return self._moving

    @property
    def progress(self) -> float:
        """Normalized (uneased) progress of the current transition."""
        if not self._moving:
            return 1.0
        if self.duration <= 0:
            return 0.0
        return min(self._elapsed / self.duration, 1.0)

    # ===========================================================
    # Movement
    # ===========================================================

    def move_to(self, pose: Pose) -> bool:
        """
        Start a transition to pose, replacing any in-flight one.

        The camera stays wherever the cancelled transition left it and
        interpolates from there.

        Returns:
            False if pose is None, True otherwise
        """
        if pose is None:
            DebugLogger.warn("Move requested with no target pose", category="camera")
            return False

        if self._moving:
            DebugLogger.trace(
                f"Cancelling transition to {self._target} at {self.progress:.0%}",
                category="camera"
            )

        self._start_pose = self._pose
        self._target = pose
        self._elapsed = 0.0
        self._moving = True

        DebugLogger.state(f"Moving to {pose}", category="camera")
        self.events.dispatch(CameraMovementStartedEvent(target=pose))
        return True

    def update(self, dt: float):
        """Advance the active transition by one tick."""
        if not self._moving:
            return

        self._elapsed += dt

        if self._elapsed >= self.duration:
            self._arrive()
            return

        t = self.easing(self._elapsed / self.duration)
        self._pose = self._start_pose.lerp(self._target, t)

    def snap_to(self, pose: Pose):
        """Place the camera at pose immediately, cancelling any transition. No events."""
        self._pose = pose
        self._start_pose = None
        self._target = None
        self._elapsed = 0.0
        self._moving = False
        self._sync_orbit(pose)

    def _arrive(self):
        """Snap to the exact target and announce completion."""
        target = self._target
        self._pose = target
        self._start_pose = None
        self._target = None
        self._elapsed = 0.0
        self._moving = False
        self._sync_orbit(target)

        DebugLogger.action(f"Arrived at {target}", category="camera")
        self.events.dispatch(CameraMovementCompleteEvent(pose=target))

    # ===========================================================
    # Free Look
    # ===========================================================

    def orbit(self, delta_yaw: float, delta_pitch: float) -> bool:
        """
        Rotate the live orientation in place. Ignored while moving.

        Returns:
            True if the orientation was changed
        """
        if self._moving:
            return False

        self._yaw = min(max(self._yaw + delta_yaw, Orbit.MIN_YAW), Orbit.MAX_YAW)
        self._pitch = min(max(self._pitch + delta_pitch, Orbit.MIN_PITCH), Orbit.MAX_PITCH)

        roll = self._pose.orientation.z
        self._pose = Pose(
            position=self._pose.position,
            orientation=(self._pitch, self._yaw, roll),
            name=self._pose.name,
        )
        return True

    def _sync_orbit(self, pose: Pose):
        self._yaw = _normalize_angle(pose.orientation.y)
        self._pitch = _normalize_angle(pose.orientation.x)
