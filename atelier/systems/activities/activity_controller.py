"""
activity_controller.py
----------------------
Mini-activity lifecycle coordinator.

Architecture
------------
One session at a time, driven as a per-tick phase machine:

    IDLE -> AWAITING_ARRIVAL -> ACTIVE -> SUCCESS_HOLD -> RETURNING_CAMERA -> IDLE

- Camera arrival (CameraMovementCompleteEvent) gates module activation and
  result publication.
- The module's completion callback moves ACTIVE -> SUCCESS_HOLD.
- update(dt) closes each tick. The session advances at most one phase per
  tick, and only ticks that began in SUCCESS_HOLD count towards the hold.
- request_skip() can only shorten the hold.

Responsibilities
----------------
- Reject start requests while a session is in flight or bindings are missing
- Activate the matching module only once the camera is at rest on its pose
- Hold the success view, stop the module, return the camera
- Report the stored result (or an abort) to the result sink, exactly once
"""

from typing import Optional

from atelier.core.debug.debug_logger import DebugLogger
from atelier.core.runtime.game_settings import Activity
from atelier.core.services.event_manager import (
    ActivityPhaseChangedEvent,
    CameraMovementCompleteEvent,
)
from atelier.data.pose import Pose
from atelier.systems.activities.session_phase import SessionPhase


# Float slack so a hold of N whole ticks is not stretched to N+1 by drift
HOLD_EPSILON = 1e-9


class ActivityController:
    """Coordinates camera, module and result hand-off for one session at a time."""

    def __init__(self, events, camera, registry, room_pose: Pose,
                 success_hold: float = Activity.SUCCESS_HOLD,
                 allow_skip: bool = Activity.ALLOW_SKIP):
        """
        Args:
            events: EventManager for camera and phase notifications
            camera: CameraController instance
            registry: ActivityRegistry with module/pose bindings
            room_pose: Overview pose the camera returns to
            success_hold: Seconds to hold the success view
            allow_skip: Whether player input may shorten the hold
        """
        self.events = events
        self.camera = camera
        self.registry = registry
        self.room_pose = room_pose
        self.success_hold = max(0.0, float(success_hold))
        self.allow_skip = allow_skip

        self.result_sink = None

        self._phase = SessionPhase.IDLE
        self._active_type = None
        self._active_module = None
        self._last_module = None
        self._stored_result = None
        self._skip_requested = False
        self._hold_elapsed = 0.0
        self.last_hold_time: Optional[float] = None
        self._activating = False
        self._deferred_completion = False
        self._advanced_this_tick = False

        DebugLogger.init_entry("ActivityController")
        DebugLogger.init_sub(f"Success hold: {self.success_hold:.1f}s | Skip: {self.allow_skip}")

    # ===========================================================
    # Lifecycle
    # ===========================================================

    def wire(self, result_sink):
        """
        Resolve subscriptions once. Call after every dependency exists.

        Args:
            result_sink: Receives on_activity_result_ready(result) and
                on_activity_aborted(activity_type)
        """
        self.result_sink = result_sink
        self.events.subscribe(CameraMovementCompleteEvent, self._on_camera_arrived)

        for activity_type in self.registry.types:
            binding = self.registry.get(activity_type)
            if binding and binding.module is not None:
                binding.module.set_completion_handler(self._make_completion_handler(activity_type))

        DebugLogger.init_sub(f"Wired {len(self.registry)} activity module(s)")

    def teardown(self):
        """Stop any running module and release subscriptions."""
        self.events.unsubscribe(CameraMovementCompleteEvent, self._on_camera_arrived)
        for module in self.registry.modules():
            module.set_completion_handler(None)

        if self._active_module is not None:
            self._active_module.stop()

        self._phase = SessionPhase.IDLE
        self._active_type = None
        self._active_module = None
        self._last_module = None
        self._stored_result = None
        self._skip_requested = False
        self._deferred_completion = False
        self._advanced_this_tick = False
        self.result_sink = None

    # ===========================================================
    # Queries
    # ===========================================================

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def is_idle(self) -> bool:
        return self._phase == SessionPhase.IDLE

    @property
    def active_type(self):
        return self._active_type

    @property
    def hold_elapsed(self) -> float:
        return self._hold_elapsed

    @property
    def skip_requested(self) -> bool:
        return self._skip_requested

    def can_start(self, activity_type) -> bool:
        """
        Authoritative admission check for a new session.

        Rejects (and logs) when a session is in flight or the type has
        no module/pose binding.
        """
        if self._phase != SessionPhase.IDLE:
            DebugLogger.warn(
                f"Cannot start {getattr(activity_type, 'value', activity_type)} - "
                f"session already active ({self._phase.value})",
                category="activity"
            )
            return False

        if not self.registry.has(activity_type):
            DebugLogger.fail(
                f"No module or camera pose configured for '{getattr(activity_type, 'value', activity_type)}'",
                category="activity"
            )
            return False

        return True

    # ===========================================================
    # Session Control
    # ===========================================================

    def start_activity(self, activity_type) -> bool:
        """
        Begin a session: move the camera to the activity pose.

        The module is activated later, when the camera reports arrival.

        Returns:
            True if the session started
        """
        if not self.can_start(activity_type):
            return False

        binding = self.registry.get(activity_type)

        # Previous module may still be showing its success visuals
        if self._last_module is not None:
            self._last_module.stop()

        self._active_type = activity_type
        self._active_module = binding.module
        self._stored_result = None
        self._deferred_completion = False
        self._skip_requested = False
        self._hold_elapsed = 0.0

        DebugLogger.action(f"Starting {activity_type.value} session", category="activity")
        self._set_phase(SessionPhase.AWAITING_ARRIVAL)
        self.camera.move_to(binding.pose)
        return True

    def request_skip(self) -> bool:
        """
        Latch a skip of the current success hold.

        Only honored during SUCCESS_HOLD and when skipping is enabled.
        """
        if not self.allow_skip or self._phase != SessionPhase.SUCCESS_HOLD:
            return False
        if not self._skip_requested:
            DebugLogger.trace(f"Skip requested at {self._hold_elapsed:.2f}s", category="activity")
        self._skip_requested = True
        return True

    def update(self, dt: float):
        """
        Close the current tick.

        A tick that already moved the session (camera arrival, module
        completion) does not move it again, and only ticks that began in
        SUCCESS_HOLD count towards the hold.
        """
        if not self._advanced_this_tick:
            if self._deferred_completion:
                self._enter_success_hold()
            elif self._phase == SessionPhase.SUCCESS_HOLD:
                self._hold_elapsed += dt
                if self._skip_requested or self._hold_elapsed >= self.success_hold - HOLD_EPSILON:
                    self._end_success_hold()
        self._advanced_this_tick = False

    # ===========================================================
    # Notifications
    # ===========================================================

    def _on_camera_arrived(self, event: CameraMovementCompleteEvent):
        """Camera at rest: activate the module or wrap up the session."""
        if self._phase == SessionPhase.AWAITING_ARRIVAL:
            self._activate_module()
        elif self._phase == SessionPhase.RETURNING_CAMERA:
            self._finish_session()
        else:
            DebugLogger.trace(
                f"Camera arrival ignored in phase {self._phase.value}",
                category="activity"
            )

    def _make_completion_handler(self, activity_type):
        def _handler(result):
            self._on_activity_completed(activity_type, result)
        _handler.__name__ = f"on_{activity_type.value}_completed"
        return _handler

    def _on_activity_completed(self, activity_type, result):
        """Active module finished: store its result and begin the success hold."""
        if self._phase != SessionPhase.ACTIVE or activity_type != self._active_type:
            DebugLogger.warn(
                f"Ignoring {activity_type.value} completion in phase {self._phase.value}",
                category="activity"
            )
            return

        completion_time = getattr(result, "completion_time", 0.0)
        DebugLogger.action(
            f"{activity_type.value} complete in {completion_time:.2f}s",
            category="activity"
        )

        self._stored_result = result
        if self._activating:
            # Finished inside start(): enter the hold on the next tick
            self._deferred_completion = True
            return
        self._enter_success_hold()

    # ===========================================================
    # Phase Steps
    # ===========================================================

    def _activate_module(self):
        # ACTIVE first so a module completing inside start() is accepted
        self._set_phase(SessionPhase.ACTIVE)
        self._last_module = self._active_module
        DebugLogger.action(f"Camera arrived, activating {self._active_type.value}", category="activity")
        self._activating = True
        try:
            self._active_module.start()
        finally:
            self._activating = False

    def _enter_success_hold(self):
        self._deferred_completion = False
        self._skip_requested = False
        self._hold_elapsed = 0.0
        self._set_phase(SessionPhase.SUCCESS_HOLD)

    def _end_success_hold(self):
        self.last_hold_time = self._hold_elapsed
        DebugLogger.system(
            f"Success displayed for {self._hold_elapsed:.2f}s (skipped: {self._skip_requested})",
            category="activity"
        )

        self._active_module.stop()
        self._set_phase(SessionPhase.RETURNING_CAMERA)

        if not self.camera.move_to(self.room_pose):
            DebugLogger.fail("Room pose missing - finishing session in place", category="activity")
            self._finish_session()

    def _finish_session(self):
        """Back to IDLE, then publish the stored result or report an abort."""
        result = self._stored_result
        activity_type = self._active_type

        self._stored_result = None
        self._skip_requested = False
        self._hold_elapsed = 0.0
        self._active_type = None
        self._active_module = None
        self._set_phase(SessionPhase.IDLE)

        if self.result_sink is None:
            DebugLogger.fail("No result sink wired - session result dropped", category="activity")
            return

        if result is None:
            DebugLogger.warn(
                f"Session for {getattr(activity_type, 'value', activity_type)} ended without a result",
                category="activity"
            )
            self.result_sink.on_activity_aborted(activity_type)
            return

        DebugLogger.action("Camera returned to room, publishing result", category="activity")
        self.result_sink.on_activity_result_ready(result)

    def _set_phase(self, new_phase: SessionPhase):
        old_phase = self._phase
        if old_phase == new_phase:
            return
        self._phase = new_phase
        self._advanced_this_tick = True
        DebugLogger.state(f"Phase {old_phase.value} -> {new_phase.value}", category="activity")
        self.events.dispatch(ActivityPhaseChangedEvent(old_phase=old_phase, new_phase=new_phase))
