"""
test_game_context.py
--------------------
Unit tests for GameContext wiring, tick order and player intents.
"""

from unittest.mock import MagicMock, call

from atelier.core.services.game_context import GameContext
from atelier.core.runtime.progress_state import ProgressState
from atelier.systems.activities.session_phase import SessionPhase

from conftest import tick_until


def make_mock_context():
    parts = {name: MagicMock() for name in (
        "events", "camera", "registry", "activity_controller", "game_manager", "room_controller",
    )}
    return GameContext(room_name="Mock", **parts), parts


class TestLifecycle:

    def test_wire_once(self):
        context, parts = make_mock_context()

        context.wire()
        context.wire()

        parts["activity_controller"].wire.assert_called_once_with(parts["game_manager"])
        parts["room_controller"].wire.assert_called_once()
        assert context.is_wired

    def test_teardown_releases_everything(self):
        context, parts = make_mock_context()
        context.wire()

        context.teardown()

        parts["room_controller"].teardown.assert_called_once()
        parts["activity_controller"].teardown.assert_called_once()
        parts["events"].clear_all.assert_called_once()
        assert not context.is_wired

    def test_teardown_before_wire_is_noop(self):
        context, parts = make_mock_context()
        context.teardown()
        parts["events"].clear_all.assert_not_called()


class TestTickOrder:

    def test_modules_then_camera_then_controller(self):
        context, parts = make_mock_context()
        module = MagicMock()
        parts["registry"].modules.return_value = [module]

        manager = MagicMock()
        manager.attach_mock(module.update, "module")
        manager.attach_mock(parts["camera"].update, "camera")
        manager.attach_mock(parts["activity_controller"].update, "controller")

        context.update(0.25)

        assert manager.mock_calls == [call.module(0.25), call.camera(0.25), call.controller(0.25)]


class TestIntents:

    def test_click_and_target(self, context):
        assert context.click_spot("spot_a") is True
        assert context.game_manager.state == ProgressState.ACTIVITY_IN_PROGRESS

    def test_target_spot_marks_only_one(self, context):
        context.target_spot("spot_b")
        assert [s.is_targeted for s in context.room_controller.spots] == [False, True, False]

        context.target_spot(None)
        assert not any(s.is_targeted for s in context.room_controller.spots)

    def test_orbit_only_between_sessions(self, context):
        assert context.orbit(5, 0) is True

        context.click_spot("spot_a")
        tick_until(context, lambda: context.activity_controller.phase == SessionPhase.ACTIVE)

        assert context.orbit(5, 0) is False

    def test_skip_forwarded(self, context):
        assert context.request_skip() is False


class TestSharedPoses:

    def test_editing_live_camera_pose_leaves_room_pose_intact(self, context):
        room_pose = context.activity_controller.room_pose
        before = room_pose.as_tuple()

        context.camera.pose.position.x += 5.0

        assert room_pose.as_tuple() == before
        assert context.camera.pose == room_pose

    def test_session_returns_to_untouched_room_pose(self, context):
        context.click_spot("spot_a")
        tick_until(context, lambda: context.activity_controller.phase == SessionPhase.ACTIVE)
        context.camera.pose.position.y = 100.0

        tick_until(context, lambda: context.activity_controller.is_idle)

        assert context.camera.pose == context.activity_controller.room_pose
        spot = context.room_controller.get_spot("spot_a")
        spot.placed_item.pose.position.z = -50.0
        assert spot.placed_item.pose == spot.anchor
