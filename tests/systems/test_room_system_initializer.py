"""
test_room_system_initializer.py
-------------------------------
Unit tests for building a room from layout config.

Covers:
- Happy path: components, spots, bindings, camera start pose
- Fail-fast ConfigurationError for every layout gap
- The shipped room.yaml builds
"""

import copy

import pytest

from atelier.core.errors import ConfigurationError
from atelier.core.services.game_context import GameContext
from atelier.data.activity_types import ActivityType
from atelier.data.pose import Pose
from atelier.systems.activities.timed_activity import TimedActivity
from atelier.systems.room_system_initializer import RoomSystemInitializer


def build(config):
    return RoomSystemInitializer(config=config).initialize()


class TestInitialize:

    def test_builds_context(self, room_config):
        context = build(room_config)

        assert isinstance(context, GameContext)
        assert context.room_name == "Test Room"
        assert [s.spot_id for s in context.room_controller.spots] == ["spot_a", "spot_b", "spot_c"]
        assert context.game_manager.required_items == 3
        assert context.activity_controller.success_hold == 2.0
        assert context.camera.duration == 1.0

    def test_camera_starts_at_room_pose(self, room_config):
        context = build(room_config)
        assert context.camera.pose == Pose((0, 3, -6), (20, 0, 0))
        assert context.activity_controller.room_pose == context.camera.pose

    def test_bindings_use_timed_modules(self, room_config):
        context = build(room_config)

        binding = context.registry.get(ActivityType.LANTERN)
        assert isinstance(binding.module, TimedActivity)
        assert binding.module.prefab.kind == "lantern"
        assert binding.module.payload == {"final_brightness": 0.75}
        assert binding.pose == Pose((-2, 1.5, -1), (10, -30, 0))

    def test_anchor_parsed(self, room_config):
        context = build(room_config)
        spot = context.room_controller.get_spot("spot_a")

        assert spot.anchor == Pose((-2.5, 1.8, 1), (0, 15, 0))
        assert context.room_controller.get_spot("spot_b").anchor is None

    def test_shared_event_bus(self, room_config, events):
        context = RoomSystemInitializer(events=events, config=room_config).initialize()
        assert context.events is events
        assert context.camera.events is events

    def test_shipped_layout_builds(self):
        context = RoomSystemInitializer().initialize()

        assert len(context.room_controller.spots) == 3
        assert set(context.registry.types) == set(ActivityType)
        assert context.room_controller.completion_pose is not None

    def test_completion_pose_optional(self, room_config):
        context = build(room_config)

        assert context.room_controller.completion_pose is None
        assert context.room_controller.camera is context.camera

    def test_completion_pose_resolved(self, room_config):
        config = copy.deepcopy(room_config)
        config["camera"]["completion_pose"] = "room"
        context = build(config)

        assert context.room_controller.completion_pose == Pose((0, 3, -6), (20, 0, 0))


class TestConfigurationErrors:

    def mutate(self, room_config, change):
        config = copy.deepcopy(room_config)
        change(config)
        return config

    def test_missing_room_pose(self, room_config):
        config = self.mutate(room_config, lambda c: c["camera"]["poses"].pop("room"))
        with pytest.raises(ConfigurationError):
            build(config)

    def test_unknown_completion_pose(self, room_config):
        config = self.mutate(room_config, lambda c: c["camera"].update(completion_pose="sunset"))
        with pytest.raises(ConfigurationError, match="sunset"):
            build(config)

    def test_missing_activity_pose(self, room_config):
        config = self.mutate(room_config, lambda c: c["camera"]["poses"].pop("origami"))
        with pytest.raises(ConfigurationError, match="origami"):
            build(config)

    def test_spot_type_without_module(self, room_config):
        config = self.mutate(room_config, lambda c: c["activities"]["modules"].pop("calligraphy"))
        with pytest.raises(ConfigurationError, match="calligraphy"):
            build(config)

    def test_unknown_activity_module(self, room_config):
        def change(c):
            c["activities"]["modules"]["weaving"] = {"prefab": {"id": "loom"}}
        with pytest.raises(ConfigurationError, match="weaving"):
            build(self.mutate(room_config, change))

    def test_unknown_spot_activity(self, room_config):
        def change(c):
            c["spots"][0]["activity"] = "weaving"
        with pytest.raises(ConfigurationError):
            build(self.mutate(room_config, change))

    def test_unknown_item_kind(self, room_config):
        def change(c):
            c["activities"]["modules"]["lantern"]["prefab"]["kind"] = "hologram"
        with pytest.raises(ConfigurationError, match="hologram"):
            build(self.mutate(room_config, change))

    def test_missing_prefab(self, room_config):
        def change(c):
            del c["activities"]["modules"]["origami"]["prefab"]
        with pytest.raises(ConfigurationError):
            build(self.mutate(room_config, change))

    def test_spot_without_pose(self, room_config):
        def change(c):
            del c["spots"][1]["pose"]
        with pytest.raises(ConfigurationError, match="spot_b"):
            build(self.mutate(room_config, change))

    def test_malformed_anchor(self, room_config):
        def change(c):
            c["spots"][0]["anchor"] = {"orientation": [0, 0, 0]}
        with pytest.raises(ConfigurationError, match="anchor"):
            build(self.mutate(room_config, change))

    def test_unused_activity_without_pose_is_allowed(self, room_config):
        def change(c):
            c["spots"] = [s for s in c["spots"] if s["activity"] != "calligraphy"]
            c["camera"]["poses"].pop("calligraphy")
        context = build(self.mutate(room_config, change))

        assert not context.registry.has(ActivityType.CALLIGRAPHY)
