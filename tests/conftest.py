"""
conftest.py
-----------
Shared pytest configuration and fixtures for Zen Atelier tests.

Contains:
- Event bus, pose and spot fixtures
- A manually-completed mini-activity for driving the session machine
- An event recorder for asserting notification order
- A compact room layout built through RoomSystemInitializer
- Pytest configuration and hooks

pygame is used for real here (Vector3 math); nothing opens a window.
"""

import pytest
from unittest.mock import MagicMock

from atelier.core.services.event_manager import EventManager
from atelier.data.activity_result import ItemPrefab, build_result
from atelier.data.activity_types import ActivityType
from atelier.data.pose import Pose
from atelier.entities.items import ItemRegistry
from atelier.systems.activities.base_activity import MiniActivity
from atelier.systems.room_system_initializer import RoomSystemInitializer


# ===========================================================
# Test Helpers
# ===========================================================

class ManualActivity(MiniActivity):
    """Module that only completes when the test says so."""

    def __init__(self, activity_type, prefab=None, payload=None,
                 complete_on_start=False):
        super().__init__()
        self.activity_type = activity_type
        self.prefab = prefab or ItemPrefab(f"{activity_type.value}_prefab", "decoration")
        self.payload = payload or {}
        self.complete_on_start = complete_on_start
        self.start_count = 0
        self.stop_count = 0
        self.ticks = 0

    def on_start(self):
        self.start_count += 1
        if self.complete_on_start:
            self.finish()

    def on_stop(self, was_running):
        self.stop_count += 1

    def on_update(self, dt):
        self.ticks += 1

    def finish(self, completion_time=1.0):
        self.complete(build_result(self.activity_type, self.prefab, self.payload, completion_time))


class EventRecorder:
    """Subscribes to event types and keeps them in dispatch order."""

    def __init__(self, events, *event_types):
        self.received = []
        for event_type in event_types:
            events.subscribe(event_type, self.received.append)

    def of_type(self, event_type):
        return [e for e in self.received if isinstance(e, event_type)]

    def names(self):
        return [type(e).__name__ for e in self.received]


def tick(target, seconds, dt=0.25):
    """Advance anything with update(dt) by `seconds` in fixed steps."""
    steps = int(round(seconds / dt))
    for _ in range(steps):
        target.update(dt)


def tick_until(target, condition, dt=0.25, limit=200):
    """Tick until condition() holds; fail the test if it never does."""
    for _ in range(limit):
        if condition():
            return
        target.update(dt)
    assert condition(), "condition never reached"


# ===========================================================
# Fixtures
# ===========================================================

@pytest.fixture
def events():
    """Fresh event bus per test."""
    return EventManager()


@pytest.fixture
def room_pose():
    return Pose((0, 3, -6), (20, 0, 0), "room")


@pytest.fixture
def lantern_pose():
    return Pose((-2, 1.5, -1), (10, -30, 0), "lantern")


@pytest.fixture
def origami_pose():
    return Pose((0, 1.2, 0.5), (35, 0, 0), "origami")


@pytest.fixture
def mock_event_manager():
    """Mock for EventManager."""
    event_manager = MagicMock()
    event_manager.subscribe = MagicMock()
    event_manager.dispatch = MagicMock()
    event_manager.unsubscribe = MagicMock()
    return event_manager


@pytest.fixture
def restore_item_registry():
    """Undo item kinds registered by a test."""
    snapshot = dict(ItemRegistry._registry)
    yield
    ItemRegistry._registry.clear()
    ItemRegistry._registry.update(snapshot)


@pytest.fixture
def room_config():
    """
    Three-spot layout with round numbers:
    camera 1.0s, success hold 2.0s, modules finish after 0.5s.
    """
    return {
        "room": {"name": "Test Room", "required_items": 3},
        "camera": {
            "duration": 1.0,
            "easing": "ease_in_out",
            "room_pose": "room",
            "poses": {
                "room": {"position": [0, 3, -6], "orientation": [20, 0, 0]},
                "lantern": {"position": [-2, 1.5, -1], "orientation": [10, -30, 0]},
                "origami": {"position": [0, 1.2, 0.5], "orientation": [35, 0, 0]},
                "calligraphy": {"position": [2, 1.2, -0.5], "orientation": [40, 25, 0]},
            },
        },
        "activities": {
            "success_hold": 2.0,
            "allow_skip": True,
            "modules": {
                "lantern": {
                    "duration": 0.5,
                    "prefab": {"id": "paper_lantern", "kind": "lantern"},
                    "payload": {"final_brightness": 0.75},
                },
                "origami": {
                    "duration": 0.5,
                    "prefab": {"id": "origami_crane", "kind": "origami"},
                    "payload": {"design_name": "Crane"},
                },
                "calligraphy": {
                    "duration": 0.5,
                    "prefab": {"id": "ink_scroll", "kind": "decoration"},
                    "payload": {"stroke_consistency": 0.9},
                },
            },
        },
        "spots": [
            {
                "id": "spot_a",
                "activity": "lantern",
                "pose": {"position": [-2.5, 0, 1]},
                "anchor": {"position": [-2.5, 1.8, 1], "orientation": [0, 15, 0]},
            },
            {"id": "spot_b", "activity": "origami", "pose": {"position": [0, 0.8, 1.5]}},
            {"id": "spot_c", "activity": "calligraphy", "pose": {"position": [2.5, 1, 1]}},
        ],
    }


@pytest.fixture
def context(room_config):
    """Wired GameContext for the three-spot room."""
    ctx = RoomSystemInitializer(config=room_config).initialize()
    ctx.wire()
    yield ctx
    ctx.teardown()


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "regression: marks tests as regression tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        if "test_room_flow" in item.nodeid:
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)
