"""
room_system_initializer.py
--------------------------
Builds a room's orchestration components from layout config.

Order:
    poses -> camera -> activity registry -> activity controller
          -> game manager -> spots -> room controller -> GameContext

Configuration gaps (missing room pose, unknown activity type, spot type
without module or camera pose, unknown item kind) raise ConfigurationError
here, before anything runs.
"""

from atelier.core.debug.debug_logger import DebugLogger
from atelier.core.errors import ConfigurationError
from atelier.core.runtime.game_settings import Activity, Camera, Room
from atelier.core.services.config_manager import load_config, merge_config
from atelier.core.services.event_manager import EventManager
from atelier.core.services.game_context import GameContext
from atelier.data.activity_result import ItemPrefab
from atelier.data.activity_types import ActivityType
from atelier.data.placement_spot import PlacementSpot
from atelier.data.pose import Pose
from atelier.entities.items import ItemRegistry
from atelier.systems.activities.activity_controller import ActivityController
from atelier.systems.activities.activity_registry import ActivityRegistry
from atelier.systems.activities.timed_activity import TimedActivity
from atelier.systems.camera.camera_controller import CameraController
from atelier.systems.placement.room_controller import RoomController
from atelier.systems.state.game_manager import GameManager
from atelier.systems.system_initializer import SystemInitializer


DEFAULT_ROOM_CONFIG = {
    "room": {
        "name": "Room",
        "required_items": Room.REQUIRED_ITEMS,
    },
    "camera": {
        "duration": Camera.TRANSITION_DURATION,
        "easing": Camera.EASING,
        "room_pose": Camera.ROOM_POSE,
        "completion_pose": None,
        "poses": {},
    },
    "activities": {
        "success_hold": Activity.SUCCESS_HOLD,
        "allow_skip": Activity.ALLOW_SKIP,
        "modules": {},
    },
    "spots": [],
}


class RoomSystemInitializer(SystemInitializer):
    """Initializes every component a room needs from one layout mapping."""

    def __init__(self, events=None, config: dict = None, config_file: str = Room.CONFIG_FILE):
        """
        Args:
            events: EventManager to share (a new one if None)
            config: Layout mapping; loaded from config_file when None
            config_file: Layout file name resolved through load_config
        """
        super().__init__(events if events is not None else EventManager())
        if config is None:
            config = load_config(config_file, DEFAULT_ROOM_CONFIG)
        else:
            config = merge_config(DEFAULT_ROOM_CONFIG, config)
        self.config = config

    def initialize(self) -> GameContext:
        """
        Build the room in dependency order.

        Raises:
            ConfigurationError: on any layout gap
        """
        DebugLogger.section("Initializing Room Systems")

        room_cfg = self.config["room"]
        poses = self._init_poses(self.config["camera"].get("poses") or {})
        room_pose = self._init_room_pose(poses)
        completion_pose = self._init_completion_pose(poses)

        camera = self._init_camera(room_pose)
        registry = self._init_registry(poses)

        activity_cfg = self.config["activities"]
        activity_controller = ActivityController(
            self.events,
            camera,
            registry,
            room_pose,
            success_hold=activity_cfg.get("success_hold", Activity.SUCCESS_HOLD),
            allow_skip=bool(activity_cfg.get("allow_skip", Activity.ALLOW_SKIP)),
        )

        game_manager = GameManager(
            self.events,
            activity_controller,
            required_items=room_cfg.get("required_items", Room.REQUIRED_ITEMS),
        )

        spots = self._init_spots(self.config.get("spots") or [])

        # Every spot type must be bound before anything runs
        required_types = []
        for spot in spots:
            if spot.activity_type not in required_types:
                required_types.append(spot.activity_type)
        registry.validate(required_types)

        room_controller = RoomController(
            self.events,
            game_manager,
            spots,
            camera=camera,
            room_pose=room_pose,
            completion_pose=completion_pose,
        )

        context = GameContext(
            events=self.events,
            camera=camera,
            registry=registry,
            activity_controller=activity_controller,
            game_manager=game_manager,
            room_controller=room_controller,
            room_name=str(room_cfg.get("name", "")),
        )
        DebugLogger.init_entry("Room Systems Initialized")
        return context

    # ===========================================================
    # System Initialization Methods
    # ===========================================================

    def _init_poses(self, pose_cfg: dict) -> dict:
        if not isinstance(pose_cfg, dict):
            raise ConfigurationError("camera.poses must be a mapping of name -> pose")

        poses = {}
        for name, data in pose_cfg.items():
            pose = Pose.from_config(data, name=str(name))
            if pose is None:
                raise ConfigurationError(f"Camera pose '{name}' is malformed")
            poses[str(name)] = pose
        DebugLogger.init_sub(f"Camera poses: {list(poses)}")
        return poses

    def _init_room_pose(self, poses: dict) -> Pose:
        room_pose_name = self.config["camera"].get("room_pose", Camera.ROOM_POSE)
        room_pose = poses.get(room_pose_name)
        if room_pose is None:
            raise ConfigurationError(f"Room camera pose '{room_pose_name}' is not defined")
        return room_pose

    def _init_completion_pose(self, poses: dict):
        """Optional view framed once the room is complete."""
        name = self.config["camera"].get("completion_pose")
        if name is None:
            return None
        if name not in poses:
            raise ConfigurationError(f"Completion camera pose '{name}' is not defined")
        return poses[name]

    def _init_camera(self, room_pose: Pose) -> CameraController:
        camera_cfg = self.config["camera"]
        return CameraController(
            self.events,
            initial_pose=room_pose,
            duration=camera_cfg.get("duration", Camera.TRANSITION_DURATION),
            easing=camera_cfg.get("easing", Camera.EASING),
        )

    def _init_registry(self, poses: dict) -> ActivityRegistry:
        """Create one scripted module per configured activity and bind its pose."""
        registry = ActivityRegistry()
        modules_cfg = self.config["activities"].get("modules") or {}

        for key, module_cfg in modules_cfg.items():
            activity_type = ActivityType.parse(key)
            if activity_type is None:
                raise ConfigurationError(
                    f"Unknown activity type '{key}' (expected one of {ActivityType.get_all()})"
                )
            module_cfg = module_cfg or {}

            prefab = self._parse_prefab(activity_type, module_cfg.get("prefab"))
            module = TimedActivity(
                activity_type,
                prefab,
                duration=module_cfg.get("duration", 2.0),
                payload=module_cfg.get("payload"),
            )
            registry.register(activity_type, module, poses.get(activity_type.value))

        return registry

    @staticmethod
    def _parse_prefab(activity_type: ActivityType, data) -> ItemPrefab:
        if not isinstance(data, dict) or not data.get("id"):
            raise ConfigurationError(f"Activity '{activity_type.value}' has no prefab id")

        kind = str(data.get("kind", "decoration"))
        if not ItemRegistry.has(kind):
            raise ConfigurationError(
                f"Activity '{activity_type.value}' uses unknown item kind '{kind}' "
                f"(registered: {ItemRegistry.kinds()})"
            )
        return ItemPrefab(prefab_id=str(data["id"]), kind=kind)

    def _init_spots(self, spots_cfg: list) -> list:
        spots = []
        for index, data in enumerate(spots_cfg):
            if not isinstance(data, dict):
                raise ConfigurationError(f"Spot #{index} is not a mapping")

            spot_id = str(data.get("id") or f"spot_{index}")
            activity_type = ActivityType.parse(data.get("activity"))
            if activity_type is None:
                raise ConfigurationError(f"Spot '{spot_id}' has unknown activity '{data.get('activity')}'")

            pose = Pose.from_config(data.get("pose"), name=spot_id)
            if pose is None:
                raise ConfigurationError(f"Spot '{spot_id}' has no valid pose")

            anchor = None
            if data.get("anchor") is not None:
                anchor = Pose.from_config(data["anchor"], name=f"{spot_id}_anchor")
                if anchor is None:
                    raise ConfigurationError(f"Spot '{spot_id}' has a malformed anchor")

            spots.append(PlacementSpot(spot_id, activity_type, pose, anchor))
            DebugLogger.init_sub(f"Spot {spot_id} -> {activity_type.value}")

        return spots
