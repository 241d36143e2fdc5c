"""
test_pose.py
------------
Unit tests for Pose value semantics and config parsing.
"""

import pygame
import pytest

from atelier.data.pose import Pose, lerp_vec3


class TestPoseConstruction:

    def test_values_are_copied(self):
        position = pygame.Vector3(1, 2, 3)
        pose = Pose(position, (0, 90, 0))

        position.x = 99

        assert pose.position.x == 1

    def test_from_config(self):
        pose = Pose.from_config({"position": [1, 2, 3], "orientation": [10, 20, 30]}, name="desk")

        assert pose.as_tuple() == ((1.0, 2.0, 3.0), (10.0, 20.0, 30.0))
        assert pose.name == "desk"

    def test_from_config_orientation_defaults_to_zero(self):
        pose = Pose.from_config({"position": [1, 2, 3]})
        assert tuple(pose.orientation) == (0.0, 0.0, 0.0)

    @pytest.mark.parametrize("data", [None, [], {}, {"position": [1, 2]}, {"position": "abc"}])
    def test_from_config_malformed_returns_none(self, data):
        assert Pose.from_config(data) is None


class TestPoseMath:

    def test_lerp_midpoint(self):
        start = Pose((0, 0, 0), (0, 0, 0))
        end = Pose((2, 4, 6), (10, 20, 30))

        mid = start.lerp(end, 0.5)

        assert mid.as_tuple() == ((1.0, 2.0, 3.0), (5.0, 10.0, 15.0))

    def test_lerp_endpoints_exact(self):
        start = Pose((1, 1, 1), (5, 5, 5))
        end = Pose((3, 3, 3), (9, 9, 9))

        assert start.lerp(end, 0.0) == start
        assert start.lerp(end, 1.0) == end

    def test_lerp_is_unclamped(self):
        result = lerp_vec3(pygame.Vector3(0, 0, 0), pygame.Vector3(1, 0, 0), 1.5)
        assert result.x == pytest.approx(1.5)

    def test_equality_ignores_name(self):
        assert Pose((1, 2, 3), name="a") == Pose((1, 2, 3), name="b")
        assert hash(Pose((1, 2, 3), name="a")) == hash(Pose((1, 2, 3)))

    def test_frozen(self):
        pose = Pose()
        with pytest.raises(AttributeError):
            pose.name = "moved"

    def test_vectors_handed_out_are_copies(self):
        pose = Pose((1, 2, 3), (10, 20, 30), "room")
        before = hash(pose)

        pose.position.x += 5.0
        pose.orientation.y = -90

        assert pose.as_tuple() == ((1.0, 2.0, 3.0), (10.0, 20.0, 30.0))
        assert hash(pose) == before

    def test_coordinates_cannot_be_rebound(self):
        pose = Pose((1, 2, 3))
        with pytest.raises(AttributeError):
            pose.position = pygame.Vector3(0, 0, 0)
