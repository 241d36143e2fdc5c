"""
test_activity_result.py
-----------------------
Unit tests for the activity result variants and build_result.
"""

import pytest

from atelier.data.activity_result import (
    CalligraphyResult,
    ItemPrefab,
    LanternResult,
    OrigamiResult,
    build_result,
)
from atelier.data.activity_types import ActivityType


PREFAB = ItemPrefab("paper_lantern", "lantern")


class TestBuildResult:

    @pytest.mark.parametrize("activity_type, expected_cls", [
        (ActivityType.LANTERN, LanternResult),
        (ActivityType.ORIGAMI, OrigamiResult),
        (ActivityType.CALLIGRAPHY, CalligraphyResult),
    ])
    def test_variant_per_type(self, activity_type, expected_cls):
        result = build_result(activity_type, PREFAB)

        assert isinstance(result, expected_cls)
        assert result.activity_type == activity_type

    def test_payload_fields_applied(self):
        result = build_result(ActivityType.LANTERN, PREFAB, {"final_brightness": 0.75}, completion_time=3.5)

        assert result.final_brightness == 0.75
        assert result.completion_time == 3.5
        assert result.prefab == PREFAB

    def test_unknown_and_reserved_keys_ignored(self):
        result = build_result(
            ActivityType.ORIGAMI,
            PREFAB,
            {"design_name": "Crane", "activity_type": "lantern", "note": "x", "prefab": None},
        )

        assert result.design_name == "Crane"
        assert result.activity_type == ActivityType.ORIGAMI
        assert result.prefab == PREFAB

    def test_unknown_type_returns_none(self):
        assert build_result("weaving", PREFAB) is None


class TestActivityType:

    def test_parse(self):
        assert ActivityType.parse(" Lantern ") == ActivityType.LANTERN
        assert ActivityType.parse(ActivityType.ORIGAMI) == ActivityType.ORIGAMI
        assert ActivityType.parse("weaving") is None
        assert ActivityType.parse(None) is None
