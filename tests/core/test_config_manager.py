"""
test_config_manager.py
----------------------
Unit tests for load_config and merge helpers.

Covers:
- JSON, YAML and Python config files
- Recursive merge over defaults, '_notes' stripping
- Missing / malformed files (lenient and strict)
- Shipped default room layout resolves through the index
"""

import json

import pytest

from atelier.core.services import config_manager
from atelier.core.services.config_manager import load_config, merge_config


DEFAULTS = {"room": {"name": "Default", "required_items": 3}, "spots": []}


# ===========================================================
# File Formats
# ===========================================================

class TestLoadFormats:

    def test_yaml_merges_over_defaults(self, tmp_path):
        path = tmp_path / "layout.yaml"
        path.write_text("room:\n  name: Garden\n_notes: ignored\n", encoding="utf-8")

        data = load_config(str(path), DEFAULTS)

        assert data["room"] == {"name": "Garden", "required_items": 3}
        assert data["spots"] == []
        assert "_notes" not in data

    def test_json(self, tmp_path):
        path = tmp_path / "layout.json"
        path.write_text(json.dumps({"room": {"required_items": 5}}), encoding="utf-8")

        data = load_config(str(path), DEFAULTS)

        assert data["room"]["required_items"] == 5
        assert data["room"]["name"] == "Default"

    def test_python_default_config(self, tmp_path):
        path = tmp_path / "layout.py"
        path.write_text('DEFAULT_CONFIG = {"room": {"name": "Study"}}\n', encoding="utf-8")

        data = load_config(str(path), DEFAULTS)

        assert data["room"]["name"] == "Study"

    def test_non_mapping_yaml_falls_back(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        assert load_config(str(path), DEFAULTS) == DEFAULTS


# ===========================================================
# Failure Handling
# ===========================================================

class TestLoadFailures:

    def test_missing_file_returns_defaults(self):
        assert load_config("definitely_missing_layout.yaml", DEFAULTS) == DEFAULTS

    def test_missing_file_strict_raises(self):
        with pytest.raises(FileNotFoundError):
            load_config("definitely_missing_layout.yaml", DEFAULTS, strict=True)

    def test_malformed_yaml_returns_defaults(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("room: [unclosed\n", encoding="utf-8")

        assert load_config(str(path), DEFAULTS) == DEFAULTS


# ===========================================================
# Merge & Index
# ===========================================================

class TestMergeAndIndex:

    def test_merge_config_does_not_mutate_defaults(self):
        merged = merge_config(DEFAULTS, {"room": {"name": "Tea"}})

        assert merged["room"]["name"] == "Tea"
        assert DEFAULTS["room"]["name"] == "Default"

    def test_lists_replace_rather_than_merge(self):
        merged = merge_config({"spots": [1, 2]}, {"spots": [3]})
        assert merged["spots"] == [3]

    def test_shipped_room_layout_is_indexed(self):
        config_manager.rebuild_file_index()

        data = load_config("room.yaml")

        assert "room.yaml" in config_manager.get_indexed_files()
        assert data["room"]["required_items"] == 3
        assert {s["activity"] for s in data["spots"]} == {"lantern", "origami", "calligraphy"}
