"""
Tests for editor configuration.
"""

import json

import pytest

from chromaspace.core.config import EditorConfig


class TestEditorConfig:
    """Defaults, validation and JSON files."""

    def test_defaults(self):
        config = EditorConfig()
        assert config.initial_rgb == (127.0, 127.0, 127.0)
        assert config.interpolation_steps == 10
        assert config.min_interpolation_points == 2
        assert config.undo_limit == 100
        assert config.log_level == "WARNING"

    @pytest.mark.parametrize("kwargs", [
        {"interpolation_steps": 1},
        {"min_interpolation_points": 1},
        {"undo_limit": 0},
        {"log_level": "LOUD"},
        {"initial_rgb": (1, 2)},
    ])
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            EditorConfig(**kwargs)

    def test_normalization(self):
        config = EditorConfig(initial_rgb=(300, -1, 5), log_level="debug")
        assert config.initial_rgb == (255.0, 0.0, 5.0)
        assert config.log_level == "DEBUG"

    def test_from_dict_ignores_unknown_keys(self):
        config = EditorConfig.from_dict({"interpolation_steps": 4, "theme": "dark"})
        assert config.interpolation_steps == 4

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "settings" / "editor.json"
        EditorConfig(initial_rgb=(10, 20, 30), undo_limit=5).save(path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["initial_rgb"] == [10.0, 20.0, 30.0]

        loaded = EditorConfig.load(path)
        assert loaded == EditorConfig(initial_rgb=(10, 20, 30), undo_limit=5)
