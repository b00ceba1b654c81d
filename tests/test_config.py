"""Tests for pine_engine.utils.config: JSON-backed configuration."""

import json
import logging

from pine_engine.utils.config import DEFAULT_CONFIG, Config


class TestConfig:
    def test_defaults_when_file_missing(self, tmp_path):
        config = Config(str(tmp_path / "missing.json"))
        assert config.get("engine.stylesheet_index") == 0
        assert config.get("output.indent_width") == 2
        assert config.get("output.default_tree") == "layout"

    def test_file_overrides_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"output": {"indent_width": 4}}), encoding="utf-8")
        config = Config(str(path))
        assert config.get("output.indent_width") == 4
        assert config.get("output.default_tree") == "layout"

    def test_invalid_json_falls_back_to_defaults(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json", encoding="utf-8")
        config = Config(str(path))
        assert config.get_all() == DEFAULT_CONFIG

    def test_non_object_json_is_ignored(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert Config(str(path)).get("engine.stylesheet_index") == 0

    def test_get_missing_key_returns_default(self, tmp_path):
        config = Config(str(tmp_path / "c.json"))
        assert config.get("nope.nothing", "fallback") == "fallback"
        assert config.get("engine.stylesheet_index.deeper", 7) == 7

    def test_set_creates_nested_keys(self, tmp_path):
        config = Config(str(tmp_path / "c.json"))
        config.set("a.b.c", 1)
        assert config.get("a.b.c") == 1

    def test_remove(self, tmp_path):
        config = Config(str(tmp_path / "c.json"))
        assert config.remove("output.indent_width")
        assert config.get("output.indent_width") is None
        assert not config.remove("output.indent_width")
        assert not config.remove("missing.key")

    def test_save_and_reload(self, tmp_path):
        path = tmp_path / "nested" / "config.json"
        config = Config(str(path))
        config.set("engine.stylesheet_index", 2)
        config.save()

        reloaded = Config(str(path))
        assert reloaded.get("engine.stylesheet_index") == 2

    def test_get_all_is_a_copy(self, tmp_path):
        config = Config(str(tmp_path / "c.json"))
        snapshot = config.get_all()
        snapshot["output"]["indent_width"] = 99
        assert config.get("output.indent_width") == 2

    def test_defaults_are_not_shared(self, tmp_path):
        first = Config(str(tmp_path / "a.json"))
        first.set("output.indent_width", 8)
        second = Config(str(tmp_path / "b.json"))
        assert second.get("output.indent_width") == 2


class TestGetInt:
    def test_valid_value(self, tmp_path):
        config = Config(str(tmp_path / "c.json"))
        config.set("output.indent_width", 4)
        assert config.get_int("output.indent_width", 2) == 4

    def test_missing_value_uses_default(self, tmp_path):
        config = Config(str(tmp_path / "c.json"))
        assert config.get_int("output.nothing", 3) == 3

    def test_wrong_type_uses_default(self, tmp_path, caplog):
        config = Config(str(tmp_path / "c.json"))
        config.set("engine.stylesheet_index", "1")
        with caplog.at_level(logging.WARNING, logger="pine_engine.utils.config"):
            assert config.get_int("engine.stylesheet_index", 0) == 0
        assert "Invalid value '1' for engine.stylesheet_index" in caplog.text

    def test_booleans_and_negatives_use_default(self, tmp_path):
        config = Config(str(tmp_path / "c.json"))
        config.set("output.indent_width", True)
        assert config.get_int("output.indent_width", 2) == 2
        config.set("output.indent_width", -1)
        assert config.get_int("output.indent_width", 2) == 2
