"""Tests for ikilog.config — LoggerConfig and three-layer resolution."""

import json

import pytest

from ikilog.config import (
    LoggerConfig,
    find_project_config,
    load_json,
    load_project_config,
    normalize_config,
    resolve_config,
    save_global_config,
    save_project_config,
)


class TestLoggerConfigDefaults:

    def test_defaults(self):
        cfg = LoggerConfig()
        assert cfg.enabled is True
        assert cfg.suppress_before_date == "2000-Jan-01"
        assert cfg.prefix == "ikiApps"
        assert cfg.use_color is False
        assert cfg.crash_reporting_active is False
        assert cfg.log_undated is False

    def test_replace_returns_copy(self):
        cfg = LoggerConfig()
        other = cfg.replace(use_color=True)
        assert other.use_color is True
        assert cfg.use_color is False

    def test_replace_ignores_unknown(self):
        assert LoggerConfig().replace(colour=True) == LoggerConfig()


class TestNormalizeConfig:
    """Key spelling and value coercion."""

    @pytest.mark.parametrize("key", [
        "suppress_before_date", "suppress-before-date", "suppressBeforeDate",
    ])
    def test_key_spellings(self, key):
        assert normalize_config({key: "2016-Jan-01"}) == {
            "suppress_before_date": "2016-Jan-01"}

    def test_legacy_camel_case_names(self):
        result = normalize_config({"useColor": True, "useCrashlytics": True})
        assert result == {"use_color": True, "crash_reporting_active": True}

    @pytest.mark.parametrize("raw,expected", [
        ("false", False), ("0", False), ("no", False), ("off", False),
        ("true", True), ("1", True), ("yes", True), (0, False), (1, True),
    ])
    def test_bool_coercion(self, raw, expected):
        assert normalize_config({"enabled": raw}) == {"enabled": expected}

    def test_unknown_and_none_dropped(self):
        assert normalize_config({"verbosity": 3, "prefix": None}) == {}

    def test_string_fields_stringified(self):
        assert normalize_config({"prefix": 42}) == {"prefix": "42"}


class TestFindProjectConfig:
    """Test .ikilog.json discovery by walking up directories."""

    def test_finds_config_in_dir(self, tmp_project):
        cfg_file = tmp_project / ".ikilog.json"
        cfg_file.write_text('{"prefix": "test"}')
        assert find_project_config(str(tmp_project)) == cfg_file

    def test_finds_config_in_parent(self, tmp_project):
        cfg_file = tmp_project / ".ikilog.json"
        cfg_file.write_text('{"prefix": "test"}')
        child = tmp_project / "subdir" / "deep"
        child.mkdir(parents=True)
        assert find_project_config(str(child)) == cfg_file

    def test_load_project_config_missing(self, tmp_project):
        data, path = load_project_config(str(tmp_project))
        assert path is None
        assert data == {}


class TestLoadJson:

    def test_load_valid_json(self, tmp_path):
        f = tmp_path / "test.json"
        f.write_text('{"key": "value"}')
        assert load_json(f) == {"key": "value"}

    def test_load_missing_file(self, tmp_path):
        assert load_json(tmp_path / "nope.json") == {}

    def test_load_malformed_json(self, tmp_path):
        f = tmp_path / "bad.json"
        f.write_text("{not json")
        assert load_json(f) == {}

    def test_load_non_object(self, tmp_path):
        f = tmp_path / "list.json"
        f.write_text("[1, 2]")
        assert load_json(f) == {}

    def test_load_invalid_utf8(self, tmp_path):
        """Undecodable bytes load as an empty config."""
        f = tmp_path / "binary.json"
        f.write_bytes(b'\xff')
        assert load_json(f) == {}


class TestResolveConfig:
    """Overrides > project .ikilog.json > global config > defaults."""

    def test_defaults_without_files(self, tmp_config_home, tmp_project):
        assert resolve_config(start_dir=str(tmp_project)) == LoggerConfig()

    def test_global_layer(self, tmp_config_home, tmp_project):
        save_global_config({"prefix": "global", "useColor": True})
        cfg = resolve_config(start_dir=str(tmp_project))
        assert cfg.prefix == "global"
        assert cfg.use_color is True

    def test_project_beats_global(self, tmp_config_home, tmp_project):
        save_global_config({"prefix": "global"})
        save_project_config({"prefix": "project"}, tmp_project)
        cfg = resolve_config(start_dir=str(tmp_project))
        assert cfg.prefix == "project"

    def test_overrides_beat_project(self, tmp_config_home, tmp_project):
        save_project_config({"prefix": "project", "enabled": False}, tmp_project)
        cfg = resolve_config({"prefix": "cli", "enabled": None},
                             start_dir=str(tmp_project))
        assert cfg.prefix == "cli"
        assert cfg.enabled is False  # None override falls through

    def test_save_project_config_roundtrip(self, tmp_config_home, tmp_project):
        original = LoggerConfig(suppress_before_date="2017-May-01",
                                log_undated=True)
        path = save_project_config(original, tmp_project)
        assert json.loads(path.read_text())["log_undated"] is True
        assert resolve_config(start_dir=str(tmp_project)) == original

    def test_invalid_utf8_project_file_ignored(self, tmp_config_home,
                                               tmp_project):
        (tmp_project / ".ikilog.json").write_bytes(b'{"prefix": "\xff\xfe"}')
        assert resolve_config(start_dir=str(tmp_project)) == LoggerConfig()
