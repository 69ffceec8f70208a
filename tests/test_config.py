"""Tests for defluff/config.py"""

from argparse import Namespace

import pytest
import yaml

from defluff.config import Config, _parse_bool, load_config, load_yaml_config
from defluff.models import RenderMode


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("DEFLUFF_SINGLELINE", "DEFLUFF_EMIT_ORIGINAL", "DEFLUFF_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def _args(**kwargs):
    defaults = {"singleline": None, "original": None, "verbose": None}
    defaults.update(kwargs)
    return Namespace(**defaults)


class TestParseBool:
    def test_true_values(self):
        for val in ("true", "True", "1", "yes", "on", True):
            assert _parse_bool(val) is True

    def test_false_values(self):
        for val in ("false", "0", "no", "", False):
            assert _parse_bool(val) is False


class TestConfigDefaults:
    def test_defaults(self):
        cfg = Config()
        assert cfg.singleline is False
        assert cfg.emit_original is False
        assert cfg.log_level == "WARNING"
        assert cfg.mode is RenderMode.EXPANDED

    def test_singleline_is_compact(self):
        assert Config(singleline=True).mode is RenderMode.COMPACT

    def test_frozen(self):
        cfg = Config()
        with pytest.raises(AttributeError):
            cfg.singleline = True


class TestLoadYamlConfig:
    def test_no_path(self):
        assert load_yaml_config(None) == {}

    def test_reads_file(self, tmp_path):
        path = tmp_path / "defluff.yaml"
        path.write_text(yaml.dump({"singleline": True, "log_level": "info"}))
        assert load_yaml_config(str(path)) == {"singleline": True, "log_level": "info"}

    def test_missing_file(self, tmp_path, caplog):
        assert load_yaml_config(str(tmp_path / "nope.yaml")) == {}
        assert "not found" in caplog.text

    def test_invalid_yaml(self, tmp_path, caplog):
        path = tmp_path / "bad.yaml"
        path.write_text("singleline: [unclosed\n")
        assert load_yaml_config(str(path)) == {}
        assert "Invalid YAML" in caplog.text

    def test_non_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        assert load_yaml_config(str(path)) == {}

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml_config(str(path)) == {}


class TestLoadConfig:
    def test_nothing_set(self):
        assert load_config() == Config()

    def test_yaml_values(self):
        cfg = load_config(None, {"singleline": True, "emit_original": "yes", "log_level": "debug"})
        assert cfg == Config(singleline=True, emit_original=True, log_level="DEBUG")

    def test_env_overrides_yaml(self, monkeypatch):
        monkeypatch.setenv("DEFLUFF_SINGLELINE", "false")
        monkeypatch.setenv("DEFLUFF_LOG_LEVEL", "error")
        cfg = load_config(None, {"singleline": True, "log_level": "info"})
        assert cfg.singleline is False
        assert cfg.log_level == "ERROR"

    def test_cli_overrides_env(self, monkeypatch):
        monkeypatch.setenv("DEFLUFF_SINGLELINE", "false")
        monkeypatch.setenv("DEFLUFF_EMIT_ORIGINAL", "0")
        cfg = load_config(_args(singleline=True, original=True), {})
        assert cfg.singleline is True
        assert cfg.emit_original is True

    def test_unset_cli_flags_keep_lower_layers(self):
        cfg = load_config(_args(), {"singleline": True})
        assert cfg.singleline is True

    def test_verbose_sets_debug(self):
        assert load_config(_args(verbose=True), {"log_level": "ERROR"}).log_level == "DEBUG"

    def test_unknown_log_level_falls_back(self, caplog):
        cfg = load_config(None, {"log_level": "chatty"})
        assert cfg.log_level == "WARNING"
        assert "Unknown log level" in caplog.text
