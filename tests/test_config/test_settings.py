"""Tests for config loading."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml

from fbxmon.config.settings import Settings, load_config
from fbxmon.errors import ConfigError


def _write_yaml(path: Path, data: dict) -> None:
    with open(path, "w") as f:
        yaml.dump(data, f)


@pytest.fixture(autouse=True)
def _isolate(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("FBXMON_CONFIG", raising=False)


def test_defaults_without_file():
    settings = load_config()
    assert settings == Settings()
    assert settings.freebox.url == "http://mafreebox.freebox.fr/pub/fbx_info.txt"
    assert settings.freebox.encoding == "iso-8859-1"
    assert settings.logging.level == "WARNING"


def test_explicit_path(tmp_path):
    cfg = tmp_path / "custom.yaml"
    _write_yaml(cfg, {"freebox": {"host": "192.168.0.254"}})
    settings = load_config(cfg)
    assert settings.freebox.url == "http://192.168.0.254/pub/fbx_info.txt"


def test_cwd_candidate(tmp_path):
    _write_yaml(tmp_path / "fbxmon.yaml", {"logging": {"level": "DEBUG"}})
    assert load_config().logging.level == "DEBUG"


def test_env_var_path(tmp_path, monkeypatch):
    cfg = tmp_path / "elsewhere.yml"
    _write_yaml(cfg, {"freebox": {"path": "/pub/other.txt"}})
    monkeypatch.setenv("FBXMON_CONFIG", str(cfg))
    assert load_config().freebox.path == "/pub/other.txt"


def test_env_expansion(tmp_path, monkeypatch):
    monkeypatch.setenv("FREEBOX_HOST", "10.0.0.1")
    cfg = tmp_path / "fbxmon.yaml"
    _write_yaml(cfg, {"freebox": {"host": "${FREEBOX_HOST}"}})
    assert load_config(cfg).freebox.host == "10.0.0.1"


def test_unset_env_var_left_verbatim(tmp_path):
    cfg = tmp_path / "fbxmon.yaml"
    _write_yaml(cfg, {"freebox": {"host": "${FBXMON_NOT_SET}"}})
    assert load_config(cfg).freebox.host == "${FBXMON_NOT_SET}"


def test_empty_file_gives_defaults(tmp_path):
    cfg = tmp_path / "fbxmon.yaml"
    cfg.write_text("")
    assert load_config(cfg) == Settings()


def test_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError, match="Cannot read"):
        load_config(tmp_path / "nope.yaml")


def test_invalid_yaml_raises(tmp_path):
    cfg = tmp_path / "fbxmon.yaml"
    cfg.write_text("freebox: [unclosed\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(cfg)


def test_invalid_schema_raises(tmp_path):
    cfg = tmp_path / "fbxmon.yaml"
    _write_yaml(cfg, {"freebox": {"host": ["not", "a", "string"]}})
    with pytest.raises(ConfigError, match="Invalid configuration"):
        load_config(cfg)


def test_non_mapping_raises(tmp_path):
    cfg = tmp_path / "fbxmon.yaml"
    cfg.write_text("- just\n- a list\n")
    with pytest.raises(ConfigError, match="must contain a mapping"):
        load_config(cfg)


def test_unknown_encoding_raises(tmp_path):
    cfg = tmp_path / "fbxmon.yaml"
    _write_yaml(cfg, {"freebox": {"encoding": "latin-9x"}})
    with pytest.raises(ConfigError, match="unknown encoding: latin-9x"):
        load_config(cfg)


def test_known_encoding_alias_accepted(tmp_path):
    cfg = tmp_path / "fbxmon.yaml"
    _write_yaml(cfg, {"freebox": {"encoding": "latin-1"}})
    assert load_config(cfg).freebox.encoding == "latin-1"
