"""Tests for ConfigManager."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from tasklist_cli.config import ConfigManager, get_config_manager
from tasklist_cli.models import FilterMode


@pytest.fixture()
def manager(tmp_path):
    return ConfigManager(tmp_path / "cfg")


def test_defaults(manager):
    assert manager.get("storage.backend") == "json"
    assert manager.get("storage.path") is None
    assert manager.get("ui.language") == "en"
    assert manager.get("ui.default_filter") == FilterMode.ALL
    assert manager.get("output.format") == "pretty"
    assert manager.get("logging.level") == "info"


def test_unknown_key_reads_none(manager):
    assert manager.get("ui.nope") is None
    assert manager.get("nope.deeper") is None


def test_set_persists(manager, tmp_path):
    manager.set("ui.language", "id")

    reloaded = ConfigManager(tmp_path / "cfg")
    assert reloaded.get("ui.language") == "id"
    saved = json.loads((tmp_path / "cfg" / "config.json").read_text())
    assert saved["ui"]["language"] == "id"


def test_set_unknown_key(manager):
    with pytest.raises(KeyError):
        manager.set("ui.colour", "blue")
    with pytest.raises(KeyError):
        manager.set("nope.deeper", "x")


def test_set_invalid_value(manager):
    with pytest.raises(ValidationError):
        manager.set("ui.language", "klingon")
    with pytest.raises(ValidationError):
        manager.set("storage.backend", "cloud")

    assert manager.get("ui.language") == "en"


def test_reset_single_key(manager):
    manager.set("ui.language", "id")
    manager.set("storage.backend", "sqlite")

    manager.reset("ui.language")

    assert manager.get("ui.language") == "en"
    assert manager.get("storage.backend") == "sqlite"


def test_reset_everything(manager, tmp_path):
    manager.set("ui.language", "id")

    manager.reset()

    assert ConfigManager(tmp_path / "cfg").get("ui.language") == "en"


def test_corrupt_file_falls_back_to_defaults(tmp_path):
    cfg_dir = tmp_path / "cfg"
    cfg_dir.mkdir()
    (cfg_dir / "config.json").write_text("{ broken")

    assert ConfigManager(cfg_dir).get("ui.language") == "en"


def test_invalid_values_in_file_fall_back_to_defaults(tmp_path):
    cfg_dir = tmp_path / "cfg"
    cfg_dir.mkdir()
    (cfg_dir / "config.json").write_text('{"ui": {"language": "xx"}}')

    assert ConfigManager(cfg_dir).get("ui.language") == "en"


def test_global_manager_uses_platform_dir(isolated_dirs):
    manager = get_config_manager()

    assert manager is get_config_manager()
    assert manager.config_dir == isolated_dirs / "config"
