"""Tests for configuration loading."""

import json
from pathlib import Path

from gctx.config import ConfigLoader, GctxConfig


def test_defaults_under_home(tmp_path):
    config = ConfigLoader(environ={}).load()

    assert config.store_dir == tmp_path / ".gctx"
    assert config.gitconfig == tmp_path / ".gitconfig"


def test_settings_file(tmp_path):
    path = tmp_path / ".config" / "gctx" / "config.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps({"storeDir": "~/snapshots", "gitconfig": "/etc/gitconfig"}))

    config = ConfigLoader(environ={}).load()

    assert config.store_dir == tmp_path / "snapshots"
    assert config.gitconfig == Path("/etc/gitconfig")


def test_environment_overrides_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"storeDir": str(tmp_path / "from-file")}))

    loader = ConfigLoader(config_path=path, environ={"GCTX_STORE_DIR": str(tmp_path / "from-env")})

    assert loader.config.store_dir == tmp_path / "from-env"


def test_invalid_settings_file_ignored(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text("{not json")

    config = ConfigLoader(config_path=path, environ={}).load()

    assert config == GctxConfig()


def test_from_dict_ignores_bad_values(tmp_path):
    config = GctxConfig.from_dict({"storeDir": 42, "gitconfig": "  "})

    assert config.store_dir == tmp_path / ".gctx"
    assert config.gitconfig == tmp_path / ".gitconfig"
