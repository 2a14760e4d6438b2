"""Tests for the gctx command line."""

from __future__ import annotations

import hashlib
import os
from pathlib import Path

import pytest

from gctx.app.cli import create_parser, main


def md5(data: bytes) -> str:
    return hashlib.md5(data).hexdigest()


@pytest.fixture
def home(tmp_path) -> Path:
    return tmp_path


@pytest.fixture
def gitconfig(home) -> Path:
    path = home / ".gitconfig"
    path.write_bytes(b"foo")
    return path


@pytest.fixture
def store_dir(home) -> Path:
    return home / ".gctx"


def test_parser_defaults():
    parsed = create_parser().parse_args(["update"])

    assert parsed.command == "update"
    assert parsed.name == "default"
    assert parsed.create is False


def test_gitconfig_option_after_subcommand(tmp_path):
    parsed = create_parser().parse_args(["use", "-g", str(tmp_path / "cfg"), "-n", "x"])

    assert parsed.gitconfig == tmp_path / "cfg"
    assert parsed.name == "x"


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: gctx" in capsys.readouterr().out


def test_update_create_then_list(gitconfig, store_dir, capsys):
    assert main(["update", "--name", "a", "--create"]) == 0
    out = capsys.readouterr().out
    assert "Created a new git context with the name a" in out

    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [f"a - {store_dir / ('a.' + md5(b'foo'))}"]


def test_update_default_name(gitconfig, store_dir):
    assert main(["update", "-c"]) == 0

    assert (store_dir / f"default.{md5(b'foo')}").exists()


def test_update_up_to_date_then_updated(gitconfig, store_dir, capsys):
    main(["update", "-n", "a", "-c"])
    capsys.readouterr()

    assert main(["update", "-n", "a"]) == 0
    assert "is up to date" in capsys.readouterr().out

    gitconfig.write_bytes(b"bar")
    assert main(["update", "-n", "a"]) == 0
    out = capsys.readouterr().out
    assert "is outdated, updating..." in out
    assert "Updated the git context with the name a" in out
    assert sorted(p.name for p in store_dir.iterdir()) == [f"a.{md5(b'bar')}"]


def test_update_without_create_fails(gitconfig, capsys):
    assert main(["update", "-n", "a"]) == 1

    err = capsys.readouterr().err
    assert "No git context with the name a found" in err


def test_update_missing_source(home, store_dir, capsys):
    assert main(["update", "-n", "a", "-c"]) == 1

    assert "not exists" in capsys.readouterr().err
    assert not store_dir.exists()


def test_use_round_trip(gitconfig, capsys):
    main(["update", "-n", "a", "-c"])
    gitconfig.write_bytes(b"changed")

    assert main(["use", "-n", "a"]) == 0

    assert "switched to git context a" in capsys.readouterr().out
    assert gitconfig.read_bytes() == b"foo"


def test_use_missing_name(gitconfig, store_dir, capsys):
    store_dir.mkdir()
    (store_dir / "b.123").write_text("b")

    assert main(["use", "--name", "missing"]) == 1

    assert "No git context with the name missing found" in capsys.readouterr().err
    assert gitconfig.read_bytes() == b"foo"


def test_ambiguous_reported_as_integrity_error(gitconfig, store_dir, capsys):
    store_dir.mkdir()
    (store_dir / "c.111").write_text("x")
    (store_dir / "c.222").write_text("y")

    assert main(["use", "-n", "c"]) == 1
    assert "Data integrity error" in capsys.readouterr().err

    assert main(["update", "-n", "c"]) == 1
    assert "Data integrity error" in capsys.readouterr().err


def test_invalid_name(gitconfig, capsys):
    assert main(["update", "-n", "a.b", "-c"]) == 1

    assert "must not contain" in capsys.readouterr().err


def test_list_empty(capsys):
    assert main(["list"]) == 0

    assert capsys.readouterr().out.strip() == "No git contexts found."


def test_list_current_marker(gitconfig, capsys):
    main(["update", "-n", "a", "-c"])
    gitconfig.write_bytes(b"bar")
    main(["update", "-n", "b", "-c"])
    capsys.readouterr()

    assert main(["list", "--current"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("a - ")
    assert not lines[0].endswith("(current)")
    assert lines[1].startswith("b - ")
    assert lines[1].endswith(" (current)")


def test_explicit_paths(tmp_path, capsys):
    live = tmp_path / "custom" / "cfg"
    live.parent.mkdir()
    live.write_bytes(b"custom")
    store = tmp_path / "snapshots"

    assert main(["-g", str(live), "--store-dir", str(store), "update", "-n", "x", "-c"]) == 0

    assert (store / f"x.{md5(b'custom')}").exists()


def test_paths_from_environment(tmp_path, monkeypatch):
    live = tmp_path / "env-cfg"
    live.write_bytes(b"env")
    store = tmp_path / "env-store"
    monkeypatch.setenv("GCTX_GITCONFIG", str(live))
    monkeypatch.setenv("GCTX_STORE_DIR", str(store))

    assert main(["update", "-n", "e", "-c"]) == 0

    assert (store / f"e.{md5(b'env')}").exists()


def test_debug_flag(gitconfig, capsys, monkeypatch):
    # setenv registers the variable so it is removed again after the test
    monkeypatch.setenv("GCTX_DEBUG", "0")

    assert main(["--debug", "update", "-n", "a", "-c"]) == 0

    assert "[gctx]" in capsys.readouterr().err
    assert os.environ.get("GCTX_DEBUG") == "1"
