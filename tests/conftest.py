from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_home(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Prevent the developer's `~/.gctx` and `GCTX_*` settings from influencing tests."""

    monkeypatch.setenv("HOME", str(tmp_path))
    for var in ("GCTX_DEBUG", "GCTX_STORE_DIR", "GCTX_GITCONFIG"):
        monkeypatch.delenv(var, raising=False)
