from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Prevent developer machine `~/.gvt/config.json` and GVT_* vars from influencing tests."""

    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    monkeypatch.delenv("GVT_DEBUG", raising=False)
    monkeypatch.delenv("GVT_PROJECT_ROOT", raising=False)


@pytest.fixture
def project(tmp_path):
    """Create an empty project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root
