"""Test configuration for npmclient tests."""

from __future__ import annotations

import json

import pytest


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Redirect the user's home directory to a temp directory."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setattr("npmclient.store.get_home_dir", lambda: home_dir)
    return home_dir


@pytest.fixture
def project(tmp_path, monkeypatch):
    """A Unity project with an empty Packages/manifest.json as the working directory."""
    project_dir = tmp_path / "project"
    (project_dir / "Packages").mkdir(parents=True)
    (project_dir / "Packages" / "manifest.json").write_text(json.dumps({"dependencies": {}}, indent=2))
    monkeypatch.chdir(project_dir)
    return project_dir
