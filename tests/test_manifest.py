"""Tests for scoped registry registration."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

import pytest

from npmclient.exceptions import ManifestError, ManifestNotFoundError, NotFoundError
from npmclient.manifest import ManifestFileScopedRegistries, ManifestRegistrar, get_manifest_path


def _read_manifest(project):
    return json.loads((project / "Packages" / "manifest.json").read_text())


class TestManifestRegistrar:
    def test_missing_manifest_raises(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        client = MagicMock()
        with pytest.raises(ManifestNotFoundError) as exc_info:
            ManifestRegistrar(client).register("TUAS-FIT", "https://npm.example.org/", ["com.example"])

        assert isinstance(exc_info.value, NotFoundError)
        assert isinstance(exc_info.value, ManifestError)
        client.add_scoped_registry.assert_not_called()

    def test_delegates_to_client(self, project):
        client = MagicMock()
        ManifestRegistrar(client).register("TUAS-FIT", "https://npm.example.org/", ("com.example",))
        client.add_scoped_registry.assert_called_once_with("TUAS-FIT", "https://npm.example.org/", ["com.example"])

    def test_explicit_project_root(self, tmp_path, project):
        other = tmp_path / "elsewhere"
        other.mkdir()
        client = MagicMock()
        with pytest.raises(ManifestNotFoundError):
            ManifestRegistrar(client, project_root=other).register("n", "u", ["s"])

    def test_manifest_path_is_relative_to_cwd(self, project):
        assert get_manifest_path() == project / "Packages" / "manifest.json"


class TestManifestFileScopedRegistries:
    def test_adds_new_registry(self, project):
        ManifestFileScopedRegistries().add_scoped_registry("TUAS-FIT", "https://npm.example.org/", ["com.example"])

        manifest = _read_manifest(project)
        assert manifest["dependencies"] == {}
        assert manifest["scopedRegistries"] == [
            {"name": "TUAS-FIT", "url": "https://npm.example.org/", "scopes": ["com.example"]}
        ]

    def test_updates_existing_registry_by_url(self, project):
        (project / "Packages" / "manifest.json").write_text(
            json.dumps(
                {
                    "scopedRegistries": [
                        {"name": "old", "url": "https://npm.example.org/", "scopes": ["com.other"]},
                        {"name": "keep", "url": "https://keep.example/", "scopes": ["com.keep"]},
                    ]
                }
            )
        )

        registries = ManifestFileScopedRegistries()
        registries.add_scoped_registry("TUAS-FIT", "https://npm.example.org/", ["com.example", "com.other"])
        registries.add_scoped_registry("TUAS-FIT", "https://npm.example.org/", ["com.example"])

        assert _read_manifest(project)["scopedRegistries"] == [
            {"name": "TUAS-FIT", "url": "https://npm.example.org/", "scopes": ["com.other", "com.example"]},
            {"name": "keep", "url": "https://keep.example/", "scopes": ["com.keep"]},
        ]

    def test_invalid_json_raises_manifest_error(self, project):
        (project / "Packages" / "manifest.json").write_text("{not json")
        with pytest.raises(ManifestError):
            ManifestFileScopedRegistries().add_scoped_registry("n", "u", ["s"])

    def test_non_object_raises_manifest_error(self, project):
        (project / "Packages" / "manifest.json").write_text("[]")
        with pytest.raises(ManifestError):
            ManifestFileScopedRegistries().add_scoped_registry("n", "u", ["s"])

    def test_null_scoped_registries_raises_manifest_error(self, project):
        (project / "Packages" / "manifest.json").write_text(json.dumps({"scopedRegistries": None}))
        with pytest.raises(ManifestError):
            ManifestFileScopedRegistries().add_scoped_registry("n", "u", ["s"])

    def test_non_object_entry_raises_manifest_error(self, project):
        (project / "Packages" / "manifest.json").write_text(json.dumps({"scopedRegistries": ["https://x/"]}))
        with pytest.raises(ManifestError):
            ManifestFileScopedRegistries().add_scoped_registry("n", "u", ["s"])

    def test_registrar_default_client_writes_manifest(self, project):
        ManifestRegistrar().register("TUAS-FIT", "https://npm.example.org/", ["com.example"])
        assert _read_manifest(project)["scopedRegistries"][0]["name"] == "TUAS-FIT"
