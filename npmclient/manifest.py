"""Register the scoped registry with the project's package manifest."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol, Sequence

from .config import MANIFEST_RELATIVE_PATH
from .exceptions import ManifestError, ManifestNotFoundError
from .store import atomic_write_text

logger = logging.getLogger(__name__)


class ScopedRegistryClient(Protocol):
    """What the host package manager must offer to add a scoped registry."""

    def add_scoped_registry(self, name: str, url: str, scopes: Sequence[str]) -> None: ...


def get_manifest_path(project_root: Path | None = None) -> Path:
    return (project_root or Path.cwd()) / MANIFEST_RELATIVE_PATH


class ManifestFileScopedRegistries:
    """Adds entries to the ``scopedRegistries`` array of Packages/manifest.json.

    An existing entry with the same URL is updated in place: its name is
    replaced and the new scopes are appended to the ones it already has.
    """

    def __init__(self, project_root: Path | None = None) -> None:
        self._project_root = project_root

    def add_scoped_registry(self, name: str, url: str, scopes: Sequence[str]) -> None:
        path = get_manifest_path(self._project_root)
        try:
            manifest = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ManifestError(f"Invalid manifest {path}: {e}") from e
        if not isinstance(manifest, dict):
            raise ManifestError(f"Invalid manifest {path}: expected a JSON object")

        registries: list[dict[str, Any]] = manifest.setdefault("scopedRegistries", [])
        if not isinstance(registries, list) or not all(isinstance(entry, dict) for entry in registries):
            raise ManifestError(f"Invalid manifest {path}: scopedRegistries must be a list of objects")
        for entry in registries:
            if entry.get("url") == url:
                entry["name"] = name
                existing = list(entry.get("scopes", []))
                entry["scopes"] = existing + [s for s in scopes if s not in existing]
                break
        else:
            registries.append({"name": name, "url": url, "scopes": list(scopes)})

        atomic_write_text(path, json.dumps(manifest, indent=2) + "\n")


class ManifestRegistrar:
    """Guard on the manifest's presence, then hand off to the package manager."""

    def __init__(self, client: ScopedRegistryClient | None = None, project_root: Path | None = None) -> None:
        self._project_root = project_root
        self._client = client or ManifestFileScopedRegistries(project_root)

    def register(self, name: str, url: str, scopes: Sequence[str]) -> None:
        """Add ``name``/``url`` as a scoped registry for ``scopes``.

        Raises:
            ManifestNotFoundError: If the project has no Packages/manifest.json.
        """
        manifest_path = get_manifest_path(self._project_root)
        if not manifest_path.is_file():
            raise ManifestNotFoundError(manifest_path)

        self._client.add_scoped_registry(name, url, list(scopes))
        logger.info("Registered scoped registry %s (%s) for %s", name, url, ", ".join(scopes))
