"""Custom exceptions raised by npmclient."""

from __future__ import annotations

from pathlib import Path


class NPMClientError(Exception):
    """Base exception for all npmclient specific failures."""


class ValidationError(NPMClientError):
    """Raised when a required credential field is empty."""


class NotFoundError(NPMClientError):
    """Raised when an expected file or executable does not exist."""


class ExecutableNotFoundError(NotFoundError):
    """Raised when no login executable matches the search."""

    def __init__(self, fragment: str, search_root: Path | str):
        super().__init__(f"{fragment} executable not found under {search_root}")
        self.fragment = fragment
        self.search_root = search_root


class ManifestError(NPMClientError):
    """Raised when the scoped registry cannot be added to the project manifest."""


class ManifestNotFoundError(ManifestError, NotFoundError):
    """Raised when the project has no package manifest."""

    def __init__(self, path: Path | str):
        super().__init__(f"Manifest file not found: {path}")
        self.path = path


class LaunchError(NPMClientError):
    """Raised when the external login tool cannot be started."""


class TokenParseError(NPMClientError):
    """Raised when the matching .npmrc line has no '=' separator."""
