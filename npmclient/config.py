"""Registry settings and well-known file names."""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import urlparse

DEFAULT_REGISTRY_URL = "https://npm.turkugamelab.fi/"
DEFAULT_REGISTRY_NAME = "TUAS-FIT"
DEFAULT_REGISTRY_SCOPE = "com.tuas-fit"
DEFAULT_LOGIN_EXECUTABLE = "npm-login"

# Files in the user's home directory
STAGING_FILE_NAME = "npm-login.json"
NPMRC_FILE_NAME = ".npmrc"
UPM_CONFIG_FILE_NAME = ".upmconfig.toml"

# Relative to the project root (current working directory)
MANIFEST_RELATIVE_PATH = os.path.join("Packages", "manifest.json")


def host_fragment(url: str) -> str:
    """Return the host part of a registry URL, used to match .npmrc lines."""

    return urlparse(url).netloc or url.strip("/")


def _env_scopes() -> tuple[str, ...]:
    raw = os.environ.get("NPMCLIENT_REGISTRY_SCOPE", DEFAULT_REGISTRY_SCOPE)
    return tuple(s.strip() for s in raw.split(",") if s.strip())


REGISTRY_URL = os.environ.get("NPMCLIENT_REGISTRY_URL", DEFAULT_REGISTRY_URL)
REGISTRY_NAME = os.environ.get("NPMCLIENT_REGISTRY_NAME", DEFAULT_REGISTRY_NAME)
REGISTRY_SCOPES = _env_scopes()
HOST_FRAGMENT = os.environ.get("NPMCLIENT_HOST_FRAGMENT", host_fragment(REGISTRY_URL))
LOGIN_EXECUTABLE = os.environ.get("NPMCLIENT_LOGIN_EXECUTABLE", DEFAULT_LOGIN_EXECUTABLE)


@dataclass(frozen=True)
class RegistrySettings:
    """The registry this machine is provisioned for."""

    url: str = REGISTRY_URL
    name: str = REGISTRY_NAME
    scopes: tuple[str, ...] = REGISTRY_SCOPES
    host_fragment: str = HOST_FRAGMENT
    executable_fragment: str = LOGIN_EXECUTABLE
