"""Report and verify the credentials provisioned on this machine.

All functions return typed results and never print directly.
"""

from __future__ import annotations

from pathlib import Path

import httpx

from .config import NPMRC_FILE_NAME, UPM_CONFIG_FILE_NAME, RegistrySettings
from .manifest import get_manifest_path
from .store import ConfigFileStore
from .npmrc import TokenExtractor
from .types import RegistryStatus

DEFAULT_TIMEOUT_SECONDS = 30.0
WHOAMI_PATH = "-/whoami"


def _mask_token(token: str) -> str:
    if len(token) >= 16:
        return token[:4] + "..." + token[-4:]
    if len(token) >= 8:
        return token[:4] + "..."
    return "***"


def get_status(
    settings: RegistrySettings | None = None,
    store: ConfigFileStore | None = None,
    project_root: Path | None = None,
) -> RegistryStatus:
    settings = settings or RegistrySettings()
    store = store or ConfigFileStore()

    token = TokenExtractor(store).extract(NPMRC_FILE_NAME, settings.host_fragment)
    return RegistryStatus(
        authenticated=bool(token),
        token=token or None,
        masked_token=_mask_token(token) if token else None,
        npmrc_path=str(store.path(NPMRC_FILE_NAME)),
        upm_config_path=str(store.path(UPM_CONFIG_FILE_NAME)),
        upm_config_present=store.exists(UPM_CONFIG_FILE_NAME),
        manifest_present=get_manifest_path(project_root).is_file(),
    )


def verify_token(registry_url: str, token: str, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> str:
    """Ask the registry who the token belongs to.

    Raises httpx.HTTPStatusError if the registry rejects the token.
    """
    url = f"{registry_url.rstrip('/')}/{WHOAMI_PATH}"
    with httpx.Client(timeout=timeout) as client:
        response = client.get(url, headers={"Authorization": f"Bearer {token}"})
        response.raise_for_status()
        return response.json().get("username", "")
