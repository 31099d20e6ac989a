"""Render the Unity Package Manager auth config (~/.upmconfig.toml)."""

from __future__ import annotations


def render_upm_config(registry_url: str, token: str, email: str) -> str:
    """Return the complete file content for a single registry.

    The result replaces the whole file; entries for other registries are not kept.
    """
    return (
        f'[npmAuth."{registry_url}"]\n'
        f'token = "{token}"\n'
        f'email = "{email}"\n'
        "alwaysAuth = true"
    )
