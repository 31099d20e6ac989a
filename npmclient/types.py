"""Typed values passed into and returned from the provisioning workflow."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class CredentialRequest:
    """Credentials entered by the user for a single login run."""

    username: str
    password: str
    email: str
    registry_url: str

    def missing_fields(self) -> list[str]:
        return [name for name in ("username", "password", "email", "registry_url") if not getattr(self, name)]

    def to_staging_dict(self) -> dict[str, str]:
        """Field names expected by the external login tool."""
        return {
            "Username": self.username,
            "Password": self.password,
            "Email": self.email,
            "RegistryURL": self.registry_url,
        }

    def __repr__(self) -> str:
        return (
            f"CredentialRequest(username={self.username!r}, password='***', "
            f"email={self.email!r}, registry_url={self.registry_url!r})"
        )


@dataclass(frozen=True)
class ExitOutcome:
    """How the external login tool terminated."""

    path: Path
    returncode: int


class ProvisioningState(str, enum.Enum):
    IDLE = "idle"
    VALIDATING_INPUT = "validating_input"
    STAGING_WRITTEN = "staging_written"
    TOOL_RUNNING = "tool_running"
    TOKEN_EXTRACTED = "token_extracted"
    CONFIG_WRITTEN = "config_written"
    REGISTERED = "registered"
    DONE = "done"
    ABORTED = "aborted"


@dataclass
class ProvisioningResult:
    """Result of a provisioning run."""

    state: ProvisioningState
    token: str | None = None
    error: str | None = None
    error_kind: str | None = None
    failed_state: ProvisioningState | None = None
    executable: Path | None = None
    returncode: int | None = None

    @property
    def success(self) -> bool:
        return self.state is not ProvisioningState.ABORTED

    @property
    def registered(self) -> bool:
        return self.state is ProvisioningState.REGISTERED


@dataclass
class RegistryStatus:
    """Current credential state on this machine."""

    authenticated: bool
    token: str | None = field(default=None, repr=False)
    masked_token: str | None = None
    npmrc_path: str | None = None
    upm_config_path: str | None = None
    upm_config_present: bool = False
    manifest_present: bool = False
