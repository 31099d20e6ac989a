"""npmclient - provision local credentials for a private npm registry."""

from importlib.metadata import PackageNotFoundError, version

from .config import RegistrySettings
from .exceptions import (
    ExecutableNotFoundError,
    LaunchError,
    ManifestError,
    ManifestNotFoundError,
    NotFoundError,
    NPMClientError,
    TokenParseError,
    ValidationError,
)
from .types import CredentialRequest, ProvisioningResult, ProvisioningState
from .workflow import ProvisioningWorkflow, delete_credential_files

__all__ = [
    "CredentialRequest",
    "ExecutableNotFoundError",
    "LaunchError",
    "ManifestError",
    "ManifestNotFoundError",
    "NotFoundError",
    "NPMClientError",
    "ProvisioningResult",
    "ProvisioningState",
    "ProvisioningWorkflow",
    "RegistrySettings",
    "TokenParseError",
    "ValidationError",
    "delete_credential_files",
]

try:
    __version__ = version("npmclient")
except PackageNotFoundError:
    __version__ = "0.1.0"
