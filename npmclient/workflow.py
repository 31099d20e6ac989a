"""Credential provisioning: external npm login -> .upmconfig.toml -> manifest.

Runs the external login tool with the user's credentials, picks the issued
token out of ~/.npmrc, writes ~/.upmconfig.toml and registers the scoped
registry with the current project. Every step is synchronous. Failures are
returned as a ProvisioningResult; nothing is printed or raised to the caller.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from .config import NPMRC_FILE_NAME, STAGING_FILE_NAME, UPM_CONFIG_FILE_NAME, RegistrySettings
from .exceptions import ValidationError
from .invoker import ExternalLoginInvoker
from .manifest import ManifestRegistrar
from .store import ConfigFileStore
from .npmrc import TokenExtractor
from .types import CredentialRequest, ExitOutcome, ProvisioningResult, ProvisioningState
from .upmconfig import render_upm_config

logger = logging.getLogger(__name__)

State = ProvisioningState


class ProvisioningWorkflow:
    """Sequence the login tool, token extraction, config writing and registration.

    Only one run per user profile at a time is supported: the files involved
    live at fixed paths and are written without locking.
    """

    def __init__(
        self,
        settings: RegistrySettings | None = None,
        *,
        store: ConfigFileStore | None = None,
        invoker: ExternalLoginInvoker | None = None,
        extractor: TokenExtractor | None = None,
        registrar: ManifestRegistrar | None = None,
        search_root: Path | str | None = None,
    ) -> None:
        self.settings = settings or RegistrySettings()
        self._store = store or ConfigFileStore()
        self._invoker = invoker or ExternalLoginInvoker()
        self._extractor = extractor or TokenExtractor(self._store)
        self._registrar = registrar or ManifestRegistrar()
        self._search_root = search_root

    def request(self, username: str, password: str, email: str) -> CredentialRequest:
        return CredentialRequest(username=username, password=password, email=email, registry_url=self.settings.url)

    def run(self, request: CredentialRequest) -> ProvisioningResult:
        """Provision credentials for ``request``.

        Ends in REGISTERED when a token was found and registered, DONE when
        the login tool produced no token, or ABORTED with an error message.
        """
        logger.debug("Provisioning %r", request)
        missing = request.missing_fields()
        if missing:
            return self._abort(State.VALIDATING_INPUT, ValidationError(f"Missing required credentials: {', '.join(missing)}"))

        try:
            self._store.write_all(STAGING_FILE_NAME, json.dumps(request.to_staging_dict(), indent=4))
        except OSError as e:
            return self._abort(State.VALIDATING_INPUT, e)

        try:
            return self._login(request)
        finally:
            self._remove_staging_file()

    def _login(self, request: CredentialRequest) -> ProvisioningResult:
        search_root = self._search_root or Path.cwd()
        try:
            executable = self._invoker.locate(self.settings.executable_fragment, search_root)
        except Exception as e:
            return self._abort(State.STAGING_WRITTEN, e)

        try:
            outcome = self._invoker.run(executable)
        except Exception as e:
            return self._abort(State.TOOL_RUNNING, e, executable=executable)

        # The exit code is not inspected: a missing token is the failure signal.
        try:
            self._store.delete(STAGING_FILE_NAME)
            token = self._extractor.extract(NPMRC_FILE_NAME, self.settings.host_fragment)
        except Exception as e:
            return self._abort(State.TOOL_RUNNING, e, outcome=outcome)

        if not token:
            logger.info("No token for %s in %s; nothing to configure", self.settings.host_fragment, NPMRC_FILE_NAME)
            return self._result(State.DONE, outcome)

        try:
            self._store.write_all(UPM_CONFIG_FILE_NAME, render_upm_config(request.registry_url, token, request.email))
        except OSError as e:
            return self._abort(State.TOKEN_EXTRACTED, e, outcome=outcome)

        try:
            self._registrar.register(self.settings.name, self.settings.url, self.settings.scopes)
        except Exception as e:
            return self._abort(State.CONFIG_WRITTEN, e, outcome=outcome)

        return self._result(State.REGISTERED, outcome, token=token)

    def _remove_staging_file(self) -> None:
        try:
            self._store.delete(STAGING_FILE_NAME)
        except OSError as e:
            logger.warning("Could not remove %s: %s", self._store.path(STAGING_FILE_NAME), e)

    @staticmethod
    def _result(state: ProvisioningState, outcome: ExitOutcome, token: str | None = None) -> ProvisioningResult:
        logger.info("Provisioning finished in state %s", state.value)
        return ProvisioningResult(state=state, token=token, executable=outcome.path, returncode=outcome.returncode)

    @staticmethod
    def _abort(
        failed_state: ProvisioningState,
        error: Exception,
        *,
        executable: Path | None = None,
        outcome: ExitOutcome | None = None,
    ) -> ProvisioningResult:
        logger.warning("Provisioning aborted in state %s: %s", failed_state.value, error)
        return ProvisioningResult(
            state=State.ABORTED,
            error=str(error),
            error_kind=type(error).__name__,
            failed_state=failed_state,
            executable=outcome.path if outcome else executable,
            returncode=outcome.returncode if outcome else None,
        )


def delete_credential_files(store: ConfigFileStore | None = None) -> list[Path]:
    """Remove ~/.npmrc and ~/.upmconfig.toml if present.

    Returns the paths that were actually deleted.
    """
    store = store or ConfigFileStore()
    deleted = []
    for name in (NPMRC_FILE_NAME, UPM_CONFIG_FILE_NAME):
        if store.delete(name):
            logger.info("Successfully deleted %s file", name)
            deleted.append(store.path(name))
    return deleted
