"""Locate and run the external npm login executable."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
from pathlib import Path

from .exceptions import ExecutableNotFoundError, LaunchError
from .types import ExitOutcome

logger = logging.getLogger(__name__)

_DEFAULT_PATHEXT = ".COM;.EXE;.BAT;.CMD"


def _is_executable(path: Path) -> bool:
    if sys.platform == "win32":
        extensions = os.environ.get("PATHEXT", _DEFAULT_PATHEXT).lower().split(os.pathsep)
        return path.suffix.lower() in extensions
    return os.access(path, os.X_OK)


class ExternalLoginInvoker:
    """Find the login tool under a directory tree and run it to completion.

    The search returns the first match of a recursive directory walk. Walk
    order is platform dependent, so with several matching binaries the one
    picked is not stable; the chosen path is logged.
    """

    def locate(self, fragment: str, search_root: Path | str) -> Path:
        """Return the first executable file whose name contains ``fragment``.

        Raises:
            ExecutableNotFoundError: If nothing under ``search_root`` matches.
        """
        for dirpath, _dirnames, filenames in os.walk(search_root):
            for filename in filenames:
                if fragment not in filename:
                    continue
                candidate = Path(dirpath) / filename
                if candidate.is_file() and _is_executable(candidate):
                    logger.info("Using login executable %s", candidate)
                    return candidate
        raise ExecutableNotFoundError(fragment, search_root)

    def run(self, path: Path | str) -> ExitOutcome:
        """Run the tool and block until it exits.

        There is no timeout: the tool may prompt the user interactively.
        The process handle is released on every exit path.

        Raises:
            LaunchError: If the process cannot be started.
        """
        path = Path(path)
        logger.debug("Starting %s", path)
        try:
            with subprocess.Popen([str(path)]) as process:
                returncode = process.wait()
        except OSError as e:
            raise LaunchError(f"Could not start {path}: {e}") from e

        logger.info("%s exited with code %d", path.name, returncode)
        return ExitOutcome(path=path, returncode=returncode)
