"""File access for the well-known credential files in the user's home directory.

Paths are resolved against the home directory on every call, never cached.
Writes replace the whole file atomically (temp file in the same directory,
then os.replace()), the same way ~/.npmrc-style credential files are
usually handled.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def get_home_dir() -> Path:
    return Path.home()


def atomic_write_text(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` so readers never see a partial file."""
    directory = path.parent
    directory.mkdir(parents=True, exist_ok=True)

    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=f".{path.name}_", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


class ConfigFileStore:
    """Read, write and delete files relative to the current user's home directory."""

    def path(self, name: str) -> Path:
        return get_home_dir() / name

    def exists(self, name: str) -> bool:
        return self.path(name).is_file()

    def read_all_lines(self, name: str) -> list[str]:
        """Return the file's lines without line terminators.

        Raises OSError if the file is missing or unreadable.
        """
        return self.path(name).read_text(encoding="utf-8").splitlines()

    def write_all(self, name: str, content: str) -> Path:
        path = self.path(name)
        atomic_write_text(path, content)
        logger.debug("Wrote %s", path)
        return path

    def delete(self, name: str) -> bool:
        """Delete the file if present.

        Returns True if a file was removed, False if there was nothing to delete.
        Raises OSError if the file exists but cannot be removed.
        """
        path = self.path(name)
        try:
            path.unlink()
        except FileNotFoundError:
            return False
        logger.debug("Deleted %s", path)
        return True
