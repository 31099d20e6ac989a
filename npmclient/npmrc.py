"""Recover the auth token the login tool wrote to ~/.npmrc."""

from __future__ import annotations

from .exceptions import TokenParseError
from .store import ConfigFileStore


def parse_token_line(line: str) -> str:
    """Return the value after the first '=' with all double quotes removed."""
    _key, sep, value = line.partition("=")
    if not sep:
        raise TokenParseError(f"Malformed .npmrc line (no '='): {line!r}")
    return value.replace('"', "")


def find_token(lines: list[str], host_fragment: str) -> str:
    """Return the token from the first line mentioning ``host_fragment``, or ""."""
    for line in lines:
        if host_fragment in line:
            return parse_token_line(line)
    return ""


class TokenExtractor:
    """Read the token for a registry host out of an rc file in the home directory.

    A missing rc file means the login did not succeed and yields "".
    """

    def __init__(self, store: ConfigFileStore | None = None) -> None:
        self._store = store or ConfigFileStore()

    def extract(self, rc_name: str, host_fragment: str) -> str:
        if not self._store.exists(rc_name):
            return ""
        try:
            lines = self._store.read_all_lines(rc_name)
        except UnicodeDecodeError as e:
            raise TokenParseError(f"{rc_name} is not valid UTF-8: {e}") from e
        return find_token(lines, host_fragment)
