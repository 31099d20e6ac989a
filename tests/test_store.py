"""Tests for the home-directory file store."""

from __future__ import annotations

import os
import sys

import pytest

from npmclient.store import ConfigFileStore, atomic_write_text


class TestConfigFileStore:
    @pytest.fixture(autouse=True)
    def _store(self, home):
        self.home = home
        self.store = ConfigFileStore()

    def test_path_is_resolved_in_home(self):
        assert self.store.path(".npmrc") == self.home / ".npmrc"

    def test_path_follows_home_changes(self, tmp_path, monkeypatch):
        other = tmp_path / "other-home"
        monkeypatch.setattr("npmclient.store.get_home_dir", lambda: other)
        assert self.store.path(".npmrc") == other / ".npmrc"

    def test_exists(self):
        assert self.store.exists(".npmrc") is False
        (self.home / ".npmrc").write_text("x")
        assert self.store.exists(".npmrc") is True

    def test_read_all_lines(self):
        (self.home / ".npmrc").write_text("a=1\nb=2\n")
        assert self.store.read_all_lines(".npmrc") == ["a=1", "b=2"]

    def test_read_missing_raises_oserror(self):
        with pytest.raises(OSError):
            self.store.read_all_lines(".npmrc")

    def test_write_all_replaces_content(self):
        self.store.write_all(".upmconfig.toml", "first\nsecond")
        self.store.write_all(".upmconfig.toml", "third")
        assert (self.home / ".upmconfig.toml").read_text() == "third"

    def test_write_leaves_no_temp_files(self):
        self.store.write_all("npm-login.json", "{}")
        assert [p.name for p in self.home.iterdir()] == ["npm-login.json"]

    def test_delete_existing(self):
        (self.home / ".npmrc").write_text("x")
        assert self.store.delete(".npmrc") is True
        assert not (self.home / ".npmrc").exists()

    def test_delete_missing_is_noop(self):
        assert self.store.delete(".npmrc") is False

    @pytest.mark.skipif(sys.platform == "win32" or os.geteuid() == 0, reason="needs POSIX permissions as non-root")
    def test_delete_undeletable_raises(self):
        (self.home / ".npmrc").write_text("x")
        os.chmod(self.home, 0o500)
        try:
            with pytest.raises(OSError):
                self.store.delete(".npmrc")
        finally:
            os.chmod(self.home, 0o700)


class TestAtomicWrite:
    def test_creates_parent_directories(self, tmp_path):
        target = tmp_path / "a" / "b" / "file.txt"
        atomic_write_text(target, "content")
        assert target.read_text() == "content"

    def test_failed_write_keeps_old_content(self, tmp_path, monkeypatch):
        target = tmp_path / "file.txt"
        target.write_text("old")

        def fail_replace(src, dst):
            raise OSError("disk full")

        monkeypatch.setattr("npmclient.store.os.replace", fail_replace)
        with pytest.raises(OSError):
            atomic_write_text(target, "new")

        assert target.read_text() == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["file.txt"]
