"""Pytest fixtures for britto tests."""

import os
import stat
import sys
from pathlib import Path
from typing import Dict, Optional

import pytest

# Ensure project root is in path for britto imports
_project_root = Path(__file__).resolve().parent.parent
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from britto.config.settings import get_launcher_config  # noqa: E402
from britto.errors import CacheUnavailable  # noqa: E402


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


class FakeCache:
    """In-memory CacheClient. fail=True makes every call raise CacheUnavailable."""

    def __init__(self, fail: bool = False) -> None:
        self.data: Dict[str, str] = {}
        self.fail = fail
        self.calls = []

    def set(self, key: str, value: str) -> None:
        self.calls.append(("set", key))
        if self.fail:
            raise CacheUnavailable("connection refused")
        self.data[key] = value

    def get(self, key: str) -> Optional[str]:
        self.calls.append(("get", key))
        if self.fail:
            raise CacheUnavailable("connection refused")
        return self.data.get(key)


@pytest.fixture
def project_root() -> Path:
    return _project_root()


@pytest.fixture
def launcher_settings() -> dict:
    """Launcher settings from config/config.yaml.example only."""
    return get_launcher_config({})


@pytest.fixture
def java_home(tmp_path: Path) -> Path:
    """A fake JDK home whose bin/java is an executable file."""
    home = tmp_path / "jdk"
    (home / "bin").mkdir(parents=True)
    java = home / "bin" / ("java.exe" if os.name == "nt" else "java")
    java.write_text("#!/bin/sh\nexit 0\n", encoding="utf-8")
    java.chmod(java.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return home


@pytest.fixture
def java_cmd(java_home: Path) -> str:
    return str(java_home / "bin" / ("java.exe" if os.name == "nt" else "java"))


@pytest.fixture
def fake_cache() -> FakeCache:
    return FakeCache()


@pytest.fixture
def failing_cache() -> FakeCache:
    return FakeCache(fail=True)
