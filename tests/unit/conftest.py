"""Fixtures for running gitlib against scripted stand-ins for git."""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from gitlib.config import GitLibConfig


@pytest.fixture
def make_git_script(tmp_path: Path) -> Callable[[str], GitLibConfig]:
    """Return a factory writing a /bin/sh script that plays the git executable.

    The script body sees git's arguments as "$@" and the payload on stdin.
    """
    if sys.platform == "win32":
        pytest.skip("scripted git stand-ins need a POSIX shell")

    def _make(body: str) -> GitLibConfig:
        script = tmp_path / "fake-git"
        script.write_text(f"#!/bin/sh\n{body}\n", encoding="utf-8")
        script.chmod(0o755)
        return GitLibConfig(git_executable=str(script))

    return _make
