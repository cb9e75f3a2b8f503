"""Standalone functions delegating to a module-level RealGitLib.

For callers that want the plain call style:

    from gitlib import api

    root = api.top_level()
    creds = api.credentials_fill("https://example.com")

Code that needs to be testable should accept a GitLib instead.
"""

from pathlib import Path

from gitlib.credentials import Credentials
from gitlib.gateway.abc import GitLib
from gitlib.gateway.real import RealGitLib

_git_lib: GitLib | None = None


def get_git_lib() -> GitLib:
    """Return the module singleton, creating a default RealGitLib on first use."""
    global _git_lib
    if _git_lib is None:
        _git_lib = RealGitLib()
    return _git_lib


def set_git_lib(git_lib: GitLib | None) -> None:
    """Replace the module singleton. None restores the default on next use."""
    global _git_lib
    _git_lib = git_lib


def remote_add(name: str, url: str, cwd: Path | None = None) -> None:
    get_git_lib().repo.remote_add(name, url, cwd=cwd)


def remote_url(name: str, cwd: Path | None = None) -> str:
    return get_git_lib().repo.remote_url(name, cwd=cwd)


def is_inside_work_tree(cwd: Path | None = None) -> bool:
    return get_git_lib().repo.is_inside_work_tree(cwd=cwd)


def top_level(cwd: Path | None = None) -> Path:
    return get_git_lib().repo.top_level(cwd=cwd)


def credentials_fill(url: str, cwd: Path | None = None) -> Credentials:
    return get_git_lib().credential.credentials_fill(url, cwd=cwd)


def credentials_approve(credentials: Credentials, cwd: Path | None = None) -> None:
    get_git_lib().credential.credentials_approve(credentials, cwd=cwd)


def credentials_reject(credentials: Credentials, cwd: Path | None = None) -> None:
    get_git_lib().credential.credentials_reject(credentials, cwd=cwd)
