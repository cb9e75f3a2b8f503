"""Fake implementation of git repository operations for testing."""

from __future__ import annotations

from pathlib import Path

from gitlib.errors import GitCommandError
from gitlib.gateway.repo_ops.abc import GitRepoOps


class FakeGitRepoOps(GitRepoOps):
    """In-memory fake implementation of Git repository operations.

    This fake accepts pre-configured state in its constructor and tracks
    mutations for test assertions. A cwd of None is looked up as Path.cwd().

    Constructor Injection:
    ---------------------
    - remote_urls: Mapping of (cwd, remote_name) -> remote URL
    - work_trees: Mapping of cwd -> is_inside_work_tree answer
    - top_levels: Mapping of cwd -> work tree root
    - remote_add_raises: Exception to raise when remote_add() is called

    Mutation Tracking:
    -----------------
    - added_remotes: List of (cwd, name, url) tuples from remote_add()
    """

    def __init__(
        self,
        *,
        remote_urls: dict[tuple[Path, str], str] | None = None,
        work_trees: dict[Path, bool] | None = None,
        top_levels: dict[Path, Path] | None = None,
        remote_add_raises: Exception | None = None,
    ) -> None:
        self._remote_urls = dict(remote_urls) if remote_urls is not None else {}
        self._work_trees = dict(work_trees) if work_trees is not None else {}
        self._top_levels = dict(top_levels) if top_levels is not None else {}
        self._remote_add_raises = remote_add_raises

        # Mutation tracking
        self._added_remotes: list[tuple[Path, str, str]] = []

    def remote_add(self, name: str, url: str, *, cwd: Path | None = None) -> None:
        """Record the remote so later remote_url() calls see it."""
        if self._remote_add_raises is not None:
            raise self._remote_add_raises
        key_cwd = cwd if cwd is not None else Path.cwd()
        if (key_cwd, name) in self._remote_urls:
            raise GitCommandError(f"error: remote {name} already exists.\n")
        self._remote_urls[(key_cwd, name)] = url
        self._added_remotes.append((key_cwd, name, url))

    def remote_url(self, name: str, *, cwd: Path | None = None) -> str:
        key_cwd = cwd if cwd is not None else Path.cwd()
        url = self._remote_urls.get((key_cwd, name))
        if url is None:
            raise GitCommandError(f"error: No such remote '{name}'\n")
        return url

    def is_inside_work_tree(self, *, cwd: Path | None = None) -> bool:
        key_cwd = cwd if cwd is not None else Path.cwd()
        inside = self._work_trees.get(key_cwd)
        if inside is None:
            raise GitCommandError(_not_a_repository())
        return inside

    def top_level(self, *, cwd: Path | None = None) -> Path:
        key_cwd = cwd if cwd is not None else Path.cwd()
        root = self._top_levels.get(key_cwd)
        if root is None:
            raise GitCommandError(_not_a_repository())
        return root

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def added_remotes(self) -> list[tuple[Path, str, str]]:
        """Read-only access to added remotes for test assertions.

        Returns list of (cwd, name, url) tuples.
        """
        return list(self._added_remotes)


def _not_a_repository() -> str:
    return "fatal: not a git repository (or any of the parent directories): .git\n"
