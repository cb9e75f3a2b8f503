"""Abstract interface for git repository operations."""

from abc import ABC, abstractmethod
from pathlib import Path


class GitRepoOps(ABC):
    """Abstract interface for Git repository operations.

    This interface contains both mutation and query operations for a repository.
    All implementations (real, fake, dry-run, printing) must implement this interface.
    When cwd is None, operations run in the current working directory.
    """

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def remote_add(self, name: str, url: str, *, cwd: Path | None = None) -> None:
        """Add a remote to a local repository.

        Command: git remote add <name> <url>

        Args:
            name: Remote name (e.g., "origin")
            url: Remote URL
            cwd: Directory inside the repository

        Raises:
            GitCommandError: If the remote already exists or cwd is not a repository
        """
        ...

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def remote_url(self, name: str, *, cwd: Path | None = None) -> str:
        """Get the first URL of the named remote.

        Command: git remote get-url <name>

        Raises:
            GitCommandError: If the remote doesn't exist
        """
        ...

    @abstractmethod
    def is_inside_work_tree(self, *, cwd: Path | None = None) -> bool:
        """Ask git whether cwd is inside a work tree.

        Git prints "false" inside a repository's .git directory, but outside
        any repository it fails with "fatal: not a git repository", which is
        raised rather than reported as False.

        Command: git rev-parse --is-inside-work-tree

        Raises:
            GitCommandError: If cwd is not inside a git repository
        """
        ...

    @abstractmethod
    def top_level(self, *, cwd: Path | None = None) -> Path:
        """Get the root directory of the work tree containing cwd.

        Command: git rev-parse --show-toplevel

        Raises:
            GitCommandError: If cwd is not in a work tree or git's output is not a path
        """
        ...
