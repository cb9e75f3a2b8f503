"""No-op git repository operations wrapper for dry-run mode.

This module provides a wrapper that prevents execution of mutating
repository operations while delegating queries to the wrapped implementation.
"""

from pathlib import Path

from gitlib.gateway.repo_ops.abc import GitRepoOps


class DryRunGitRepoOps(GitRepoOps):
    """No-op wrapper that prevents execution of mutating repository operations.

    Usage:
        real_ops = RealGitRepoOps()
        noop_ops = DryRunGitRepoOps(real_ops)

        # Query operations work normally
        url = noop_ops.remote_url("origin", cwd=repo_root)

        # Mutation operations are no-ops
        noop_ops.remote_add("upstream", url, cwd=repo_root)
    """

    def __init__(self, wrapped: GitRepoOps) -> None:
        """Create a dry-run wrapper around a GitRepoOps implementation.

        Args:
            wrapped: The GitRepoOps implementation to wrap (usually RealGitRepoOps)
        """
        self._wrapped = wrapped

    # ============================================================================
    # Mutation Operations (no-ops in dry-run mode)
    # ============================================================================

    def remote_add(self, name: str, url: str, *, cwd: Path | None = None) -> None:
        """No-op for adding a remote in dry-run mode."""
        pass

    # ============================================================================
    # Query Operations (delegate to wrapped implementation)
    # ============================================================================

    def remote_url(self, name: str, *, cwd: Path | None = None) -> str:
        return self._wrapped.remote_url(name, cwd=cwd)

    def is_inside_work_tree(self, *, cwd: Path | None = None) -> bool:
        return self._wrapped.is_inside_work_tree(cwd=cwd)

    def top_level(self, *, cwd: Path | None = None) -> Path:
        return self._wrapped.top_level(cwd=cwd)
