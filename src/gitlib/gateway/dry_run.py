"""No-op GitLib wrapper for dry-run mode.

This module provides a GitLib wrapper that prevents execution of mutating
operations while delegating read-only operations to the wrapped implementation.
"""

from gitlib.gateway.abc import GitLib
from gitlib.gateway.credential_ops.abc import GitCredentialOps
from gitlib.gateway.credential_ops.dry_run import DryRunGitCredentialOps
from gitlib.gateway.repo_ops.abc import GitRepoOps
from gitlib.gateway.repo_ops.dry_run import DryRunGitRepoOps


class DryRunGitLib(GitLib):
    """No-op wrapper that prevents execution of mutating operations.

    Usage:
        real_ops = RealGitLib()
        noop_ops = DryRunGitLib(real_ops)

        # Mutations go through the dry-run subgateways and do nothing
        noop_ops.repo.remote_add("origin", url, cwd=repo_root)
    """

    def __init__(self, wrapped: GitLib) -> None:
        """Create a dry-run wrapper around a GitLib implementation.

        Args:
            wrapped: The GitLib implementation to wrap (usually RealGitLib or FakeGitLib)
        """
        self._wrapped = wrapped

    @property
    def repo(self) -> GitRepoOps:
        """Access repository operations subgateway (wrapped with DryRunGitRepoOps)."""
        return DryRunGitRepoOps(self._wrapped.repo)

    @property
    def credential(self) -> GitCredentialOps:
        """Access credential operations subgateway (wrapped with DryRunGitCredentialOps)."""
        return DryRunGitCredentialOps(self._wrapped.credential)
