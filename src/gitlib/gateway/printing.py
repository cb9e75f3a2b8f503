"""Printing GitLib wrapper for verbose output."""

from gitlib.gateway.abc import GitLib
from gitlib.gateway.credential_ops.abc import GitCredentialOps
from gitlib.gateway.credential_ops.printing import PrintingGitCredentialOps
from gitlib.gateway.repo_ops.abc import GitRepoOps
from gitlib.gateway.repo_ops.printing import PrintingGitRepoOps
from gitlib.printing.base import PrintingBase


class PrintingGitLib(PrintingBase, GitLib):
    """Wrapper that prints operations before delegating to inner implementation.

    Usage:
        # For production
        printing_ops = PrintingGitLib(real_ops, script_mode=False, dry_run=False)

        # For dry-run
        noop_inner = DryRunGitLib(real_ops)
        printing_ops = PrintingGitLib(noop_inner, script_mode=False, dry_run=True)
    """

    # Inherits __init__, _emit, and _format_command from PrintingBase

    @property
    def repo(self) -> GitRepoOps:
        """Access repository operations subgateway (wrapped with PrintingGitRepoOps)."""
        return PrintingGitRepoOps(
            self._wrapped.repo, script_mode=self._script_mode, dry_run=self._dry_run
        )

    @property
    def credential(self) -> GitCredentialOps:
        """Access credential operations subgateway (wrapped with PrintingGitCredentialOps)."""
        return PrintingGitCredentialOps(
            self._wrapped.credential, script_mode=self._script_mode, dry_run=self._dry_run
        )
