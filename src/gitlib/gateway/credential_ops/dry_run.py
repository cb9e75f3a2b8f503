"""No-op git credential operations wrapper for dry-run mode."""

from pathlib import Path

from gitlib.credentials import Credentials
from gitlib.gateway.credential_ops.abc import GitCredentialOps


class DryRunGitCredentialOps(GitCredentialOps):
    """No-op wrapper that leaves the credential store untouched.

    approve and reject would change what git's helpers have stored, so they
    do nothing. fill only reads and is delegated, which means it can still
    prompt the user when no helper answers.
    """

    def __init__(self, wrapped: GitCredentialOps) -> None:
        self._wrapped = wrapped

    def credentials_approve(self, credentials: Credentials, *, cwd: Path | None = None) -> None:
        """No-op for approving credentials in dry-run mode."""
        pass

    def credentials_reject(self, credentials: Credentials, *, cwd: Path | None = None) -> None:
        """No-op for rejecting credentials in dry-run mode."""
        pass

    def credentials_fill(self, url: str, *, cwd: Path | None = None) -> Credentials:
        return self._wrapped.credentials_fill(url, cwd=cwd)
