"""Printing git credential operations wrapper for verbose output."""

from pathlib import Path

from gitlib.credentials import Credentials
from gitlib.gateway.credential_ops.abc import GitCredentialOps
from gitlib.printing.base import PrintingBase


def _describe(credentials: Credentials) -> str:
    # Never echo the password or refresh token.
    target = credentials.url if credentials.url is not None else credentials.host
    if credentials.username is not None:
        return f"{credentials.username} @ {target}"
    return str(target)


class PrintingGitCredentialOps(PrintingBase, GitCredentialOps):
    """Wrapper that prints credential operations before delegating to inner implementation."""

    # Inherits __init__, _emit, and _format_command from PrintingBase

    def credentials_approve(self, credentials: Credentials, *, cwd: Path | None = None) -> None:
        """Approve credentials with printed output."""
        self._emit(self._format_command(f"git credential approve  # {_describe(credentials)}"))
        self._wrapped.credentials_approve(credentials, cwd=cwd)

    def credentials_reject(self, credentials: Credentials, *, cwd: Path | None = None) -> None:
        """Reject credentials with printed output."""
        self._emit(self._format_command(f"git credential reject  # {_describe(credentials)}"))
        self._wrapped.credentials_reject(credentials, cwd=cwd)

    def credentials_fill(self, url: str, *, cwd: Path | None = None) -> Credentials:
        return self._wrapped.credentials_fill(url, cwd=cwd)
