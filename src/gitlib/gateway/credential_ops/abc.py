"""Abstract interface for git credential operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from gitlib.credentials import Credentials


class GitCredentialOps(ABC):
    """Abstract interface for git's credential-helper protocol.

    All implementations (real, fake, dry-run, printing) must implement this interface.
    When cwd is None, git runs in the current working directory, which decides
    which repository-level credential.helper settings apply.
    """

    # ============================================================================
    # Mutation Operations
    # ============================================================================

    @abstractmethod
    def credentials_approve(self, credentials: Credentials, *, cwd: Path | None = None) -> None:
        """Tell git the credentials were accepted, so helpers may store them.

        The record is sent in protocol order, so `url` comes last. Git expands
        `url=` into protocol, host and path and resets the fields read before
        it, username and password included. Approve a decomposed record
        (protocol/host/path) or the record credentials_fill() returned.

        Command: git credential approve
        """
        ...

    @abstractmethod
    def credentials_reject(self, credentials: Credentials, *, cwd: Path | None = None) -> None:
        """Tell git the credentials were rejected, so helpers may erase them.

        As with credentials_approve(), a `url` field resets the fields sent
        before it, so pass a decomposed record or the one fill returned.

        Command: git credential reject
        """
        ...

    # ============================================================================
    # Query Operations
    # ============================================================================

    @abstractmethod
    def credentials_fill(self, url: str, *, cwd: Path | None = None) -> Credentials:
        """Ask git to complete the credentials for a URL.

        Git consults its configured helpers and, failing those, may prompt the
        user. The returned record is built fresh from git's output; fields git
        did not emit are None.

        Command: git credential fill

        Raises:
            GitCommandError: If git cannot produce credentials (e.g. prompts disabled)
        """
        ...
