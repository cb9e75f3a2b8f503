"""Fake implementation of git credential operations for testing."""

from __future__ import annotations

from pathlib import Path

from gitlib.credentials import Credentials
from gitlib.gateway.credential_ops.abc import GitCredentialOps


class FakeGitCredentialOps(GitCredentialOps):
    """In-memory credential store standing in for git's helpers.

    approve() stores a record under its url, reject() removes it, and fill()
    returns the stored record, falling back to the configured default.
    Decomposed records are keyed as protocol://host[/path].

    Constructor Injection:
    ---------------------
    - stored: Mapping of url -> Credentials already known to the store
    - fill_default: Returned by fill() for unknown urls. None returns a
      record carrying only the url, as git does when no helper answers
      and the prompt is cancelled.
    - fill_raises: Exception to raise when credentials_fill() is called

    Mutation Tracking:
    -----------------
    - filled_urls: List of urls passed to credentials_fill()
    - approved: List of Credentials passed to credentials_approve()
    - rejected: List of Credentials passed to credentials_reject()
    """

    def __init__(
        self,
        *,
        stored: dict[str, Credentials] | None = None,
        fill_default: Credentials | None = None,
        fill_raises: Exception | None = None,
    ) -> None:
        self._stored = dict(stored) if stored is not None else {}
        self._fill_default = fill_default
        self._fill_raises = fill_raises

        self._filled_urls: list[str] = []
        self._approved: list[Credentials] = []
        self._rejected: list[Credentials] = []

    def credentials_approve(self, credentials: Credentials, *, cwd: Path | None = None) -> None:
        self._approved.append(credentials)
        key = _store_key(credentials)
        if key is not None:
            self._stored[key] = credentials

    def credentials_reject(self, credentials: Credentials, *, cwd: Path | None = None) -> None:
        self._rejected.append(credentials)
        key = _store_key(credentials)
        if key is not None:
            self._stored.pop(key, None)

    def credentials_fill(self, url: str, *, cwd: Path | None = None) -> Credentials:
        self._filled_urls.append(url)
        if self._fill_raises is not None:
            raise self._fill_raises
        stored = self._stored.get(url)
        if stored is not None:
            return stored
        if self._fill_default is not None:
            return self._fill_default
        return Credentials.with_url(url)

    # ============================================================================
    # Mutation Tracking Properties
    # ============================================================================

    @property
    def filled_urls(self) -> list[str]:
        return list(self._filled_urls)

    @property
    def approved(self) -> list[Credentials]:
        return list(self._approved)

    @property
    def rejected(self) -> list[Credentials]:
        return list(self._rejected)

    @property
    def stored(self) -> dict[str, Credentials]:
        """Snapshot of the in-memory store, keyed by url."""
        return dict(self._stored)


def _store_key(credentials: Credentials) -> str | None:
    if credentials.url is not None:
        return credentials.url
    if credentials.protocol is None or credentials.host is None:
        return None
    if credentials.path:
        return f"{credentials.protocol}://{credentials.host}/{credentials.path}"
    return f"{credentials.protocol}://{credentials.host}"
