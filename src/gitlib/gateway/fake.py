"""Fake GitLib for testing code that depends on git."""

from gitlib.gateway.abc import GitLib
from gitlib.gateway.credential_ops.abc import GitCredentialOps
from gitlib.gateway.credential_ops.fake import FakeGitCredentialOps
from gitlib.gateway.repo_ops.abc import GitRepoOps
from gitlib.gateway.repo_ops.fake import FakeGitRepoOps


class FakeGitLib(GitLib):
    """In-memory GitLib composed of fake sub-gateways.

    Pass pre-configured fakes to control state; assertions read the
    sub-gateways' mutation tracking properties:

        fake = FakeGitLib(repo=FakeGitRepoOps(top_levels={cwd: root}))
        ...
        assert fake.credential_fake.approved == [expected]
    """

    def __init__(
        self,
        *,
        repo: FakeGitRepoOps | None = None,
        credential: FakeGitCredentialOps | None = None,
    ) -> None:
        self._repo = repo if repo is not None else FakeGitRepoOps()
        self._credential = credential if credential is not None else FakeGitCredentialOps()

    @property
    def repo(self) -> GitRepoOps:
        return self._repo

    @property
    def credential(self) -> GitCredentialOps:
        return self._credential

    @property
    def repo_fake(self) -> FakeGitRepoOps:
        """Typed access to the repository fake for test assertions."""
        return self._repo

    @property
    def credential_fake(self) -> FakeGitCredentialOps:
        """Typed access to the credential fake for test assertions."""
        return self._credential
