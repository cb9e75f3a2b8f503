"""Production implementation of GitLib using subprocess."""

from gitlib.config import GitLibConfig
from gitlib.gateway.abc import GitLib
from gitlib.gateway.credential_ops.abc import GitCredentialOps
from gitlib.gateway.credential_ops.real import RealGitCredentialOps
from gitlib.gateway.repo_ops.abc import GitRepoOps
from gitlib.gateway.repo_ops.real import RealGitRepoOps


class RealGitLib(GitLib):
    """Production implementation of GitLib.

    Both sub-gateways share one GitLibConfig, so a configured executable or
    environment applies to every invocation.
    """

    def __init__(self, config: GitLibConfig | None = None) -> None:
        self._config = config if config is not None else GitLibConfig()
        self._repo = RealGitRepoOps(self._config)
        self._credential = RealGitCredentialOps(self._config)

    @property
    def config(self) -> GitLibConfig:
        return self._config

    @property
    def repo(self) -> GitRepoOps:
        return self._repo

    @property
    def credential(self) -> GitCredentialOps:
        return self._credential
