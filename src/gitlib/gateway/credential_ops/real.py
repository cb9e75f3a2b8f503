"""Production implementation of git credential operations using subprocess."""

from pathlib import Path

from gitlib.config import GitLibConfig
from gitlib.credentials import Credentials, parse_credentials
from gitlib.gateway.credential_ops.abc import GitCredentialOps
from gitlib.subprocess_utils import git_command


class RealGitCredentialOps(GitCredentialOps):
    """Real implementation of the credential-helper protocol using subprocess.

    The record is written to `git credential <action>` on stdin. The runner's
    trailing newline after the last `key=value` line is the blank line that
    ends the request.
    """

    def __init__(self, config: GitLibConfig | None = None) -> None:
        self._config = config if config is not None else GitLibConfig()

    def credentials_approve(self, credentials: Credentials, *, cwd: Path | None = None) -> None:
        """Tell git the credentials were accepted."""
        git_command("credential", ["approve"], credentials, cwd, config=self._config)

    def credentials_reject(self, credentials: Credentials, *, cwd: Path | None = None) -> None:
        """Tell git the credentials were rejected."""
        git_command("credential", ["reject"], credentials, cwd, config=self._config)

    def credentials_fill(self, url: str, *, cwd: Path | None = None) -> Credentials:
        """Ask git to complete the credentials for a URL."""
        output = git_command(
            "credential", ["fill"], Credentials.with_url(url), cwd, config=self._config
        )
        return parse_credentials(output)
