"""Production implementation of git repository operations using subprocess."""

from pathlib import Path

from gitlib.config import GitLibConfig
from gitlib.errors import GitCommandError
from gitlib.gateway.repo_ops.abc import GitRepoOps
from gitlib.subprocess_utils import git_command, trim_trailing_newline


def _resolve_cwd(cwd: Path | None) -> Path:
    if cwd is None:
        return Path.cwd()
    return cwd


class RealGitRepoOps(GitRepoOps):
    """Real implementation of Git repository operations using subprocess."""

    def __init__(self, config: GitLibConfig | None = None) -> None:
        self._config = config if config is not None else GitLibConfig()

    def remote_add(self, name: str, url: str, *, cwd: Path | None = None) -> None:
        """Add a remote to a local repository."""
        git_command("remote", ["add", name, url], None, _resolve_cwd(cwd), config=self._config)

    def remote_url(self, name: str, *, cwd: Path | None = None) -> str:
        """Get the first URL of the named remote."""
        output = git_command(
            "remote", ["get-url", name], None, _resolve_cwd(cwd), config=self._config
        )
        return trim_trailing_newline(output)

    def is_inside_work_tree(self, *, cwd: Path | None = None) -> bool:
        """Ask git whether cwd is inside a work tree."""
        output = git_command(
            "rev-parse", ["--is-inside-work-tree"], None, _resolve_cwd(cwd), config=self._config
        )
        return trim_trailing_newline(output) == "true"

    def top_level(self, *, cwd: Path | None = None) -> Path:
        """Get the root directory of the work tree containing cwd."""
        output = git_command(
            "rev-parse", ["--show-toplevel"], None, _resolve_cwd(cwd), config=self._config
        )
        return parse_top_level(trim_trailing_newline(output))


def parse_top_level(text: str) -> Path:
    """Validate git's --show-toplevel output as a filesystem path."""
    if not text:
        raise GitCommandError("git rev-parse --show-toplevel returned an empty path")
    if "\x00" in text:
        raise GitCommandError(f"git rev-parse --show-toplevel returned an invalid path: {text!r}")
    return Path(text)
