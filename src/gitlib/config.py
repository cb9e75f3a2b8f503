"""Configuration for how gitlib launches git."""

import tomllib
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_GIT_EXECUTABLE = "git"


@dataclass(frozen=True)
class GitLibConfig:
    """In-memory representation of `config.toml`.

    Example config.toml:
      [git]
      # Optional: defaults to "git" resolved through PATH
      executable = "/usr/local/bin/git"

      [env]
      # Extra environment variables for every git invocation
      GIT_TERMINAL_PROMPT = "0"
    """

    git_executable: str = DEFAULT_GIT_EXECUTABLE
    env: dict[str, str] = field(default_factory=dict)


def load_config(config_dir: Path) -> GitLibConfig:
    """Load config.toml from the given directory if present; otherwise return defaults."""
    cfg_path = config_dir / "config.toml"
    if not cfg_path.exists():
        return GitLibConfig()

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    git_section = data.get("git", {})
    executable = git_section.get("executable")
    if executable is None:
        executable = DEFAULT_GIT_EXECUTABLE
    env = {str(k): str(v) for k, v in data.get("env", {}).items()}
    return GitLibConfig(git_executable=str(executable), env=env)
