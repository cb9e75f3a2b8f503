"""gitlib: repository introspection and credential-helper access through git."""

from gitlib.config import GitLibConfig, load_config
from gitlib.credentials import Credentials, format_credentials, parse_credentials
from gitlib.errors import GitCommandError
from gitlib.gateway.abc import GitLib
from gitlib.gateway.real import RealGitLib

__all__ = [
    "Credentials",
    "GitCommandError",
    "GitLib",
    "GitLibConfig",
    "RealGitLib",
    "format_credentials",
    "load_config",
    "parse_credentials",
]
