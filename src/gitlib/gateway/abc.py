"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making
callers testable without a git binary.

Architecture:
- GitLib: Abstract base class exposing the sub-gateways
- RealGitLib: Production implementation using subprocess
- FakeGitLib, DryRunGitLib, PrintingGitLib: test and wrapper implementations
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gitlib.gateway.credential_ops.abc import GitCredentialOps
    from gitlib.gateway.repo_ops.abc import GitRepoOps


class GitLib(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    @property
    @abstractmethod
    def repo(self) -> GitRepoOps:
        """Access repository operations subgateway."""
        ...

    @property
    @abstractmethod
    def credential(self) -> GitCredentialOps:
        """Access credential operations subgateway."""
        ...
