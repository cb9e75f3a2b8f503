"""Printing git repository operations wrapper for verbose output."""

from pathlib import Path

from gitlib.gateway.repo_ops.abc import GitRepoOps
from gitlib.printing.base import PrintingBase


class PrintingGitRepoOps(PrintingBase, GitRepoOps):
    """Wrapper that prints repository operations before delegating to inner implementation.

    Usage:
        # For production
        printing_ops = PrintingGitRepoOps(real_ops, script_mode=False, dry_run=False)

        # For dry-run
        noop_inner = DryRunGitRepoOps(real_ops)
        printing_ops = PrintingGitRepoOps(noop_inner, script_mode=False, dry_run=True)
    """

    # Inherits __init__, _emit, and _format_command from PrintingBase

    # ============================================================================
    # Mutation Operations (print before delegating)
    # ============================================================================

    def remote_add(self, name: str, url: str, *, cwd: Path | None = None) -> None:
        """Add remote with printed output."""
        self._emit(self._format_command(f"git remote add {name} {url}"))
        self._wrapped.remote_add(name, url, cwd=cwd)

    # ============================================================================
    # Query Operations (delegate without printing)
    # ============================================================================

    def remote_url(self, name: str, *, cwd: Path | None = None) -> str:
        return self._wrapped.remote_url(name, cwd=cwd)

    def is_inside_work_tree(self, *, cwd: Path | None = None) -> bool:
        return self._wrapped.is_inside_work_tree(cwd=cwd)

    def top_level(self, *, cwd: Path | None = None) -> Path:
        return self._wrapped.top_level(cwd=cwd)
