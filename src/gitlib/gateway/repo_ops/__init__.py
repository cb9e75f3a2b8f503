"""Repository operations sub-gateway.

This module provides a separate gateway for repository introspection:
remotes, work-tree detection and top-level resolution.

Import from submodules:
- abc: GitRepoOps
- real: RealGitRepoOps
- fake: FakeGitRepoOps
- dry_run: DryRunGitRepoOps
- printing: PrintingGitRepoOps
"""
