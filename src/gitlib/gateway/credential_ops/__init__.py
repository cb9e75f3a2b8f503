"""Credential operations sub-gateway.

This module provides a separate gateway for git's credential-helper
protocol (`git credential fill|approve|reject`).

Import from submodules:
- abc: GitCredentialOps
- real: RealGitCredentialOps
- fake: FakeGitCredentialOps
- dry_run: DryRunGitCredentialOps
- printing: PrintingGitCredentialOps
"""
