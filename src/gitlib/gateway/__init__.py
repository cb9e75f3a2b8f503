"""Git gateway: the operations gitlib performs, behind swappable implementations.

Import from submodules:
- abc: GitLib
- real: RealGitLib
- fake: FakeGitLib
- dry_run: DryRunGitLib
- printing: PrintingGitLib
"""
