"""Verbose-output helpers for gateway wrappers."""
