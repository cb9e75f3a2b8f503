"""Shared behavior for gateway wrappers that echo commands before running them."""

from typing import Any

import click

# Style mapping for emitted lines
STYLE_MAP: dict[str, dict[str, str | bool]] = {
    "command": {"dim": True},
    "dry_run": {"fg": "yellow"},
}


class PrintingBase:
    """Mixin holding the wrapped gateway and the echo helpers.

    Output goes to stderr so stdout stays clean for callers that capture it.
    In script_mode nothing is printed.
    """

    def __init__(self, wrapped: Any, *, script_mode: bool = False, dry_run: bool = False) -> None:
        self._wrapped = wrapped
        self._script_mode = script_mode
        self._dry_run = dry_run

    def _emit(self, message: str) -> None:
        if self._script_mode:
            return
        click.echo(message, err=True)

    def _format_command(self, command: str) -> str:
        text = click.style(f"  $ {command}", **STYLE_MAP["command"])
        if self._dry_run:
            text += " " + click.style("(dry run)", **STYLE_MAP["dry_run"])
        return text
