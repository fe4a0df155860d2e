"""Command execution package for CLI."""

from segpath.ui.cli.commands.path_commands import (
    CwdCommand,
    JoinCommand,
    ListCommand,
    SplitCommand,
    StatCommand,
    build_command,
)

__all__ = [
    "CwdCommand",
    "JoinCommand",
    "ListCommand",
    "SplitCommand",
    "StatCommand",
    "build_command",
]
