"""Command line argument handling package."""

from segpath.ui.cli.args.parser import ArgumentParser
from segpath.ui.cli.args.options import (
    CLIArgs,
    CwdArgs,
    JoinArgs,
    ListArgs,
    SplitArgs,
    StatArgs,
)

__all__ = [
    "ArgumentParser",
    "CLIArgs",
    "CwdArgs",
    "JoinArgs",
    "ListArgs",
    "SplitArgs",
    "StatArgs",
]
