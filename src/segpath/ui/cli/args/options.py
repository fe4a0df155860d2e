"""Command line argument options."""

from dataclasses import dataclass
from typing import Literal, final

from segpath.domain.path import FsPath


@final
@dataclass(slots=True)
class SplitArgs:
    """Command line arguments for the ``split`` subcommand."""

    command: Literal["split"]
    path: FsPath
    reverse: bool
    quiet: bool


@final
@dataclass(slots=True)
class JoinArgs:
    """Command line arguments for the ``join`` subcommand."""

    command: Literal["join"]
    paths: list[FsPath]
    quiet: bool


@final
@dataclass(slots=True)
class StatArgs:
    """Command line arguments for the ``stat`` subcommand."""

    command: Literal["stat"]
    path: FsPath
    quiet: bool


@final
@dataclass(slots=True)
class CwdArgs:
    """Command line arguments for the ``cwd`` subcommand."""

    command: Literal["cwd"]
    quiet: bool


@final
@dataclass(slots=True)
class ListArgs:
    """Command line arguments for the ``ls`` subcommand."""

    command: Literal["ls"]
    path: FsPath | None
    quiet: bool


CLIArgs = SplitArgs | JoinArgs | StatArgs | CwdArgs | ListArgs

__all__ = ["CLIArgs", "CwdArgs", "JoinArgs", "ListArgs", "SplitArgs", "StatArgs"]
