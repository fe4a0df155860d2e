"""Path subcommand implementations for the CLI."""

from __future__ import annotations

from typing import Protocol, final

from segpath.domain.attributes import FileAttributes
from segpath.domain.path import FsPath
from segpath.platform.logging import logger
from segpath.ui.cli.args.options import (
    CLIArgs,
    CwdArgs,
    JoinArgs,
    ListArgs,
    SplitArgs,
    StatArgs,
)
from segpath.ui.cli.display import PathDisplay
from segpath.usecases.inspection import PathInspector, get_default_inspector


class Command(Protocol):
    """Executable CLI command returning a process exit code."""

    def execute(self) -> int: ...


@final
class SplitCommand:
    """Print the components of a path, optionally last to first."""

    def __init__(self, args: SplitArgs, display: PathDisplay | None = None) -> None:
        self.args = args
        self.display = display or PathDisplay()

    def execute(self) -> int:
        path = self.args.path
        components = list(reversed(path)) if self.args.reverse else list(path)
        logger.debug("Split into %d components:", len(components), extra={"path_text": path.text})
        self.display.show_components(components, quiet=self.args.quiet)
        return 0


@final
class JoinCommand:
    """Join every argument path from left to right."""

    def __init__(self, args: JoinArgs, display: PathDisplay | None = None) -> None:
        self.args = args
        self.display = display or PathDisplay()

    def execute(self) -> int:
        first, *rest = self.args.paths
        joined = first.joinpath(*rest)
        self.display.show_path(joined, quiet=self.args.quiet)
        return 0


@final
class StatCommand:
    """Classify a path; exits with 1 when it does not exist."""

    def __init__(
        self,
        args: StatArgs,
        display: PathDisplay | None = None,
        inspector: PathInspector | None = None,
    ) -> None:
        self.args = args
        self.display = display or PathDisplay()
        self.inspector = inspector or get_default_inspector()

    def execute(self) -> int:
        attributes = self.args.path.get_attributes(self.inspector)
        self.display.show_attributes(self.args.path, attributes, quiet=self.args.quiet)
        return 1 if attributes & FileAttributes.NOT_FOUND else 0


@final
class CwdCommand:
    """Print the current working directory."""

    def __init__(
        self,
        args: CwdArgs,
        display: PathDisplay | None = None,
        inspector: PathInspector | None = None,
    ) -> None:
        self.args = args
        self.display = display or PathDisplay()
        self.inspector = inspector or get_default_inspector()

    def execute(self) -> int:
        self.display.show_path(FsPath.current_dir(self.inspector), quiet=self.args.quiet)
        return 0


@final
class ListCommand:
    """List directory entries."""

    def __init__(
        self,
        args: ListArgs,
        display: PathDisplay | None = None,
        inspector: PathInspector | None = None,
    ) -> None:
        self.args = args
        self.display = display or PathDisplay()
        self.inspector = inspector or get_default_inspector()

    def execute(self) -> int:
        target = self.args.path if self.args.path is not None else FsPath.current_dir(self.inspector)
        count = self.display.show_entries(target.list_dir(self.inspector), quiet=self.args.quiet)
        logger.debug("Listed %d entries:", count, extra={"path_text": target.text})
        return 0


def build_command(args: CLIArgs) -> Command:
    """Create the command object matching ``args``."""

    if isinstance(args, SplitArgs):
        return SplitCommand(args)
    if isinstance(args, JoinArgs):
        return JoinCommand(args)
    if isinstance(args, StatArgs):
        return StatCommand(args)
    if isinstance(args, CwdArgs):
        return CwdCommand(args)
    return ListCommand(args)
