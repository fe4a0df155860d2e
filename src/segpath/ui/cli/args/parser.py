"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from segpath.config.config import Config
from segpath.domain.path import FsPath
from segpath.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from segpath.ui.cli.args.options import (
    CLIArgs,
    CwdArgs,
    JoinArgs,
    ListArgs,
    SplitArgs,
    StatArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="segpath",
            description="segpath - inspect, join and split filesystem paths.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument(
            "--verbose",
            action="store_true",
            help="Show debug logging on the console",
        )
        _ = parser.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )
        _ = parser.add_argument(
            "--log-file",
            type=str,
            metavar="LOG_FILE",
            help="Write a debug log to LOG_FILE",
        )

        subparsers = parser.add_subparsers(dest="command", required=True)

        split_parser = subparsers.add_parser("split", help="Print the components of a path")
        _ = split_parser.add_argument("path", type=str, metavar="PATH")
        _ = split_parser.add_argument(
            "--reverse",
            action="store_true",
            help="Walk the components from last to first",
        )

        join_parser = subparsers.add_parser("join", help="Join paths and print the result")
        _ = join_parser.add_argument("paths", type=str, nargs="+", metavar="PATH")

        stat_parser = subparsers.add_parser("stat", help="Classify a path on the local filesystem")
        _ = stat_parser.add_argument("path", type=str, metavar="PATH")

        _ = subparsers.add_parser("cwd", help="Print the current working directory")

        ls_parser = subparsers.add_parser("ls", help="List the entries of a directory")
        _ = ls_parser.add_argument(
            "path",
            type=str,
            nargs="?",
            metavar="PATH",
            help="Directory to list (defaults to the current directory)",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            InvalidPathError: If a path argument contains invalid characters.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        quiet = bool(parsed_args.quiet)
        if quiet:
            log_level = logging.ERROR
        elif parsed_args.verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.WARNING

        configuration = Config.load()
        log_file_path = (
            Path(parsed_args.log_file)
            if parsed_args.log_file
            else configuration.log_file or DEFAULT_LOG_FILE
        )
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "split":
            return SplitArgs(
                command="split",
                path=FsPath(parsed_args.path),
                reverse=parsed_args.reverse,
                quiet=quiet,
            )

        if command == "join":
            return JoinArgs(
                command="join",
                paths=[FsPath(p) for p in parsed_args.paths],
                quiet=quiet,
            )

        if command == "stat":
            return StatArgs(command="stat", path=FsPath(parsed_args.path), quiet=quiet)

        if command == "cwd":
            return CwdArgs(command="cwd", quiet=quiet)

        if command == "ls":
            path = FsPath(parsed_args.path) if parsed_args.path is not None else None
            return ListArgs(command="ls", path=path, quiet=quiet)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)
