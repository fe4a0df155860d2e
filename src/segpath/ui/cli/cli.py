"""Command line interface for segpath."""

import sys
from collections.abc import Sequence
from typing import final

from segpath.domain.errors import PathError
from segpath.platform.logging import logger
from segpath.ui.cli.args import ArgumentParser
from segpath.ui.cli.commands import build_command


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: Sequence[str] | None = None) -> int:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            int: Exit code of the executed command.
        """
        try:
            args = ArgumentParser.process_args(args_list)
            return build_command(args).execute()
        except KeyboardInterrupt:
            logger.info("Operation cancelled by user")
            sys.exit(130)
        except PathError as e:
            logger.error("%s", e)
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code. Path errors terminate through ``sys.exit(1)``.
    """
    return CommandProcessor.process_command()
