"""src/segpath/ui/cli/display/output.py
What: Render path command results on the console.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import final

from rich.console import Console
from rich.table import Table

from segpath.domain.attributes import FileAttributes
from segpath.domain.path import FsPath
from segpath.usecases.ports import DirectoryEntry


@final
class PathDisplay:
    """Handles result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize path display.

        Args:
            console: Console to print to. Defaults to standard output.
        """
        self.console = console or Console(highlight=False)

    def show_path(self, path: FsPath, *, quiet: bool = False) -> None:
        """Print a single path as plain text."""

        if quiet:
            return
        self.console.print(path.text, markup=False, soft_wrap=True)

    def show_components(self, components: Iterable[str], *, quiet: bool = False) -> None:
        """Print one component per line."""

        if quiet:
            return
        for component in components:
            self.console.print(component, markup=False, soft_wrap=True)

    def show_attributes(
        self, path: FsPath, attributes: FileAttributes, *, quiet: bool = False
    ) -> None:
        """Print the classification of ``path``."""

        if quiet:
            return
        self.console.print(f"{path.text}: {attributes.describe()}", markup=False, soft_wrap=True)

    def show_entries(self, entries: Iterable[DirectoryEntry], *, quiet: bool = False) -> int:
        """Print directory entries as a table sorted by name.

        Returns:
            int: Number of entries shown.
        """
        ordered = sorted(entries, key=lambda entry: entry.name)
        if quiet:
            return len(ordered)

        table = Table(show_header=True, header_style="bold")
        table.add_column("Type", no_wrap=True)
        table.add_column("Name")
        for entry in ordered:
            table.add_row("dir" if entry.is_dir else "file", entry.name)
        self.console.print(table)
        self.console.print(f"Total entries: {len(ordered)}")
        return len(ordered)
