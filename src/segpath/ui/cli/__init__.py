"""Command line interface package."""

from segpath.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
