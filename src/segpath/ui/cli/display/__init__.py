"""Display management for CLI interface."""

from segpath.ui.cli.display.output import PathDisplay

__all__ = ["PathDisplay"]
