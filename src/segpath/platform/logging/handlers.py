"""Rich console handler that renders path extras.

Where: platform/logging/handlers.py
What: Append a styled, width-limited rendering of ``path_text`` extras to log lines.
Why: Keep path output readable in the console without touching call sites.
"""

from __future__ import annotations

import logging
from typing import ClassVar, final, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


@final
class PathRichHandler(RichHandler):
    """Rich handler rendering ``path_text`` record extras with dimmed separators."""

    ELLIPSIS: ClassVar[str] = "…"
    MAX_PATH_WIDTH: ClassVar[int] = 60
    PATH_STYLE: ClassVar[str] = "bold white"
    SEPARATOR_STYLE: ClassVar[str] = "dim"

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        rendered = super().render_message(record, message)
        path_text = getattr(record, "path_text", None)
        if not isinstance(path_text, str) or not path_text:
            return rendered

        text = rendered if isinstance(rendered, Text) else Text(message)
        if text.plain:
            _ = text.append(" ")
        _ = text.append_text(self.format_path(path_text))
        return text

    @staticmethod
    def separators() -> str:
        """Return the configured separator characters."""

        # Imported on use: settings loads the config, which logs through this module.
        from segpath.config.settings import SEPARATORS

        return SEPARATORS

    @classmethod
    def shorten(cls, path_text: str) -> str:
        """Trim leading components until ``path_text`` fits ``MAX_PATH_WIDTH``."""

        if len(path_text) <= cls.MAX_PATH_WIDTH:
            return path_text

        separators = cls.separators()
        budget = cls.MAX_PATH_WIDTH - len(cls.ELLIPSIS) - 1
        start = len(path_text) - budget
        # Resume at a component boundary so no segment is cut in half.
        while start < len(path_text) and path_text[start - 1] not in separators:
            start += 1
        if start >= len(path_text):
            return cls.ELLIPSIS + path_text[-(budget + 1) :]
        return cls.ELLIPSIS + path_text[start - 1 :]

    @classmethod
    def format_path(cls, path_text: str) -> Text:
        """Return ``path_text`` as styled Rich text."""

        separators = cls.separators()
        rendered = Text()
        for char in cls.shorten(path_text):
            style = cls.SEPARATOR_STYLE if char in separators else cls.PATH_STYLE
            _ = rendered.append(char, style=style)
        return rendered


__all__ = ["PathRichHandler"]
