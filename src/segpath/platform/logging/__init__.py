"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and the Rich path handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import DEFAULT_LOG_FILE, logger, setup_logger
from .handlers import PathRichHandler

__all__ = [
    "DEFAULT_LOG_FILE",
    "PathRichHandler",
    "logger",
    "setup_logger",
]
