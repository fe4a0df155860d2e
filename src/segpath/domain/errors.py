"""
Summary: Error kinds raised by path construction, cursors, and OS-facing queries.
Why: Give callers one hierarchy to catch while keeping builtin exception bases.
"""

from __future__ import annotations


class PathError(Exception):
    """Base class for all segpath errors."""


class InvalidPathError(PathError, ValueError):
    """Raised when path text contains characters that are never allowed.

    Attributes:
        text: Raw text that failed validation.
        index: Offset of the first offending character.
        char: The offending character.
    """

    def __init__(self, text: str, index: int) -> None:
        self.text: str = text
        self.index: int = index
        self.char: str = text[index]
        super().__init__(
            f"Invalid symbol {self.char!r} at offset {index} in path {text!r}"
        )


class InvalidFileNameError(PathError, ValueError):
    """Raised when a single file name component contains forbidden characters."""

    def __init__(self, name: str, index: int | None = None) -> None:
        self.name: str = name
        self.index: int | None = index
        if index is None:
            message = "File name cannot be empty"
        else:
            message = f"Invalid symbol {name[index]!r} at offset {index} in file name {name!r}"
        super().__init__(message)


class PathNotImplementedError(PathError, NotImplementedError):
    """Raised by operations that are deliberately not provided."""


class PathIOError(PathError, OSError):
    """Raised when an operating system query fails beyond classification."""


class CursorRangeError(PathError, IndexError):
    """Raised when a component cursor is built or moved outside its path."""


__all__ = [
    "PathError",
    "InvalidPathError",
    "InvalidFileNameError",
    "PathNotImplementedError",
    "PathIOError",
    "CursorRangeError",
]
