"""
Summary: Attribute classification flags returned by attribute queries.
Why: Let callers combine type and flag bits without depending on OS constants.
"""

from __future__ import annotations

from enum import IntFlag


class FileAttributes(IntFlag):
    """Classification of a filesystem entry.

    Exactly one of ``NOT_FOUND``, ``UNKNOWN``, ``FILE`` or ``DIRECTORY`` is set;
    ``HIDDEN`` and ``READONLY`` are independent bits on top of the type.
    """

    NONE = 0
    NOT_FOUND = 1
    UNKNOWN = 2
    FILE = 4
    DIRECTORY = 8
    HIDDEN = 16
    READONLY = 32

    @property
    def exists(self) -> bool:
        return not self & FileAttributes.NOT_FOUND

    @property
    def kind(self) -> "FileAttributes":
        """Return only the type bit of this classification."""
        return self & (
            FileAttributes.NOT_FOUND
            | FileAttributes.UNKNOWN
            | FileAttributes.FILE
            | FileAttributes.DIRECTORY
        )

    def describe(self) -> str:
        """Render as a short human readable label, e.g. ``file (hidden, readonly)``."""

        names = {
            FileAttributes.NOT_FOUND: "not found",
            FileAttributes.UNKNOWN: "unknown",
            FileAttributes.FILE: "file",
            FileAttributes.DIRECTORY: "directory",
        }
        label = names.get(self.kind, "unknown")
        flags = [
            name
            for flag, name in ((FileAttributes.HIDDEN, "hidden"), (FileAttributes.READONLY, "readonly"))
            if self & flag
        ]
        return f"{label} ({', '.join(flags)})" if flags else label


__all__ = ["FileAttributes"]
