"""Summary: Ports defining the OS-facing collaborators of path values.
Why: Decouple path logic from concrete adapters so tests and swaps stay simple."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from segpath.domain.attributes import FileAttributes
from segpath.domain.path import FsPath


@dataclass(slots=True, frozen=True)
class DirectoryEntry:
    """Single child produced by a directory listing."""

    path: FsPath
    name: str
    is_dir: bool


@runtime_checkable
class AttributeQueryPort(Protocol):
    """Port for classifying a normalized path text."""

    def query(self, text: str) -> FileAttributes:
        """Classify ``text``; OS errors are folded into NOT_FOUND or UNKNOWN."""
        ...


@runtime_checkable
class CurrentDirectoryPort(Protocol):
    """Port for reading the process working directory."""

    def current_dir(self) -> str:
        """Return the working directory as raw text."""
        ...


@runtime_checkable
class DirectoryListingPort(Protocol):
    """Port for enumerating the children of a directory."""

    def list_dir(self, path: FsPath) -> Iterator[DirectoryEntry]:
        """Return a lazy stream of entries below ``path``."""
        ...


__all__ = [
    "AttributeQueryPort",
    "CurrentDirectoryPort",
    "DirectoryEntry",
    "DirectoryListingPort",
]
