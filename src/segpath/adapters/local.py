"""src/segpath/adapters/local.py
What: Adapters implementing the path ports on top of the ``os`` module.
Why: Keep filesystem I/O in adapters while path values target abstractions."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from typing import Final

from segpath.domain.attributes import FileAttributes
from segpath.domain.errors import InvalidPathError, PathIOError
from segpath.domain.path import FsPath
from segpath.platform.logging import logger
from segpath.usecases.ports import (
    AttributeQueryPort,
    CurrentDirectoryPort,
    DirectoryEntry,
    DirectoryListingPort,
)

# Windows error codes that mean the path does not name an existing entry.
_NOT_FOUND_WINERRORS: Final[frozenset[int]] = frozenset(
    {
        2,  # ERROR_FILE_NOT_FOUND
        3,  # ERROR_PATH_NOT_FOUND
        15,  # ERROR_INVALID_DRIVE
        53,  # ERROR_BAD_NETPATH
        87,  # ERROR_INVALID_PARAMETER
        123,  # ERROR_INVALID_NAME
        161,  # ERROR_BAD_PATHNAME
    }
)

_FILE_ATTRIBUTE_HIDDEN: Final[int] = getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0x2)
_FILE_ATTRIBUTE_READONLY: Final[int] = getattr(stat, "FILE_ATTRIBUTE_READONLY", 0x1)


def _is_not_found(error: OSError) -> bool:
    if isinstance(error, (FileNotFoundError, NotADirectoryError)):
        return True
    return getattr(error, "winerror", None) in _NOT_FOUND_WINERRORS


def _is_hidden(text: str, st: os.stat_result) -> bool:
    win_attributes: int | None = getattr(st, "st_file_attributes", None)
    if win_attributes is not None:
        return bool(win_attributes & _FILE_ATTRIBUTE_HIDDEN)
    name = FsPath.from_trusted(text).file_name
    return name.startswith(".") and name not in {".", ".."}


def _is_readonly(st: os.stat_result) -> bool:
    win_attributes: int | None = getattr(st, "st_file_attributes", None)
    if win_attributes is not None:
        return bool(win_attributes & _FILE_ATTRIBUTE_READONLY)
    return not st.st_mode & stat.S_IWUSR


class LocalAttributeQuery(AttributeQueryPort):
    """Classify paths with ``os.stat`` (symbolic links are followed)."""

    def query(self, text: str) -> FileAttributes:
        try:
            st = os.stat(text)
        except ValueError:
            # Names the OS cannot represent never exist.
            return FileAttributes.NOT_FOUND
        except OSError as error:
            if _is_not_found(error):
                return FileAttributes.NOT_FOUND
            logger.warning(
                "Attribute query failed (%s):", error.strerror or error, extra={"path_text": text}
            )
            return FileAttributes.UNKNOWN

        result = FileAttributes.DIRECTORY if stat.S_ISDIR(st.st_mode) else FileAttributes.FILE
        if _is_hidden(text, st):
            result |= FileAttributes.HIDDEN
        if _is_readonly(st):
            result |= FileAttributes.READONLY
        return result


class LocalCurrentDirectory(CurrentDirectoryPort):
    """Read the working directory of this process."""

    def current_dir(self) -> str:
        try:
            return os.getcwd()
        except OSError as error:
            raise PathIOError(
                error.errno, f"Cannot determine the current directory: {error.strerror}"
            ) from error


class LocalDirectoryListing(DirectoryListingPort):
    """Enumerate directory children with ``os.scandir``.

    The listing is lazy: the directory is opened on first iteration and closed
    when the iterator is exhausted, closed or collected.
    """

    def list_dir(self, path: FsPath) -> Iterator[DirectoryEntry]:
        target = path.text or os.curdir
        try:
            scanner = os.scandir(target)
        except OSError as error:
            raise PathIOError(
                error.errno, f"Cannot list directory {target!r}: {error.strerror}"
            ) from error
        with scanner:
            for entry in scanner:
                try:
                    child = path.join(FsPath(entry.name, policy=path.policy))
                except InvalidPathError:
                    logger.warning(
                        "Skipping entry with invalid name %r in", entry.name,
                        extra={"path_text": path.text},
                    )
                    continue
                try:
                    is_dir = entry.is_dir()
                except OSError:
                    is_dir = False
                yield DirectoryEntry(path=child, name=entry.name, is_dir=is_dir)


__all__ = ["LocalAttributeQuery", "LocalCurrentDirectory", "LocalDirectoryListing"]
