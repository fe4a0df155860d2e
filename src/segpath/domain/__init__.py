# Path: `src/segpath/domain/__init__.py`
# Summary: Export path value, cursor, separator and error symbols.
# Why: Provide a stable import surface for use cases, adapters and tests.

from .attributes import FileAttributes
from .cursor import ComponentCursor
from .errors import (
    CursorRangeError,
    InvalidFileNameError,
    InvalidPathError,
    PathError,
    PathIOError,
    PathNotImplementedError,
)
from .path import FsPath
from .separators import (
    DEFAULT_POLICY,
    SeparatorPolicy,
    is_invalid_file_name_char,
    is_invalid_path_char,
    is_separator,
    validate_file_name,
)

__all__ = [
    "DEFAULT_POLICY",
    "ComponentCursor",
    "CursorRangeError",
    "FileAttributes",
    "FsPath",
    "InvalidFileNameError",
    "InvalidPathError",
    "PathError",
    "PathIOError",
    "PathNotImplementedError",
    "SeparatorPolicy",
    "is_invalid_file_name_char",
    "is_invalid_path_char",
    "is_separator",
    "validate_file_name",
]
