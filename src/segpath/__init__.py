"""segpath - validated path values with bidirectional component cursors."""

from segpath.domain import (
    DEFAULT_POLICY,
    ComponentCursor,
    CursorRangeError,
    FileAttributes,
    FsPath,
    InvalidFileNameError,
    InvalidPathError,
    PathError,
    PathIOError,
    PathNotImplementedError,
    SeparatorPolicy,
    is_invalid_file_name_char,
    is_invalid_path_char,
    is_separator,
    validate_file_name,
)
from segpath.usecases import (
    DirectoryEntry,
    PathInspector,
    get_default_inspector,
    set_default_inspector,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_POLICY",
    "ComponentCursor",
    "CursorRangeError",
    "DirectoryEntry",
    "FileAttributes",
    "FsPath",
    "InvalidFileNameError",
    "InvalidPathError",
    "PathError",
    "PathIOError",
    "PathInspector",
    "PathNotImplementedError",
    "SeparatorPolicy",
    "get_default_inspector",
    "is_invalid_file_name_char",
    "is_invalid_path_char",
    "is_separator",
    "set_default_inspector",
    "validate_file_name",
]
