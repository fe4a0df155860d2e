"""
Summary: Separator policy and character classification for path text.
Why: Keep the accepted separator set explicit and injectable instead of process-global.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from segpath.config.settings import SEPARATORS
from segpath.domain.errors import InvalidFileNameError

# Characters rejected anywhere in a path, besides control characters.
INVALID_PATH_SYMBOLS: Final[frozenset[str]] = frozenset('"<>|')

# Characters additionally rejected inside a single file name.
INVALID_FILE_NAME_SYMBOLS: Final[frozenset[str]] = INVALID_PATH_SYMBOLS | frozenset(":*?\\/")


def is_invalid_path_char(char: str) -> bool:
    """Return True when ``char`` may not appear anywhere in a path."""

    return ord(char) < 32 or char in INVALID_PATH_SYMBOLS


def is_invalid_file_name_char(char: str) -> bool:
    """Return True when ``char`` may not appear in a single file name.

    Stricter than ``is_invalid_path_char``: separators, colon, asterisk and
    question mark are rejected as well.
    """

    return ord(char) < 32 or char in INVALID_FILE_NAME_SYMBOLS


@dataclass(frozen=True, slots=True)
class SeparatorPolicy:
    """Fixed set of accepted separator characters.

    Any character of ``separators`` is treated as a separator when parsing;
    the first one is the canonical separator inserted by joins.
    """

    separators: str

    def __post_init__(self) -> None:
        if not self.separators:
            raise ValueError("separators cannot be empty")
        for index, char in enumerate(self.separators):
            if is_invalid_path_char(char):
                raise ValueError(
                    f"separator {char!r} at offset {index} is not a valid path character"
                )

    @property
    def canonical(self) -> str:
        return self.separators[0]

    def is_separator(self, char: str) -> bool:
        return char in self.separators


DEFAULT_POLICY: Final[SeparatorPolicy] = SeparatorPolicy(SEPARATORS)


def is_separator(char: str, policy: SeparatorPolicy = DEFAULT_POLICY) -> bool:
    """Return True when ``char`` is one of the policy's separators."""

    return policy.is_separator(char)


def find_invalid_path_char(text: str) -> int | None:
    """Return the offset of the first invalid path character, if any."""

    for index, char in enumerate(text):
        if is_invalid_path_char(char):
            return index
    return None


def validate_file_name(name: str) -> str:
    """Validate a single path segment before it is joined onto a path.

    Args:
        name: Candidate file or directory name.

    Returns:
        str: ``name`` unchanged.

    Raises:
        InvalidFileNameError: If ``name`` is empty or contains a forbidden character.
    """
    if not name:
        raise InvalidFileNameError(name)
    for index, char in enumerate(name):
        if is_invalid_file_name_char(char):
            raise InvalidFileNameError(name, index)
    return name


__all__ = [
    "DEFAULT_POLICY",
    "INVALID_FILE_NAME_SYMBOLS",
    "INVALID_PATH_SYMBOLS",
    "SeparatorPolicy",
    "find_invalid_path_char",
    "is_invalid_file_name_char",
    "is_invalid_path_char",
    "is_separator",
    "validate_file_name",
]
