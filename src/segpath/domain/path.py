"""
Summary: Immutable, validated path value with join semantics and attribute forwarding.
Why: Give every caller one normalized textual form to hand to OS-facing collaborators.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any, NoReturn, final

from segpath.domain.attributes import FileAttributes
from segpath.domain.cursor import ComponentCursor
from segpath.domain.errors import InvalidPathError, PathNotImplementedError
from segpath.domain.separators import DEFAULT_POLICY, SeparatorPolicy, find_invalid_path_char
from segpath.platform.logging import logger

if TYPE_CHECKING:
    from segpath.usecases.inspection import PathInspector
    from segpath.usecases.ports import DirectoryEntry


def _strip_trailing_separators(text: str, policy: SeparatorPolicy) -> str:
    """Drop trailing separators, keeping at least one character."""

    end = len(text)
    while end > 1 and policy.is_separator(text[end - 1]):
        end -= 1
    return text[:end]


def _inspector(inspector: PathInspector | None) -> PathInspector:
    if inspector is not None:
        return inspector
    from segpath.usecases.inspection import get_default_inspector

    return get_default_inspector()


@final
class FsPath:
    """Normalized textual representation of a filesystem location.

    The text never contains control characters or any of ``" < > |`` and never
    ends with a separator, except for a path made of a single separator.
    Values are immutable: joining returns a new value, so cursors handed out
    by ``begin()``/``end()`` stay valid for as long as they are referenced.
    """

    __slots__ = ("_text", "_policy")

    _text: str
    _policy: SeparatorPolicy

    def __init__(
        self,
        text: str | os.PathLike[str] = "",
        *,
        policy: SeparatorPolicy = DEFAULT_POLICY,
    ) -> None:
        """Validate and normalize ``text``.

        Args:
            text: Raw path text.
            policy: Accepted separator set.

        Raises:
            InvalidPathError: If ``text`` contains a control character or one of ``" < > |``.
        """
        raw = os.fspath(text)
        if not isinstance(raw, str):
            raise TypeError(f"FsPath expects str text, got {type(raw).__name__}")

        index = find_invalid_path_char(raw)
        if index is not None:
            logger.debug("Rejected path text at offset %d", index)
            raise InvalidPathError(raw, index)

        object.__setattr__(self, "_text", _strip_trailing_separators(raw, policy))
        object.__setattr__(self, "_policy", policy)

    @classmethod
    def from_trusted(cls, text: str, policy: SeparatorPolicy = DEFAULT_POLICY) -> FsPath:
        """Wrap text from a trusted source without validation or normalization."""

        path = cls.__new__(cls)
        object.__setattr__(path, "_text", text)
        object.__setattr__(path, "_policy", policy)
        return path

    @classmethod
    def parse(cls, source: str, policy: SeparatorPolicy = DEFAULT_POLICY) -> FsPath:
        """Build a path from the first whitespace-delimited token of ``source``.

        Applies the same validation and normalization as the constructor. Input
        without any token yields the empty path.
        """
        tokens = source.split(maxsplit=1)
        return cls(tokens[0] if tokens else "", policy=policy)

    @classmethod
    def current_dir(cls, inspector: PathInspector | None = None) -> FsPath:
        """Return the process working directory as a path.

        Raises:
            PathIOError: If the working directory cannot be determined.
        """
        return _inspector(inspector).current_dir()

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (FsPath.from_trusted, (self._text, self._policy))

    # Text access --------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    @property
    def policy(self) -> SeparatorPolicy:
        return self._policy

    @property
    def is_empty(self) -> bool:
        return not self._text

    def __str__(self) -> str:
        return self._text

    def __fspath__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"FsPath({self._text!r})"

    def __bool__(self) -> bool:
        return bool(self._text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FsPath):
            return NotImplemented
        return self._text == other._text

    def __hash__(self) -> int:
        return hash(self._text)

    # Joining ------------------------------------------------------------------

    def join(self, other: FsPath | str) -> FsPath:
        """Append ``other`` to this path.

        Leading separators of ``other`` are skipped unless this path is empty,
        and exactly one canonical separator is inserted at the junction when
        this path does not already end with one.

        Args:
            other: Path or raw text to append. Raw text is validated first.

        Returns:
            FsPath: The joined path; ``self`` when ``other`` adds nothing.
        """
        right = other if isinstance(other, FsPath) else FsPath(other, policy=self._policy)
        if not right._text:
            return self
        if not self._text:
            return right if right._policy == self._policy else FsPath.from_trusted(right._text, self._policy)

        start = 0
        while start < len(right._text) and self._policy.is_separator(right._text[start]):
            start += 1
        tail = right._text[start:]
        if not tail:
            return self

        head = self._text
        if not self._policy.is_separator(head[-1]):
            head += self._policy.canonical
        return FsPath.from_trusted(head + tail, self._policy)

    def joinpath(self, *others: FsPath | str) -> FsPath:
        """Join every element of ``others`` onto this path from left to right."""

        result = self
        for other in others:
            result = result.join(other)
        return result

    def __add__(self, other: object) -> FsPath:
        if not isinstance(other, (FsPath, str)):
            return NotImplemented
        return self.join(other)

    def __radd__(self, other: object) -> FsPath:
        if not isinstance(other, str):
            return NotImplemented
        return FsPath(other, policy=self._policy).join(self)

    __truediv__ = __add__
    __rtruediv__ = __radd__

    # Components ---------------------------------------------------------------

    def begin(self) -> ComponentCursor:
        """Return a cursor on the first component."""

        return ComponentCursor(self, 0)

    def end(self) -> ComponentCursor:
        """Return the end sentinel cursor."""

        return ComponentCursor(self, len(self._text))

    def __iter__(self) -> Iterator[str]:
        cursor = self.begin()
        while cursor:
            yield cursor.element
            cursor = cursor.advance()

    def __reversed__(self) -> Iterator[str]:
        cursor = self.end()
        first = self.begin()
        while cursor != first:
            cursor = cursor.retreat()
            yield cursor.element

    @property
    def components(self) -> tuple[str, ...]:
        return tuple(self)

    @property
    def file_name(self) -> str:
        """Last component, or an empty string when there is none."""

        return next(reversed(self), "")

    # Attribute queries --------------------------------------------------------

    def get_attributes(self, inspector: PathInspector | None = None) -> FileAttributes:
        return _inspector(inspector).get_attributes(self)

    def exists(self, inspector: PathInspector | None = None) -> bool:
        return self.get_attributes(inspector).exists

    def is_file(self, inspector: PathInspector | None = None) -> bool:
        return bool(self.get_attributes(inspector) & FileAttributes.FILE)

    def is_directory(self, inspector: PathInspector | None = None) -> bool:
        return bool(self.get_attributes(inspector) & FileAttributes.DIRECTORY)

    def is_hidden(self, inspector: PathInspector | None = None) -> bool:
        return bool(self.get_attributes(inspector) & FileAttributes.HIDDEN)

    def is_readonly(self, inspector: PathInspector | None = None) -> bool:
        return bool(self.get_attributes(inspector) & FileAttributes.READONLY)

    def is_link(self, inspector: PathInspector | None = None) -> NoReturn:
        """Link checks are not provided.

        Raises:
            PathNotImplementedError: Always.
        """
        del inspector
        raise PathNotImplementedError("Link checks are not implemented")

    def list_dir(self, inspector: PathInspector | None = None) -> Iterator[DirectoryEntry]:
        """Hand this path to the directory listing collaborator.

        Raises:
            PathIOError: On first iteration, if the directory cannot be opened.
        """
        return _inspector(inspector).list_dir(self)


__all__ = ["FsPath"]
