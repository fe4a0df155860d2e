"""
Summary: Bidirectional cursor over the components of a path value.
Why: Walk segments forward and backward without copying the whole path text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NoReturn, final

from segpath.domain.errors import CursorRangeError

if TYPE_CHECKING:
    from segpath.domain.path import FsPath


@final
class ComponentCursor:
    """Position on a component of an ``FsPath``.

    ``pos`` is either the first character of a component or ``len(text)``
    (the end sentinel). Cursors are immutable: ``advance()`` and ``retreat()``
    return new cursors. Two cursors are equal when they point at the same
    offset of the same path.
    """

    __slots__ = ("_path", "_pos", "_element")

    def __init__(self, path: FsPath, position: int = 0) -> None:
        """Create a cursor at the component found at or after ``position``.

        Args:
            path: Path whose components are visited.
            position: Offset into ``path.text``; separators from there on are skipped.

        Raises:
            CursorRangeError: If ``position`` lies outside ``0..len(path.text)``.
        """
        text = path.text
        if not 0 <= position <= len(text):
            raise CursorRangeError(
                f"Cursor position {position} outside of path {text!r} (length {len(text)})"
            )
        object.__setattr__(self, "_path", path)
        start = self._skip_separators(position)
        object.__setattr__(self, "_pos", start)
        object.__setattr__(self, "_element", text[start : self._next_separator(start)])

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def _is_separator(self, char: str) -> bool:
        return self._path.policy.is_separator(char)

    def _skip_separators(self, index: int) -> int:
        text = self._path.text
        while index < len(text) and self._is_separator(text[index]):
            index += 1
        return index

    def _next_separator(self, index: int) -> int:
        text = self._path.text
        while index < len(text) and not self._is_separator(text[index]):
            index += 1
        return index

    @property
    def path(self) -> FsPath:
        return self._path

    @property
    def pos(self) -> int:
        return self._pos

    @property
    def element(self) -> str:
        """Current component; empty at the end sentinel."""
        return self._element

    def advance(self) -> ComponentCursor:
        """Return a cursor on the next component, or the end sentinel.

        Raises:
            CursorRangeError: If this cursor already is the end sentinel.
        """
        if not self:
            raise CursorRangeError(f"Cannot advance past the end of {self._path.text!r}")
        return ComponentCursor(self._path, self._pos + len(self._element))

    def retreat(self) -> ComponentCursor:
        """Return a cursor on the previous component.

        Raises:
            CursorRangeError: If no component precedes this cursor.
        """
        text = self._path.text
        index = self._pos
        while index > 0 and self._is_separator(text[index - 1]):
            index -= 1
        if index == 0:
            raise CursorRangeError(f"No component before offset {self._pos} in {text!r}")
        while index > 0 and not self._is_separator(text[index - 1]):
            index -= 1
        return ComponentCursor(self._path, index)

    def copy(self) -> ComponentCursor:
        return ComponentCursor(self._path, self._pos)

    def __bool__(self) -> bool:
        return self._pos != len(self._path.text)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComponentCursor):
            return NotImplemented
        return self._pos == other._pos and self._path == other._path

    def __hash__(self) -> int:
        return hash((self._path, self._pos))

    def __repr__(self) -> str:
        return f"ComponentCursor({self._path!r}, pos={self._pos}, element={self._element!r})"


__all__ = ["ComponentCursor"]
