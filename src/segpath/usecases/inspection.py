"""Summary: Service bundling the OS-facing ports used by path values.
Why: Let path values forward queries without knowing which adapters back them."""

from __future__ import annotations

from collections.abc import Iterator
from typing import final

from segpath.domain.attributes import FileAttributes
from segpath.domain.path import FsPath
from segpath.domain.separators import DEFAULT_POLICY, SeparatorPolicy
from segpath.platform.logging import logger
from segpath.usecases.ports import (
    AttributeQueryPort,
    CurrentDirectoryPort,
    DirectoryEntry,
    DirectoryListingPort,
)


@final
class PathInspector:
    """Forward path queries to attribute, working-directory and listing ports."""

    attributes: AttributeQueryPort
    working_directory: CurrentDirectoryPort
    listing: DirectoryListingPort
    policy: SeparatorPolicy

    def __init__(
        self,
        attributes: AttributeQueryPort | None = None,
        working_directory: CurrentDirectoryPort | None = None,
        listing: DirectoryListingPort | None = None,
        *,
        policy: SeparatorPolicy = DEFAULT_POLICY,
    ) -> None:
        """Initialize the inspector.

        Args:
            attributes: Attribute query port. Defaults to the local filesystem.
            working_directory: Working directory port. Defaults to the local process.
            listing: Directory listing port. Defaults to the local filesystem.
            policy: Separator policy applied to paths created by this inspector.
        """
        from segpath.adapters.local import (
            LocalAttributeQuery,
            LocalCurrentDirectory,
            LocalDirectoryListing,
        )

        self.attributes = attributes if attributes is not None else LocalAttributeQuery()
        self.working_directory = (
            working_directory if working_directory is not None else LocalCurrentDirectory()
        )
        self.listing = listing if listing is not None else LocalDirectoryListing()
        self.policy = policy

    def get_attributes(self, path: FsPath) -> FileAttributes:
        """Classify ``path`` through the attribute port."""

        attributes = self.attributes.query(path.text)
        logger.debug("Classified as %s:", attributes.describe(), extra={"path_text": path.text})
        return attributes

    def current_dir(self) -> FsPath:
        """Wrap the working directory reported by the port without validation."""

        return FsPath.from_trusted(self.working_directory.current_dir(), self.policy)

    def list_dir(self, path: FsPath) -> Iterator[DirectoryEntry]:
        """Return the lazy entry stream produced by the listing port."""

        return self.listing.list_dir(path)


_default_inspector: PathInspector | None = None


def get_default_inspector() -> PathInspector:
    """Return the inspector used when path methods receive none."""

    global _default_inspector
    if _default_inspector is None:
        _default_inspector = PathInspector()
    return _default_inspector


def set_default_inspector(inspector: PathInspector | None) -> PathInspector | None:
    """Replace the default inspector and return the previous one.

    Passing ``None`` restores lazily created local adapters.
    """
    global _default_inspector
    previous = _default_inspector
    _default_inspector = inspector
    return previous


__all__ = ["PathInspector", "get_default_inspector", "set_default_inspector"]
