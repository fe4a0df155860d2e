"""
Summary: Package marker for path inspection use cases.
Why: Keep ports and the inspector service together for easy discovery.
"""

from .inspection import PathInspector, get_default_inspector, set_default_inspector
from .ports import (
    AttributeQueryPort,
    CurrentDirectoryPort,
    DirectoryEntry,
    DirectoryListingPort,
)

__all__ = [
    "AttributeQueryPort",
    "CurrentDirectoryPort",
    "DirectoryEntry",
    "DirectoryListingPort",
    "PathInspector",
    "get_default_inspector",
    "set_default_inspector",
]
