"""
Summary: Package marker for filesystem adapters.
Why: Keep adapter exports together for easy discovery.
"""

from .local import LocalAttributeQuery, LocalCurrentDirectory, LocalDirectoryListing

__all__ = [
    "LocalAttributeQuery",
    "LocalCurrentDirectory",
    "LocalDirectoryListing",
]
