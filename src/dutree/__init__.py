"""
dutree — disk usage tree and duplicate file finder.

Core features:
- Builds an in-memory index of a directory tree in one fail-fast pass
- Recursive disk usage with natural, size-descending or lexicographic ordering
- Extension filter for usage reports
- Duplicate detection by streaming xxHash64 content signatures, grouped in parallel
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("dutree")
except PackageNotFoundError:
    __version__ = "0.0.0"

# Public API — only what users should import directly
from dutree.commands import UsageCommand, DuplicateCommand
from dutree.core import (
    FileTree, Size, FileEntry, DirectoryEntry, DuplicateGroup, TraversalOrder,
    UsageParams, DuplicateParams, TreeBuildError)

__all__ = [
    "UsageCommand",
    "DuplicateCommand",
    "FileTree",
    "Size",
    "FileEntry",
    "DirectoryEntry",
    "DuplicateGroup",
    "TraversalOrder",
    "UsageParams",
    "DuplicateParams",
    "TreeBuildError",
    "__version__",
]
