"""
Core indexing engine — tree builder, hasher, tree index, grouper and traversal.

This package contains the whole algorithmic part of dutree:
- FileTreeBuilderImpl: fail-fast depth-first walk filling path-keyed indexes
- HasherImpl + XXHashAlgorithmImpl: streaming xxHash64 content signatures
- FileTree: read-only queries (children, aggregate size, files, entries)
- DuplicateGrouperImpl: thread-pool partition/fold/reduce over signatures
- TreeWalker: natural, size-descending and lexicographic walks with extension filter
- Models: Size, FileEntry, DirectoryEntry, DuplicateGroup and parameter objects

Nothing here prints; rendering to the console lives in the CLI.
"""

from .errors import (
    TreeBuildError, PathNotFound, PermissionDenied,
    UnsupportedEntryKind, SignatureComputationFailed)
from .models import (
    Size, FileEntry, DirectoryEntry, EntryNode, DuplicateGroup,
    TraversalOrder, TreeConfig, UsageParams, DuplicateParams)
from .hasher import HasherImpl, XXHashAlgorithmImpl
from .scanner import FileTreeBuilderImpl
from .grouper import DuplicateGrouperImpl
from .tree import FileTree
from .traversal import TreeLine, TreeWalker, render_line, render_tree

__all__ = [
    "TreeBuildError",
    "PathNotFound",
    "PermissionDenied",
    "UnsupportedEntryKind",
    "SignatureComputationFailed",
    "Size",
    "FileEntry",
    "DirectoryEntry",
    "EntryNode",
    "DuplicateGroup",
    "TraversalOrder",
    "TreeConfig",
    "UsageParams",
    "DuplicateParams",
    "HasherImpl",
    "XXHashAlgorithmImpl",
    "FileTreeBuilderImpl",
    "DuplicateGrouperImpl",
    "FileTree",
    "TreeLine",
    "TreeWalker",
    "render_line",
    "render_tree",
]
