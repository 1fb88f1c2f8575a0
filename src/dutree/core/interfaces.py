"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the indexing engine.
These protocols rely on structural typing via `typing.Protocol`, so any object
with matching methods can be plugged in (tests use this to inject fakes).

Key Components:
---------------
- HashAlgorithm: Factory for streaming hash objects (xxHash, MD5, SHA-256...).
- Hasher: Computes the content signature of a single file.
- TreeBuilder: Walks a root path and fills the entry and signature indexes.
- DuplicateGrouper: Groups paths sharing a signature.
"""

from pathlib import Path
from typing import Dict, List, Mapping, Optional, Protocol, Tuple

from dutree.core.models import EntryNode


# ===== Interfaces =====

class StreamingHash(Protocol):
    """Incremental hash object, fed chunk by chunk."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic streaming hash algorithms.

    Allows plugging in different hashing functions like SHA-256, MD5, or xxHash
    without affecting the rest of the indexing logic.
    """

    @staticmethod
    def new() -> StreamingHash:
        """Returns a fresh accumulator."""
        ...


class Hasher(Protocol):
    """Interface for computing the content signature of a file."""
    def compute_signature(self, path: Path) -> str: ...


class TreeBuilder(Protocol):
    """
    Interface for building the path-keyed indexes of a filesystem subtree.

    Methods:
        build: Walks `root` and returns (entries, signatures).
    """
    def build(self, root: Path) -> Tuple[Dict[Path, EntryNode], Dict[Path, str]]:
        """
        Args:
            root: Path the walk starts from.

        Returns:
            Entry index keyed by path, and signature index keyed by file path.

        Raises:
            TreeBuildError: On the first obstruction met during the walk.
        """
        ...


class DuplicateGrouper(Protocol):
    """
    Interface for grouping files by content signature.
    """
    def group(
        self,
        signatures: Mapping[Path, str],
        workers: Optional[int] = None
    ) -> Dict[str, List[Path]]:
        """Return signature -> paths, keeping only signatures shared by 2+ paths."""
        ...
