"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for the filesystem index: sizes, entries, duplicate groups and
the parameter objects shared by the CLI and the command layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional, Tuple, Union
import os

from dutree.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class TraversalOrder(Enum):
    """
    Order in which children of a directory are visited when rendering the tree.
    """
    NATURAL = "natural"
    SIZE_DESC = "size"
    LEXICOGRAPHIC = "lexicographic"

    @property
    def display_name(self) -> str:
        """Human-readable name for help and log output."""
        mapping = {
            TraversalOrder.NATURAL: "Discovery order",
            TraversalOrder.SIZE_DESC: "Largest first",
            TraversalOrder.LEXICOGRAPHIC: "Lexicographic",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True, order=True)
class Size:
    """
    Byte count of a file or of a whole subtree.
    Sizes are never negative; adding two sizes gives a new Size.
    """
    value: int = 0

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError(f"Size must be an integer byte count, got {self.value!r}")
        if self.value < 0:
            raise ValueError(f"Size cannot be negative: {self.value}")

    def __add__(self, other: "Size") -> "Size":
        if not isinstance(other, Size):
            return NotImplemented
        return Size(self.value + other.value)

    def __radd__(self, other):
        # lets sum() start from its default 0
        if other == 0:
            return self
        return NotImplemented

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return ConvertUtils.bytes_to_human(self.value)


@dataclass(frozen=True)
class FileEntry:
    """A regular file and its size in bytes."""
    size: Size


@dataclass(frozen=True)
class DirectoryEntry:
    """A directory and the paths of its immediate children, in discovery order."""
    children: Tuple[Path, ...] = ()


EntryNode = Union[FileEntry, DirectoryEntry]


@dataclass
class DuplicateGroup:
    """
    Files sharing one content signature.
    """
    signature: str
    paths: List[Path] = field(default_factory=list)

    @property
    def duplicate_count(self) -> int:
        """How many files are in this group."""
        return len(self.paths)

    def is_duplicate(self) -> bool:
        """True if this group contains at least two files."""
        return self.duplicate_count >= 2

    def __repr__(self):
        return f"<DuplicateGroup signature={self.signature}, count={len(self.paths)}>"


# =============================
# Configuration
# =============================

class TreeConfig:
    CHUNK_SIZE = 8 * 1024  # read buffer for content signatures
    INDENT_WIDTH = 6       # spaces per depth level in rendered tree lines
    MAX_WORKERS = 32

    @staticmethod
    def default_workers() -> int:
        return min(TreeConfig.MAX_WORKERS, os.cpu_count() or 1)


"""
DTOs for the usage and duplicate commands with built-in validation.
Interface-agnostic: filled by the CLI, consumed by commands.py.
"""

@dataclass
class UsageParams:
    """Parameters for a disk-usage report."""
    root: Path
    order: TraversalOrder = TraversalOrder.NATURAL
    extension_filter: Optional[str] = None

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if self.root is None or str(self.root) == "":
            raise ValueError("Root path cannot be empty")
        self.root = Path(self.root)

        if not isinstance(self.order, TraversalOrder):
            raise ValueError(f"Unknown traversal order: {self.order!r}")

        # Normalize filter: compared against the suffix without its dot
        if self.extension_filter is not None:
            ext = self.extension_filter.strip()
            if ext.startswith("."):
                ext = ext[1:]
            if not ext:
                raise ValueError("Extension filter cannot be empty")
            self.extension_filter = ext


@dataclass
class DuplicateParams:
    """Parameters for a duplicate-file search."""
    root: Path
    workers: Optional[int] = None

    def __post_init__(self):
        if self.root is None or str(self.root) == "":
            raise ValueError("Root path cannot be empty")
        self.root = Path(self.root)

        if self.workers is not None and self.workers < 1:
            raise ValueError("Worker count must be at least 1")
