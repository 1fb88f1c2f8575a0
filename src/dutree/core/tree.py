"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/tree.py
Read-only index of a filesystem subtree.

A FileTree is built once by `FileTree.build()` and never changes afterwards.
Directories refer to their children by path, so every relation is a lookup in
the index rather than an object reference.
"""

from pathlib import Path
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple, Union

from dutree.core.grouper import DuplicateGrouperImpl
from dutree.core.interfaces import DuplicateGrouper, TreeBuilder
from dutree.core.models import DirectoryEntry, EntryNode, FileEntry, Size
from dutree.core.scanner import FileTreeBuilderImpl


class FileTree:
    """
    Entries and content signatures of every path under `root`.

    Query methods never raise: unknown paths give None.
    """

    def __init__(self, root: Path, index: Dict[Path, EntryNode], signatures: Dict[Path, str]):
        self._root = Path(root)
        self._index = MappingProxyType(dict(index))
        self._signatures = MappingProxyType(dict(signatures))

    @classmethod
    def build(cls, root: Union[str, Path], builder: TreeBuilder = None) -> "FileTree":
        """
        Walk `root` and return the complete tree.

        Raises:
            TreeBuildError: If anything under `root` cannot be indexed.
        """
        if builder is None:
            builder = FileTreeBuilderImpl()
        root_path = Path(root)
        index, signatures = builder.build(root_path)
        return cls(root_path, index, signatures)

    @property
    def root(self) -> Path:
        return self._root

    @property
    def index(self) -> Mapping[Path, EntryNode]:
        return self._index

    @property
    def signatures(self) -> Mapping[Path, str]:
        return self._signatures

    def entry(self, path: Path) -> Optional[EntryNode]:
        return self._index.get(Path(path))

    def children(self, path: Path) -> Optional[Tuple[Path, ...]]:
        """Children of a directory; None for files and unknown paths."""
        entry = self.entry(path)
        if isinstance(entry, DirectoryEntry):
            return entry.children
        return None

    def size(self, path: Path) -> Optional[Size]:
        """
        Size of a file, or the total size of everything below a directory.

        Directory totals are recomputed on every call.
        """
        entry = self.entry(path)
        if entry is None:
            return None
        if isinstance(entry, FileEntry):
            return entry.size
        total = Size(0)
        pending = list(entry.children)
        while pending:
            child_entry = self.entry(pending.pop())
            if isinstance(child_entry, FileEntry):
                total = total + child_entry.size
            elif isinstance(child_entry, DirectoryEntry):
                pending.extend(child_entry.children)
        return total

    def signature(self, path: Path) -> Optional[str]:
        return self._signatures.get(Path(path))

    def files(self) -> Iterator[Path]:
        """All file paths, in no particular order."""
        return (path for path, entry in self._index.items() if isinstance(entry, FileEntry))

    def find_duplicates(self, workers: Optional[int] = None,
                        grouper: DuplicateGrouper = None) -> Dict[str, List[Path]]:
        """Signature -> paths for every signature shared by two or more files."""
        if grouper is None:
            grouper = DuplicateGrouperImpl()
        return grouper.group(self._signatures, workers=workers)

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, path) -> bool:
        return Path(path) in self._index

    def __repr__(self):
        return f"<FileTree root={self._root}, entries={len(self._index)}>"
