"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Builds the path-keyed indexes of a filesystem subtree.
Features:
- Depth-first descent from the root path, with no recursion depth limit
- Records every file with its size and content signature
- Keeps directory children in the order the OS enumerates them
- Fails fast: the first obstruction aborts the whole build
"""

import os
import stat
import time
import logging
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Tuple, Union

logger = logging.getLogger(__name__)

# Local imports
from dutree.core.errors import PathNotFound, PermissionDenied, UnsupportedEntryKind
from dutree.core.hasher import HasherImpl
from dutree.core.interfaces import Hasher, TreeBuilder
from dutree.core.models import DirectoryEntry, EntryNode, FileEntry, Size


class FileTreeBuilderImpl(TreeBuilder):
    """
    Walks a directory tree and collects entries and signatures.

    Symbolic links are never followed: like devices, sockets and FIFOs they
    are reported as UnsupportedEntryKind, so the walk can only go downward.

    Attributes:
        hasher: Computes content signatures of regular files
    """

    def __init__(self, hasher: Hasher = None):
        self.hasher = hasher or HasherImpl()

    def build(self, root: Union[str, Path]) -> Tuple[Dict[Path, EntryNode], Dict[Path, str]]:
        """
        Walks `root` and returns (index, signatures).
        Nothing is returned on failure: the partially filled maps are dropped.
        """
        root_path = Path(root)
        logger.debug(f"Starting build at: {root_path}")
        start_time = time.time()

        index: Dict[Path, EntryNode] = {}
        signatures: Dict[Path, str] = {}
        root_entry = self._explore(root_path, index, signatures)
        index[root_path] = root_entry

        elapsed_time = time.time() - start_time
        logger.debug(
            f"Build completed in {elapsed_time:.2f} seconds: "
            f"{len(index)} entries, {len(signatures)} files"
        )
        return index, signatures

    def _explore(self, root: Path, index: Dict[Path, EntryNode], signatures: Dict[Path, str]) -> EntryNode:
        """
        Records `root` (and everything below it) and returns its entry.

        Iterative post-order walk: each open directory keeps its pending
        children, and its entry is recorded once all of them are done.
        """
        frames: List[Tuple[Path, Iterator[Path], List[Path]]] = []
        entry = self._enter(root, frames, signatures)

        while frames:
            path, pending, collected = frames[-1]
            child_path = next(pending, None)
            if child_path is None:
                frames.pop()
                entry = DirectoryEntry(tuple(collected))
                index[path] = entry
                continue

            collected.append(child_path)
            child_entry = self._enter(child_path, frames, signatures)
            if child_entry is not None:
                index[child_path] = child_entry

        return entry

    def _enter(self, path: Path, frames: list, signatures: Dict[Path, str]) -> Optional[FileEntry]:
        """
        Stats `path`. Files are hashed and returned; directories are listed
        and pushed onto `frames` (returns None).
        """
        st = self._lstat(path)

        if stat.S_ISREG(st.st_mode):
            signatures[path] = self.hasher.compute_signature(path)
            return FileEntry(Size(st.st_size))

        if stat.S_ISDIR(st.st_mode):
            frames.append((path, iter(self._list_dir(path)), []))
            return None

        kind = self._describe_mode(st.st_mode)
        logger.error(f"Unsupported entry kind '{kind}': {path}")
        raise UnsupportedEntryKind(path, kind)

    @staticmethod
    def _lstat(path: Path) -> os.stat_result:
        try:
            return os.lstat(path)
        except FileNotFoundError as e:
            raise PathNotFound(path) from e
        except PermissionError as e:
            raise PermissionDenied(path) from e

    @staticmethod
    def _list_dir(path: Path):
        """Immediate children of a directory, in enumeration order."""
        try:
            with os.scandir(path) as it:
                return [path / entry.name for entry in it]
        except FileNotFoundError as e:
            raise PathNotFound(path) from e
        except PermissionError as e:
            raise PermissionDenied(path) from e

    @staticmethod
    def _describe_mode(mode: int) -> str:
        if stat.S_ISLNK(mode):
            return "symlink"
        if stat.S_ISCHR(mode):
            return "character device"
        if stat.S_ISBLK(mode):
            return "block device"
        if stat.S_ISFIFO(mode):
            return "fifo"
        if stat.S_ISSOCK(mode):
            return "socket"
        return "unknown"
