"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Errors raised while building a file tree. Every one of them aborts the build.
"""

import errno as _errno
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, Path]


class TreeBuildError(Exception):
    """Base class for failures that abort a tree build."""

    def __init__(self, message: str, path: Optional[PathLike] = None):
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class PathNotFound(TreeBuildError, FileNotFoundError):
    """A path vanished during the walk, or the root never existed."""

    def __init__(self, path: PathLike, strerror: str = "No such file or directory"):
        FileNotFoundError.__init__(self, _errno.ENOENT, strerror, str(path))
        self.path = Path(path)

    def __str__(self) -> str:
        return f"Path not found: {self.path}"


class PermissionDenied(TreeBuildError, PermissionError):
    """The walk hit a file or directory it is not allowed to read."""

    def __init__(self, path: PathLike, strerror: str = "Permission denied"):
        PermissionError.__init__(self, _errno.EACCES, strerror, str(path))
        self.path = Path(path)

    def __str__(self) -> str:
        return f"Permission denied: {self.path}"


class UnsupportedEntryKind(TreeBuildError):
    """An entry is neither a regular file nor a directory (symlink, device, socket...)."""

    def __init__(self, path: PathLike, kind: str):
        super().__init__(f"Unsupported entry kind '{kind}': {path}", path)
        self.kind = kind


class SignatureComputationFailed(TreeBuildError):
    """Reading a file's content for its signature failed."""

    def __init__(self, path: PathLike, reason: str):
        super().__init__(f"Could not compute signature of {path}: {reason}", path)
