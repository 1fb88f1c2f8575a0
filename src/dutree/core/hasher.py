"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements content signatures using a pluggable streaming hash algorithm.

Files are read in fixed-size chunks, so memory use does not depend on file size.
"""

import logging
from pathlib import Path

import xxhash

from dutree.core.errors import SignatureComputationFailed
from dutree.core.interfaces import Hasher, HashAlgorithm, StreamingHash
from dutree.core.models import TreeConfig

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class XXHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> StreamingHash:
        return xxhash.xxh64()


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    The signature is the lowercase hex encoding of the raw digest.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = TreeConfig.CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or XXHashAlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_signature(self, path: Path) -> str:
        """Streams the whole file through the hash and returns its hex digest."""
        accumulator = self.algorithm.new()
        try:
            with open(path, 'rb') as f:
                while True:
                    chunk = f.read(self.chunk_size)
                    if not chunk:
                        break
                    accumulator.update(chunk)
        except OSError as e:
            logger.error(f"Error reading {path}: {e}")
            raise SignatureComputationFailed(path, e.strerror or str(e)) from e
        return accumulator.hexdigest()
