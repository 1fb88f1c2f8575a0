"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Groups files by content signature with a partition → fold → reduce pipeline.

Each worker folds its own slice of the signature table into a private dict,
so no locking is needed; partial results meet only in the merge step.
"""

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from functools import reduce
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from dutree.core.interfaces import DuplicateGrouper
from dutree.core.models import TreeConfig

logger = logging.getLogger(__name__)

Pair = Tuple[Path, str]
SignatureMap = Dict[str, List[Path]]


class DuplicateGrouperImpl(DuplicateGrouper):
    """
    Thread-pool implementation of DuplicateGrouper.
    """

    def __init__(self, workers: Optional[int] = None):
        self.workers = workers

    def group(self, signatures: Mapping[Path, str], workers: Optional[int] = None) -> SignatureMap:
        """
        Args:
            signatures: path -> signature, treated as read-only
            workers: number of partitions/threads (defaults to TreeConfig)
        Returns:
            Dict[signature, List[Path]] with only signatures shared by 2+ paths
        """
        if workers is None:
            workers = self.workers if self.workers is not None else TreeConfig.default_workers()
        if workers < 1:
            raise ValueError("Worker count must be at least 1")

        pairs = list(signatures.items())
        if not pairs:
            return {}

        start_time = time.time()
        partitions = self.partition(pairs, workers)
        logger.debug(f"Grouping {len(pairs)} files in {len(partitions)} partitions")

        with ThreadPoolExecutor(max_workers=len(partitions)) as executor:
            partials = list(executor.map(self.fold, partitions))

        merged = reduce(self.merge, partials, {})
        result = {sig: paths for sig, paths in merged.items() if len(paths) > 1}

        logger.debug(
            f"Found {len(result)} duplicate groups in {time.time() - start_time:.3f}s"
        )
        return result

    @staticmethod
    def partition(pairs: Sequence[Pair], workers: int) -> List[Sequence[Pair]]:
        """Split pairs into at most `workers` contiguous, non-empty slices."""
        count = min(workers, len(pairs))
        if count == 0:
            return []
        step, extra = divmod(len(pairs), count)
        slices = []
        start = 0
        for i in range(count):
            end = start + step + (1 if i < extra else 0)
            slices.append(pairs[start:end])
            start = end
        return slices

    @staticmethod
    def fold(pairs: Iterable[Pair]) -> SignatureMap:
        """Worker-local accumulation: signature -> paths in the order seen."""
        acc: SignatureMap = {}
        for path, signature in pairs:
            acc.setdefault(signature, []).append(path)
        return acc

    @staticmethod
    def merge(left: SignatureMap, right: SignatureMap) -> SignatureMap:
        """
        Combine two partial maps without touching either operand.
        Shared keys get their path lists concatenated.
        """
        merged = {sig: list(paths) for sig, paths in left.items()}
        for sig, paths in right.items():
            merged.setdefault(sig, []).extend(paths)
        return merged
