"""
Command orchestrators for the usage and duplicate reports.
This is the single place wiring the core together, used by the CLI and by
library callers alike. Nothing here prints.
"""
import logging
import time
from typing import Iterator, List, Optional

from dutree.core.grouper import DuplicateGrouperImpl
from dutree.core.interfaces import DuplicateGrouper, TreeBuilder
from dutree.core.models import DuplicateGroup, DuplicateParams, UsageParams
from dutree.core.scanner import FileTreeBuilderImpl
from dutree.core.traversal import TreeLine, TreeWalker, render_line
from dutree.core.tree import FileTree

logger = logging.getLogger(__name__)


class UsageCommand:
    """
    Builds the tree for `params.root` and walks it with the selected policy.

    Usage:
        command = UsageCommand()
        for line in command.execute(UsageParams(root=Path("."))):
            print(line)
    """

    def __init__(self, builder: Optional[TreeBuilder] = None):
        self._builder = builder or FileTreeBuilderImpl()
        self._tree: Optional[FileTree] = None

    def build(self, params: UsageParams) -> FileTree:
        """
        Raises:
            TreeBuildError: If the tree cannot be built
        """
        start_time = time.time()
        self._tree = FileTree.build(params.root, builder=self._builder)
        logger.debug(f"Indexed {len(self._tree)} entries in {time.time() - start_time:.2f}s")
        return self._tree

    def walk(self, params: UsageParams) -> Iterator[TreeLine]:
        tree = self.build(params)
        logger.debug(f"Walking with order={params.order.display_name}, filter={params.extension_filter}")
        return TreeWalker(tree, params.order, params.extension_filter).walk()

    def execute(self, params: UsageParams) -> List[str]:
        """Build the tree and return the rendered report lines."""
        return [render_line(line) for line in self.walk(params)]

    @property
    def tree(self) -> Optional[FileTree]:
        """Tree from the last execution, if any."""
        return self._tree


class DuplicateCommand:
    """
    Builds the tree for `params.root` and groups files by content signature.
    Groups are sorted by signature and paths inside a group by path, so the
    result is stable across runs.
    """

    def __init__(self, builder: Optional[TreeBuilder] = None,
                 grouper: Optional[DuplicateGrouper] = None):
        self._builder = builder or FileTreeBuilderImpl()
        self._grouper = grouper or DuplicateGrouperImpl()
        self._tree: Optional[FileTree] = None

    def execute(self, params: DuplicateParams) -> List[DuplicateGroup]:
        """
        Raises:
            TreeBuildError: If the tree cannot be built
        """
        start_time = time.time()
        self._tree = FileTree.build(params.root, builder=self._builder)
        logger.debug(f"Indexed {len(self._tree)} entries in {time.time() - start_time:.2f}s")

        groups = self._tree.find_duplicates(workers=params.workers, grouper=self._grouper)
        return [
            DuplicateGroup(signature=sig, paths=sorted(paths))
            for sig, paths in sorted(groups.items())
        ]

    @property
    def tree(self) -> Optional[FileTree]:
        return self._tree
