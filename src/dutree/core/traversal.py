"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/traversal.py
Depth-first walks over a FileTree for disk-usage reports.
Works only through the tree's query methods and never touches the filesystem.

Ordering (one of):
  • NATURAL:       children in the order the builder discovered them
  • SIZE_DESC:     largest aggregate size first (stable on ties)
  • LEXICOGRAPHIC: children sorted by path
Filtering (optional, combinable with any ordering):
  • extension filter: files are emitted only when their extension matches
    exactly; directories are always emitted and descended
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

from dutree.core.models import FileEntry, Size, TraversalOrder, TreeConfig
from dutree.core.tree import FileTree
from dutree.utils.convert_utils import ConvertUtils


@dataclass(frozen=True)
class TreeLine:
    """One visited node of a walk."""
    depth: int
    path: Path
    size: Size


class TreeWalker:
    """
    Yields TreeLine objects for a FileTree according to an order and filter.
    """

    def __init__(
        self,
        tree: FileTree,
        order: TraversalOrder = TraversalOrder.NATURAL,
        extension_filter: Optional[str] = None
    ):
        self.tree = tree
        self.order = order
        if extension_filter is not None and extension_filter.startswith("."):
            extension_filter = extension_filter[1:]
        self.extension_filter = extension_filter

    def walk(self) -> Iterator[TreeLine]:
        """Visit the whole tree starting at its root, parents before children."""
        stack: List[Tuple[int, Iterator[Path]]] = [(0, iter([self.tree.root]))]
        while stack:
            depth, pending = stack[-1]
            path = next(pending, None)
            if path is None:
                stack.pop()
                continue

            entry = self.tree.entry(path)
            if entry is None:
                continue

            if isinstance(entry, FileEntry):
                if self._passes_filter(path):
                    yield TreeLine(depth, path, entry.size)
                continue

            yield TreeLine(depth, path, self.tree.size(path) or Size(0))
            stack.append((depth + 1, iter(self._order_children(entry.children))))

    def _order_children(self, children: Sequence[Path]) -> List[Path]:
        if self.order == TraversalOrder.SIZE_DESC:
            return sorted(children, key=lambda p: self.tree.size(p) or Size(0), reverse=True)
        if self.order == TraversalOrder.LEXICOGRAPHIC:
            return sorted(children)
        return list(children)

    def _passes_filter(self, path: Path) -> bool:
        """
        Check if a file matches the extension filter.
        Args:
            path: File path
        Returns:
            True if no filter is set or the extension (without its dot) equals it
        """
        if self.extension_filter is None:
            return True
        return path.suffix[1:] == self.extension_filter


def render_line(line: TreeLine, indent_width: int = TreeConfig.INDENT_WIDTH) -> str:
    """Format a visited node as `<indent><size> /<path>`."""
    return f"{ConvertUtils.indent(line.depth, indent_width)}{line.size} /{line.path}"


def render_tree(
    tree: FileTree,
    order: TraversalOrder = TraversalOrder.NATURAL,
    extension_filter: Optional[str] = None
) -> Iterator[str]:
    """Rendered lines of a whole tree, ready to print."""
    for line in TreeWalker(tree, order, extension_filter).walk():
        yield render_line(line)
