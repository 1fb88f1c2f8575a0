from dutree.core.models import TraversalOrder

ORDER_ALIASES = {
    "natural": TraversalOrder.NATURAL,
    "size": TraversalOrder.SIZE_DESC,
    "lexicographic": TraversalOrder.LEXICOGRAPHIC,
}

USAGE_HELP_TEXT = (
    "Show the disk usage tree for the given path.\n"
    "Children are listed in discovery order unless a sort flag is given.\n"
    "Example    : %(prog)s ~/Pictures --filter jpg --lexicographic-sort\n"
)

DUPLICATE_HELP_TEXT = (
    "Find files with identical content within the given path.\n"
    "Example    : %(prog)s ~/Downloads --workers 4\n"
)

EPILOG_TEXT = """
Examples:
  Disk usage of the current directory
  %(prog)s usage

  Largest entries first
  %(prog)s usage ~/Downloads --size-sort

  Only .jpg files, sorted by path
  %(prog)s usage ~/Pictures --filter jpg --lexicographic-sort

  Duplicate files in the current directory
  %(prog)s duplicate
"""
