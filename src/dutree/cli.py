#!/usr/bin/env python3
"""
dutree CLI — disk usage tree and duplicate file finder.
Builds the whole index first, then prints the requested report.
The filesystem is only ever read, never modified.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from dutree.core.errors import TreeBuildError
from dutree.core.models import DuplicateGroup, DuplicateParams, UsageParams
from dutree.commands import UsageCommand, DuplicateCommand
from dutree.aliases import ORDER_ALIASES, USAGE_HELP_TEXT, DUPLICATE_HELP_TEXT, EPILOG_TEXT


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dutree",
            description="dutree — disk usage tree and duplicate file finder",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and timing"
        )

        subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
        subparsers.required = True

        usage = subparsers.add_parser(
            "usage",
            help="Show the disk usage tree for the given path",
            description=USAGE_HELP_TEXT,
            formatter_class=argparse.RawTextHelpFormatter
        )
        usage.add_argument(
            "path",
            nargs="?",
            default=".",
            help="Directory to analyse (default '.')"
        )
        sort_group = usage.add_mutually_exclusive_group()
        sort_group.add_argument(
            "--lexicographic-sort",
            action="store_true",
            dest="lexicographic_sort",
            help="List children sorted by path"
        )
        sort_group.add_argument(
            "--size-sort",
            action="store_true",
            dest="size_sort",
            help="List children largest first"
        )
        usage.add_argument(
            "--filter",
            default=None,
            type=str,
            metavar="EXT",
            help="Only show files with this extension (e.g., jpg)"
        )

        duplicate = subparsers.add_parser(
            "duplicate",
            help="Find and display duplicate files within the given path",
            description=DUPLICATE_HELP_TEXT,
            formatter_class=argparse.RawTextHelpFormatter
        )
        duplicate.add_argument(
            "path",
            nargs="?",
            default=".",
            help="Directory to analyse (default '.')"
        )
        duplicate.add_argument(
            "--workers", "-w",
            default=None,
            type=int,
            metavar="N",
            help="Number of threads used to group signatures. Default: CPU count"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if self.verbose and self.quiet:
            self.error_exit("--verbose and --quiet cannot be used together")

        if args.command == "duplicate" and args.workers is not None and args.workers < 1:
            self.error_exit("--workers must be at least 1")

        if args.command == "usage" and args.filter is not None and not args.filter.strip(" ."):
            self.error_exit("--filter needs a non-empty extension")

    def create_usage_params(self, args: argparse.Namespace) -> UsageParams:
        """Create UsageParams from CLI arguments."""
        if args.lexicographic_sort:
            order = ORDER_ALIASES["lexicographic"]
        elif args.size_sort:
            order = ORDER_ALIASES["size"]
        else:
            order = ORDER_ALIASES["natural"]

        try:
            return UsageParams(root=Path(args.path), order=order, extension_filter=args.filter)
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def create_duplicate_params(self, args: argparse.Namespace) -> DuplicateParams:
        """Create DuplicateParams from CLI arguments."""
        try:
            return DuplicateParams(root=Path(args.path), workers=args.workers)
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_usage(self, params: UsageParams) -> None:
        """Build the tree and print one line per visited entry."""
        command = UsageCommand()
        try:
            lines = command.execute(params)
        except (TreeBuildError, OSError) as e:
            self.error_exit(f"Failed to index {params.root}: {e}")

        for line in lines:
            print(line)

    def run_duplicate(self, params: DuplicateParams) -> List[DuplicateGroup]:
        """Build the tree and return its duplicate groups."""
        command = DuplicateCommand()
        try:
            groups = command.execute(params)
        except (TreeBuildError, OSError) as e:
            self.error_exit(f"Failed to index {params.root}: {e}")

        if self.verbose:
            files = sum(1 for _ in command.tree.files())
            print(f"Checked {files} files, found {len(groups)} duplicate groups", file=sys.stderr)
        return groups

    def output_duplicates(self, groups: List[DuplicateGroup]) -> None:
        """Print each group of two or more files as a signature header followed by its paths."""
        groups = [group for group in groups if group.is_duplicate()]
        if not groups:
            if not self.quiet:
                print("No duplicate files found.")
            return

        for group in groups:
            print(f"Signature: {group.signature}")
            for path in group.paths:
                print(f"  - {path}")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        self.validate_args(args)
        if self.verbose:
            logging.getLogger("dutree").setLevel(logging.DEBUG)

        if args.command == "usage":
            params = self.create_usage_params(args)
            if params.root.exists() and not params.root.is_dir():
                self.warning(f"{params.root} is not a directory, reporting it as a single entry")
            self.run_usage(params)
        else:
            params = self.create_duplicate_params(args)
            groups = self.run_duplicate(params)
            self.output_duplicates(groups)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
