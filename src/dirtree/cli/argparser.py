"""Command-line argument parsing for dirtree.

This module defines the command-line interface for dirtree,
handling argument parsing and validation.
"""

import argparse
import os
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dirtree import __version__
from dirtree.config import TraversalConfig
from dirtree.exclusion_rules.base_rules import BaseExclusionRules
from dirtree.types import TreeFormat


def create_exclusion_action(exclusion_rules: BaseExclusionRules) -> Type[argparse.Action]:
    """Create a custom action class for handling pattern exclusion options.

    The returned action updates the provided exclusion rules object as arguments are
    processed, preserving the order of -e/--exclude and -i/--ignore options as they
    appear on the command line.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            if option_string in ("-e", "--exclude"):
                if isinstance(values, (str, os.PathLike)):
                    exclusion_rules.load_rules(values)
                else:
                    exclusion_rules.load_rules(Path(str(values)))
            else:  # -i/--ignore
                exclusion_rules.add_rule(str(values))

            if getattr(namespace, self.dest, None) is None:
                setattr(namespace, self.dest, [])
            getattr(namespace, self.dest).append(values)

    return ExclusionRulesAction


def create_parser(exclusion_rules: BaseExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        exclusion_rules: The exclusion rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with dirtree's options.
    """
    description = """
    dirtree: Display a directory hierarchy as an indented tree.

    Common noise is skipped by default: version-control metadata (.git), dependency
    caches (node_modules, venv, __pycache__), editor settings (.vscode, .idea) and
    operating system artifacts (.DS_Store, Thumbs.db, desktop.ini, ...). Entries are
    listed in byte-wise name order, so the output is stable and easy to diff or to
    paste into a prompt for a language model.
    """

    epilog = """
    Examples:
      # Show tree for current directory
      dirtree

      # Show tree for specified directory
      dirtree /path/to/dir

      # Show tree with maximum depth of 2
      dirtree -d 2 /path/to/dir

      # Show all files including those normally skipped
      dirtree -a

      # Skip additional directories and files by exact name
      dirtree -x build -x dist -X README.md

      # Skip entries matching gitignore-style patterns
      dirtree -i "*.pyc" -e .gitignore

      # Plain ASCII output, written to a file
      dirtree -A -o tree.txt

      # Report line and token counts on stderr
      dirtree -s stderr -t gpt-4
    """

    parser = argparse.ArgumentParser(
        prog="dirtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirtree {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(exclusion_rules)

    parser.add_argument(
        "directory",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Directory to display (default: current directory).",
    )
    parser.add_argument(
        "-d",
        "--depth",
        type=int,
        metavar="LEVEL",
        help="Maximum depth to display. 0 or a negative value means no limit (default: no limit).",
    )
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        help="Disable skipping of common directories/files, including hidden ones.",
    )
    parser.add_argument(
        "-H",
        "--skip-hidden",
        action="store_true",
        help="Skip entries whose names start with a dot.",
    )
    parser.add_argument(
        "-x",
        "--skip-dir",
        metavar="NAME",
        action="append",
        help="Additional directory name to skip (exact match, can be specified multiple times).",
    )
    parser.add_argument(
        "-X",
        "--skip-file",
        metavar="NAME",
        action="append",
        help="Additional file name to skip (exact match, can be specified multiple times).",
    )
    parser.add_argument(
        "-e",
        "--exclude",
        type=Path,
        metavar="FILE",
        action=ExclusionAction,
        help="Path to a gitignore-style file whose patterns exclude entries (can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        action=ExclusionAction,
        help=(
            "Individual gitignore-style pattern to exclude entries. Patterns are processed in "
            "the order they appear, mixed with -e/--exclude options."
        ),
    )
    parser.add_argument(
        "-A",
        "--ascii",
        action="store_true",
        help="Draw branches with plain ASCII characters instead of box-drawing characters.",
    )
    parser.add_argument(
        "-L",
        "--follow-symlinks",
        action="store_true",
        help="Descend into symbolic links to directories. Cycles are still detected.",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        metavar="FILE",
        help="Output file path. If not specified, output is written to stdout.",
    )
    parser.add_argument(
        "-s",
        "--summary",
        metavar="DEST",
        choices=["stderr", "stdout", "file"],
        help="Print summary report. Valid destinations: stderr, stdout, file (requires -o)",
    )
    parser.add_argument(
        "-t",
        "--tokenizer",
        metavar="MODEL",
        help="Tokenizer model used to count tokens in the summary (e.g., gpt-4).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log skipped and unreadable directories to stderr.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.summary == "file" and not args.output:
        raise ValueError("--summary=file requires -o/--output to be specified")

    if args.tokenizer and not args.summary:
        raise ValueError("-t/--tokenizer requires -s/--summary to be specified")


def build_config(args: argparse.Namespace, exclusion_rules: Optional[BaseExclusionRules] = None) -> TraversalConfig:
    """Translate parsed arguments into a traversal configuration.

    Args:
        args: Parsed command-line arguments.
        exclusion_rules: Pattern rules populated by -e/-i. Only attached to the
            configuration when at least one pattern was given.

    Returns:
        The configuration for the traversal.
    """
    has_patterns = bool(getattr(args, "exclude", None) or getattr(args, "ignore", None))

    return TraversalConfig(
        max_depth=args.depth,
        skip_hidden=args.skip_hidden,
        skip_common=not args.all,
        custom_skip_dirs=tuple(args.skip_dir or ()),
        custom_skip_files=tuple(args.skip_file or ()),
        render_format=TreeFormat.ASCII if args.ascii else TreeFormat.UNICODE,
        follow_symlinks=args.follow_symlinks,
        exclusion_rules=exclusion_rules if has_patterns else None,
    )
