"""Command-line interface for dirtree.

This module provides the ``dirtree`` command, which prints the tree of a directory
to stdout or a file. It handles argument parsing, logging setup, output and signal
management for graceful interruption handling.

Exit Codes:
    0: Successful completion
    1: Runtime error, including a missing or invalid root directory
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Current directory, two levels deep
    $ dirtree -d 2

    # Everything, including .git and node_modules
    $ dirtree -a /path/to/dir
"""

import importlib.util
import logging
import sys
from collections.abc import Mapping
from typing import Optional

from dirtree.cli.argparser import build_config, create_parser, validate_args
from dirtree.cli.safe_writer import SafeWriter
from dirtree.cli.signal_handler import setup_signal_handling, signal_handler
from dirtree.dirtree import StreamingDirTree
from dirtree.exceptions import TokenizerNotAvailableError
from dirtree.exclusion_rules.git_rules import GitIgnoreExclusionRules

LOG_FORMAT = "%(levelname)s: %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr; DEBUG when verbose, WARNING otherwise."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def format_counts(counts: Mapping[str, Optional[int]]) -> str:
    """Format the counts into a human-readable string.

    Args:
        counts: Mapping containing various count metrics.

    Returns:
        A formatted string showing all counts with appropriate labels.
    """
    result = [
        f"Directories: {counts['directories']}",
        f"Files: {counts['files']}",
        f"Lines: {counts['lines']}",
        f"Characters: {counts['characters']}",
    ]

    if counts["tokens"] is not None:
        result.append(f"Tokens: {counts['tokens']}")

    return "\n".join(result)


def check_tiktoken_available() -> bool:
    """Check if the tiktoken library is available."""
    return importlib.util.find_spec("tiktoken") is not None


def main() -> None:
    """Main entry point for the dirtree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        # Populated in command-line order while the arguments are parsed
        exclusion_rules = GitIgnoreExclusionRules()

        parser = create_parser(exclusion_rules)
        args = parser.parse_args()
        validate_args(args)
        setup_logging(args.verbose)

        if args.tokenizer and not check_tiktoken_available():
            raise TokenizerNotAvailableError(
                "Token counting was requested with -t/--tokenizer, but the required tiktoken library is not installed."
            )

        config = build_config(args, exclusion_rules)

        # Validates the root before anything is written
        tree = StreamingDirTree(args.directory, config, tokenizer_model=args.tokenizer)

        output_file = args.output if args.output else sys.stdout.fileno()

        with SafeWriter(output_file) as safe_writer:
            try:
                for line in tree.stream_tree():
                    safe_writer.write(line)

                if args.summary:
                    counts = {
                        "directories": tree.directory_count,
                        "files": tree.file_count,
                        "lines": tree.line_count,
                        "characters": tree.character_count,
                        "tokens": tree.token_count,
                    }
                    count_output_str = format_counts(counts)

                    if args.summary in ("stdout", "file"):
                        safe_writer.write("\n" + count_output_str + "\n")
                    else:
                        print(count_output_str, file=sys.stderr)

            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

    except TokenizerNotAvailableError as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        print("To enable token counting, install dirtree with the 'token_counting' extra:", file=sys.stderr)
        print('    pip install "dirtree[token_counting]"', file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    if signal_handler.sigpipe_received.is_set():
        sys.exit(141)
    elif signal_handler.sigint_received.is_set():
        sys.exit(130)


if __name__ == "__main__":
    main()
