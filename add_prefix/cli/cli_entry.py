"""
cli_entry.py - CLI Entry Point

Usage:
    add-prefix [options] <prefix> [directory]

Exit codes:
    0 - success, help, nothing to process, preview (even with conflicts)
    1 - invalid arguments, missing directory, or any item failed to rename
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .. import PROG_NAME, __version__
from ..core import (
    RenameConfig, RenameOutcome, Item,
    ArgumentError, MissingPrefixError, DirectoryNotFoundError,
    scan_directory, plan_prefix_rename, execute_rename,
    validate_config, check_writable,
    configure_logging, log, warning, error,
)


# Exact option spellings; anything else starting with "-" is rejected
FLAG_OPTIONS = {"-h", "--help", "-d", "--dry-run", "-b", "--backup",
                "-v", "--verbose", "--version"}
VALUE_OPTIONS = {"-e", "--extension"}


class ToolArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ArgumentError instead of exiting with status 2"""

    def error(self, message):
        raise ArgumentError(message)


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser"""
    parser = ToolArgumentParser(
        prog=PROG_NAME,
        allow_abbrev=False,
        description="Add a prefix to the names of files and directories in a directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Add "new_" to every file and directory in the current directory
  add-prefix "new_" .

  # Add "backup_" to every item in the given directory
  add-prefix "backup_" /path/to/files

  # Only .txt files (directories are excluded)
  add-prefix -e ".txt" "doc_" .

  # Preview only
  add-prefix -d "test_" .

  # Back up each item before renaming it
  add-prefix -b "backup_" .
"""
    )

    parser.add_argument("prefix", nargs="?", default="", help="Prefix to prepend")
    parser.add_argument("directory", nargs="?", default=".",
                        help="Target directory (default: current directory)")
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    parser.add_argument("--dry-run", "-d", action="store_true",
                        help="Preview only, do not rename anything")
    parser.add_argument("--backup", "-b", action="store_true",
                        help="Create a timestamped backup of each item before renaming")
    parser.add_argument("--extension", "-e", metavar="EXT", type=str, default=None,
                        help="Only process files whose name ends with EXT (directories are excluded)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def check_options(argv: List[str]) -> List[str]:
    """
    Reject unknown options before argparse sees them

    argparse would otherwise accept abbreviations (--dry), grouped short
    flags (-dv) and take negative-number-like tokens (-1) as the prefix.
    The token after -e/--extension is taken literally, even if it starts
    with "-", and is passed on as --extension=VALUE.

    Args:
        argv: Raw argument list

    Returns:
        Argument list safe to hand to the parser

    Raises:
        ArgumentError: Unknown option
    """
    tokens: List[str] = []
    remaining = iter(argv)

    for token in remaining:
        if token in VALUE_OPTIONS:
            value = next(remaining, None)
            # Missing value is reported by argparse
            tokens.append(token if value is None else f"--extension={value}")
        elif token.startswith(("--extension=", "-e=")):
            tokens.append(token)
        elif token.startswith("-") and token not in FLAG_OPTIONS:
            raise ArgumentError(f"Unknown option: {token}")
        else:
            tokens.append(token)

    return tokens


def parse_config(argv: Optional[List[str]] = None,
                 parser: Optional[argparse.ArgumentParser] = None) -> RenameConfig:
    """
    Convert command-line tokens into a RenameConfig

    Args:
        argv: Argument list (defaults to sys.argv[1:])
        parser: Parser to use (defaults to create_parser())

    Returns:
        Immutable run configuration

    Raises:
        ArgumentError: Unknown option or too many arguments
        SystemExit: --help or --version (status 0)
    """
    if parser is None:
        parser = create_parser()
    if argv is None:
        argv = sys.argv[1:]
    argv = check_options(argv)

    # Options may appear before, between or after the positionals
    args, unknown = parser.parse_known_intermixed_args(argv)

    for token in unknown:
        if token.startswith("-"):
            raise ArgumentError(f"Unknown option: {token}")
    extra = list(args.extra) + unknown
    if extra:
        raise ArgumentError(f"Too many arguments: {extra[0]}")

    return RenameConfig(
        prefix=args.prefix,
        directory=Path(args.directory),
        dry_run=args.dry_run,
        backup=args.backup,
        extension=args.extension or None,
        verbose=args.verbose,
    )


def run_preview(items: List[Item], config: RenameConfig) -> int:
    """Print what would be renamed, flagging conflicts"""
    plan = plan_prefix_rename(items, config.prefix)

    print("=== Preview ===")
    for op in plan.ops:
        if op.conflict:
            print(f"⚠ {op.describe()} (conflicts with existing entry)")
        else:
            print(f"  {op.describe()}")

    if plan.conflict_count > 0:
        print()
        warning(f"{plan.conflict_count} item(s) would conflict with existing entries")

    return 0


def run_rename(items: List[Item], config: RenameConfig) -> int:
    """Rename all items and print the final tally"""
    writable, reason = check_writable(config.directory)
    if not writable:
        warning(reason)

    def on_progress(current: int, total: int, outcome: RenameOutcome):
        if outcome.ok:
            print(f"✓ {outcome.op.describe()}")

    print("=== Renaming ===")
    result = execute_rename(items, config, progress_callback=on_progress)

    print()
    print(result.tally())

    return 0 if result.failed_count == 0 else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    parser = create_parser()

    try:
        config = parse_config(argv, parser)
    except SystemExit as e:
        # --help / --version
        return e.code if isinstance(e.code, int) else 0
    except ArgumentError as e:
        configure_logging(verbose=False)
        error(str(e))
        parser.print_help()
        return 1

    configure_logging(config.verbose)

    try:
        validate_config(config)
    except MissingPrefixError as e:
        error(str(e))
        parser.print_help()
        return 1
    except DirectoryNotFoundError as e:
        error(str(e))
        return 1

    for line in config.describe():
        log(line)

    try:
        items = scan_directory(config.directory, config.extension)
    except OSError as e:
        error(f"Cannot read directory: {config.directory} ({e})")
        return 1

    if not items:
        print("No files or directories to process.")
        return 0

    print(f"Items to process: {len(items)}")
    print()

    if config.dry_run:
        return run_preview(items, config)
    return run_rename(items, config)


if __name__ == "__main__":
    sys.exit(main())
