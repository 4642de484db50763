"""
Unified CLI entry point for typed_sql.

Usage:
    python -m typed_sql.cli <command> [options]

Available commands:
    prepare      - Substitute typed placeholders in a SQL template
"""

import argparse
import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point with subcommand routing.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = argparse.ArgumentParser(
        prog="typed_sql.cli",
        description="typed_sql CLI",
    )
    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
        help="Command to execute",
    )
    subparsers.add_parser(
        "prepare",
        help="Substitute typed placeholders in a SQL template",
        add_help=False,  # Let the delegated module handle help
    )

    args, remaining_args = parser.parse_known_args(argv)

    if args.command == "prepare":
        from typed_sql.cli.prepare import main as prepare_main

        return prepare_main(remaining_args)

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
