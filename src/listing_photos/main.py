"""Main module for the listing photos CLI."""

import sys
import argparse

from . import __version__
from .validate_images import add_validation_arguments, run as run_validation


def main() -> None:
    """
    Entry point for the unified command-line interface (CLI).

    Sets up an `ArgumentParser` with the "validate" and "version" commands
    and dispatches to the matching handler.
    """
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="listing-photos",
        description="Listing Photos - quality validation for vehicle listing images",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate photos with default thresholds
  listing-photos validate front.jpg side.jpg interior.png

  # Use a thread pool and a stricter minimum size
  listing-photos validate photos/*.jpg --processor multithread --min-file-size 51200

  # Show version
  listing-photos version
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    validate_parser: argparse.ArgumentParser = subparsers.add_parser(
        "validate", help="Validate image files as listing photos"
    )
    add_validation_arguments(validate_parser)

    subparsers.add_parser("version", help="Show version information")

    args: argparse.Namespace = parser.parse_args()

    if args.command == "validate":
        sys.exit(run_validation(args))

    elif args.command == "version":
        print("Listing Photos CLI")
        print(f"Version {__version__}")
        print("Quality validation for vehicle listing images")
        sys.exit(0)

    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
