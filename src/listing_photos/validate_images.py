#!/usr/bin/env python3
"""
Listing Photo Validator CLI

Reads image files → Validates size, dimensions and format → Reports verdicts
Supports multiple concurrency strategies: serial, multithread, multiprocess, asyncio
"""

import sys
import json
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .core import (
    BatchValidationResult,
    ConfigurationError,
    ImageReadError,
    ValidationConfig,
    configure_logging,
    get_logger,
    load_settings,
    with_error_handling,
)
from .core.error_handling import BatchErrorCollector
from .core.factories import ValidationPipelineFactory

THRESHOLD_OPTIONS = {
    "min_width": int,
    "min_height": int,
    "max_width": int,
    "max_height": int,
    "min_file_size": int,
    "max_file_size": int,
    "min_aspect_ratio": float,
    "max_aspect_ratio": float,
}


def add_validation_arguments(parser: argparse.ArgumentParser) -> None:
    """Register the arguments shared by this script and the unified CLI."""
    parser.add_argument("paths", nargs="+", help="Image files to validate")

    for name, value_type in THRESHOLD_OPTIONS.items():
        parser.add_argument(
            f"--{name.replace('_', '-')}",
            dest=name,
            type=value_type,
            default=None,
            help=f"Override the {name.replace('_', ' ')} threshold",
        )

    parser.add_argument(
        "--processor",
        type=str,
        default=None,
        choices=["serial", "multithread", "multiprocess", "asyncio"],
        help="Processing strategy to use (default: serial)",
    )
    parser.add_argument(
        "--workers", type=int, default=None, help="Worker cap for concurrent strategies"
    )
    parser.add_argument(
        "--no-decoder",
        action="store_true",
        help="Skip header decoding and check file signatures only",
    )
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parses command-line arguments for the listing photo validator.

    Returns:
        An `argparse.Namespace` object containing the parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Validate listing photos with multiple concurrency strategies"
    )
    add_validation_arguments(parser)
    return parser.parse_args(argv)


@with_error_handling
def read_image_file(path: str) -> bytes:
    """Read one image file from disk."""
    return Path(path).read_bytes()


def build_config(args: argparse.Namespace, base: ValidationConfig) -> ValidationConfig:
    """Apply command-line threshold overrides on top of `base`."""
    overrides: Dict[str, Any] = {
        name: getattr(args, name)
        for name in THRESHOLD_OPTIONS
        if getattr(args, name, None) is not None
    }
    try:
        return ValidationConfig(**{**base.model_dump(), **overrides})
    except ValueError as exc:
        raise ConfigurationError(f"Invalid thresholds: {exc}") from exc


def format_report(paths: List[str], batch: BatchValidationResult) -> str:
    """Render a batch result as human-readable text."""
    lines = []

    for path, result in zip(paths, batch.results):
        metadata = result.metadata
        details = [metadata.format, f"{metadata.size} bytes"]
        if metadata.width and metadata.height:
            details.append(f"{metadata.width}x{metadata.height}")

        status = "OK" if result.valid else "FAIL"
        lines.append(f"[{status}] {path} ({', '.join(details)})")
        lines.extend(f"    error: {message}" for message in result.errors)
        lines.extend(f"    warning: {message}" for message in result.warnings)

    invalid_count = sum(1 for result in batch.results if not result.valid)
    lines.append(
        f"{len(batch.results)} image(s) checked, {invalid_count} invalid, "
        f"{len(batch.warnings)} with warnings"
    )
    return "\n".join(lines)


def run(args: argparse.Namespace) -> int:
    """
    Validate the files named in `args` and print the verdicts.

    Returns:
        Process exit code: 0 when every image is valid, 1 otherwise.
    """
    configure_logging(level="DEBUG" if args.debug else None)
    logger = get_logger("cli")

    try:
        settings = load_settings()
        config = build_config(args, settings.validation)

        batch_validator = ValidationPipelineFactory.create_batch_validator(
            processor=args.processor or settings.processor,
            max_workers=args.workers or settings.max_workers,
            logger=logger,
            use_decoder=not args.no_decoder,
        )

        buffers: List[bytes] = []
        reading = BatchErrorCollector(
            "Reading images", logger=logger, expected=(ImageReadError,)
        )
        with reading:
            for path in args.paths:
                data = reading.capture(path, read_image_file, path)
                if data is not None:
                    buffers.append(data)

        if reading.has_failures:
            for failure in reading.failures:
                print(f"Cannot read {failure.item}: {failure.error}", file=sys.stderr)
            return 1

        batch = batch_validator.validate_all(buffers, config)

        if args.json:
            print(json.dumps(batch.model_dump(by_alias=True), indent=2))
        else:
            print(format_report(list(args.paths), batch))

        return 0 if batch.valid else 1

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("Validation interrupted by user.")
        return 1


def main(argv: Optional[Sequence[str]] = None) -> None:
    """Entry point for running this module as a script."""
    sys.exit(run(parse_args(argv)))


if __name__ == "__main__":
    main()
