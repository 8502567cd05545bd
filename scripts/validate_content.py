#!/usr/bin/env python3
"""Content validation tool for the multi-locale article repository."""

import argparse
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO

import yaml

from articles import validate_articles
from content_config import ARTICLE_EXTENSION, DEFAULT_LOCALES, RepositoryLayout
from cross_reference import cross_reference
from registry import load_registry
from report import Report
from schemas import metadata_schema, registry_schema
from structure import check_structure


def run_validation(layout: RepositoryLayout, out: Optional[TextIO] = None) -> Report:
    """Run all checks in sequence.

    Args:
        layout: Repository layout to validate
        out: Stream for the transcript (stdout when not given)

    Returns:
        Report holding the error and warning counts of the run

    Execution order:
        1. Directory structure
        2. Registry (config.json)
        3. Article metadata blocks
        4. Cross reference, only when the registry loaded
    """
    report = Report(out=out)
    report.banner(f"Validating content in {layout.root}")

    report.step("Checking directory structure...")
    check_structure(layout, report)

    report.step(f"Validating {layout.registry_filename}...")
    entries = load_registry(layout, report)

    report.step("Validating article metadata...")
    inventory = validate_articles(layout, report)

    report.step("Cross-referencing registry and article files...")
    if entries is None:
        report.info(f"Skipped: {layout.registry_filename} could not be loaded")
    else:
        cross_reference(layout, entries, inventory, report)

    return report


def validate_all(layout: RepositoryLayout) -> int:
    return run_validation(layout).finish()


def validate_registry(layout: RepositoryLayout) -> int:
    """Validate the registry file only."""
    report = Report()
    report.step(f"Validating {layout.registry_filename}...")
    load_registry(layout, report)
    return report.finish()


def validate_structure(layout: RepositoryLayout) -> int:
    """Validate the articles directory layout only."""
    report = Report()
    report.step("Checking directory structure...")
    check_structure(layout, report)
    return report.finish()


def validate_metadata(layout: RepositoryLayout) -> int:
    """Validate the directory layout and every article metadata block."""
    report = Report()
    report.step("Checking directory structure...")
    check_structure(layout, report)
    report.step("Validating article metadata...")
    validate_articles(layout, report)
    return report.finish()


def show_schema(layout: RepositoryLayout) -> int:
    """Print the effective schemas for the configured locales."""
    print(f"=== Effective Schemas (locales: {', '.join(layout.locales)}) ===")
    schemas = {
        'registry': registry_schema(layout.locales),
        'metadata': metadata_schema(layout.locales),
    }
    print(yaml.dump(schemas, default_flow_style=False, sort_keys=False, allow_unicode=True))
    print("=" * 60)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate the article registry and article source files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s
  %(prog)s validate-registry
  %(prog)s --root ../site --locale en --locale ru validate-all
        """
    )

    parser.add_argument(
        '--root',
        type=Path,
        default=Path('.'),
        help='Repository root containing config.json and articles/ (default: current directory)'
    )
    parser.add_argument(
        '--locale',
        dest='locales',
        action='append',
        metavar='CODE',
        help=f"Supported locale code; repeat for several (default: {', '.join(DEFAULT_LOCALES)})"
    )
    parser.add_argument(
        '--extension',
        default=ARTICLE_EXTENSION,
        help=f'Article source file extension (default: {ARTICLE_EXTENSION})'
    )

    subparsers = parser.add_subparsers(
        dest='command',
        help='Validation command to run (default: validate-all)'
    )

    subparsers.add_parser(
        'validate-all',
        help='Run all validation checks'
    )
    subparsers.add_parser(
        'validate-registry',
        help='Validate config.json against the registry schema'
    )
    subparsers.add_parser(
        'validate-structure',
        help='Validate the articles/ locale directories'
    )
    subparsers.add_parser(
        'validate-metadata',
        help='Validate metadata blocks of all article files'
    )
    subparsers.add_parser(
        'show-schema',
        help='Show the effective schemas and exit (debug mode)'
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the validation tool."""
    args = build_parser().parse_args(argv)

    try:
        layout = RepositoryLayout(
            root=args.root.resolve(),
            locales=tuple(args.locales) if args.locales else DEFAULT_LOCALES,
            extension=args.extension,
        )
    except ValueError as e:
        print(f"[ERROR] Invalid configuration: {e}", file=sys.stderr)
        return 2

    handlers: Dict[str, Callable[[RepositoryLayout], int]] = {
        'validate-all': validate_all,
        'validate-registry': validate_registry,
        'validate-structure': validate_structure,
        'validate-metadata': validate_metadata,
        'show-schema': show_schema,
    }

    return handlers[args.command or 'validate-all'](layout)


if __name__ == "__main__":
    sys.exit(main())
