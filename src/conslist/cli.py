"""Command-line interface for conslist.

Provides the `conslist` command with subcommands for:
- Reporting on a list built from command-line values
- Reporting on a list described by a YAML configuration
"""

from __future__ import annotations

import argparse
import sys

import yaml

from conslist.core import list_of
from conslist.report import (
    ReportConfig,
    build_report,
    format_report,
    load_report_config,
    parse_value,
)


def _print_report(config: ReportConfig, trace: bool) -> int:
    if trace:
        config.trace = True
    lst = list_of(*config.values)
    lines = build_report(lst, config, trace=sys.stderr)
    print(format_report(lines))
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Report on a list built from the given values."""
    try:
        values = [parse_value(text) for text in args.values]
        targets = [parse_value(text) for text in args.contains or []]
    except (ValueError, yaml.YAMLError) as e:
        print(f"Error parsing values: {e}")
        return 1

    config = ReportConfig(
        values=values,
        get=args.get or [],
        skip=args.skip or [],
        contains=targets,
    )
    return _print_report(config, args.trace)


def cmd_run(args: argparse.Namespace) -> int:
    """Report on a list described by a configuration file."""
    try:
        config = load_report_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading report configuration: {e}")
        return 1

    return _print_report(config, args.trace)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="conslist",
        description="Build persistent lists and query them",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Write a line to stderr for every element the iterator visits",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # show command
    show_parser = subparsers.add_parser(
        "show", help="Report on a list built from values"
    )
    show_parser.add_argument("values", nargs="*", help="List elements, front first")
    show_parser.add_argument(
        "--get",
        type=int,
        action="append",
        metavar="INDEX",
        help="Look up the element at INDEX (repeatable)",
    )
    show_parser.add_argument(
        "--skip",
        type=int,
        action="append",
        metavar="N",
        help="Show the sublist after skipping N elements (repeatable)",
    )
    show_parser.add_argument(
        "--contains",
        action="append",
        metavar="VALUE",
        help="Check whether VALUE is in the list (repeatable)",
    )
    show_parser.set_defaults(func=cmd_show)

    # run command
    run_parser = subparsers.add_parser(
        "run", help="Report on a list from a YAML configuration"
    )
    run_parser.add_argument("config", help="Path to report configuration (YAML)")
    run_parser.set_defaults(func=cmd_run)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
