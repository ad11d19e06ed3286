"""Command-line front end of the line-processing demo application."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from swcli.app import dispatch
from swcli.buildinfo import (
    HELP_INFO_FILE,
    VERSION_INFO_FILE,
    HelpInfo,
    load_help_info,
    load_version_info,
)
from swcli.builder import add_standard_args, parse_base_config
from swcli.demo.actions import CopyCommand, CountCommand, GrepCommand, ReverseCommand
from swcli.demo.config import DemoConfig
from swcli.version import Version

PROG = "working-cli-demo"
ABOUT = "Builder-Config-Dispatcher pattern demo"
INFO_DIR_ENV = "SWCLI_INFO_DIR"


def _add_custom_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i", "--input", dest="input", action="append", metavar="FILE",
        help="Input file(s)",
    )
    parser.add_argument(
        "-o", "--output", dest="output", metavar="FILE", help="Output file",
    )
    parser.add_argument(
        "-p", "--pattern", dest="pattern", metavar="PATTERN",
        help="Pattern to search for",
    )
    parser.add_argument(
        "--count", dest="count", action="store_true", help="Count lines in input",
    )
    parser.add_argument(
        "--reverse", dest="reverse", action="store_true", help="Reverse line order",
    )


def build_cli() -> argparse.ArgumentParser:
    """Create the parser with the standard flags and the demo's options."""
    parser = argparse.ArgumentParser(prog=PROG, description=ABOUT, add_help=False)
    add_standard_args(parser)
    _add_custom_args(parser)
    return parser


def _config_from(namespace: argparse.Namespace) -> DemoConfig:
    return DemoConfig(
        base=parse_base_config(namespace),
        input=None if namespace.input is None else [Path(p) for p in namespace.input],
        output=None if namespace.output is None else Path(namespace.output),
        pattern=namespace.pattern,
        count=namespace.count,
        reverse=namespace.reverse,
    )


def parse_config(argv: Sequence[str] | None = None) -> DemoConfig:
    """Parse ``argv`` (default: ``sys.argv[1:]``) into a DemoConfig."""
    return _config_from(build_cli().parse_args(argv))


def _help_and_version(parser: argparse.ArgumentParser) -> tuple[HelpInfo, Version | None]:
    """Use generated information from ``$SWCLI_INFO_DIR`` where present."""
    help_info = HelpInfo(
        short_help=parser.format_usage().strip(),
        long_help=parser.format_help().strip(),
    )
    version = None
    info_dir = os.environ.get(INFO_DIR_ENV)
    if info_dir:
        directory = Path(info_dir)
        if (directory / HELP_INFO_FILE).exists():
            help_info = load_help_info(directory)
        if (directory / VERSION_INFO_FILE).exists():
            version = load_version_info(directory)
    return help_info, version


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo and return the process exit status."""
    parser = build_cli()
    config = _config_from(parser.parse_args(argv))
    try:
        help_info, version = _help_and_version(parser)
        dispatcher = dispatch(
            help_info.short_help,
            help_info.long_help,
            version,
            CountCommand,
            GrepCommand,
            ReverseCommand,
            CopyCommand,
        )
        dispatcher.dispatch(config)
    except Exception as exc:  # noqa: BLE001 - every failure ends the run the same way
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())