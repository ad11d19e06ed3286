"""Standard command-line flags and their conversion into a BaseConfig."""

from __future__ import annotations

import argparse

from swcli.config import BaseConfig, HelpType


def add_standard_args(parser: argparse.ArgumentParser) -> argparse.ArgumentParser:
    """Add the standard flags to ``parser`` and return it.

    The parser must be created with ``add_help=False``.
    """
    parser.add_argument(
        "-V", "--version", dest="version", action="store_true",
        help="Show version information",
    )
    parser.add_argument(
        "-h", dest="help_short", action="store_true",
        help="Show short help (quick reference)",
    )
    parser.add_argument(
        "--help", dest="help_long", action="store_true",
        help="Show detailed help with examples",
    )
    parser.add_argument(
        "-v", "--verbose", dest="verbose", action="store_true",
        help="Increase output verbosity",
    )
    parser.add_argument(
        "-n", "--dry-run", dest="dry_run", action="store_true",
        help="Show what would be done without doing it",
    )
    return parser


def parse_base_config(namespace: argparse.Namespace) -> BaseConfig:
    """Build a BaseConfig from a namespace parsed with the standard flags."""
    if namespace.help_long:
        help_type = HelpType.LONG
    elif namespace.help_short:
        help_type = HelpType.SHORT
    else:
        help_type = HelpType.NONE
    return BaseConfig(
        verbose=namespace.verbose,
        dry_run=namespace.dry_run,
        help=help_type,
        version=namespace.version,
    )