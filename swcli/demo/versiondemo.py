"""Smallest demo: prints version information for ``-V`` / ``--version``."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from pathlib import Path

from swcli.buildinfo import InvalidInfoFileError, load_version_info
from swcli.commands import MissingVersionError
from swcli.demo.cli import INFO_DIR_ENV
from swcli.version import Version

_VERSION_FLAGS = ("-V", "--version")


def _load_version() -> Version:
    info_dir = os.environ.get(INFO_DIR_ENV)
    if not info_dir:
        raise MissingVersionError("no version information available")
    return load_version_info(Path(info_dir))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demo and return the process exit status.

    Only the first argument is checked for a version flag.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if args and args[0] in _VERSION_FLAGS:
        try:
            version = _load_version()
        except (MissingVersionError, InvalidInfoFileError, OSError) as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(version)
        return 0

    print("Demo CLI Application")
    print("Run with -V or --version to see version information")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())