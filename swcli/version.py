"""Version and build information and their display format."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_SHORT_SHA_LEN = 7


def _rfc3339_from_millis(timestamp_ms: int) -> str:
    try:
        moment = _EPOCH + timedelta(milliseconds=timestamp_ms)
    except OverflowError:
        moment = _EPOCH
    text = (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )
    if moment.microsecond:
        text += f".{moment.microsecond // 1000:03d}"
    return text + "+00:00"


@dataclass
class BuildInfo:
    """Where, from which commit and when a program was built."""

    build_host: str
    commit_sha: str
    build_timestamp_ms: int

    def __str__(self) -> str:
        short_sha = self.commit_sha[:_SHORT_SHA_LEN]
        stamp = _rfc3339_from_millis(self.build_timestamp_ms)
        return f"Build: {short_sha} @ {self.build_host} ({stamp})"


@dataclass
class Version:
    """Version, copyright, licence and build details of an application."""

    version: str
    copyright: str
    license_name: str
    license_url: str
    build_info: BuildInfo

    def __str__(self) -> str:
        return "\n".join(
            (
                f"Version: {self.version}",
                self.copyright,
                f"{self.license_name} License: {self.license_url}",
                str(self.build_info),
            )
        )


def check_version_flag(argv: Sequence[str] | None = None) -> bool:
    """Return True if ``-V`` or ``--version`` appears anywhere in the arguments.

    ``argv`` excludes the program name; it defaults to ``sys.argv[1:]``.
    """
    args = sys.argv[1:] if argv is None else argv
    return any(arg in ("-V", "--version") for arg in args)