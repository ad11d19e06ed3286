"""Configuration flags shared by every command-line application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HelpType(Enum):
    """Kind of help the user asked for."""

    NONE = "none"
    SHORT = "short"  # -h
    LONG = "long"  # --help


@dataclass
class BaseConfig:
    """Standard flags common to all applications built on this package."""

    verbose: bool = False
    dry_run: bool = False
    help: HelpType = HelpType.NONE
    version: bool = False

    def verbosity(self) -> int:
        """Return 1 when verbose output was requested, else 0."""
        return int(self.verbose)

    def is_dry_run(self) -> bool:
        return self.dry_run

    def wants_help(self) -> bool:
        return self.help is not HelpType.NONE

    def wants_short_help(self) -> bool:
        return self.help is HelpType.SHORT

    def wants_long_help(self) -> bool:
        return self.help is HelpType.LONG


class CliConfig:
    """Mixin for application configs; subclasses provide a ``base`` attribute."""

    base: BaseConfig

    def wants_help(self) -> bool:
        return self.base.wants_help()

    def wants_short_help(self) -> bool:
        return self.base.wants_short_help()

    def wants_long_help(self) -> bool:
        return self.base.wants_long_help()

    def wants_version(self) -> bool:
        return self.base.version

    def verbosity(self) -> int:
        return self.base.verbosity()

    def is_dry_run(self) -> bool:
        return self.base.is_dry_run()