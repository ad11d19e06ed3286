"""Built-in help and version commands."""

from __future__ import annotations

from dataclasses import dataclass

from swcli.command import Command
from swcli.config import CliConfig
from swcli.version import Version


class MissingVersionError(RuntimeError):
    """Raised when version output is requested but no version is known."""


@dataclass
class HelpCommand(Command):
    """Prints the short help for ``-h`` and the long help for ``--help``."""

    short_help: str
    long_help: str

    def can_handle(self, config: CliConfig) -> bool:
        return config.wants_help()

    def execute(self, config: CliConfig) -> None:
        print(self.long_help if config.wants_long_help() else self.short_help)

    def priority(self) -> int:
        return 1


@dataclass
class VersionCommand(Command):
    """Prints version and build information."""

    version: Version | None = None

    def can_handle(self, config: CliConfig) -> bool:
        return config.wants_version()

    def execute(self, config: CliConfig) -> None:
        if self.version is None:
            raise MissingVersionError("no version information available")
        print(self.version)

    def priority(self) -> int:
        return 0