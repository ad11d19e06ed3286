"""Chooses and runs the first command able to handle a configuration."""

from __future__ import annotations

from swcli.command import Command
from swcli.commands import HelpCommand, VersionCommand
from swcli.config import CliConfig
from swcli.version import Version


class DispatchError(Exception):
    """Raised when no registered command can handle a configuration."""


class Dispatcher:
    """Holds commands ordered by priority; version and help are built in."""

    def __init__(
        self, short_help: str, long_help: str, version: Version | None = None
    ) -> None:
        self._commands: list[Command] = []
        self._add(VersionCommand(version))
        self._add(HelpCommand(short_help, long_help))

    def _add(self, command: Command) -> None:
        self._commands.append(command)
        self._commands.sort(key=lambda c: c.priority())

    @property
    def commands(self) -> tuple[Command, ...]:
        """Registered commands in the order they are consulted."""
        return tuple(self._commands)

    def register(self, command: Command) -> Dispatcher:
        """Add ``command`` and return the dispatcher for chaining."""
        self._add(command)
        return self

    def dispatch(self, config: CliConfig) -> None:
        """Run the first command that can handle ``config``."""
        for command in self._commands:
            if command.can_handle(config):
                command.execute(config)
                return
        raise DispatchError("No command could handle this request")