"""The interface every dispatchable command implements."""

from __future__ import annotations

from abc import ABC, abstractmethod

from swcli.config import CliConfig


class Command(ABC):
    """A unit of work chosen by the dispatcher from the parsed configuration.

    Commands with a lower priority are consulted first.
    """

    @abstractmethod
    def can_handle(self, config: CliConfig) -> bool:
        """Return True when this command should run for ``config``."""

    @abstractmethod
    def execute(self, config: CliConfig) -> None:
        """Run the command; failures are raised as exceptions."""

    def priority(self) -> int:
        return 100