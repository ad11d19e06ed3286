from dataclasses import dataclass, field

import pytest

from swcli.command import Command
from swcli.config import BaseConfig, CliConfig


@dataclass
class SampleConfig(CliConfig):
    base: BaseConfig = field(default_factory=BaseConfig)
    flag: bool = False


class FlagCommand(Command):
    def __init__(self):
        self.seen = []

    def can_handle(self, config):
        return config.flag

    def execute(self, config):
        self.seen.append(config)


def test_default_priority():
    assert Command.priority(FlagCommand()) == 100


def test_abstract_command_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Command()


def test_subclass_behaviour():
    command = FlagCommand()
    config = SampleConfig(base=BaseConfig(), flag=True)
    assert command.can_handle(config) is True
    assert command.can_handle(SampleConfig(base=BaseConfig())) is False
    command.execute(config)
    assert command.seen == [config]
    assert config.verbosity() == 0


def test_partial_subclass_is_still_abstract():
    class OnlyCheck(Command):
        def can_handle(self, config):
            return True

    with pytest.raises(TypeError):
        OnlyCheck()
    with pytest.raises(TypeError):
        Command()