"""Line-processing commands of the demo application: count, grep, reverse and copy."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Union

from swcli.command import Command
from swcli.config import CliConfig
from swcli.demo.config import DemoConfig

_Chunk = Union[str, bytes]


def _demo_config(config: CliConfig) -> DemoConfig:
    if not isinstance(config, DemoConfig):
        raise TypeError("Config type mismatch")
    return config


def _lines(stream: Iterable[_Chunk]) -> Iterator[str]:
    """Yield lines without their ``\\n`` or ``\\r\\n`` terminator."""
    for chunk in stream:
        text = chunk.decode("utf-8") if isinstance(chunk, bytes) else chunk
        if text.endswith("\n"):
            text = text[:-1].removesuffix("\r")
        yield text


@contextmanager
def _file_lines(path: Path) -> Iterator[Iterator[str]]:
    with open(path, "rb") as handle:
        yield _lines(handle)


def _stdin_lines() -> Iterator[str]:
    return _lines(getattr(sys.stdin, "buffer", sys.stdin))


class CopyCommand(Command):
    """Default command: prints every input line unchanged."""

    def can_handle(self, config: CliConfig) -> bool:
        return True

    def execute(self, config: CliConfig) -> None:
        demo = _demo_config(config)
        if demo.input is None:
            for line in _stdin_lines():
                print(line)
            return
        for path in demo.input:
            with _file_lines(path) as lines:
                for line in lines:
                    print(line)


class CountCommand(Command):
    """Prints the number of lines of each input."""

    def can_handle(self, config: CliConfig) -> bool:
        return isinstance(config, DemoConfig) and config.count

    def execute(self, config: CliConfig) -> None:
        demo = _demo_config(config)
        if demo.input is None:
            self._count_stdin(demo)
        else:
            for path in demo.input:
                self._count_file(path, demo)

    @staticmethod
    def _count_file(path: Path, config: CliConfig) -> None:
        if config.is_dry_run():
            print(f"Would count lines in: {path}")
            return
        if config.verbosity() > 0:
            print(f"Processing: {path}", file=sys.stderr)
        with _file_lines(path) as lines:
            count = sum(1 for _ in lines)
        if config.verbosity() > 0:
            print(f"{path}: {count} lines")
        else:
            print(count)

    @staticmethod
    def _count_stdin(config: CliConfig) -> None:
        if config.verbosity() > 0:
            print("Reading from stdin...", file=sys.stderr)
        print(sum(1 for _ in _stdin_lines()))


class GrepCommand(Command):
    """Prints the input lines that contain the pattern."""

    def can_handle(self, config: CliConfig) -> bool:
        return isinstance(config, DemoConfig) and config.pattern is not None

    def execute(self, config: CliConfig) -> None:
        demo = _demo_config(config)
        pattern = demo.pattern
        if pattern is None:
            raise ValueError("no pattern given")
        if demo.input is None:
            for line in _stdin_lines():
                if pattern in line:
                    print(line)
            return
        for path in demo.input:
            with _file_lines(path) as lines:
                for line in lines:
                    if pattern not in line:
                        continue
                    if demo.verbosity() > 0:
                        print(f"{path}: {line}")
                    else:
                        print(line)


class ReverseCommand(Command):
    """Prints the lines of each input in reverse order."""

    def can_handle(self, config: CliConfig) -> bool:
        return isinstance(config, DemoConfig) and config.reverse

    def execute(self, config: CliConfig) -> None:
        demo = _demo_config(config)
        if demo.input is None:
            for line in reversed(list(_stdin_lines())):
                print(line)
            return
        for path in demo.input:
            with _file_lines(path) as lines:
                collected = list(lines)
            for line in reversed(collected):
                print(line)