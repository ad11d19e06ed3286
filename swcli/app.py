"""Declarative application definitions: config type, parser and commands from field lists."""

from __future__ import annotations

import argparse
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, make_dataclass
from pathlib import Path
from typing import Any, Optional

from swcli.builder import add_standard_args, parse_base_config
from swcli.command import Command
from swcli.config import BaseConfig, CliConfig
from swcli.dispatcher import Dispatcher
from swcli.version import Version

_VALUE_TYPES = (bool, str, int, float, Path)
_RESERVED_NAMES = frozenset({"base", "version", "help_short", "help_long", "verbose", "dry_run"})
_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


def _parse_int(raw: str, unsigned: bool) -> int | None:
    pattern = _UNSIGNED_INT if unsigned else _SIGNED_INT
    if pattern.fullmatch(raw) is None:
        return None
    return int(raw)


def _parse_float(raw: str) -> float | None:
    if raw != raw.strip() or "_" in raw:
        return None
    try:
        return float(raw)
    except ValueError:
        return None


@dataclass(frozen=True)
class FieldDef:
    """One application-specific option and the config attribute it fills.

    ``type`` is one of ``bool``, ``str``, ``int``, ``float`` or ``Path``.
    Boolean fields are flags; ``multiple`` fields may be given repeatedly and
    collect a list. Numbers that fail to parse leave the attribute as None.
    """

    name: str
    type: type = str
    short: Optional[str] = None
    long: Optional[str] = None
    help: str = ""
    multiple: bool = False
    unsigned: bool = False

    def __post_init__(self) -> None:
        if not self.name.isidentifier():
            raise ValueError(f"invalid field name: {self.name!r}")
        if self.type not in _VALUE_TYPES:
            raise ValueError(f"unsupported type for field {self.name!r}: {self.type!r}")
        if self.multiple and self.type not in (str, Path):
            raise ValueError(f"field {self.name!r}: only str and Path fields may repeat")
        if self.short is not None and len(self.short) != 1:
            raise ValueError(f"field {self.name!r}: short flag must be one character")

    @property
    def long_flag(self) -> str:
        return self.long or self.name

    @property
    def annotation(self) -> Any:
        if self.type is bool:
            return bool
        if self.multiple:
            return Optional[list[self.type]]  # type: ignore[name-defined]
        return Optional[self.type]

    @property
    def default(self) -> Any:
        return False if self.type is bool else None

    def add_to(self, parser: argparse.ArgumentParser) -> None:
        flags = [f"--{self.long_flag}"]
        if self.short is not None:
            flags.insert(0, f"-{self.short}")
        if self.type is bool:
            parser.add_argument(*flags, dest=self.name, action="store_true", help=self.help)
        else:
            parser.add_argument(
                *flags,
                dest=self.name,
                action="append" if self.multiple else "store",
                metavar=self.name.upper(),
                help=self.help,
            )

    def convert(self, raw: Any) -> Any:
        """Turn the raw parsed value into the attribute value."""
        if self.type is bool:
            return bool(raw)
        if raw is None:
            return None
        if self.multiple:
            return [Path(v) for v in raw] if self.type is Path else list(raw)
        if self.type is Path:
            return Path(raw)
        if self.type is int:
            return _parse_int(raw, self.unsigned)
        if self.type is float:
            return _parse_float(raw)
        return raw


@dataclass
class CliApp:
    """An application: its name, description, config type name and options."""

    name: str
    about: str
    config_name: str
    fields: Sequence[FieldDef] = ()
    config_type: type = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.fields = tuple(self.fields)
        seen: set[str] = set()
        for fdef in self.fields:
            if fdef.name in _RESERVED_NAMES:
                raise ValueError(f"field name is reserved: {fdef.name!r}")
            if fdef.name in seen:
                raise ValueError(f"duplicate field: {fdef.name!r}")
            seen.add(fdef.name)
        specs: list[Any] = [("base", BaseConfig, field(default_factory=BaseConfig))]
        specs.extend(
            (fdef.name, fdef.annotation, field(default=fdef.default)) for fdef in self.fields
        )
        self.config_type = make_dataclass(self.config_name, specs, bases=(CliConfig,))

    def build_cli(self) -> argparse.ArgumentParser:
        """Create a parser with the standard flags followed by the app's options."""
        parser = argparse.ArgumentParser(
            prog=self.name, description=self.about, add_help=False
        )
        add_standard_args(parser)
        for fdef in self.fields:
            fdef.add_to(parser)
        return parser

    def parse_config(self, argv: Sequence[str] | None = None) -> Any:
        """Parse ``argv`` (default: ``sys.argv[1:]``) into an instance of the config type."""
        namespace = self.build_cli().parse_args(argv)
        values = {fdef.name: fdef.convert(getattr(namespace, fdef.name)) for fdef in self.fields}
        return self.config_type(base=parse_base_config(namespace), **values)


def cli_command(
    name: str,
    config_type: type,
    can_handle: Callable[[Any], bool],
    execute: Callable[[Any], None],
) -> type[Command]:
    """Create a Command class that acts only on configs of ``config_type``."""

    class _Generated(Command):
        def can_handle(self, config: CliConfig) -> bool:
            return isinstance(config, config_type) and bool(can_handle(config))

        def execute(self, config: CliConfig) -> None:
            if not isinstance(config, config_type):
                raise TypeError("Config type mismatch")
            execute(config)

    _Generated.__name__ = name
    _Generated.__qualname__ = name
    _Generated.__doc__ = f"Command acting on {config_type.__name__} configurations."
    return _Generated


def dispatch(
    short_help: str,
    long_help: str,
    version: Version | None = None,
    *args: Command | type[Command],
) -> Dispatcher:
    """Create a dispatcher with help and version built in and ``args`` registered.

    Command classes are instantiated with no arguments.
    """
    dispatcher = Dispatcher(short_help, long_help, version)
    for command in args:
        dispatcher.register(command() if isinstance(command, type) else command)
    return dispatcher