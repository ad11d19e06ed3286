"""Configuration of the line-processing demo application."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from swcli.config import BaseConfig, CliConfig


@dataclass
class DemoConfig(CliConfig):
    """Standard flags plus the demo's input, output, pattern and mode options."""

    base: BaseConfig = field(default_factory=BaseConfig)
    input: list[Path] | None = None
    output: Path | None = None
    pattern: str | None = None
    count: bool = False
    reverse: bool = False