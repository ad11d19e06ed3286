"""Capture build metadata and help texts at build time and load them at run time."""

from __future__ import annotations

import json
import os
import subprocess
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Union

from swcli.version import BuildInfo, Version

PathLike = Union[str, "os.PathLike[str]"]

VERSION_INFO_FILE = "version_info.json"
HELP_INFO_FILE = "help_info.json"
COPYRIGHT_FILE = "COPYRIGHT"
UNKNOWN = "unknown"

_HELP_FILE = Path("src") / "help.txt"
_SHORT_HELP_FILE = Path("src") / "short-help.txt"
_LONG_HELP_FILE = Path("src") / "long-help.txt"


class HelpFilesNotFoundError(FileNotFoundError):
    """Raised when no usable combination of help text files exists."""


class InvalidInfoFileError(ValueError):
    """Raised when a generated information file is malformed."""


@dataclass(frozen=True)
class HelpInfo:
    """Short (``-h``) and long (``--help``) help texts of an application."""

    short_help: str
    long_help: str


def _command_output(args: list[str], cwd: Path | None = None) -> str:
    """Return the trimmed standard output of a program, or ``unknown`` if it cannot start."""
    try:
        result = subprocess.run(args, capture_output=True, check=False, cwd=cwd)
    except OSError:
        return UNKNOWN
    return result.stdout.decode("utf-8", errors="replace").strip()


def collect_build_info(project_dir: PathLike = ".") -> BuildInfo:
    """Gather the build host, current git commit and a fresh timestamp."""
    project = Path(project_dir)
    return BuildInfo(
        build_host=_command_output(["hostname"]),
        commit_sha=_command_output(["git", "rev-parse", "HEAD"], cwd=project),
        build_timestamp_ms=time.time_ns() // 1_000_000,
    )


def _write_json(out_dir: PathLike, name: str, data: dict[str, Any]) -> None:
    directory = Path(out_dir)
    directory.mkdir(parents=True, exist_ok=True)
    (directory / name).write_text(json.dumps(data, indent=2), encoding="utf-8")


def _read_json(out_dir: PathLike, name: str) -> dict[str, Any]:
    path = Path(out_dir) / name
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise InvalidInfoFileError(f"{path}: {exc}") from exc
    if not isinstance(data, dict):
        raise InvalidInfoFileError(f"{path}: expected a JSON object")
    return data


def define_build_info(
    out_dir: PathLike,
    version: str,
    license_name: str,
    repository: str,
    project_dir: PathLike = ".",
) -> Version:
    """Write version and build metadata to ``out_dir`` and return it.

    The copyright notice is read from the ``COPYRIGHT`` file in ``project_dir``.
    """
    project = Path(project_dir)
    copyright_text = (project / COPYRIGHT_FILE).read_text(encoding="utf-8").strip()
    info = Version(
        version=version,
        copyright=copyright_text,
        license_name=license_name,
        license_url=f"{repository}/blob/main/LICENSE",
        build_info=collect_build_info(project),
    )
    _write_json(out_dir, VERSION_INFO_FILE, asdict(info))
    return info


def load_version_info(out_dir: PathLike) -> Version:
    """Read the version information written by :func:`define_build_info`."""
    data = _read_json(out_dir, VERSION_INFO_FILE)
    try:
        build = data["build_info"]
        return Version(
            version=str(data["version"]),
            copyright=str(data["copyright"]),
            license_name=str(data["license_name"]),
            license_url=str(data["license_url"]),
            build_info=BuildInfo(
                build_host=str(build["build_host"]),
                commit_sha=str(build["commit_sha"]),
                build_timestamp_ms=int(build["build_timestamp_ms"]),
            ),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidInfoFileError(f"malformed {VERSION_INFO_FILE}: {exc}") from exc


def _read_trimmed(path: Path) -> str:
    return path.read_text(encoding="utf-8").strip()


def read_help_texts(project_dir: PathLike = ".") -> HelpInfo:
    """Read help texts from ``src/help.txt`` or ``src/short-help.txt`` and ``src/long-help.txt``."""
    project = Path(project_dir)
    single = project / _HELP_FILE
    if single.exists():
        text = _read_trimmed(single)
        return HelpInfo(short_help=text, long_help=text)
    short_path = project / _SHORT_HELP_FILE
    long_path = project / _LONG_HELP_FILE
    if short_path.exists() and long_path.exists():
        return HelpInfo(
            short_help=_read_trimmed(short_path),
            long_help=_read_trimmed(long_path),
        )
    raise HelpFilesNotFoundError(
        "Help files not found. Provide either src/help.txt OR both "
        "src/short-help.txt and src/long-help.txt"
    )


def define_help_info(out_dir: PathLike, project_dir: PathLike = ".") -> HelpInfo:
    """Write the project's help texts to ``out_dir`` and return them."""
    info = read_help_texts(project_dir)
    _write_json(out_dir, HELP_INFO_FILE, asdict(info))
    return info


def load_help_info(out_dir: PathLike) -> HelpInfo:
    """Read the help texts written by :func:`define_help_info`."""
    data = _read_json(out_dir, HELP_INFO_FILE)
    try:
        return HelpInfo(
            short_help=str(data["short_help"]),
            long_help=str(data["long_help"]),
        )
    except KeyError as exc:
        raise InvalidInfoFileError(f"malformed {HELP_INFO_FILE}: {exc}") from exc