import io
import sys
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from swcli.commands import VersionCommand
from swcli.config import BaseConfig, CliConfig, HelpType
from swcli.demo.actions import CopyCommand, CountCommand, GrepCommand, ReverseCommand
from swcli.demo.config import DemoConfig


@dataclass
class OtherConfig(CliConfig):
    base: BaseConfig = field(default_factory=BaseConfig)
    count: bool = True
    reverse: bool = True
    pattern: str = "x"


def make_config(**kwargs):
    base = BaseConfig(
        verbose=kwargs.pop("verbose", False),
        dry_run=kwargs.pop("dry_run", False),
        help=HelpType.NONE,
        version=kwargs.pop("version", False),
    )
    return DemoConfig(base=base, **kwargs)


def write(tmp_path: Path, name: str, text: str) -> Path:
    path = tmp_path / name
    path.write_bytes(text.encode("utf-8"))
    return path


def test_version_command_priority():
    config = make_config(version=True)
    cmd = VersionCommand()
    assert cmd.can_handle(config)
    assert cmd.priority() == 0


def test_count_command_handles_count_flag():
    assert CountCommand().can_handle(make_config(count=True))


def test_copy_command_is_default():
    assert CopyCommand().can_handle(make_config())


def test_specific_commands_decline_plain_config():
    config = make_config()
    assert not CountCommand().can_handle(config)
    assert not GrepCommand().can_handle(config)
    assert not ReverseCommand().can_handle(config)


def test_commands_decline_foreign_config():
    other = OtherConfig()
    assert not CountCommand().can_handle(other)
    assert not GrepCommand().can_handle(other)
    assert not ReverseCommand().can_handle(other)
    assert CopyCommand().can_handle(other)


@pytest.mark.parametrize("command", [CopyCommand, CountCommand, GrepCommand, ReverseCommand])
def test_execute_rejects_foreign_config(command):
    with pytest.raises(TypeError, match="Config type mismatch"):
        command().execute(OtherConfig())


def test_grep_and_reverse_handle_their_options():
    assert GrepCommand().can_handle(make_config(pattern="abc"))
    assert ReverseCommand().can_handle(make_config(reverse=True))


def test_count_file(tmp_path, capsys):
    path = write(tmp_path, "in.txt", "one\ntwo\nthree\n")
    CountCommand().execute(make_config(count=True, input=[path]))
    assert capsys.readouterr().out == "3\n"


def test_count_file_without_trailing_newline(tmp_path, capsys):
    path = write(tmp_path, "in.txt", "one\ntwo")
    CountCommand().execute(make_config(count=True, input=[path]))
    assert capsys.readouterr().out == "2\n"


def test_count_file_verbose(tmp_path, capsys):
    path = write(tmp_path, "in.txt", "a\nb\n")
    CountCommand().execute(make_config(count=True, verbose=True, input=[path]))
    captured = capsys.readouterr()
    assert captured.out == f"{path}: 2 lines\n"
    assert captured.err == f"Processing: {path}\n"


def test_count_dry_run_does_not_open_file(tmp_path, capsys):
    missing = tmp_path / "missing.txt"
    CountCommand().execute(make_config(count=True, dry_run=True, input=[missing]))
    assert capsys.readouterr().out == f"Would count lines in: {missing}\n"


def test_count_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("x\ny\n"))
    CountCommand().execute(make_config(count=True, verbose=True))
    captured = capsys.readouterr()
    assert captured.out == "2\n"
    assert captured.err == "Reading from stdin...\n"


def test_count_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        CountCommand().execute(make_config(count=True, input=[tmp_path / "nope"]))


def test_grep_file(tmp_path, capsys):
    path = write(tmp_path, "in.txt", "apple\nbanana\npineapple\n")
    GrepCommand().execute(make_config(pattern="apple", input=[path]))
    assert capsys.readouterr().out == "apple\npineapple\n"


def test_grep_file_verbose_prefixes_path(tmp_path, capsys):
    path = write(tmp_path, "in.txt", "apple\nbanana\n")
    GrepCommand().execute(make_config(pattern="nan", verbose=True, input=[path]))
    assert capsys.readouterr().out == f"{path}: banana\n"


def test_grep_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("red\ngreen\nblue\n"))
    GrepCommand().execute(make_config(pattern="e", verbose=True))
    assert capsys.readouterr().out == "red\ngreen\nblue\n"


def test_reverse_file(tmp_path, capsys):
    path = write(tmp_path, "in.txt", "1\n2\n3\n")
    ReverseCommand().execute(make_config(reverse=True, input=[path]))
    assert capsys.readouterr().out == "3\n2\n1\n"


def test_reverse_each_file_separately(tmp_path, capsys):
    first = write(tmp_path, "a.txt", "a1\na2\n")
    second = write(tmp_path, "b.txt", "b1\nb2\n")
    ReverseCommand().execute(make_config(reverse=True, input=[first, second]))
    assert capsys.readouterr().out == "a2\na1\nb2\nb1\n"


def test_reverse_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("top\nbottom\n"))
    ReverseCommand().execute(make_config(reverse=True))
    assert capsys.readouterr().out == "bottom\ntop\n"


def test_copy_files_strip_crlf(tmp_path, capsys):
    first = write(tmp_path, "a.txt", "one\r\ntwo\r\n")
    second = write(tmp_path, "b.txt", "three")
    CopyCommand().execute(make_config(input=[first, second]))
    assert capsys.readouterr().out == "one\ntwo\nthree\n"


def test_copy_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("hello\nworld\n"))
    CopyCommand().execute(make_config())
    assert capsys.readouterr().out == "hello\nworld\n"


def test_copy_invalid_utf8_raises(tmp_path):
    path = tmp_path / "bad.bin"
    path.write_bytes(b"\xff\xfe\n")
    with pytest.raises(UnicodeDecodeError):
        CopyCommand().execute(make_config(input=[path]))