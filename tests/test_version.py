import pytest

from swcli.version import BuildInfo, Version, check_version_flag

NOTICE = "Notice text for Example Corp"
LICENSE_NAME = "Sample"
LICENSE_URL = "https://example.com/repo/blob/main/LICENSE"


def _build_info(sha="abc123def456", timestamp=1700000000000):
    return BuildInfo("builder.local", sha, timestamp)


def test_build_info_display():
    output = str(_build_info())
    assert output == "Build: abc123d @ builder.local (2023-11-14T22:13:20+00:00)"


def test_version_display():
    version = Version("0.1.0", NOTICE, LICENSE_NAME, LICENSE_URL, _build_info())
    output = str(version)
    assert "Version: 0.1.0" in output
    assert NOTICE in output
    assert f"{LICENSE_NAME} License: {LICENSE_URL}" in output
    assert "Build: abc123d @ builder.local" in output


def test_version_display_has_four_lines_in_order():
    version = Version("0.1.0", "Notice", LICENSE_NAME, LICENSE_URL, _build_info())
    lines = str(version).split("\n")
    assert lines[0] == "Version: 0.1.0"
    assert lines[1] == "Notice"
    assert lines[2] == f"{LICENSE_NAME} License: {LICENSE_URL}"
    assert lines[3] == str(version.build_info)


def test_short_sha_kept_whole():
    assert str(_build_info(sha="abc")).startswith("Build: abc @ builder.local (")


def test_fractional_milliseconds_shown():
    output = str(_build_info(timestamp=1700000000123))
    assert output.endswith("(2023-11-14T22:13:20.123+00:00)")


def test_out_of_range_timestamp_falls_back_to_epoch():
    output = str(_build_info(timestamp=10**20))
    assert output.endswith("(1970-01-01T00:00:00+00:00)")


@pytest.mark.parametrize(
    "argv",
    [["-V"], ["-V", "-v", "-n"], ["-v", "-V", "-n"], ["--version"]],
)
def test_check_version_flag_found(argv):
    assert check_version_flag(argv) is True


@pytest.mark.parametrize("argv", [[], ["-v"], ["-n", "--verbose"], ["--versions"]])
def test_check_version_flag_absent(argv):
    assert check_version_flag(argv) is False