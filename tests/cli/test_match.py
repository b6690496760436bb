# mimetable:header:start
#
#   project      : MimeTable
#   file         : test_match.py
#   file_relpath : tests/cli/test_match.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""CLI tests: `match` command exit statuses."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from mimetable.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_NO_MATCH, assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path


@pytest.mark.parametrize(
    ("a", "b"),
    [
        ("image/*", "image/png"),
        ("image/png", "image/*"),
        ("*", "application/json"),
        ("*/*", "text/plain"),
        ("IMAGE/PNG", "image/png"),
        ("application/vnd.acme.x", "application/vnd.acme.x"),
    ],
)
def test_compatible_types_exit_zero(tmp_path: Path, a: str, b: str) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "match", a, b])
    assert_SUCCESS(result)
    assert result.output.rstrip().endswith(": match")


@pytest.mark.parametrize(
    ("a", "b"),
    [("image/png", "image/gif"), ("image/*", "text/plain"), ("text/plain", "text/html")],
)
def test_incompatible_types_exit_one(tmp_path: Path, a: str, b: str) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "match", a, b])
    assert_NO_MATCH(result)
    assert "no match" in result.output


def test_quiet_match_prints_nothing(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["-q", "match", "image/png", "image/gif"])
    assert_NO_MATCH(result)
    assert result.output == ""


def test_invalid_type_name(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "match", "not a mime type", "image/png"])
    assert result.exit_code == ExitCode.INVALID_TYPE_NAME
    assert "is not a valid MIME type" in result.output


def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["-v", "-q", "match", "image/png", "image/png"])
    assert result.exit_code == ExitCode.USAGE_ERROR
    assert "mutually exclusive" in result.output
