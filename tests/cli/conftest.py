# mimetable:header:start
#
#   project      : MimeTable
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""CLI test helpers.

`run_cli_in()` invokes the Click CLI from a given directory so that
configuration discovery sees only the files the test created there.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Sequence

import pytest
from click.testing import CliRunner, Result

from mimetable.cli.exit_codes import ExitCode
from mimetable.cli.main import cli
from mimetable.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Re-attach suite logging after the CLI pointed it at the runner streams."""
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["lookup", "a.png"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli_in`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_NO_MATCH(result: Result) -> None:
    """Assert that the command reported an unresolved query (code 1).

    Args:
        result (Result): The Result object returned by `run_cli_in`.
    """
    assert result.exit_code == ExitCode.NO_MATCH, result.output
