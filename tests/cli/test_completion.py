# mimetable:header:start
#
#   project      : MimeTable
#   file         : test_completion.py
#   file_relpath : tests/cli/test_completion.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Shell completion and logging-flag tests for the Click CLI.

Completion is driven programmatically through `EnumChoiceParam.shell_complete`,
so no interactive shell setup is needed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from mimetable.cli.cli_types import EnumChoiceParam
from mimetable.cli.commands.lookup import LookupKind
from mimetable.cli.main import cli
from mimetable.cli.options import OutputFormat
from mimetable.constants import LOG_LEVEL_ENV_VAR
from tests.cli.conftest import assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


def _complete(param_type: EnumChoiceParam[Any], incomplete: str) -> list[str]:
    opt = click.Option(("--x",), type=param_type)
    ctx = click.Context(cli)
    return [item.value for item in param_type.shell_complete(ctx, opt, incomplete)]


def test_format_completion_lists_all_values() -> None:
    assert set(_complete(EnumChoiceParam(OutputFormat), "")) == {f.value for f in OutputFormat}


def test_completion_filters_by_prefix() -> None:
    assert _complete(EnumChoiceParam(OutputFormat), "n") == ["ndjson"]
    assert _complete(EnumChoiceParam(LookupKind), "EX") == ["extension"]
    assert _complete(EnumChoiceParam(LookupKind), "zzz") == []


def test_enum_choice_is_case_insensitive() -> None:
    param = EnumChoiceParam(OutputFormat)
    assert param.convert("JSON", None, None) is OutputFormat.JSON
    assert param.convert(OutputFormat.TEXT, None, None) is OutputFormat.TEXT


def test_verbose_and_quiet_flags_parse(tmp_path: Path) -> None:
    for args in (["-v", "version"], ["-vvv", "version"], ["-q", "version"], ["-qq", "version"]):
        assert_SUCCESS(run_cli_in(tmp_path, args))


def test_debug_logging_keeps_stdout_clean(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "DEBUG")
    result = run_cli_in(tmp_path, ["lookup", "--format", "json", "a.png"])
    assert_SUCCESS(result)
    assert result.stdout.lstrip().startswith("[")
