# mimetable:header:start
#
#   project      : MimeTable
#   file         : test_lookup.py
#   file_relpath : tests/cli/test_lookup.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""CLI tests: `lookup` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from mimetable.cli.commands.lookup import LookupKind, resolve_value
from tests.cli.conftest import assert_NO_MATCH, assert_SUCCESS, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

    from mimetable.registry.registry import MimeTypeRegistry


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("photo.JPG", "image/jpeg"),
        (".png", "image/png"),
        ("gif", "image/gif"),
        ("https://example.com/data.json?x=1", "application/json"),
        ("file:///tmp/archive.tar.gz", "application/x-gzip"),
        ("Image/PNG", "image/png"),
        ("application/vnd.acme.widget", "application/vnd.acme.widget"),
    ],
)
def test_guessing_lookup(registry: MimeTypeRegistry, value: str, expected: str) -> None:
    mime = resolve_value(value, LookupKind.AUTO, registry)
    assert mime is not None
    assert mime.type_name == expected


def test_explicit_kind_disables_guessing(registry: MimeTypeRegistry) -> None:
    assert resolve_value("image/png", LookupKind.EXTENSION, registry) is None
    mime = resolve_value("png", LookupKind.EXTENSION, registry)
    assert mime is not None and mime.type_name == "image/png"


def test_lookup_single_value_prints_type(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "lookup", "report.pdf"])
    assert_SUCCESS(result)
    assert result.output.strip() == "application/pdf"


def test_lookup_multiple_values_are_labelled(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "lookup", "a.png", "b.json"])
    assert_SUCCESS(result)
    lines = result.output.strip().splitlines()
    assert lines[0].split() == ["a.png", "image/png"]
    assert lines[1].split() == ["b.json", "application/json"]


def test_lookup_verbose_shows_extensions(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "-v", "lookup", "--by", "type", "image/jpeg"])
    assert_SUCCESS(result)
    assert "(jpg, jpeg, jpe)" in result.output


def test_lookup_unknown_value_exits_with_no_match(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--no-color", "lookup", "a.png", "noext"])
    assert_NO_MATCH(result)
    assert "image/png" in result.output
    assert "noext: no MIME type found" in result.output


def test_lookup_json(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["lookup", "--format", "json", "x.tiff", "nothing.zzz"])
    assert_NO_MATCH(result)
    payload = json.loads(result.stdout)
    assert payload[0]["query"] == "x.tiff"
    assert payload[0]["result"]["type"] == "image/tiff"
    assert payload[0]["result"]["extensions"] == ["tif", "tiff"]
    assert payload[0]["result"]["registered"] is True
    assert payload[1] == {"query": "nothing.zzz", "result": None}


def test_lookup_ndjson(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["lookup", "--format", "ndjson", "a.png", "b.gif"])
    assert_SUCCESS(result)
    rows = [json.loads(line) for line in result.stdout.splitlines()]
    assert [r["result"]["type"] for r in rows] == ["image/png", "image/gif"]


def test_lookup_markdown(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["lookup", "--format", "markdown", "a.png"])
    assert_SUCCESS(result)
    assert "| Query" in result.output
    assert "image/png" in result.output


def test_lookup_rejects_unknown_kind(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["lookup", "--by", "magic", "a.png"])
    assert result.exit_code == 2
    assert "Invalid value" in result.output


def test_lookup_requires_a_value(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["lookup"])
    assert result.exit_code == 2
