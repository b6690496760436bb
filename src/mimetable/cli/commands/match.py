# mimetable:header:start
#
#   project      : MimeTable
#   file         : match.py
#   file_relpath : src/mimetable/cli/commands/match.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""MimeTable `match` command: test two types for compatibility."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mimetable.cli.cmd_common import get_cli_registry, get_console, get_effective_verbosity
from mimetable.cli.errors import MimeTableInvalidTypeError
from mimetable.cli.exit_codes import ExitCode
from mimetable.model.errors import InvalidTypeNameError
from mimetable.model.mimetype import MimeType
from mimetable.resolve import from_type_name

if TYPE_CHECKING:
    from mimetable.registry.registry import MimeTypeRegistry


def parse_cli_type(value: str, registry: MimeTypeRegistry) -> MimeType:
    """Return the registered type for ``value``, or parse it as a custom one.

    Raises:
        MimeTableInvalidTypeError: If ``value`` is not a valid type name.
    """
    mime = from_type_name(value, registry=registry)
    if mime is not None:
        return mime
    try:
        return MimeType.parse(value.strip().lower())
    except InvalidTypeNameError as exc:
        raise MimeTableInvalidTypeError(str(exc)) from exc


@click.command(
    name="match",
    help="Check whether two MIME types are compatible.",
    epilog="""
'*' (or '*/*') matches everything and 'image/*' matches any image type.
Exits with status 0 when the types match and 1 when they do not.
""",
)
@click.argument("first", metavar="A")
@click.argument("second", metavar="B")
def match_command(*, first: str, second: str) -> None:
    """Compare two MIME types with `MimeType.matches`.

    Args:
        first (str): First type name.
        second (str): Second type name.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    registry = get_cli_registry(ctx)

    a = parse_cli_type(first, registry)
    b = parse_cli_type(second, registry)
    matched = a.matches(b)

    if get_effective_verbosity(ctx) >= 0:
        verdict = (
            console.styled("match", fg="green") if matched else console.styled("no match", fg="red")
        )
        console.print(f"{a.type_name} ~ {b.type_name}: {verdict}")

    ctx.exit(ExitCode.SUCCESS if matched else ExitCode.NO_MATCH)
