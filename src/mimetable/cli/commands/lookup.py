# mimetable:header:start
#
#   project      : MimeTable
#   file         : lookup.py
#   file_relpath : src/mimetable/cli/commands/lookup.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""MimeTable `lookup` command.

Resolves extensions, filenames, URIs or type names to MIME types. Exits with
`ExitCode.NO_MATCH` when at least one value does not resolve.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TYPE_CHECKING, Callable
from urllib.parse import urlsplit

import click

from mimetable.cli.cli_types import EnumChoiceParam
from mimetable.cli.cmd_common import get_cli_registry, get_console, get_effective_verbosity
from mimetable.cli.exit_codes import ExitCode
from mimetable.cli.options import OutputFormat, output_format_option
from mimetable.cli.rendering import mime_to_dict, render_markdown_table
from mimetable.model.grammar import is_valid_type_name
from mimetable.resolve import from_extension, from_filename, from_type_name, from_uri

if TYPE_CHECKING:
    from mimetable.model.mimetype import MimeType
    from mimetable.registry.registry import MimeTypeRegistry


class LookupKind(str, Enum):
    """How `lookup` interprets its arguments."""

    AUTO = "auto"
    EXTENSION = "extension"
    FILENAME = "filename"
    URI = "uri"
    TYPE = "type"


_RESOLVERS: dict[LookupKind, Callable[..., MimeType | None]] = {
    LookupKind.EXTENSION: from_extension,
    LookupKind.FILENAME: from_filename,
    LookupKind.URI: from_uri,
    LookupKind.TYPE: from_type_name,
}


def _guess_kinds(value: str) -> list[LookupKind]:
    """Return the resolvers worth trying for ``value``, most specific first."""
    kinds: list[LookupKind] = []
    if is_valid_type_name(value.strip().lower()):
        kinds.append(LookupKind.TYPE)
    try:
        has_scheme = len(urlsplit(value).scheme) > 1
    except ValueError:
        has_scheme = False
    if has_scheme:
        kinds.append(LookupKind.URI)
    if "." in value or "/" in value or "\\" in value:
        kinds.append(LookupKind.FILENAME)
    else:
        kinds.append(LookupKind.EXTENSION)
    return kinds


def resolve_value(
    value: str, kind: LookupKind, registry: MimeTypeRegistry
) -> MimeType | None:
    """Resolve one command-line value with the selected strategy."""
    kinds = _guess_kinds(value) if kind is LookupKind.AUTO else [kind]
    for k in kinds:
        mime = _RESOLVERS[k](value, registry=registry)
        if mime is not None:
            return mime
    return None


@click.command(
    name="lookup",
    help="Resolve extensions, filenames, URIs or type names to MIME types.",
    epilog="""
Without --by, each VALUE is tried as a type name, a URI, a filename, then
an extension, whichever apply. Exits with status 1 if any VALUE is unknown.
""",
)
@click.argument("values", metavar="VALUE...", nargs=-1, required=True)
@click.option(
    "--by",
    "kind",
    type=EnumChoiceParam(LookupKind),
    default=LookupKind.AUTO.value,
    show_default=True,
    help=f"How to interpret VALUE ({', '.join(v.value for v in LookupKind)}).",
)
@output_format_option
def lookup_command(
    *,
    values: tuple[str, ...],
    kind: LookupKind = LookupKind.AUTO,
    output_format: OutputFormat | None = None,
) -> None:
    """Resolve each VALUE and print the resulting MIME type.

    Args:
        values (tuple[str, ...]): Values to resolve.
        kind (LookupKind): Interpretation of the values.
        output_format (OutputFormat | None): Output format; plain text if None.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    registry = get_cli_registry(ctx)
    vlevel = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    results = [(value, resolve_value(value, kind, registry)) for value in values]

    def _entry(value: str, mime: MimeType | None) -> dict[str, object]:
        return {"query": value, "result": mime_to_dict(mime) if mime is not None else None}

    if fmt == OutputFormat.JSON:
        console.print(json.dumps([_entry(v, m) for v, m in results], indent=2))
    elif fmt == OutputFormat.NDJSON:
        for v, m in results:
            console.print(json.dumps(_entry(v, m)))
    elif fmt == OutputFormat.MARKDOWN:
        rows = [
            [v, m.type_name if m else "", ", ".join(m.extensions) if m else ""]
            for v, m in results
        ]
        console.print(render_markdown_table(["Query", "MIME type", "Extensions"], rows), nl=False)
    else:
        width = max(len(v) for v in values)
        for value, mime in results:
            if mime is None:
                if vlevel >= 0:
                    console.warn(f"{value}: no MIME type found")
                continue
            text = console.styled(mime.type_name, bold=True)
            if vlevel > 0 and mime.extensions:
                text += f"  ({', '.join(mime.extensions)})"
            console.print(text if len(values) == 1 else f"{value:<{width}}  {text}")

    if any(mime is None for _, mime in results):
        ctx.exit(ExitCode.NO_MATCH)
