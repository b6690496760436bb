# mimetable:header:start
#
#   project      : MimeTable
#   file         : types.py
#   file_relpath : src/mimetable/cli/commands/types.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""MimeTable `types` command: list the registered MIME types."""

from __future__ import annotations

import json

import click

from mimetable.cli.cmd_common import get_cli_registry, get_console
from mimetable.cli.options import OutputFormat, output_format_option
from mimetable.cli.rendering import mime_to_dict, render_markdown_table
from mimetable.constants import MIMETABLE_VERSION


@click.command(
    name="types",
    help="List the registered MIME types.",
    epilog="""
Types are listed alphabetically. Use --long to include the extensions of
each type, and --primary to restrict the listing to one top-level type.
""",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show the extensions of each type.",
)
@click.option(
    "--primary",
    "primary",
    default=None,
    metavar="TYPE",
    help="Only list types with this primary type (e.g. 'image').",
)
@output_format_option
def types_command(
    *,
    show_details: bool = False,
    primary: str | None = None,
    output_format: OutputFormat | None = None,
) -> None:
    """List registered MIME types.

    Args:
        show_details (bool): Include extensions.
        primary (str | None): Primary type filter (case-insensitive).
        output_format (OutputFormat | None): Output format; plain text if None.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    registry = get_cli_registry(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    wanted = primary.strip().lower() if primary else None
    mimes = [
        registry.types_by_name[name]
        for name in registry.names()
        if wanted is None or registry.types_by_name[name].primary_type == wanted
    ]

    if fmt in (OutputFormat.JSON, OutputFormat.NDJSON):
        payload = [
            mime_to_dict(m) if show_details else {"type": m.type_name} for m in mimes
        ]
        if fmt == OutputFormat.JSON:
            console.print(json.dumps(payload, indent=2))
        else:
            for obj in payload:
                console.print(json.dumps(obj))
        return

    if fmt == OutputFormat.MARKDOWN:
        console.print("# MIME types\n")
        console.print(f"MimeTable **{MIMETABLE_VERSION}** knows {len(mimes)} types.\n")
        if show_details:
            rows = [[m.type_name, ", ".join(m.extensions)] for m in mimes]
            console.print(render_markdown_table(["MIME type", "Extensions"], rows), nl=False)
        else:
            rows = [[m.type_name] for m in mimes]
            console.print(render_markdown_table(["MIME type"], rows), nl=False)
        return

    width = max((len(m.type_name) for m in mimes), default=0)
    for m in mimes:
        if show_details and m.extensions:
            console.print(f"{m.type_name:<{width}}  {' '.join(m.extensions)}")
        else:
            console.print(m.type_name)
