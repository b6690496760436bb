# mimetable:header:start
#
#   project      : MimeTable
#   file         : version.py
#   file_relpath : src/mimetable/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""MimeTable `version` command."""

from __future__ import annotations

import json

import click

from mimetable.cli.cmd_common import get_console, get_effective_verbosity
from mimetable.cli.options import OutputFormat, output_format_option
from mimetable.constants import MIMETABLE_VERSION


@click.command(
    name="version",
    help="Show the current version of MimeTable.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the installed MimeTable version.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    console = get_console(ctx)
    vlevel = get_effective_verbosity(ctx)
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt.is_machine:
        console.print(json.dumps({"version": MIMETABLE_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# MimeTable Version\n")
        console.print(f"**MimeTable version: {MIMETABLE_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("MimeTable version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(MIMETABLE_VERSION, bold=True)}")
    else:
        console.print(console.styled(MIMETABLE_VERSION, bold=True))
