# mimetable:header:start
#
#   project      : MimeTable
#   file         : errors.py
#   file_relpath : src/mimetable/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Exceptions for the MimeTable CLI.

Commands translate core exceptions into these so that Click prints a clean
message and exits with the matching [`ExitCode`][mimetable.cli.exit_codes.ExitCode].
They prefer the project console (see `show()`) and fall back to Click's own
error display when no console is present in the context.
"""

from __future__ import annotations

from typing import IO, Any

import click

from mimetable.cli.exit_codes import ExitCode


class MimeTableCliError(click.ClickException):
    """Base class for all MimeTable CLI errors."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colour is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class MimeTableUsageError(MimeTableCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class MimeTableInvalidTypeError(MimeTableCliError):
    """Error for type arguments that fail the MIME grammar."""

    exit_code = ExitCode.INVALID_TYPE_NAME


class MimeTableRegistryError(MimeTableCliError):
    """Error when the registry cannot be built."""

    exit_code = ExitCode.REGISTRY_ERROR


class MimeTableConfigError(MimeTableCliError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR
