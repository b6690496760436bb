# mimetable:header:start
#
#   project      : MimeTable
#   file         : cli_types.py
#   file_relpath : src/mimetable/cli/cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Shared Click parameter types."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, NoReturn, TypeVar, cast

import click

if TYPE_CHECKING:
    from click.shell_completion import CompletionItem

E = TypeVar("E", bound=Enum)


class EnumChoiceParam(click.ParamType, Generic[E]):
    """A Click parameter type that converts a string to a member of a given Enum.

    Matching is case-insensitive on the members' string values.
    """

    def __init__(self, enum_cls: type[E]) -> None:
        self.enum_cls = enum_cls
        self.name = enum_cls.__name__.lower()
        self.choices: list[str] = [cast("str", member.value) for member in enum_cls]

    def _fail_noreturn(
        self,
        message: str,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> NoReturn:
        raise click.BadParameter(message, param=param, ctx=ctx)

    def convert(
        self,
        value: Any,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> E | None:
        """Convert a string (or an existing member) to an Enum member."""
        if value is None or isinstance(value, self.enum_cls):
            return value
        lookup: dict[str, E] = {
            cast("str", member.value).lower(): member for member in self.enum_cls
        }
        member = lookup.get(str(value).lower())
        if member is None:
            self._fail_noreturn(
                f"Invalid value '{value}'. Must be one of: {', '.join(self.choices)}",
                param,
                ctx,
            )
        return member

    def shell_complete(
        self,
        ctx: click.Context,
        param: click.Parameter,
        incomplete: str,
    ) -> list[CompletionItem]:
        """Complete enum values for shells (``_MIMETABLE_COMPLETE=bash_source mimetable``)."""
        from click.shell_completion import CompletionItem

        return [CompletionItem(c) for c in self.choices if c.startswith(incomplete.lower())]
