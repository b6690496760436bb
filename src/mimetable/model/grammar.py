# mimetable:header:start
#
#   project      : MimeTable
#   file         : grammar.py
#   file_relpath : src/mimetable/model/grammar.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Structural grammar for MIME type names.

A type name is ``primary/sub`` with an optional structured-syntax suffix
(``application/ld+json``). The grammar is case-sensitive: callers that accept
user input lowercase it first. The single character ``*`` is the universal
wildcard and bypasses the grammar.
"""

from __future__ import annotations

import re
from typing import Final, NamedTuple

from mimetable.constants import WILDCARD
from mimetable.model.errors import InvalidTypeNameError

MIME_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?P<primary>[-a-z]+?)/(?P<sub>[-.a-z0-9*]+?)(?:\+(?P<suffix>\w+))?$",
    re.ASCII,
)


class ParsedTypeName(NamedTuple):
    """Components of a parsed type name."""

    primary: str
    sub: str
    suffix: str | None = None

    @property
    def type_name(self) -> str:
        """Canonical ``primary/sub[+suffix]`` form."""
        return format_type_name(self.primary, self.sub, self.suffix)


WILDCARD_PARTS: Final[ParsedTypeName] = ParsedTypeName(WILDCARD, WILDCARD, None)
WILDCARD_NAMES: Final[frozenset[str]] = frozenset({WILDCARD, f"{WILDCARD}/{WILDCARD}"})


def is_valid_type_name(name: str) -> bool:
    """Return True if ``name`` is a wildcard (``*`` or ``*/*``) or follows the grammar."""
    return name in WILDCARD_NAMES or MIME_PATTERN.fullmatch(name) is not None


def parse_type_name(name: str) -> ParsedTypeName:
    """Split a type name into its primary type, sub type and suffix.

    Args:
        name (str): Type name such as ``"image/png"`` or ``"application/ld+json"``.

    Returns:
        ParsedTypeName: The components; ``suffix`` is None when absent.

    Raises:
        InvalidTypeNameError: If ``name`` does not follow the grammar.
    """
    if name in WILDCARD_NAMES:
        return WILDCARD_PARTS
    match = MIME_PATTERN.fullmatch(name)
    if match is None:
        raise InvalidTypeNameError(name)
    return ParsedTypeName(match.group("primary"), match.group("sub"), match.group("suffix"))


def format_type_name(primary: str, sub: str, suffix: str | None = None) -> str:
    """Join components into the canonical type name.

    The universal wildcard renders as ``*/*``.
    """
    if suffix:
        return f"{primary}/{sub}+{suffix}"
    return f"{primary}/{sub}"
