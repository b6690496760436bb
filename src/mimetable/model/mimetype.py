# mimetable:header:start
#
#   project      : MimeTable
#   file         : mimetype.py
#   file_relpath : src/mimetable/model/mimetype.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""The MimeType value and its wildcard-aware matching relation.

Canonical instances are owned by a
[`MimeTypeRegistry`][mimetable.registry.registry.MimeTypeRegistry]; callers
obtain them through the resolvers in [`mimetable.resolve`][]. Custom, vendor
and wildcard values are built with [`MimeType.parse`][mimetable.model.mimetype.MimeType.parse]
and are never inserted into a registry.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Final

from mimetable.constants import WILDCARD
from mimetable.model.errors import InvalidTypeNameError
from mimetable.model.grammar import format_type_name, is_valid_type_name, parse_type_name

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, eq=False)
class MimeType:
    """A MIME type and the file extensions associated with it.

    Attributes:
        primary_type (str): Top-level type (e.g. ``"image"``), or ``"*"``.
        sub_type (str): Subtype (e.g. ``"png"``); ``"*"`` matches any subtype.
        suffix (str | None): Structured-syntax suffix (``"xml"`` in
            ``application/ld+xml``), or None.
        extensions (tuple[str, ...]): Lowercase extensions without a leading dot,
            preferred extension first.
        registered (bool): True for canonical instances owned by a registry; only
            the registry sets it.

    Notes:
        * Equality and hashing use the canonical type name only, so a custom
          value compares equal to the registered instance of the same name.
        * `matches` is not equality: it honors wildcards and is not transitive.
        * Components are checked against the type grammar on construction and
          raise `InvalidTypeNameError` when malformed.
    """

    primary_type: str
    sub_type: str
    suffix: str | None = None
    extensions: tuple[str, ...] = ()
    registered: bool = field(default=False, init=False, repr=False)

    def __post_init__(self) -> None:
        if not is_valid_type_name(self.type_name):
            raise InvalidTypeNameError(self.type_name)

    @classmethod
    def parse(cls, type_name: str, extensions: Iterable[str] = ()) -> MimeType:
        """Build an unregistered MimeType from a type name.

        Args:
            type_name (str): A name following the type grammar, or ``"*"``.
            extensions (Iterable[str]): Optional extensions to attach.

        Returns:
            MimeType: A caller-owned value.

        Raises:
            InvalidTypeNameError: If ``type_name`` is malformed.
        """
        parts = parse_type_name(type_name)
        return cls(parts.primary, parts.sub, parts.suffix, tuple(extensions))

    @property
    def type_name(self) -> str:
        """Canonical ``primary/sub[+suffix]`` name (e.g. ``"application/json"``)."""
        return format_type_name(self.primary_type, self.sub_type, self.suffix)

    @property
    def preferred_extension(self) -> str | None:
        """First known extension, or None if the type has no extensions."""
        return self.extensions[0] if self.extensions else None

    @property
    def is_wildcard(self) -> bool:
        """True for the universal wildcard type."""
        return self.primary_type == WILDCARD and self.sub_type == WILDCARD

    @property
    def is_subtype_wildcard(self) -> bool:
        """True when the subtype is ``"*"`` (e.g. ``image/*``)."""
        return self.sub_type == WILDCARD

    def with_extensions(self, extensions: Iterable[str]) -> MimeType:
        """Return a copy of this type carrying a new extension tuple."""
        return replace(self, extensions=tuple(extensions))

    def matches(self, other: object) -> bool:
        """Check if this type is compatible with another type.

        Either side being the universal wildcard matches; ``image/*`` matches any
        ``image`` subtype; otherwise the canonical names must be equal.

        Args:
            other (object): Type to compare against; non-MimeType values never match.

        Returns:
            bool: Whether the two types are compatible.
        """
        if not isinstance(other, MimeType):
            return False
        if self is other or self.is_wildcard or other.is_wildcard:
            return True
        if (self.is_subtype_wildcard or other.is_subtype_wildcard) and (
            self.primary_type == other.primary_type
        ):
            return True
        return self.type_name == other.type_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MimeType):
            return NotImplemented
        return self.type_name == other.type_name

    def __hash__(self) -> int:
        return hash(self.type_name)

    def __str__(self) -> str:
        return self.type_name


# Convenience values that never live in a registry
MIME_WILDCARD: Final[MimeType] = MimeType(WILDCARD, WILDCARD)
MIME_IMAGE: Final[MimeType] = MimeType("image", WILDCARD)
