# mimetable:header:start
#
#   project      : MimeTable
#   file         : overrides.py
#   file_relpath : src/mimetable/registry/overrides.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Extension overrides applied after a dataset has been loaded.

Overrides reorder or extend the extension list of a known type. An overridden
entry is moved to the end of the table, so its extensions are indexed after
every dataset entry and win any extension claimed by another type
(``ent`` is listed for ``text/xml-external-parsed-entity`` in the dataset
but resolves to ``application/xml``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from mimetable.config.logging import get_logger
from mimetable.model.errors import RegistryInitializationError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mimetable.config.logging import MimeTableLogger
    from mimetable.model.mimetype import MimeType

logger: MimeTableLogger = get_logger(__name__)


@dataclass(frozen=True)
class ExtensionOverride:
    """Replace (or extend) the extensions of a registered type.

    Attributes:
        type_name (str): Canonical name of the type to override.
        extensions (tuple[str, ...]): Extensions to set, preferred first.
        append (bool): If True, ``extensions`` are appended to the existing ones.
    """

    type_name: str
    extensions: tuple[str, ...]
    append: bool = False

    def apply(self, current: tuple[str, ...]) -> tuple[str, ...]:
        """Return the extension tuple resulting from this override."""
        if self.append:
            return current + self.extensions
        return self.extensions


DEFAULT_OVERRIDES: Final[tuple[ExtensionOverride, ...]] = (
    ExtensionOverride("image/jpeg", ("jpg", "jpeg", "jpe")),
    ExtensionOverride("image/tiff", ("tif", "tiff")),
    ExtensionOverride("application/xml", ("ent",), append=True),
)


def apply_overrides(table: dict[str, MimeType], overrides: Iterable[ExtensionOverride]) -> None:
    """Apply ``overrides`` in order to ``table`` (mutated in place).

    Args:
        table (dict[str, MimeType]): Ordered name -> type table under construction.
        overrides (Iterable[ExtensionOverride]): Overrides, applied in iteration order.

    Raises:
        RegistryInitializationError: If an override targets an unknown type.
    """
    for override in overrides:
        mime = table.pop(override.type_name, None)
        if mime is None:
            raise RegistryInitializationError(
                f"Cannot override extensions of unknown type: {override.type_name}"
            )
        table[override.type_name] = mime.with_extensions(override.apply(mime.extensions))
        logger.trace(
            "Override %s: %s -> %s",
            override.type_name,
            mime.extensions,
            table[override.type_name].extensions,
        )
