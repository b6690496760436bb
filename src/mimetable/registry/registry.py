# mimetable:header:start
#
#   project      : MimeTable
#   file         : registry.py
#   file_relpath : src/mimetable/registry/registry.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""The MIME type registry: canonical types plus an extension index.

A [`MimeTypeRegistry`][mimetable.registry.registry.MimeTypeRegistry] is built
once from a dataset and is read-only afterwards. Most callers use the
process-wide default returned by
[`get_registry`][mimetable.registry.registry.get_registry]; tests and
applications with their own dataset build one explicitly and pass it to the
resolvers.

Typical usage:
    ```python
    from mimetable.registry import get_registry

    registry = get_registry()
    jpeg = registry.get("image/jpeg")
    assert registry.lookup_extension("JPG") is jpeg
    ```

Construction order:
    1. tab-delimited dataset records (type + extensions), in dataset order;
    2. extension-less records (including recovered comment lines);
    3. extension overrides, each moving its entry to the end of the table;
    4. the extension index, built in table order with the last writer winning.
"""

from __future__ import annotations

from dataclasses import replace
from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING

from mimetable.config.logging import get_logger
from mimetable.model.errors import RegistryInitializationError
from mimetable.model.mimetype import MimeType
from mimetable.registry.dataset import parse_records, read_bundled_dataset, read_dataset_file
from mimetable.registry.overrides import DEFAULT_OVERRIDES, apply_overrides

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping
    from pathlib import Path

    from mimetable.config.logging import MimeTableLogger
    from mimetable.registry.overrides import ExtensionOverride

logger: MimeTableLogger = get_logger(__name__)


def _registered_copy(mime: MimeType) -> MimeType:
    """Return a copy of ``mime`` flagged as owned by a registry."""
    owned = replace(mime)
    # `registered` is not an init field, so it is set after construction.
    object.__setattr__(owned, "registered", True)
    return owned


def normalize_extension(ext: str) -> str:
    """Strip a single leading dot and lowercase ``ext``."""
    return ext.removeprefix(".").lower()


class MimeTypeRegistry:
    """Read-only table of canonical MIME types.

    Attributes:
        types_by_name (Mapping[str, MimeType]): Canonical name -> registered type,
            in construction order.
        extension_to_type (Mapping[str, str]): Extension (lowercase, no dot) ->
            canonical name.
    """

    types_by_name: Mapping[str, MimeType]
    extension_to_type: Mapping[str, str]

    def __init__(self, types: Iterable[MimeType]) -> None:
        table: dict[str, MimeType] = {}
        for mime in types:
            table[mime.type_name] = mime if mime.registered else _registered_copy(mime)

        index: dict[str, str] = {}
        for name, mime in table.items():
            for ext in mime.extensions:
                index[ext] = name

        self.types_by_name = MappingProxyType(table)
        self.extension_to_type = MappingProxyType(index)

    @classmethod
    def from_lines(
        cls,
        lines: Iterable[str],
        overrides: Iterable[ExtensionOverride] = DEFAULT_OVERRIDES,
    ) -> MimeTypeRegistry:
        """Build a registry from dataset lines.

        Args:
            lines (Iterable[str]): Lines in ``mime.types`` format.
            overrides (Iterable[ExtensionOverride]): Overrides applied after the dataset.

        Returns:
            MimeTypeRegistry: The populated registry.

        Raises:
            RegistryInitializationError: If the dataset yields no types or an
                override targets an unknown type.
        """
        tabbed, bare = parse_records(lines)

        table: dict[str, MimeType] = {}
        for record in (*tabbed, *bare):
            mime = MimeType.parse(record.type_name, record.extensions)
            table[mime.type_name] = mime

        if not table:
            raise RegistryInitializationError("MIME type dataset contains no valid types")

        apply_overrides(table, overrides)

        registry = cls(table.values())
        logger.debug(
            "Loaded %d MIME types (%d extensions)",
            len(registry.types_by_name),
            len(registry.extension_to_type),
        )
        return registry

    @classmethod
    def from_file(
        cls,
        path: Path,
        overrides: Iterable[ExtensionOverride] = DEFAULT_OVERRIDES,
    ) -> MimeTypeRegistry:
        """Build a registry from a dataset file on disk."""
        logger.info("Loading MIME type dataset from %s", path)
        return cls.from_lines(read_dataset_file(path), overrides)

    @classmethod
    def bundled(
        cls,
        overrides: Iterable[ExtensionOverride] = DEFAULT_OVERRIDES,
    ) -> MimeTypeRegistry:
        """Build a registry from the packaged dataset."""
        return cls.from_lines(read_bundled_dataset(), overrides)

    def get(self, type_name: str) -> MimeType | None:
        """Return the registered type with the given canonical name, or None."""
        return self.types_by_name.get(type_name)

    def lookup_extension(self, ext: str) -> MimeType | None:
        """Return the type an extension maps to, or None.

        Args:
            ext (str): Extension with or without a leading dot; case-insensitive.
        """
        type_name = self.extension_to_type.get(normalize_extension(ext))
        if type_name is None:
            return None
        return self.types_by_name.get(type_name)

    def names(self) -> tuple[str, ...]:
        """Return all canonical type names (sorted)."""
        return tuple(sorted(self.types_by_name))

    def primary_types(self) -> tuple[str, ...]:
        """Return the distinct primary types (sorted)."""
        return tuple(sorted({mime.primary_type for mime in self.types_by_name.values()}))

    def __contains__(self, type_name: object) -> bool:
        return type_name in self.types_by_name

    def __iter__(self) -> Iterator[MimeType]:
        return iter(self.types_by_name.values())

    def __len__(self) -> int:
        return len(self.types_by_name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(types={len(self)}, extensions={len(self.extension_to_type)})"


_lock = RLock()
_default_registry: MimeTypeRegistry | None = None


def get_registry() -> MimeTypeRegistry:
    """Return (building it on first use) the process-wide default registry.

    Construction runs at most once, under a lock, even when first access is
    concurrent. Later calls are lock free.

    Raises:
        RegistryInitializationError: If the bundled dataset cannot be loaded.
    """
    registry = _default_registry
    if registry is not None:
        return registry
    with _lock:
        return _init_default_registry()


def _init_default_registry() -> MimeTypeRegistry:
    global _default_registry
    if _default_registry is None:
        _default_registry = MimeTypeRegistry.bundled()
    return _default_registry


def set_registry(registry: MimeTypeRegistry) -> None:
    """Install ``registry`` as the process-wide default (e.g. from configuration)."""
    global _default_registry
    with _lock:
        _default_registry = registry


def reset_registry() -> None:
    """Forget the default registry; the next `get_registry` call rebuilds it.

    Intended for tests.
    """
    global _default_registry
    with _lock:
        _default_registry = None
