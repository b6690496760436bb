# mimetable:header:start
#
#   project      : MimeTable
#   file         : handlers.py
#   file_relpath : src/mimetable/resource/handlers.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Persistence-type handlers: map a resolving key to candidate URIs.

A handler receives the expected MIME type but treats it as opaque; handlers
never introspect it beyond its type name.
"""

from __future__ import annotations

from threading import RLock
from types import MappingProxyType
from typing import TYPE_CHECKING, Protocol, runtime_checkable
from urllib.parse import urlsplit

from mimetable.config.logging import get_logger
from mimetable.resource.model import ResourceIOError, ResourcePersistenceType

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from mimetable.config.logging import MimeTableLogger
    from mimetable.model.mimetype import MimeType

logger: MimeTableLogger = get_logger(__name__)


@runtime_checkable
class ResourcePersistenceTypeHandler(Protocol):
    """Locates resources of one persistence type."""

    @property
    def resource_persistence_type(self) -> ResourcePersistenceType:
        """The persistence type this handler serves."""
        ...

    def get_uris(self, resolving_key: str, mime_type: MimeType | None) -> list[str]:
        """Return candidate URIs for ``resolving_key``, most preferred first.

        Args:
            resolving_key (str): Caller-supplied key.
            mime_type (MimeType | None): Expected type of the resource.

        Returns:
            list[str]: Candidate URIs.

        Raises:
            ResourceIOError: If the key cannot be turned into a URI.
        """
        ...


class CustomResourcePersistenceTypeHandler:
    """Handler for `ResourcePersistenceType.CUSTOM`: the key is the URI."""

    @property
    def resource_persistence_type(self) -> ResourcePersistenceType:
        """Always `ResourcePersistenceType.CUSTOM`."""
        return ResourcePersistenceType.CUSTOM

    def get_uris(self, resolving_key: str, mime_type: MimeType | None) -> list[str]:
        """Wrap ``resolving_key`` as a single-element URI list."""
        try:
            urlsplit(resolving_key)
        except ValueError as exc:
            raise ResourceIOError(f"Not a valid URI: {resolving_key!r}") from exc
        return [resolving_key]


class HandlerRegistry:
    """Maps persistence types to their handlers.

    Registration is guarded by an `RLock`; lookups read a snapshot.
    """

    def __init__(self, handlers: Iterable[ResourcePersistenceTypeHandler] = ()) -> None:
        self._lock = RLock()
        self._handlers: dict[ResourcePersistenceType, ResourcePersistenceTypeHandler] = {}
        for handler in handlers:
            self.register(handler)

    @classmethod
    def with_defaults(cls) -> HandlerRegistry:
        """Return a registry holding the built-in handlers."""
        return cls([CustomResourcePersistenceTypeHandler()])

    def register(self, handler: ResourcePersistenceTypeHandler) -> None:
        """Register ``handler`` for its persistence type.

        Raises:
            ValueError: If a handler is already registered for that type.
        """
        kind = handler.resource_persistence_type
        with self._lock:
            if kind in self._handlers:
                raise ValueError(f"Persistence type '{kind.value}' already has a handler.")
            logger.debug(
                "Registering %s for persistence type %s", type(handler).__name__, kind.value
            )
            self._handlers[kind] = handler

    def unregister(self, kind: ResourcePersistenceType) -> bool:
        """Remove the handler for ``kind``; return True if one was registered."""
        with self._lock:
            return self._handlers.pop(kind, None) is not None

    def get(self, kind: ResourcePersistenceType) -> ResourcePersistenceTypeHandler:
        """Return the handler for ``kind``.

        Raises:
            ResourceIOError: If no handler is registered for ``kind``.
        """
        handler = self._handlers.get(kind)
        if handler is None:
            raise ResourceIOError(f"No handler for persistence type '{kind.value}'")
        return handler

    def as_mapping(self) -> Mapping[ResourcePersistenceType, ResourcePersistenceTypeHandler]:
        """Return a read-only snapshot of the registered handlers."""
        with self._lock:
            return MappingProxyType(dict(self._handlers))
