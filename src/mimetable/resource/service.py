# mimetable:header:start
#
#   project      : MimeTable
#   file         : service.py
#   file_relpath : src/mimetable/resource/service.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Resource service: create, locate, read and write resources.

Resources are addressed by ``(key, persistence type, filename extension)``.
The persistence handler turns the key into candidate URIs; the extension
determines the resource's MIME type through
[`from_extension`][mimetable.resolve.from_extension].
"""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import TYPE_CHECKING, BinaryIO, Protocol
from urllib.parse import urlsplit
from urllib.request import url2pathname

from mimetable.config.logging import get_logger
from mimetable.resolve import FILE_SCHEME, from_extension
from mimetable.resource.handlers import HandlerRegistry
from mimetable.resource.model import Resource, ResourceIOError

if TYPE_CHECKING:
    from mimetable.config.logging import MimeTableLogger
    from mimetable.registry.registry import MimeTypeRegistry
    from mimetable.resource.model import ResourcePersistenceType

logger: MimeTableLogger = get_logger(__name__)


class ResourceService(Protocol):
    """Operations on resources keyed by (key, persistence type, extension)."""

    def create(
        self, key: str, persistence_type: ResourcePersistenceType, filename_extension: str
    ) -> Resource:
        """Return a new resource descriptor for the key (nothing is written yet)."""
        ...

    def get(
        self, key: str, persistence_type: ResourcePersistenceType, filename_extension: str
    ) -> Resource:
        """Return the descriptor of an existing resource."""
        ...

    def get_input_stream(self, resource: Resource | str) -> BinaryIO:
        """Open a resource (or a URI) for binary reading."""
        ...

    def write(self, resource: Resource, output: str) -> None:
        """Write text content to a resource."""
        ...


def uri_to_path(uri: str) -> Path:
    """Return the local path a ``file:`` (or scheme-less) URI points to.

    Raises:
        ResourceIOError: If the URI is not a local file reference.
    """
    try:
        parts = urlsplit(uri)
    except ValueError as exc:
        raise ResourceIOError(f"Not a valid URI: {uri!r}") from exc
    if parts.scheme and parts.scheme.lower() != FILE_SCHEME:
        raise ResourceIOError(f"Not a local file URI: {uri}")
    return Path(url2pathname(parts.path))


class FileResourceService:
    """`ResourceService` backed by the local filesystem.

    Args:
        handlers (HandlerRegistry | None): Persistence handlers; defaults to the
            built-in set.
        registry (MimeTypeRegistry | None): Registry used to type resources;
            defaults to the process-wide registry.
    """

    def __init__(
        self,
        handlers: HandlerRegistry | None = None,
        registry: MimeTypeRegistry | None = None,
    ) -> None:
        self.handlers = handlers if handlers is not None else HandlerRegistry.with_defaults()
        self.registry = registry

    def _candidates(
        self, key: str, persistence_type: ResourcePersistenceType, filename_extension: str
    ) -> tuple[list[str], Resource | None]:
        mime = from_extension(filename_extension, registry=self.registry)
        uris = self.handlers.get(persistence_type).get_uris(key, mime)
        if not uris:
            return uris, None
        first = Resource(key, persistence_type, filename_extension, uris[0], mime)
        return uris, first

    def create(
        self, key: str, persistence_type: ResourcePersistenceType, filename_extension: str
    ) -> Resource:
        """Return a resource descriptor at the handler's preferred URI.

        Raises:
            ResourceIOError: If the handler yields no URI for ``key``.
        """
        _, resource = self._candidates(key, persistence_type, filename_extension)
        if resource is None:
            raise ResourceIOError(f"No URI for key {key!r} ({persistence_type.value})")
        logger.debug("Created resource %s (%s)", resource.uri, resource.mime_type)
        return resource

    def get(
        self, key: str, persistence_type: ResourcePersistenceType, filename_extension: str
    ) -> Resource:
        """Return the first candidate location that exists on disk.

        Candidates that are not local file URIs are skipped.

        Raises:
            ResourceIOError: If no candidate exists.
        """
        uris, resource = self._candidates(key, persistence_type, filename_extension)
        for uri in uris:
            try:
                path = uri_to_path(uri)
            except ResourceIOError:
                logger.debug("Skipping non-local candidate %s", uri)
                continue
            if path.is_file():
                assert resource is not None
                return replace(resource, uri=uri)
        raise ResourceIOError(f"No resource found for key {key!r} ({persistence_type.value})")

    def get_input_stream(self, resource: Resource | str) -> BinaryIO:
        """Open a resource or URI for binary reading.

        Raises:
            ResourceIOError: If the location is not local or cannot be opened.
        """
        uri = resource.uri if isinstance(resource, Resource) else resource
        path = uri_to_path(uri)
        try:
            return path.open("rb")
        except OSError as exc:
            raise ResourceIOError(f"Cannot open {uri}: {exc}") from exc

    def write(self, resource: Resource, output: str) -> None:
        """Write ``output`` as UTF-8 text, creating parent directories.

        Raises:
            ResourceIOError: If the location is not local or cannot be written.
        """
        path = uri_to_path(resource.uri)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(output, encoding="utf-8")
        except OSError as exc:
            raise ResourceIOError(f"Cannot write {resource.uri}: {exc}") from exc
        logger.debug("Wrote %d characters to %s", len(output), resource.uri)
