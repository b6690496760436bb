# mimetable:header:start
#
#   project      : MimeTable
#   file         : resolve.py
#   file_relpath : src/mimetable/resolve.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Resolve MIME types from extensions, filenames, URIs and type names.

Every resolver returns ``None`` when nothing matches; an unknown extension is
an expected outcome, not an error. All resolvers accept an explicit
``registry``; without one they use the process-wide default from
[`get_registry`][mimetable.registry.registry.get_registry].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final
from urllib.parse import SplitResult, urlsplit
from urllib.request import url2pathname

from mimetable.config.logging import get_logger
from mimetable.model.errors import InvalidTypeNameError
from mimetable.model.mimetype import MimeType
from mimetable.registry.registry import get_registry

if TYPE_CHECKING:
    from mimetable.config.logging import MimeTableLogger
    from mimetable.registry.registry import MimeTypeRegistry

logger: MimeTableLogger = get_logger(__name__)

# Unregistered names are accepted only for these trees (RFC 6838 vendor,
# personal and unregistered trees, plus the legacy ``x-`` prefix).
VENDOR_PRIMARY_PREFIX: Final[str] = "x-"
VENDOR_SUBTYPE_PREFIXES: Final[tuple[str, ...]] = ("vnd.", "prs.", "x.", "x-")

FILE_SCHEME: Final[str] = "file"


def _registry_or_default(registry: MimeTypeRegistry | None) -> MimeTypeRegistry:
    return registry if registry is not None else get_registry()


def extension_of(filename: str) -> str | None:
    """Return the extension of the last path segment of ``filename``.

    The extension is the text after the last dot, so ``archive.tar.gz`` gives
    ``"gz"``. Returns None when the segment has no dot or ends with one.
    """
    segment = filename.replace("\\", "/").rsplit("/", 1)[-1]
    _, dot, ext = segment.rpartition(".")
    if not dot or not ext:
        return None
    return ext


def from_extension(ext: str, *, registry: MimeTypeRegistry | None = None) -> MimeType | None:
    """Determine the MIME type for a file extension.

    Args:
        ext (str): Extension such as ``".JPG"`` or ``"jpg"`` (one leading dot is
            stripped; matching is case-insensitive).
        registry (MimeTypeRegistry | None): Registry to query.

    Returns:
        MimeType | None: The registered type, or None for unknown extensions.
    """
    return _registry_or_default(registry).lookup_extension(ext)


def from_filename(filename: str, *, registry: MimeTypeRegistry | None = None) -> MimeType | None:
    """Determine the MIME type from a filename or path string.

    Args:
        filename (str): A bare filename or a path (``/`` or ``\\`` separated).
        registry (MimeTypeRegistry | None): Registry to query.

    Returns:
        MimeType | None: The registered type, or None if the name has no known extension.
    """
    ext = extension_of(filename)
    if ext is None:
        return None
    return from_extension(ext, registry=registry)


def from_uri(
    uri: str | SplitResult, *, registry: MimeTypeRegistry | None = None
) -> MimeType | None:
    """Determine the MIME type from a URI.

    ``file:`` URIs and scheme-less references are resolved through their
    filesystem path. For any other scheme the extension is taken from the URI
    path, ignoring query and fragment.

    Args:
        uri (str | SplitResult): URI string or an already split URI.
        registry (MimeTypeRegistry | None): Registry to query.

    Returns:
        MimeType | None: The registered type, or None.
    """
    try:
        parts = urlsplit(uri) if isinstance(uri, str) else uri
    except ValueError as exc:
        logger.debug("Unparseable URI %r: %s", uri, exc)
        return None

    if parts.scheme.lower() == FILE_SCHEME:
        return from_filename(url2pathname(parts.path), registry=registry)
    if parts.scheme:
        logger.trace("Non-file URI %s; guessing from path %r", parts.geturl(), parts.path)
    return from_filename(parts.path, registry=registry)


def is_vendor_type(mime: MimeType) -> bool:
    """Return True for vendor, personal or unregistered-tree types.

    A type qualifies if EITHER its primary type starts with ``x-`` OR its
    subtype starts with one of ``vnd.``, ``prs.``, ``x.`` or ``x-``.
    """
    return mime.primary_type.startswith(VENDOR_PRIMARY_PREFIX) or mime.sub_type.startswith(
        VENDOR_SUBTYPE_PREFIXES
    )


def from_type_name(
    type_name: str, *, registry: MimeTypeRegistry | None = None
) -> MimeType | None:
    """Look up a MIME type by name, admitting unregistered vendor types.

    Registered names return the canonical instance. Otherwise the name is
    parsed into a fresh, unregistered `MimeType`, which is returned only if
    it is a vendor/custom type (see `is_vendor_type`).

    Args:
        type_name (str): Type name; surrounding whitespace and case are ignored.
        registry (MimeTypeRegistry | None): Registry to query.

    Returns:
        MimeType | None: The registered or vendor type, or None.
    """
    name = type_name.strip().lower()
    known = _registry_or_default(registry).get(name)
    if known is not None:
        return known

    try:
        candidate = MimeType.parse(name)
    except InvalidTypeNameError:
        logger.debug("Not a valid MIME type name: %r", type_name)
        return None

    if is_vendor_type(candidate):
        return candidate
    return None
