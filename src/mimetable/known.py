# mimetable:header:start
#
#   project      : MimeTable
#   file         : known.py
#   file_relpath : src/mimetable/known.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Convenience names for commonly used MIME types.

``MIME_WILDCARD`` and ``MIME_IMAGE`` are plain values. The others are the
canonical instances of the default registry and are looked up on first
attribute access, so importing this module does not load the dataset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from mimetable.model.mimetype import MIME_IMAGE, MIME_WILDCARD
from mimetable.registry.registry import get_registry

if TYPE_CHECKING:
    from mimetable.model.mimetype import MimeType

_REGISTERED: Final[dict[str, str]] = {
    "MIME_APPLICATION_JSON": "application/json",
    "MIME_APPLICATION_XML": "application/xml",
    "MIME_IMAGE_JPEG": "image/jpeg",
    "MIME_IMAGE_TIF": "image/tiff",
    "MIME_IMAGE_PNG": "image/png",
}

__all__ = ["MIME_IMAGE", "MIME_WILDCARD", *_REGISTERED]


def __getattr__(name: str) -> MimeType:
    type_name = _REGISTERED.get(name)
    if type_name is None:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    mime = get_registry().get(type_name)
    if mime is None:
        raise AttributeError(f"{type_name} is not present in the MIME type registry")
    return mime
