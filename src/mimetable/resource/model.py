# mimetable:header:start
#
#   project      : MimeTable
#   file         : model.py
#   file_relpath : src/mimetable/resource/model.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Resource values passed between persistence handlers and resource services."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from mimetable.model.errors import MimeTableError

if TYPE_CHECKING:
    from mimetable.model.mimetype import MimeType


class ResourcePersistenceType(Enum):
    """Where and how a resource is stored.

    Attributes:
        MANAGED: Stored under a location owned by the service.
        REFERENCED: Stored elsewhere and referenced by a resolvable key.
        RESOLVED: Located by resolving the key against configured patterns.
        CUSTOM: The resolving key is itself the resource URI.
    """

    MANAGED = "managed"
    REFERENCED = "referenced"
    RESOLVED = "resolved"
    CUSTOM = "custom"


class ResourceIOError(MimeTableError, OSError):
    """A resource cannot be located, read or written."""


@dataclass(frozen=True)
class Resource:
    """A located resource.

    Attributes:
        key (str): Caller-supplied resolving key.
        persistence_type (ResourcePersistenceType): Persistence classification.
        filename_extension (str): Extension the resource was requested with.
        uri (str): Location of the resource.
        mime_type (MimeType | None): Type resolved from ``filename_extension``,
            or None if the extension is unknown.
    """

    key: str
    persistence_type: ResourcePersistenceType
    filename_extension: str
    uri: str
    mime_type: MimeType | None = None
