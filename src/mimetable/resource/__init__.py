# mimetable:header:start
#
#   project      : MimeTable
#   file         : __init__.py
#   file_relpath : src/mimetable/resource/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Resource persistence handlers and a filesystem resource service."""

from __future__ import annotations

from .handlers import (
    CustomResourcePersistenceTypeHandler,
    HandlerRegistry,
    ResourcePersistenceTypeHandler,
)
from .model import Resource, ResourceIOError, ResourcePersistenceType
from .service import FileResourceService, ResourceService, uri_to_path

__all__ = [
    "CustomResourcePersistenceTypeHandler",
    "FileResourceService",
    "HandlerRegistry",
    "Resource",
    "ResourceIOError",
    "ResourcePersistenceType",
    "ResourcePersistenceTypeHandler",
    "ResourceService",
    "uri_to_path",
]
