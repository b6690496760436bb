# mimetable:header:start
#
#   project      : MimeTable
#   file         : __init__.py
#   file_relpath : src/mimetable/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""MIME type values, the type-name grammar, and core exceptions."""

from __future__ import annotations

from .errors import (
    ConfigError,
    InvalidTypeNameError,
    MimeTableError,
    RegistryInitializationError,
)
from .grammar import MIME_PATTERN, ParsedTypeName, is_valid_type_name, parse_type_name
from .mimetype import MIME_IMAGE, MIME_WILDCARD, MimeType

__all__ = [
    "MIME_IMAGE",
    "MIME_PATTERN",
    "MIME_WILDCARD",
    "ConfigError",
    "InvalidTypeNameError",
    "MimeTableError",
    "MimeType",
    "ParsedTypeName",
    "RegistryInitializationError",
    "is_valid_type_name",
    "parse_type_name",
]
