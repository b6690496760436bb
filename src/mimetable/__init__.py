# mimetable:header:start
#
#   project      : MimeTable
#   file         : __init__.py
#   file_relpath : src/mimetable/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""MimeTable package.

MimeTable is a MIME type registry and matcher. It loads a table of type names
and file extensions, resolves types from extensions, filenames, URIs and type
names, and checks type compatibility with wildcard support.

```python
from mimetable import from_filename, MimeType

png = from_filename("logo.PNG")
assert MimeType.parse("image/*").matches(png)
```
"""

from __future__ import annotations

from mimetable.model import (
    MIME_IMAGE,
    MIME_WILDCARD,
    InvalidTypeNameError,
    MimeTableError,
    MimeType,
    RegistryInitializationError,
    parse_type_name,
)
from mimetable.registry import MimeTypeRegistry, get_registry
from mimetable.resolve import from_extension, from_filename, from_type_name, from_uri

__all__ = [
    "MIME_IMAGE",
    "MIME_WILDCARD",
    "InvalidTypeNameError",
    "MimeTableError",
    "MimeType",
    "MimeTypeRegistry",
    "RegistryInitializationError",
    "from_extension",
    "from_filename",
    "from_type_name",
    "from_uri",
    "get_registry",
    "parse_type_name",
]
