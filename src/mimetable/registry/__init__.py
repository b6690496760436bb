# mimetable:header:start
#
#   project      : MimeTable
#   file         : __init__.py
#   file_relpath : src/mimetable/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Registry of canonical MIME types and the extension index.

```python
from mimetable.registry import get_registry

registry = get_registry()
registry.lookup_extension(".png")
```
"""

from __future__ import annotations

from .overrides import DEFAULT_OVERRIDES, ExtensionOverride
from .registry import (
    MimeTypeRegistry,
    get_registry,
    normalize_extension,
    reset_registry,
    set_registry,
)

__all__ = [
    "DEFAULT_OVERRIDES",
    "ExtensionOverride",
    "MimeTypeRegistry",
    "get_registry",
    "normalize_extension",
    "reset_registry",
    "set_registry",
]
