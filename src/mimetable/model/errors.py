# mimetable:header:start
#
#   project      : MimeTable
#   file         : errors.py
#   file_relpath : src/mimetable/model/errors.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Exceptions raised by the MimeTable core.

"Not found" is deliberately absent: resolvers return ``None`` for unknown
extensions, filenames, URIs and type names.
"""

from __future__ import annotations


class MimeTableError(Exception):
    """Base class for all MimeTable errors."""


class InvalidTypeNameError(MimeTableError, ValueError):
    """A type string does not follow the ``primary/sub[+suffix]`` grammar.

    Attributes:
        type_name (str): The offending input.
    """

    def __init__(self, type_name: str) -> None:
        super().__init__(f"{type_name!r} is not a valid MIME type")
        self.type_name = type_name


class RegistryInitializationError(MimeTableError, RuntimeError):
    """The type dataset cannot be read or does not yield a usable table."""


class ConfigError(MimeTableError):
    """A configuration file is unreadable or malformed."""
