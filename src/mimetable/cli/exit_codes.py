# mimetable:header:start
#
#   project      : MimeTable
#   file         : exit_codes.py
#   file_relpath : src/mimetable/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Exit codes for the MimeTable CLI.

Error codes follow the BSD `sysexits` convention so other tooling can
interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the MimeTable CLI.

    Attributes:
        SUCCESS: Every query resolved (or the types matched).
        NO_MATCH: A query resolved to nothing, or two types are incompatible.
            Not an error: scripts use it like ``grep``'s exit status.
        USAGE_ERROR: Command-line invocation error. Mirrors ``EX_USAGE (64)``.
        INVALID_TYPE_NAME: A type argument does not follow the MIME grammar.
            Mirrors ``EX_DATAERR (65)``.
        REGISTRY_ERROR: The registry cannot be built from its dataset.
            Mirrors ``EX_SOFTWARE (70)``.
        CONFIG_ERROR: Missing or malformed configuration. Mirrors ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled error (last resort).
    """

    SUCCESS = 0
    NO_MATCH = 1

    USAGE_ERROR = 64  # EX_USAGE
    INVALID_TYPE_NAME = 65  # EX_DATAERR
    REGISTRY_ERROR = 70  # EX_SOFTWARE
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
