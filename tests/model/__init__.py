# mimetable:header:start
#
#   project      : MimeTable
#   file         : __init__.py
#   file_relpath : tests/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Tests for MIME type values and the type-name grammar."""
