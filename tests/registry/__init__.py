# mimetable:header:start
#
#   project      : MimeTable
#   file         : __init__.py
#   file_relpath : tests/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Tests for dataset parsing and the MIME type registry."""
