# mimetable:header:start
#
#   project      : MimeTable
#   file         : __init__.py
#   file_relpath : tests/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Tests for configuration loading and logging setup."""
