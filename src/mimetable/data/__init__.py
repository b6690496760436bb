# mimetable:header:start
#
#   project      : MimeTable
#   file         : __init__.py
#   file_relpath : src/mimetable/data/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Packaged data: the ``mime.types`` table the default registry is built from."""
