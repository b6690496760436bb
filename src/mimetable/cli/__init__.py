# mimetable:header:start
#
#   project      : MimeTable
#   file         : __init__.py
#   file_relpath : src/mimetable/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Click-based command line interface for MimeTable."""
