# mimetable:header:start
#
#   project      : MimeTable
#   file         : __init__.py
#   file_relpath : src/mimetable/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""MimeTable CLI subcommands (one module per command)."""
