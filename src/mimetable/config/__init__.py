# mimetable:header:start
#
#   project      : MimeTable
#   file         : __init__.py
#   file_relpath : src/mimetable/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Configuration and logging for MimeTable.

* [`mimetable.config.logging`][] – TRACE-aware, chalk-colored logging.
* [`mimetable.config.model`][] – the `MimeTableConfig` dataclass.
* [`mimetable.config.loaders`][] – TOML discovery, loading and rendering.

Submodules are imported explicitly; this package re-exports nothing so that
the registry can use the logging module without importing the configuration
model.
"""
