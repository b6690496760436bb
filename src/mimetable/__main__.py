# mimetable:header:start
#
#   project      : MimeTable
#   file         : __main__.py
#   file_relpath : src/mimetable/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Module entry point for running MimeTable via ``python -m mimetable``.

Delegates to :func:`mimetable.cli.main.cli`, the same entry point as the
``mimetable`` console script.

Examples:
    Look up the type of a file::

        python -m mimetable lookup report.pdf
"""

from __future__ import annotations

from mimetable.cli.main import cli

if __name__ == "__main__":
    cli()
