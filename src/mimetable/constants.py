# mimetable:header:start
#
#   project      : MimeTable
#   file         : constants.py
#   file_relpath : src/mimetable/constants.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""MimeTable Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

MIMETABLE_VERSION: str = get_version("mimetable")

# Bundled dataset inside the package `mimetable.data` (Apache httpd mime.types format):
DATASET_PACKAGE: str = "mimetable.data"
DATASET_NAME: str = "mime.types"

LOG_LEVEL_ENV_VAR: str = "MIMETABLE_LOG_LEVEL"

# Configuration discovery
CONFIG_FILE_NAME: str = "mimetable.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "mimetable"

# Canonical name of the universal wildcard type
WILDCARD: str = "*"
