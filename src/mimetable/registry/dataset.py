# mimetable:header:start
#
#   project      : MimeTable
#   file         : dataset.py
#   file_relpath : src/mimetable/registry/dataset.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Read and parse type datasets in the Apache httpd ``mime.types`` format.

Each record is one of:

* ``type<TAB>ext1 ext2 ...`` (tabs may repeat),
* a type name without extensions,
* a comment. Comments whose first token is itself a valid type name
  (``# application/vnd.gmx deprecated ...``) are recovered as extension-less
  types; every other line whose first token fails the grammar is dropped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from importlib.resources import files
from typing import TYPE_CHECKING, Final

from mimetable.config.logging import get_logger
from mimetable.constants import DATASET_NAME, DATASET_PACKAGE
from mimetable.model.errors import RegistryInitializationError
from mimetable.model.grammar import is_valid_type_name

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from pathlib import Path

    from mimetable.config.logging import MimeTableLogger

logger: MimeTableLogger = get_logger(__name__)

COMMENT_MARKER: Final[str] = "# "

_TAB_RUN: Final[re.Pattern[str]] = re.compile(r"\t+")


@dataclass(frozen=True)
class TypeRecord:
    """One usable dataset record."""

    type_name: str
    extensions: tuple[str, ...] = ()


def _first_token(line: str) -> str:
    tokens = line.split(None, 1)
    return tokens[0] if tokens else ""


def filter_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield the dataset lines whose first token is a valid type name.

    A leading comment marker is stripped before the check, which recovers
    types that were commented out in the dataset but are still well formed.
    """
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.startswith(COMMENT_MARKER):
            line = line[len(COMMENT_MARKER) :]
        if is_valid_type_name(_first_token(line)):
            yield line
        elif line.strip() and not line.startswith("#"):
            logger.trace("Dropping malformed dataset line: %r", raw)


def parse_records(lines: Iterable[str]) -> tuple[list[TypeRecord], list[TypeRecord]]:
    """Split surviving lines into records with and without extensions.

    Returns:
        tuple[list[TypeRecord], list[TypeRecord]]: ``(tabbed, bare)`` records
            in dataset order. Tab-delimited lines come first so that bare
            entries are inserted after them, as the table builder expects.
    """
    tabbed: list[TypeRecord] = []
    bare: list[TypeRecord] = []
    for line in filter_lines(lines):
        if "\t" in line:
            fields = _TAB_RUN.sub("\t", line).split("\t", 1)
            type_name = _first_token(fields[0])
            extensions = fields[1].split() if len(fields) > 1 else []
            tabbed.append(TypeRecord(type_name, tuple(ext.lower() for ext in extensions)))
        else:
            # Recovered comments may carry trailing prose after the type name.
            bare.append(TypeRecord(_first_token(line)))
    return tabbed, bare


def read_bundled_dataset() -> list[str]:
    """Return the lines of the packaged ``mime.types`` dataset.

    Raises:
        RegistryInitializationError: If the data package is missing, or the
            resource cannot be read or is not valid UTF-8.
    """
    try:
        resource = files(DATASET_PACKAGE).joinpath(DATASET_NAME)
        return resource.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError, ModuleNotFoundError) as exc:
        raise RegistryInitializationError(
            f"Cannot read bundled MIME type dataset {DATASET_PACKAGE}/{DATASET_NAME}: {exc}"
        ) from exc


def read_dataset_file(path: Path) -> list[str]:
    """Return the lines of a dataset file on disk.

    Raises:
        RegistryInitializationError: If the file cannot be read.
    """
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise RegistryInitializationError(f"Cannot read MIME type dataset {path}: {exc}") from exc
