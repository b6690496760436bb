# mimetable:header:start
#
#   project      : MimeTable
#   file         : loaders.py
#   file_relpath : src/mimetable/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Load and render MimeTable configuration files.

Parsing is done with `tomlkit`. Discovery looks in the given directory for
``mimetable.toml`` first, then for a ``[tool.mimetable]`` table in
``pyproject.toml``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from mimetable.config.logging import get_logger
from mimetable.config.model import MimeTableConfig, Toml
from mimetable.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION
from mimetable.model.errors import ConfigError
from mimetable.model.grammar import is_valid_type_name
from mimetable.registry.overrides import ExtensionOverride
from mimetable.registry.registry import normalize_extension

if TYPE_CHECKING:
    from mimetable.config.logging import MimeTableLogger

TomlTable = dict[str, Any]

logger: MimeTableLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file into a plain dict.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        raise ConfigError(f"Error loading TOML from {path}: {e}") from e
    except TomlkitParseError as e:
        raise ConfigError(f"Error decoding TOML from {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def _parse_override_table(
    table: object, *, section: str, append: bool, source: Path
) -> list[ExtensionOverride]:
    if not isinstance(table, dict):
        raise ConfigError(f"[{section}] in {source} must be a table")
    overrides: list[ExtensionOverride] = []
    for type_name, exts in cast("dict[str, object]", table).items():
        if not is_valid_type_name(type_name):
            raise ConfigError(f"[{section}] in {source}: invalid MIME type {type_name!r}")
        if not isinstance(exts, list) or not all(isinstance(e, str) for e in exts):
            raise ConfigError(
                f"[{section}] in {source}: {type_name!r} must map to a list of strings"
            )
        extensions = tuple(normalize_extension(e) for e in cast("list[str]", exts))
        overrides.append(ExtensionOverride(type_name, extensions, append=append))
    return overrides


def config_from_dict(data: TomlTable, *, source: Path) -> MimeTableConfig:
    """Validate a parsed TOML table and build a `MimeTableConfig`.

    Args:
        data (TomlTable): Top-level configuration table.
        source (Path): File the table came from; relative dataset paths are
            resolved against its directory.

    Raises:
        ConfigError: On unknown keys or values of the wrong shape.
    """
    known = {Toml.KEY_DATASET, Toml.SECTION_OVERRIDES, Toml.SECTION_APPEND}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"Unknown configuration key(s) in {source}: {', '.join(unknown)}")

    dataset: Path | None = None
    raw_dataset = data.get(Toml.KEY_DATASET)
    if raw_dataset is not None:
        if not isinstance(raw_dataset, str) or not raw_dataset:
            raise ConfigError(f"'{Toml.KEY_DATASET}' in {source} must be a non-empty string")
        dataset = Path(raw_dataset)
        if not dataset.is_absolute():
            dataset = source.parent / dataset

    overrides: list[ExtensionOverride] = []
    if Toml.SECTION_OVERRIDES in data:
        overrides += _parse_override_table(
            data[Toml.SECTION_OVERRIDES],
            section=Toml.SECTION_OVERRIDES,
            append=False,
            source=source,
        )
    if Toml.SECTION_APPEND in data:
        overrides += _parse_override_table(
            data[Toml.SECTION_APPEND], section=Toml.SECTION_APPEND, append=True, source=source
        )

    return MimeTableConfig(dataset=dataset, overrides=tuple(overrides), source=source)


def load_config(path: Path) -> MimeTableConfig:
    """Load a configuration file.

    ``pyproject.toml`` files are read from their ``[tool.mimetable]`` table;
    any other file is read from its top level.

    Raises:
        ConfigError: If the file is unreadable or malformed.
    """
    data = load_toml_dict(path)
    if path.name == PYPROJECT_FILE_NAME:
        tool = data.get("tool", {})
        section = tool.get(PYPROJECT_TOOL_SECTION, {}) if isinstance(tool, dict) else {}
        if not isinstance(section, dict):
            raise ConfigError(f"[tool.{PYPROJECT_TOOL_SECTION}] in {path} must be a table")
        data = cast("TomlTable", section)
    config = config_from_dict(data, source=path)
    logger.debug("Loaded configuration from %s: %s", path, config)
    return config


def discover_config(directory: Path) -> MimeTableConfig:
    """Find and load the configuration that applies to ``directory``.

    Returns:
        MimeTableConfig: The loaded configuration, or the default configuration
            when neither ``mimetable.toml`` nor a ``[tool.mimetable]`` table exists.
    """
    candidate = directory / CONFIG_FILE_NAME
    if candidate.is_file():
        return load_config(candidate)

    pyproject = directory / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        tool = load_toml_dict(pyproject).get("tool", {})
        if isinstance(tool, dict) and PYPROJECT_TOOL_SECTION in tool:
            return load_config(pyproject)

    logger.debug("No configuration found in %s; using defaults", directory)
    return MimeTableConfig()


def config_to_toml(config: MimeTableConfig) -> str:
    """Render a configuration as a TOML document."""
    doc = tomlkit.document()
    if config.source is not None:
        doc.add(tomlkit.comment(f"Loaded from {config.source}"))
    if config.dataset is not None:
        doc.add(Toml.KEY_DATASET, str(config.dataset))

    replaced = tomlkit.table()
    appended = tomlkit.table()
    for override in config.overrides:
        target = appended if override.append else replaced
        target.add(override.type_name, list(override.extensions))
    if replaced:
        doc.add(Toml.SECTION_OVERRIDES, replaced)
    if appended:
        doc.add(Toml.SECTION_APPEND, appended)
    return tomlkit.dumps(doc)
