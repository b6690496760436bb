# mimetable:header:start
#
#   project      : MimeTable
#   file         : cmd_common.py
#   file_relpath : src/mimetable/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""Common command utilities for Click-based commands.

Plumbing only: reading shared state from ``ctx.obj`` and translating core
exceptions into CLI errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from mimetable.cli.errors import MimeTableConfigError, MimeTableRegistryError
from mimetable.config.logging import get_logger
from mimetable.config.model import MimeTableConfig
from mimetable.model.errors import ConfigError, RegistryInitializationError
from mimetable.registry.registry import get_registry

if TYPE_CHECKING:
    from mimetable.cli.console import ConsoleLike
    from mimetable.registry.registry import MimeTypeRegistry

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the context by the group callback."""
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity (0 when unset)."""
    return int(ctx.obj.get("verbosity_level", 0))


def get_config(ctx: click.Context) -> MimeTableConfig:
    """Return the configuration selected by the group callback."""
    config = ctx.obj.get("config")
    return config if isinstance(config, MimeTableConfig) else MimeTableConfig()


def get_cli_registry(ctx: click.Context) -> MimeTypeRegistry:
    """Return the registry for this invocation, building it on first use.

    The default configuration shares the process-wide registry; any other
    configuration builds a dedicated one.

    Raises:
        MimeTableRegistryError: If the registry cannot be built.
        MimeTableConfigError: If the configuration is invalid.
    """
    cached: MimeTypeRegistry | None = ctx.obj.get("registry")
    if cached is not None:
        return cached
    config = get_config(ctx)
    try:
        registry = get_registry() if config.is_default else config.build_registry()
    except RegistryInitializationError as exc:
        raise MimeTableRegistryError(str(exc)) from exc
    except ConfigError as exc:
        raise MimeTableConfigError(str(exc)) from exc
    logger.debug("Using %r", registry)
    ctx.obj["registry"] = registry
    return registry
