# mimetable:header:start
#
#   project      : MimeTable
#   file         : main.py
#   file_relpath : src/mimetable/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 MimeTable contributors
#
# mimetable:header:end

"""MimeTable command-line interface.

Group-level options are resolved once and stored in ``ctx.obj``:

* ``console``: the `ClickConsole` used for program output;
* ``verbosity_level``: from ``-v``/``-q``;
* ``config``: the `MimeTableConfig` from ``--config`` or discovery;
* ``registry``: built lazily by `get_cli_registry`.
"""

from __future__ import annotations

from pathlib import Path

import click

from mimetable.cli.commands.dump_config import dump_config_command
from mimetable.cli.commands.lookup import lookup_command
from mimetable.cli.commands.match import match_command
from mimetable.cli.commands.types import types_command
from mimetable.cli.commands.version import version_command
from mimetable.cli.console import ClickConsole
from mimetable.cli.errors import MimeTableConfigError
from mimetable.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from mimetable.config.loaders import discover_config, load_config
from mimetable.config.logging import get_logger, resolve_env_log_level, setup_logging
from mimetable.model.errors import ConfigError

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def init_config(ctx: click.Context, config_path: Path | None) -> None:
    """Load the configuration named by ``--config``, or discover one in the CWD.

    Raises:
        MimeTableConfigError: If the configuration file is invalid.
    """
    try:
        config = load_config(config_path) if config_path else discover_config(Path.cwd())
    except ConfigError as exc:
        raise MimeTableConfigError(str(exc)) from exc
    ctx.obj["config"] = config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="MimeTable: resolve and match MIME types.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read configuration from this file instead of discovering one.",
)
@click.version_option(package_name="mimetable", prog_name="mimetable")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
) -> None:
    """Entry point for the MimeTable CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    init_config(ctx, config_path)

    if ctx.invoked_subcommand is None:
        console = ctx.obj["console"]
        console.print("Hint: use 'mimetable lookup FILE...' to resolve MIME types.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(lookup_command)

cli.add_command(types_command)

cli.add_command(match_command)

cli.add_command(dump_config_command)

if __name__ == "__main__":
    cli()
