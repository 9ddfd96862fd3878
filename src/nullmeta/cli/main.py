# topmark:header:start
#
#   project      : NullMeta
#   file         : main.py
#   file_relpath : src/nullmeta/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Entry point of the NullMeta command-line interface.

Group-level options (verbosity, color) are resolved once and placed into
``ctx.obj`` together with the console; subcommands read them from there.
Internal logging is configured from the ``NULLMETA_LOG_LEVEL`` environment
variable, independently of program-output verbosity.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from nullmeta.cli.commands.analyze import analyze_command
from nullmeta.cli.commands.version import version_command
from nullmeta.cli.console import ClickConsole
from nullmeta.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from nullmeta.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from nullmeta.cli.console import ConsoleLike
    from nullmeta.config.logging import NullmetaLogger

logger: NullmetaLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="NullMeta: class-level nullability meta-issues.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the NullMeta CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'nullmeta analyze BUNDLE' to report class-level meta-issues.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(analyze_command)

if __name__ == "__main__":
    cli()
