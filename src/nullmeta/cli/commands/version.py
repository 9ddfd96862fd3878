# topmark:header:start
#
#   project      : NullMeta
#   file         : version.py
#   file_relpath : src/nullmeta/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NullMeta `version` command.

Prints the NullMeta version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from nullmeta.cli.options import OutputFormat, output_format_option
from nullmeta.constants import NULLMETA_VERSION

if TYPE_CHECKING:
    from nullmeta.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of NullMeta.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of NullMeta.

    Args:
        output_format (OutputFormat | None): Optional output format.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt.is_machine:
        console.print(json.dumps({"version": NULLMETA_VERSION}))
    elif vlevel > 0:
        console.print(console.styled("NullMeta version:", bold=True, underline=True))
        console.print(f"    {console.styled(NULLMETA_VERSION, bold=True)}")
    else:
        console.print(console.styled(NULLMETA_VERSION, bold=True))
