# topmark:header:start
#
#   project      : NullMeta
#   file         : errors.py
#   file_relpath : src/nullmeta/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click exceptions raised by NullMeta commands.

Each class carries the exit code of its failure family (see `ExitCode`).
`NullmetaInternalError` has no CLI counterpart: it is never translated and
propagates out of the command.
"""

from __future__ import annotations

from typing import IO, Any

import click

from nullmeta.core.errors import NullmetaBundleError, NullmetaConfigError, NullmetaError
from nullmeta.core.exit_codes import ExitCode


class NullmetaCliError(click.ClickException):
    """Base class for all NullMeta CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain message; color is applied in `show()`."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error on the project console if one is registered."""
        ctx = click.get_current_context(silent=True)
        console = ctx.obj.get("console") if ctx is not None and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class NullmetaUsageError(NullmetaCliError):
    """Invalid command-line invocation."""

    exit_code = ExitCode.USAGE_ERROR


class NullmetaCliConfigError(NullmetaCliError):
    """Missing, unreadable or invalid configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class NullmetaDataError(NullmetaCliError):
    """Malformed analysis bundle."""

    exit_code = ExitCode.DATA_ERROR


class NullmetaFileNotFoundError(NullmetaCliError):
    """Input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


def to_cli_error(exc: NullmetaError) -> NullmetaCliError:
    """Translate a user-facing core error into its CLI exception."""
    if isinstance(exc, NullmetaConfigError):
        return NullmetaCliConfigError(str(exc))
    if isinstance(exc, NullmetaBundleError):
        return NullmetaDataError(str(exc))
    return NullmetaCliError(str(exc))
