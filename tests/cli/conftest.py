# topmark:header:start
#
#   project      : NullMeta
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running NullMeta in a controlled working directory.

`run_cli_in()` changes the process working directory before invoking the
Click CLI, so that config discovery (``nullmeta.toml``, ``pyproject.toml``)
happens inside the test's temporary directory.
"""

from __future__ import annotations

import json
import os
from typing import IO, TYPE_CHECKING, Any, Sequence

from click.testing import CliRunner, Result

from nullmeta.cli.main import cli
from nullmeta.core.exit_codes import ExitCode
from tests.conftest import sample_bundle

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector.
        input_text (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, argv, input=input_text)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on config discovery (e.g.
    ``--help`` or ``version``) or when every path is absolute.
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def write_bundle(tmp_path: Path, data: Any | None = None, name: str = "bundle.json") -> Path:
    """Write ``data`` (default: `sample_bundle()`) as JSON under ``tmp_path``."""
    path = tmp_path / name
    path.write_text(json.dumps(sample_bundle() if data is None else data), encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_FAILURE(result: Result) -> None:
    """Assert that the command exited with FAILURE (code 1)."""
    assert result.exit_code == ExitCode.FAILURE, result.output
