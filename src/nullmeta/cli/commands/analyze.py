# topmark:header:start
#
#   project      : NullMeta
#   file         : analyze.py
#   file_relpath : src/nullmeta/cli/commands/analyze.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""NullMeta `analyze` command.

Loads an analysis bundle, runs the class-level aggregation over every class it
contains, and prints one meta-issue per analyzed class.

Exit status:
    * ``0`` on success;
    * ``1`` with ``--fail-on-regressions`` when a class has regressions in its
      declared mode;
    * ``64``/``65``/``66``/``78`` for usage, bundle, missing-input and config
      errors (see `ExitCode`).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from nullmeta.analysis.aggregator import ClassAggregator
from nullmeta.bundle.environment import BundleEnvironment
from nullmeta.bundle.loader import load_bundle
from nullmeta.cli.errors import NullmetaFileNotFoundError, to_cli_error
from nullmeta.cli.options import OutputFormat, output_format_option
from nullmeta.config.io import load_config
from nullmeta.config.logging import get_logger
from nullmeta.core.errors import NullmetaError
from nullmeta.core.exit_codes import ExitCode
from nullmeta.model.meta_issue import MetaIssueCategory
from nullmeta.reporting.issue_log import IssueLog
from nullmeta.reporting.serializers import iter_ndjson, to_json

if TYPE_CHECKING:
    from nullmeta.bundle.loader import AnalysisBundle
    from nullmeta.cli.console import ConsoleLike
    from nullmeta.config.logging import NullmetaLogger
    from nullmeta.config.model import Config
    from nullmeta.reporting.issue_log import LoggedIssue

logger: NullmetaLogger = get_logger(__name__)


def _load_inputs(bundle_path: Path, config_file: Path | None) -> tuple[Config, AnalysisBundle]:
    if not bundle_path.exists():
        raise NullmetaFileNotFoundError(f"Bundle not found: {bundle_path}")
    if config_file is not None and not config_file.exists():
        raise NullmetaFileNotFoundError(f"Config file not found: {config_file}")
    try:
        return load_config(config_file), load_bundle(bundle_path)
    except NullmetaError as exc:
        raise to_cli_error(exc) from exc


def _render_text(console: ConsoleLike, issue: LoggedIssue) -> str:
    tag = issue.severity.color(f"[{issue.severity.value}]")
    location = console.styled(str(issue.location), dim=True)
    return f"{location}: {tag} {issue.issue_type.value}: {issue.message}"


def _emit_summary(console: ConsoleLike, log: IssueLog) -> None:
    counts = log.counts_by_category()
    console.print()
    console.print(console.styled("Summary:", bold=True))
    width = max(len(c.value) for c in MetaIssueCategory)
    for category in MetaIssueCategory:
        console.print(f"  {category.value:<{width}}: {counts.get(category.value, 0)}")
    if log.n_filtered:
        console.print(f"  {'filtered':<{width}}: {log.n_filtered}")


@click.command(
    name="analyze",
    help="Report one class-level nullability meta-issue per class of BUNDLE.",
)
@click.argument("bundle_path", metavar="BUNDLE", type=click.Path(path_type=Path, dir_okay=False))
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Read configuration from this TOML file instead of the working directory.",
)
@output_format_option
@click.option(
    "--fail-on-regressions",
    is_flag=True,
    default=False,
    help="Exit with status 1 if any class has issues in its declared mode.",
)
def analyze_command(
    *,
    bundle_path: Path,
    config_file: Path | None = None,
    output_format: OutputFormat | None = None,
    fail_on_regressions: bool = False,
) -> None:
    """Analyze every class of an analysis bundle.

    Args:
        bundle_path (Path): JSON analysis bundle.
        config_file (Path | None): Explicit configuration file.
        output_format (OutputFormat | None): Output format (default text).
        fail_on_regressions (bool): Exit 1 when a class has regressions.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)
    fmt: OutputFormat = output_format or OutputFormat.DEFAULT
    if fmt.is_machine:
        console.enable_color = False

    config, bundle = _load_inputs(bundle_path, config_file)
    environment = BundleEnvironment(bundle)
    log = IssueLog(config)
    aggregator = ClassAggregator(
        config,
        class_table=environment,
        mode_resolver=environment,
        sink=log,
    )
    meta_issues = aggregator.analyze_all(bundle.class_infos.values())

    if fmt is OutputFormat.JSON:
        console.print(to_json(log))
    elif fmt is OutputFormat.NDJSON:
        for line in iter_ndjson(log):
            console.print(line)
    elif vlevel >= 0:
        for issue in log:
            console.print(_render_text(console, issue))
        if vlevel > 0:
            _emit_summary(console, log)

    has_regressions = any(m.category is MetaIssueCategory.HAS_REGRESSIONS for m in meta_issues)
    if fail_on_regressions and has_regressions:
        logger.info("At least one class has regressions in its declared mode")
        ctx.exit(ExitCode.FAILURE)
