# topmark:header:start
#
#   project      : NullMeta
#   file         : aggregator.py
#   file_relpath : src/nullmeta/analysis/aggregator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Drive the class-level analysis for one class at a time.

For each class the aggregator resolves the current mode, flattens the findings
of the class and of the anonymous units it owns, resolves the declaration
location, builds the meta-issue, and hands it to the sink exactly once.

Classes are independent of each other: `ClassAggregator.analyze_class` reads no
state left behind by a previous class.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nullmeta.analysis.builder import MetaIssueBuilder
from nullmeta.analysis.classifier import ViolationClassifier
from nullmeta.analysis.collaborators import TraceElement
from nullmeta.analysis.promotion import PromotionAnalyzer
from nullmeta.analysis.reportability import TrustBasedReportability
from nullmeta.config.logging import get_logger
from nullmeta.model.finding import Location

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nullmeta.analysis.collaborators import (
        ClassTable,
        MetaIssueSink,
        ModeResolver,
        ReportabilityPolicy,
    )
    from nullmeta.config.logging import NullmetaLogger
    from nullmeta.config.model import Config
    from nullmeta.model.classes import ClassInfo, ClassName
    from nullmeta.model.meta_issue import MetaIssue

logger: NullmetaLogger = get_logger(__name__)


class ClassAggregator:
    """Produces one meta-issue per analyzed class.

    Args:
        config (Config): Runtime configuration. Whether meta-issues are analyzed
            at all is read once, here.
        class_table (ClassTable): Resolves class definitions.
        mode_resolver (ModeResolver): Resolves the mode each class declares.
        sink (MetaIssueSink): Receives the meta-issues.
        policy (ReportabilityPolicy | None): Reportability collaborator. Defaults
            to `TrustBasedReportability` built from ``config``.
    """

    def __init__(
        self,
        config: Config,
        *,
        class_table: ClassTable,
        mode_resolver: ModeResolver,
        sink: MetaIssueSink,
        policy: ReportabilityPolicy | None = None,
    ) -> None:
        self.enabled: bool = config.should_analyze_meta_issues()
        self.class_table = class_table
        self.mode_resolver = mode_resolver
        self.sink = sink
        classifier = ViolationClassifier(policy or TrustBasedReportability.from_config(config))
        self.builder = MetaIssueBuilder(PromotionAnalyzer(classifier))

    def analyze_class(self, class_name: ClassName, class_info: ClassInfo) -> MetaIssue | None:
        """Analyze one class and report its meta-issue to the sink.

        Args:
            class_name (ClassName): The class to analyze.
            class_info (ClassInfo): Summaries of the class and of its nested
                anonymous units.

        Returns:
            MetaIssue | None: The reported meta-issue, or None when meta-issues are
            disabled or the class definition cannot be resolved.
        """
        if not self.enabled:
            return None

        class_struct = self.class_table.lookup_class(class_name)
        if class_struct is None:
            logger.debug(
                "%s: could not load class info in environment: skipping class analysis",
                class_name,
            )
            return None

        current_mode = self.mode_resolver.resolve_current_mode(class_name)
        class_loc = class_struct.location or Location.first_line_of(class_info.source_file)
        all_issues = class_info.all_findings()

        meta_issue = self.builder.build(all_issues, current_mode, class_name)

        extra: dict[str, object] = {
            "class_name": class_name.classname,
            "package": class_name.package,
            "meta_issue_info": meta_issue.info,
        }
        trace = [TraceElement(level=0, location=class_loc, description=meta_issue.message)]
        self.sink.log_meta_issue(
            class_name=class_name,
            location=class_loc,
            severity=meta_issue.severity,
            trace=trace,
            extra=extra,
            issue_type=meta_issue.issue_type,
            category=meta_issue.category,
            message=meta_issue.message,
        )
        return meta_issue

    def analyze_all(self, classes: Iterable[ClassInfo]) -> list[MetaIssue]:
        """Analyze every class in ``classes`` and return the reported meta-issues.

        Classes that cannot be resolved are skipped; the run continues.
        """
        if not self.enabled:
            logger.info("All meta-issue types are disabled: skipping class-level analysis")
            return []
        reported: list[MetaIssue] = []
        for class_info in classes:
            meta_issue = self.analyze_class(class_info.name, class_info)
            if meta_issue is not None:
                reported.append(meta_issue)
        logger.info("Reported %d meta-issue(s)", len(reported))
        return reported
