# topmark:header:start
#
#   project      : NullMeta
#   file         : builder.py
#   file_relpath : src/nullmeta/analysis/builder.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classify a class into one meta-issue.

Decision procedure (first match wins):

1. The class is in Default mode:
   a. it can be promoted -> `MetaIssueCategory.CAN_BECOME_STRICT` (advice);
   b. otherwise -> `MetaIssueCategory.NEEDS_IMPROVEMENT` (info), counting the
      violations that block the weakest checked mode, Local trusting all.
2. The class declares a checked mode but has reportable violations in it ->
   `MetaIssueCategory.HAS_REGRESSIONS` (info).
3. Otherwise -> `MetaIssueCategory.ALREADY_COMPLIANT` (info).

The metadata (`MetaIssueInfo`) is computed once, before classification, and is
the same whatever the category.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nullmeta.analysis.promotion import recommend
from nullmeta.config.logging import get_logger
from nullmeta.core.errors import NullmetaInternalError
from nullmeta.model.meta_issue import (
    MetaIssue,
    MetaIssueCategory,
    MetaIssueInfo,
    Severity,
)
from nullmeta.model.mode import LOCAL_TRUST_ALL, LOCAL_TRUST_NONE, STRICT

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nullmeta.analysis.promotion import PromotionAnalyzer
    from nullmeta.config.logging import NullmetaLogger
    from nullmeta.model.classes import ClassName
    from nullmeta.model.finding import Finding
    from nullmeta.model.mode import EnforcementMode

logger: NullmetaLogger = get_logger(__name__)

LOCAL_TRUST_ALL_ANNOTATION = "`@Nullsafe(Nullsafe.Mode.Local)`"
LOCAL_TRUST_NONE_ANNOTATION = (
    "`@Nullsafe(value = Nullsafe.Mode.LOCAL, trustOnly = @Nullsafe.TrustList({}))`"
)


def promotion_recommendation(target: EnforcementMode) -> str:
    """Return the annotation text recommended for promoting a class to ``target``.

    Strict is deliberately recommended in its Local-trusting-nobody form.

    Args:
        target (EnforcementMode): Promotion target computed by `PromotionAnalyzer`.

    Returns:
        str: The annotation to suggest in the meta-issue message.

    Raises:
        NullmetaInternalError: If ``target`` is not one of the three canonical
            promotion targets. This means the promotion chain or the classifier
            contract was broken.
    """
    if target == LOCAL_TRUST_ALL:
        return LOCAL_TRUST_ALL_ANNOTATION
    if target in (LOCAL_TRUST_NONE, STRICT):
        return LOCAL_TRUST_NONE_ANNOTATION
    raise NullmetaInternalError(f"Unexpected promotion mode: {target}")


class MetaIssueBuilder:
    """Builds the `MetaIssue` of one class from its findings and current mode."""

    def __init__(self, analyzer: PromotionAnalyzer) -> None:
        self.analyzer = analyzer

    def build(
        self,
        findings: Sequence[Finding],
        current_mode: EnforcementMode,
        class_name: ClassName,
    ) -> MetaIssue:
        """Classify the class and render its meta-issue.

        Args:
            findings (Sequence[Finding]): Every finding of the class, including
                those of its nested anonymous units.
            current_mode (EnforcementMode): Mode the class currently declares.
            class_name (ClassName): The class being classified.

        Returns:
            MetaIssue: Category, message, severity and metadata.

        Raises:
            NullmetaInternalError: If a promotion target outside the canonical
                targets is produced (never caught: it aborts the run).
        """
        classifier = self.analyzer.classifier
        count_in_current_mode = len(classifier.reportable_violations(findings, current_mode))
        mode_to_promote_to = self.analyzer.mode_to_promote_to(current_mode, findings)
        info = MetaIssueInfo(
            violation_count_in_current_mode=count_in_current_mode,
            current_mode=current_mode,
            promotable_to=recommend(mode_to_promote_to, current_mode),
        )

        category: MetaIssueCategory
        severity: Severity
        message: str
        if current_mode.is_default:
            if mode_to_promote_to is not None:
                category = MetaIssueCategory.CAN_BECOME_STRICT
                severity = Severity.ADVICE
                message = (
                    f"Congrats! `{class_name.classname}` is free of nullability issues. "
                    f"Mark it {promotion_recommendation(mode_to_promote_to)} "
                    "to prevent regressions."
                )
            else:
                count_to_fix = len(classifier.reportable_violations(findings, LOCAL_TRUST_ALL))
                category = MetaIssueCategory.NEEDS_IMPROVEMENT
                severity = Severity.INFO
                message = (
                    f"`{class_name.classname}` needs {count_to_fix} issues to be fixed "
                    "in order to be marked @Nullsafe."
                )
        elif count_in_current_mode > 0:
            category = MetaIssueCategory.HAS_REGRESSIONS
            severity = Severity.INFO
            message = (
                "@Nullsafe classes should have exactly zero nullability issues. "
                f"`{class_name.classname}` has {count_in_current_mode}."
            )
        else:
            category = MetaIssueCategory.ALREADY_COMPLIANT
            severity = Severity.INFO
            message = f"Class {class_name} is free of nullability issues."

        logger.debug("%s: %s (mode=%s, %r)", class_name, category.value, current_mode, info)
        return MetaIssue(category=category, message=message, severity=severity, info=info)
