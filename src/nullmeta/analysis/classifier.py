# topmark:header:start
#
#   project      : NullMeta
#   file         : classifier.py
#   file_relpath : src/nullmeta/analysis/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decide which findings count as reportable typing-rule violations."""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from nullmeta.model.finding import FindingKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nullmeta.analysis.collaborators import ReportabilityPolicy
    from nullmeta.model.finding import Finding
    from nullmeta.model.mode import EnforcementMode

# Redundant conditions and over-annotations stay reportable diagnostics of their
# own, but they are not violations of the typing rules.
TYPING_RULE_VIOLATIONS: Final[frozenset[FindingKind]] = frozenset(
    {
        FindingKind.INCONSISTENT_SUBCLASS,
        FindingKind.NULLABLE_DEREFERENCE,
        FindingKind.FIELD_NOT_INITIALIZED,
        FindingKind.BAD_ASSIGNMENT,
    }
)


def is_typing_rule_violation(finding: Finding) -> bool:
    """Return True if ``finding`` violates the nullability typing rules."""
    return finding.kind in TYPING_RULE_VIOLATIONS


class ViolationClassifier:
    """Filters findings down to the violations reportable under a given mode.

    Args:
        policy (ReportabilityPolicy): Mode-dependent reportability collaborator.
    """

    def __init__(self, policy: ReportabilityPolicy) -> None:
        self._policy = policy

    def is_reportable(self, finding: Finding, mode: EnforcementMode) -> bool:
        return self._policy.is_reportable(finding, mode)

    def is_reportable_violation(self, finding: Finding, mode: EnforcementMode) -> bool:
        """Return True if ``finding`` is a violation and is reported under ``mode``."""
        return is_typing_rule_violation(finding) and self._policy.is_reportable(finding, mode)

    def reportable_violations(
        self,
        findings: Iterable[Finding],
        mode: EnforcementMode,
    ) -> list[Finding]:
        """Return the findings that are reportable violations under ``mode``, in input order."""
        return [f for f in findings if self.is_reportable_violation(f, mode)]

    def is_clean_in_mode(self, findings: Iterable[Finding], mode: EnforcementMode) -> bool:
        """Return True if no finding is a reportable violation under ``mode``."""
        return not any(self.is_reportable_violation(f, mode) for f in findings)
