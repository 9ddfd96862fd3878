# topmark:header:start
#
#   project      : NullMeta
#   file         : promotion.py
#   file_relpath : src/nullmeta/analysis/promotion.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Find the strictest mode a class could declare while staying free of violations.

The search walks the fixed `PROMOTION_CHAIN` (Strict, Local trusting nobody,
Local trusting all, Default) from strictest to weakest and stops at the first
mode in which no finding is a reportable violation. It never walks arbitrary
trust subsets: recommendations are restricted to the canonical targets.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nullmeta.config.logging import get_logger
from nullmeta.model.mode import LOCAL_TRUST_NONE, PROMOTION_CHAIN, STRICT

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nullmeta.analysis.classifier import ViolationClassifier
    from nullmeta.config.logging import NullmetaLogger
    from nullmeta.model.finding import Finding
    from nullmeta.model.mode import EnforcementMode

logger: NullmetaLogger = get_logger(__name__)


class PromotionAnalyzer:
    """Computes promotion targets on top of a `ViolationClassifier`."""

    def __init__(self, classifier: ViolationClassifier) -> None:
        self.classifier = classifier

    def strictest_zero_issue_mode(self, findings: Sequence[Finding]) -> EnforcementMode | None:
        """Return the strictest canonical mode with zero reportable violations.

        Args:
            findings (Sequence[Finding]): All findings of the class.

        Returns:
            EnforcementMode | None: The first clean mode of `PROMOTION_CHAIN`, or
            None if the class has violations even in Default mode.
        """
        for mode in PROMOTION_CHAIN:
            if self.classifier.is_clean_in_mode(findings, mode):
                logger.trace("Strictest clean mode: %s", mode)
                return mode
        return None

    def mode_to_promote_to(
        self,
        current_mode: EnforcementMode,
        findings: Sequence[Finding],
    ) -> EnforcementMode | None:
        """Return the strictest clean mode if it is strictly stricter than ``current_mode``.

        A lateral or backward move is never a promotion, so the result is None in
        that case.
        """
        strictest = self.strictest_zero_issue_mode(findings)
        if strictest is not None and strictest.is_stricter_than(current_mode):
            return strictest
        return None

    def recommended_promotion(
        self,
        current_mode: EnforcementMode,
        findings: Sequence[Finding],
    ) -> EnforcementMode | None:
        """Return the mode the class should be advised to declare, if any.

        Same as `mode_to_promote_to`, except that Strict is recommended as Local
        trusting nobody whenever that is still a promotion.
        """
        return recommend(self.mode_to_promote_to(current_mode, findings), current_mode)


def recommend(
    target: EnforcementMode | None,
    current_mode: EnforcementMode,
) -> EnforcementMode | None:
    """Map a promotion target to the mode that is actually recommended.

    Strict becomes Local trusting nobody when that still beats ``current_mode``;
    every other target is returned unchanged.
    """
    if target == STRICT and LOCAL_TRUST_NONE.is_stricter_than(current_mode):
        return LOCAL_TRUST_NONE
    return target
