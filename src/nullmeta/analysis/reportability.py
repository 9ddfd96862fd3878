# topmark:header:start
#
#   project      : NullMeta
#   file         : reportability.py
#   file_relpath : src/nullmeta/analysis/reportability.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default mode-dependent reportability of findings.

Rules, in order:

1. a kind suppressed by configuration is never reportable;
2. under ``Default`` only findings on declared nullability are reported: no
   ``origin`` and not ``nullsafe_only``;
3. in any other mode a finding without ``origin`` is reported;
4. a finding with an ``origin`` is reported under ``Strict``; under
   ``Local(trust)`` it is reported only when the origin is not itself checked
   (``origin_is_nullsafe``) and ``trust`` does not cover it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nullmeta.model.mode import ModeKind

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nullmeta.config.model import Config
    from nullmeta.model.finding import Finding, FindingKind
    from nullmeta.model.mode import EnforcementMode


class TrustBasedReportability:
    """`ReportabilityPolicy` driven by trust sets and suppressed finding kinds."""

    def __init__(self, suppressed_kinds: Iterable[FindingKind] = ()) -> None:
        self._suppressed: frozenset[FindingKind] = frozenset(suppressed_kinds)

    @classmethod
    def from_config(cls, config: Config) -> TrustBasedReportability:
        return cls(suppressed_kinds=config.suppressed_kinds)

    @property
    def suppressed_kinds(self) -> frozenset[FindingKind]:
        return self._suppressed

    def is_reportable(self, finding: Finding, mode: EnforcementMode) -> bool:
        """Return True if ``finding`` surfaces to the user when the class declares ``mode``."""
        if finding.kind in self._suppressed:
            return False
        if mode.kind is ModeKind.DEFAULT:
            return finding.origin is None and not finding.nullsafe_only
        if finding.origin is None:
            return True
        if mode.kind is ModeKind.STRICT:
            return True
        if finding.origin_is_nullsafe:
            return False
        assert mode.trust is not None
        return not mode.trust.trusts(finding.origin)
