# topmark:header:start
#
#   project      : NullMeta
#   file         : __init__.py
#   file_relpath : src/nullmeta/analysis/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Class-level nullability analysis.

Components, leaves first:
    - `ViolationClassifier`: which findings are reportable violations in a mode.
    - `PromotionAnalyzer`: strictest clean mode and genuine promotion targets.
    - `MetaIssueBuilder`: category, message, severity and metadata of a class.
    - `ClassAggregator`: per-class driver that reports to a `MetaIssueSink`.
"""

from __future__ import annotations

from nullmeta.analysis.aggregator import ClassAggregator
from nullmeta.analysis.builder import MetaIssueBuilder, promotion_recommendation
from nullmeta.analysis.classifier import (
    TYPING_RULE_VIOLATIONS,
    ViolationClassifier,
    is_typing_rule_violation,
)
from nullmeta.analysis.collaborators import (
    ClassTable,
    MetaIssueSink,
    ModeResolver,
    ReportabilityPolicy,
    TraceElement,
)
from nullmeta.analysis.promotion import PromotionAnalyzer
from nullmeta.analysis.reportability import TrustBasedReportability

__all__ = [
    "TYPING_RULE_VIOLATIONS",
    "ClassAggregator",
    "ClassTable",
    "MetaIssueBuilder",
    "MetaIssueSink",
    "ModeResolver",
    "PromotionAnalyzer",
    "ReportabilityPolicy",
    "TraceElement",
    "TrustBasedReportability",
    "ViolationClassifier",
    "is_typing_rule_violation",
    "promotion_recommendation",
]
