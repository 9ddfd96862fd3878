# topmark:header:start
#
#   project      : NullMeta
#   file         : __init__.py
#   file_relpath : src/nullmeta/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Domain model: enforcement modes, findings, class summaries and meta-issues.

Design:
    - Everything consumed by the analysis is immutable (`Finding`, `Summary`,
      `EnforcementMode`, `MetaIssue`).
    - `ClassInfo` is the only mutable container; it is filled once while
      grouping summaries and then only read.
"""

from __future__ import annotations

from nullmeta.model.classes import (
    ClassInfo,
    ClassName,
    ClassStructInfo,
    NullsafePayload,
    Summary,
    aggregate_summaries,
)
from nullmeta.model.finding import Finding, FindingKind, Location
from nullmeta.model.meta_issue import (
    MetaIssue,
    MetaIssueCategory,
    MetaIssueInfo,
    MetaIssueType,
    Severity,
)
from nullmeta.model.mode import (
    DEFAULT,
    LOCAL_TRUST_ALL,
    LOCAL_TRUST_NONE,
    PROMOTION_CHAIN,
    STRICT,
    EnforcementMode,
    ModeKind,
    Trust,
    is_stricter_than,
)

__all__ = [
    "DEFAULT",
    "LOCAL_TRUST_ALL",
    "LOCAL_TRUST_NONE",
    "PROMOTION_CHAIN",
    "STRICT",
    "ClassInfo",
    "ClassName",
    "ClassStructInfo",
    "EnforcementMode",
    "Finding",
    "FindingKind",
    "Location",
    "MetaIssue",
    "MetaIssueCategory",
    "MetaIssueInfo",
    "MetaIssueType",
    "ModeKind",
    "NullsafePayload",
    "Severity",
    "Summary",
    "Trust",
    "aggregate_summaries",
    "is_stricter_than",
]
