# topmark:header:start
#
#   project      : NullMeta
#   file         : collaborators.py
#   file_relpath : src/nullmeta/analysis/collaborators.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Structural interfaces for the collaborators of the class-level analysis.

The aggregation core never resolves classes, computes modes, or persists issues
itself. It talks to the outside world only through these Protocols, so callers
can plug in a real type environment or the JSON bundle in `nullmeta.bundle`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from nullmeta.model.classes import ClassName, ClassStructInfo
    from nullmeta.model.finding import Finding, Location
    from nullmeta.model.meta_issue import (
        MetaIssueCategory,
        MetaIssueType,
        Severity,
    )
    from nullmeta.model.mode import EnforcementMode


@dataclass(frozen=True)
class TraceElement:
    """One step of the explanation trace attached to a logged issue."""

    level: int
    location: Location
    description: str


class ClassTable(Protocol):
    """Resolves the structural definition of a class."""

    def lookup_class(self, class_name: ClassName) -> ClassStructInfo | None:
        """Return the class definition, or None if it cannot be resolved."""
        ...


class ModeResolver(Protocol):
    """Computes the enforcement mode a class currently declares."""

    def resolve_current_mode(self, class_name: ClassName) -> EnforcementMode:
        """Return the current mode of ``class_name``."""
        ...


class ReportabilityPolicy(Protocol):
    """Decides whether a finding would surface to the user under a given mode."""

    def is_reportable(self, finding: Finding, mode: EnforcementMode) -> bool:
        """Return True if ``finding`` is reported when the class declares ``mode``."""
        ...


class MetaIssueSink(Protocol):
    """Fire-and-forget destination for class-level meta-issues."""

    def log_meta_issue(
        self,
        *,
        class_name: ClassName,
        location: Location,
        severity: Severity,
        trace: Sequence[TraceElement],
        extra: Mapping[str, object],
        issue_type: MetaIssueType,
        category: MetaIssueCategory,
        message: str,
    ) -> None:
        """Record one meta-issue."""
        ...
