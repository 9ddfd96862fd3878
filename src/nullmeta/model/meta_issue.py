# topmark:header:start
#
#   project      : NullMeta
#   file         : meta_issue.py
#   file_relpath : src/nullmeta/model/meta_issue.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Meta-issue types: the single class-level record produced per analyzed class.

Sections:
    * Severity: advisory vs. informational, with terminal colors.
    * MetaIssueType: the three user-visible issue types (can be toggled in config).
    * MetaIssueCategory: the four classification outcomes, each mapped to a type.
    * MetaIssueInfo: structured metadata attached to every meta-issue.
    * MetaIssue: category + type + message + severity + metadata.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

    from nullmeta.model.mode import EnforcementMode


class Severity(Enum):
    """Severity of a meta-issue."""

    ADVICE = "advice"
    INFO = "info"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function for human-readable output."""
        return cast(
            "Callable[[str], str]",
            {
                Severity.ADVICE: chalk.green,
                Severity.INFO: chalk.blue,
            }[self],
        )


class MetaIssueType(str, Enum):
    """User-visible meta-issue types.

    ``NEEDS_IMPROVEMENT`` is shared by classes that cannot be promoted yet and
    classes that regressed in their declared mode.
    """

    CAN_BE_NULLSAFE = "META_CLASS_CAN_BE_NULLSAFE"
    NEEDS_IMPROVEMENT = "META_CLASS_NEEDS_IMPROVEMENT"
    IS_NULLSAFE = "META_CLASS_IS_NULLSAFE"

    @classmethod
    def parse(cls, raw: str) -> MetaIssueType | None:
        """Parse a type from its value (``META_CLASS_IS_NULLSAFE``) or member name."""
        token = raw.strip().upper().replace("-", "_")
        for member in cls:
            if token in (member.value, member.name):
                return member
        return None


class MetaIssueCategory(str, Enum):
    """Classification outcome for one class."""

    CAN_BECOME_STRICT = "can_become_strict"
    NEEDS_IMPROVEMENT = "needs_improvement"
    HAS_REGRESSIONS = "has_regressions"
    ALREADY_COMPLIANT = "already_compliant"

    @property
    def issue_type(self) -> MetaIssueType:
        """User-visible issue type this category is reported as."""
        return _CATEGORY_TYPES[self]


_CATEGORY_TYPES: Final[dict[MetaIssueCategory, MetaIssueType]] = {
    MetaIssueCategory.CAN_BECOME_STRICT: MetaIssueType.CAN_BE_NULLSAFE,
    MetaIssueCategory.NEEDS_IMPROVEMENT: MetaIssueType.NEEDS_IMPROVEMENT,
    MetaIssueCategory.HAS_REGRESSIONS: MetaIssueType.NEEDS_IMPROVEMENT,
    MetaIssueCategory.ALREADY_COMPLIANT: MetaIssueType.IS_NULLSAFE,
}


@dataclass(frozen=True)
class MetaIssueInfo:
    """Structured metadata attached to every meta-issue, whatever its category."""

    violation_count_in_current_mode: int
    current_mode: EnforcementMode
    promotable_to: EnforcementMode | None


@dataclass(frozen=True)
class MetaIssue:
    """The class-level summary issue built for one class."""

    category: MetaIssueCategory
    message: str
    severity: Severity
    info: MetaIssueInfo

    @property
    def issue_type(self) -> MetaIssueType:
        return self.category.issue_type
