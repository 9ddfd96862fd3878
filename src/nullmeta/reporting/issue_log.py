# topmark:header:start
#
#   project      : NullMeta
#   file         : issue_log.py
#   file_relpath : src/nullmeta/reporting/issue_log.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""In-memory sink for meta-issues.

`IssueLog` implements `MetaIssueSink`. It keeps the issues in insertion order
and drops issue types that the configuration disables (when filtering is on).
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nullmeta.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from nullmeta.analysis.collaborators import TraceElement
    from nullmeta.config.logging import NullmetaLogger
    from nullmeta.config.model import Config
    from nullmeta.model.classes import ClassName
    from nullmeta.model.finding import Location
    from nullmeta.model.meta_issue import MetaIssueCategory, MetaIssueType, Severity

logger: NullmetaLogger = get_logger(__name__)


@dataclass(frozen=True)
class LoggedIssue:
    """One meta-issue as recorded by `IssueLog`."""

    class_name: ClassName
    location: Location
    severity: Severity
    issue_type: MetaIssueType
    category: MetaIssueCategory
    message: str
    trace: tuple[TraceElement, ...] = ()
    extra: Mapping[str, object] = field(default_factory=lambda: {})


class IssueLog:
    """Collects meta-issues, honoring the issue types enabled in ``config``."""

    def __init__(self, config: Config | None = None) -> None:
        self._config = config
        self._items: list[LoggedIssue] = []
        self.n_filtered: int = 0

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
        """Record one meta-issue unless its type is disabled."""
        if self._config is not None and not self._config.is_issue_type_enabled(issue_type):
            self.n_filtered += 1
            logger.debug("%s: %s is disabled, not recorded", class_name, issue_type.value)
            return
        self._items.append(
            LoggedIssue(
                class_name=class_name,
                location=location,
                severity=severity,
                issue_type=issue_type,
                category=category,
                message=message,
                trace=tuple(trace),
                extra=dict(extra),
            )
        )
        logger.trace("Recorded [%s] %s", severity.value, message)

    def counts_by_category(self) -> dict[str, int]:
        """Return the number of recorded issues per category value."""
        counts: Counter[str] = Counter(item.category.value for item in self._items)
        return dict(counts)

    def __iter__(self) -> Iterator[LoggedIssue]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)
