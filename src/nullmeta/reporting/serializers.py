# topmark:header:start
#
#   project      : NullMeta
#   file         : serializers.py
#   file_relpath : src/nullmeta/reporting/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON-friendly payloads for recorded meta-issues.

Machine formats never carry ANSI colors. Modes are written with their stable
machine key (`EnforcementMode.key`), e.g. ``"LocalTrustNone"``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from nullmeta.model.meta_issue import MetaIssueInfo

if TYPE_CHECKING:
    from collections.abc import Iterable

    from nullmeta.model.finding import Location
    from nullmeta.reporting.issue_log import LoggedIssue


def location_to_dict(location: Location) -> dict[str, Any]:
    return {"file": location.file, "line": location.line, "col": location.col}


def meta_issue_info_to_dict(info: MetaIssueInfo) -> dict[str, Any]:
    """Serialize the structured metadata of a meta-issue."""
    return {
        "num_issues": info.violation_count_in_current_mode,
        "curr_nullsafe_mode": info.current_mode.key,
        "can_be_promoted_to": info.promotable_to.key if info.promotable_to else None,
    }


def logged_issue_to_dict(issue: LoggedIssue) -> dict[str, Any]:
    """Serialize one recorded meta-issue.

    Args:
        issue (LoggedIssue): The recorded issue.

    Returns:
        dict[str, Any]: A JSON-compatible mapping.
    """
    nullsafe_extra: dict[str, Any] = {}
    for key, value in issue.extra.items():
        if isinstance(value, MetaIssueInfo):
            nullsafe_extra[key] = meta_issue_info_to_dict(value)
        else:
            nullsafe_extra[key] = value

    return {
        "bug_type": issue.issue_type.value,
        "category": issue.category.value,
        "severity": issue.severity.value,
        "qualifier": issue.message,
        "class": str(issue.class_name),
        "location": location_to_dict(issue.location),
        "bug_trace": [
            {
                "level": element.level,
                "location": location_to_dict(element.location),
                "description": element.description,
            }
            for element in issue.trace
        ],
        "nullsafe_extra": nullsafe_extra,
    }


def to_json(issues: Iterable[LoggedIssue]) -> str:
    """Render issues as one JSON array."""
    return json.dumps([logged_issue_to_dict(i) for i in issues], indent=2)


def iter_ndjson(issues: Iterable[LoggedIssue]) -> Iterable[str]:
    """Yield one compact JSON object per issue (newline-delimited JSON)."""
    for issue in issues:
        yield json.dumps(logged_issue_to_dict(issue), separators=(",", ":"))
