# topmark:header:start
#
#   project      : NullMeta
#   file         : __init__.py
#   file_relpath : src/nullmeta/reporting/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Meta-issue sinks and their machine-readable serialization."""

from __future__ import annotations

from nullmeta.reporting.issue_log import IssueLog, LoggedIssue
from nullmeta.reporting.serializers import (
    iter_ndjson,
    logged_issue_to_dict,
    meta_issue_info_to_dict,
    to_json,
)

__all__ = [
    "IssueLog",
    "LoggedIssue",
    "iter_ndjson",
    "logged_issue_to_dict",
    "meta_issue_info_to_dict",
    "to_json",
]
