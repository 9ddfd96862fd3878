# topmark:header:start
#
#   project      : NullMeta
#   file         : model.py
#   file_relpath : src/nullmeta/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable runtime configuration.

`Config` is built once (from runtime defaults or from a parsed TOML table) and
handed to the components that need it. Components read it at construction
time; nothing consults a global flag while analyzing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, cast

from nullmeta.config.keys import Toml
from nullmeta.config.logging import get_logger
from nullmeta.core.errors import NullmetaConfigError
from nullmeta.model.finding import FindingKind
from nullmeta.model.meta_issue import MetaIssueType

if TYPE_CHECKING:
    from collections.abc import Mapping

    from nullmeta.config.logging import NullmetaLogger

logger: NullmetaLogger = get_logger(__name__)


@dataclass(frozen=True)
class Config:
    """Frozen NullMeta configuration.

    Attributes:
        filtering (bool): Whether disabled issue types are filtered out. With
            filtering off every meta-issue type is reported.
        disabled_issue_types (frozenset[MetaIssueType]): Meta-issue types the
            user does not want to see.
        suppressed_kinds (frozenset[FindingKind]): Finding kinds that are never
            reportable, in any mode.
    """

    filtering: bool = True
    disabled_issue_types: frozenset[MetaIssueType] = field(default_factory=lambda: frozenset())
    suppressed_kinds: frozenset[FindingKind] = field(default_factory=lambda: frozenset())

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the runtime defaults (every meta-issue type enabled, nothing suppressed)."""
        return cls()

    @classmethod
    def from_toml_dict(cls, data: Mapping[str, Any]) -> Config:
        """Build a config from a parsed TOML table.

        Missing sections and keys fall back to the runtime defaults.

        Args:
            data (Mapping[str, Any]): Top-level NullMeta table (``nullmeta.toml`` or
                ``[tool.nullmeta]``).

        Returns:
            Config: The frozen configuration.

        Raises:
            NullmetaConfigError: If a value has the wrong type or names an unknown
                issue type or finding kind.
        """
        issues = _get_table(data, Toml.SECTION_ISSUES)
        reporting = _get_table(data, Toml.SECTION_REPORTING)

        filtering = issues.get(Toml.KEY_FILTERING, True)
        if not isinstance(filtering, bool):
            raise NullmetaConfigError(
                f"[{Toml.SECTION_ISSUES}] {Toml.KEY_FILTERING} must be a boolean, "
                f"got {filtering!r}"
            )

        disabled: set[MetaIssueType] = set()
        for raw in _get_str_list(issues, Toml.SECTION_ISSUES, Toml.KEY_DISABLED):
            issue_type = MetaIssueType.parse(raw)
            if issue_type is None:
                raise NullmetaConfigError(
                    f"[{Toml.SECTION_ISSUES}] {Toml.KEY_DISABLED}: unknown issue type {raw!r} "
                    f"(expected one of: {', '.join(t.value for t in MetaIssueType)})"
                )
            disabled.add(issue_type)

        suppressed: set[FindingKind] = set()
        for raw in _get_str_list(reporting, Toml.SECTION_REPORTING, Toml.KEY_SUPPRESSED_KINDS):
            kind = FindingKind.parse(raw)
            if kind is None:
                raise NullmetaConfigError(
                    f"[{Toml.SECTION_REPORTING}] {Toml.KEY_SUPPRESSED_KINDS}: unknown finding "
                    f"kind {raw!r} (expected one of: {', '.join(k.value for k in FindingKind)})"
                )
            suppressed.add(kind)

        config = cls(
            filtering=filtering,
            disabled_issue_types=frozenset(disabled),
            suppressed_kinds=frozenset(suppressed),
        )
        logger.debug("Loaded config: %r", config)
        return config

    def is_issue_type_enabled(self, issue_type: MetaIssueType) -> bool:
        """Return True if ``issue_type`` should be reported."""
        return not self.filtering or issue_type not in self.disabled_issue_types

    def should_analyze_meta_issues(self) -> bool:
        """Return False only when every meta-issue type would be filtered out.

        Used to skip class-level aggregation entirely when nobody would see its output.
        """
        return any(self.is_issue_type_enabled(issue_type) for issue_type in MetaIssueType)


def _get_table(data: Mapping[str, Any], section: str) -> Mapping[str, Any]:
    value = data.get(section, {})
    if not isinstance(value, dict):
        raise NullmetaConfigError(f"[{section}] must be a table, got {type(value).__name__}")
    return cast("Mapping[str, Any]", value)


def _get_str_list(table: Mapping[str, Any], section: str, key: str) -> list[str]:
    value = table.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, str) for v in cast("list[Any]", value)):
        raise NullmetaConfigError(f"[{section}] {key} must be a list of strings")
    return [str(v) for v in cast("list[Any]", value)]
