# topmark:header:start
#
#   project      : NullMeta
#   file         : finding.py
#   file_relpath : src/nullmeta/model/finding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-method nullability findings, as produced by the upstream dataflow pass.

Findings are immutable: they are created once by the producer (or by the bundle
loader) and only read during class-level aggregation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final

from nullmeta.constants import DEFAULT_CLASS_COL, DEFAULT_CLASS_LINE


def _norm_token(s: str) -> str:
    """Normalize a token: ``"Nullable-Dereference"`` -> ``"nullable_dereference"``."""
    return s.strip().lower().replace("-", "_").replace(" ", "_")


class FindingKind(str, Enum):
    """Closed vocabulary of finding kinds.

    The first four are violations of the nullability typing rules. The last two
    are diagnostics that stay reportable on their own but never count as
    violations.
    """

    INCONSISTENT_SUBCLASS = "inconsistent_subclass"
    NULLABLE_DEREFERENCE = "nullable_dereference"
    FIELD_NOT_INITIALIZED = "field_not_initialized"
    BAD_ASSIGNMENT = "bad_assignment"
    CONDITION_REDUNDANT = "condition_redundant"
    OVER_ANNOTATION = "over_annotation"

    @property
    def label(self) -> str:
        """Human-readable label."""
        return _KIND_LABELS[self]

    @classmethod
    def parse(cls, raw: str | None) -> FindingKind | None:
        """Parse a value or member name (case-insensitive, ``-``/`` `` treated as ``_``)."""
        if raw is None:
            return None
        token = _norm_token(raw)
        for member in cls:
            if token in (member.value, member.name.lower()):
                return member
        return None


_KIND_LABELS: Final[dict[FindingKind, str]] = {
    FindingKind.INCONSISTENT_SUBCLASS: "incompatible override",
    FindingKind.NULLABLE_DEREFERENCE: "dereference of a possibly-null value",
    FindingKind.FIELD_NOT_INITIALIZED: "field not initialized",
    FindingKind.BAD_ASSIGNMENT: "bad assignment",
    FindingKind.CONDITION_REDUNDANT: "redundant condition",
    FindingKind.OVER_ANNOTATION: "over-annotation",
}


@dataclass(frozen=True)
class Location:
    """A position in a source file (1-based line, 0-based column)."""

    file: str
    line: int
    col: int = 0

    @classmethod
    def first_line_of(cls, file: str) -> Location:
        """Return the fallback location used when a class has no declaration position."""
        return cls(file=file, line=DEFAULT_CLASS_LINE, col=DEFAULT_CLASS_COL)

    def __str__(self) -> str:
        return f"{self.file}:{self.line}:{self.col}"


@dataclass(frozen=True)
class Finding:
    """One issue reported by the dataflow pass for a single method.

    Attributes:
        kind (FindingKind): What went wrong.
        location (Location): Where it went wrong.
        description (str): Producer-supplied explanation.
        origin (str | None): Fully-qualified identifier of the unvetted dependency
            the offending value came from, or None when the nullability is
            declared in the analyzed code itself. Trust sets are matched against it.
        origin_is_nullsafe (bool): True when the origin itself declares a non-strict
            checked mode. Such values are trusted by every Local mode and refused
            only under Strict.
        nullsafe_only (bool): True for checks that only apply once a class has opted
            into a non-default mode.
    """

    kind: FindingKind
    location: Location
    description: str = ""
    origin: str | None = None
    origin_is_nullsafe: bool = False
    nullsafe_only: bool = False
