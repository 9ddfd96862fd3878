# topmark:header:start
#
#   project      : NullMeta
#   file         : strategies_nullmeta.py
#   file_relpath : tests/strategies_nullmeta.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for findings and enforcement modes.

Origins are drawn from a small fixed pool so that trust sets and origins
actually overlap in generated examples.
"""

from __future__ import annotations

from hypothesis import strategies as st

from nullmeta.model.finding import Finding, FindingKind, Location
from nullmeta.model.mode import EnforcementMode, Trust

ORIGINS: tuple[str, ...] = (
    "com.lib.Alpha",
    "com.lib.Beta",
    "org.thirdparty.Gamma",
)


def s_trust() -> st.SearchStrategy[Trust]:
    """Trust-all, trust-none, or a subset of `ORIGINS`."""
    return st.one_of(
        st.just(Trust.all()),
        st.frozensets(st.sampled_from(ORIGINS)).map(Trust.only_these),
    )


def s_mode() -> st.SearchStrategy[EnforcementMode]:
    """Any enforcement mode, Local ones with an arbitrary trust set."""
    return st.one_of(
        st.just(EnforcementMode.default()),
        st.just(EnforcementMode.strict()),
        s_trust().map(EnforcementMode.local),
    )


def s_finding(kinds: st.SearchStrategy[FindingKind] | None = None) -> st.SearchStrategy[Finding]:
    """A finding of any kind (or of ``kinds``) with random origin flags."""
    return st.builds(
        Finding,
        kind=kinds if kinds is not None else st.sampled_from(list(FindingKind)),
        location=st.builds(
            Location,
            file=st.just("src/Foo.java"),
            line=st.integers(min_value=1, max_value=500),
            col=st.integers(min_value=0, max_value=80),
        ),
        description=st.just(""),
        origin=st.one_of(st.none(), st.sampled_from(ORIGINS)),
        origin_is_nullsafe=st.booleans(),
        nullsafe_only=st.booleans(),
    )


def s_findings(max_size: int = 8) -> st.SearchStrategy[list[Finding]]:
    return st.lists(s_finding(), max_size=max_size)
